"""Pairing of freight refuelling stops with cargo consignments."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from .records import Cargo, Freight

_MATCHED_TITLE = "Matched Schedules:"
_UNMATCHED_TITLE = "Unmatched Freights:"
_UNASSIGNED_TITLE = "Unassigned Cargos:"
_SKIPPED_MARKERS = ("Freight ID", "ID,Refuel Stop,Time", "ID,Destination,Time")


def _matched_header() -> str:
    return f"{'Freight ID':<15}{'Cargo ID':<15}\n" + "-" * 30 + "\n"


def _three_column(first: str, second: str, third: str) -> str:
    return f"{first:<10}{second:<20}{third:<10}\n"


@dataclass
class Scheduler:
    """Holds the outcome of matching freights to cargos."""

    matches: dict[str, str] = field(default_factory=dict)
    unmatched_freights: list[Freight] = field(default_factory=list)
    unassigned_cargos: list[Cargo] = field(default_factory=list)

    def generate(self, freights: Iterable[Freight], cargos: Sequence[Cargo]) -> None:
        """Match each freight to the first free cargo for its stop and time.

        A cargo fits a freight when its destination equals the refuel stop
        and its time to reach is not earlier than the refuel time.
        """
        self.matches = {}
        self.unmatched_freights = []
        assigned = [False] * len(cargos)

        for freight in freights:
            for index, cargo in enumerate(cargos):
                if (
                    not assigned[index]
                    and cargo.destination == freight.refuel_stop
                    and cargo.time_to_reach >= freight.refuel_time
                ):
                    self.matches[freight.id] = cargo.id
                    assigned[index] = True
                    break
            else:
                self.unmatched_freights.append(freight)

        self.unassigned_cargos = [
            cargo for cargo, taken in zip(cargos, assigned) if not taken
        ]

    def _matched_section(self) -> str:
        rows = "".join(
            f"{freight_id:<15}{cargo_id:<15}\n"
            for freight_id, cargo_id in sorted(self.matches.items())
        )
        return f"{_MATCHED_TITLE}\n" + _matched_header() + rows

    def format_unmatched_freights(self) -> str:
        """Return the table of freights that found no cargo."""
        rows = "".join(
            _three_column(f.id, f.refuel_stop, f.refuel_time)
            for f in self.unmatched_freights
        )
        return (
            f"\n{_UNMATCHED_TITLE}\n"
            + _three_column("ID", "Refuel Stop", "Time")
            + "-" * 40
            + "\n"
            + rows
        )

    def format_unassigned_cargos(self) -> str:
        """Return the table of cargos left without a freight."""
        rows = "".join(
            _three_column(c.id, c.destination, c.time_to_reach)
            for c in self.unassigned_cargos
        )
        return (
            f"\n{_UNASSIGNED_TITLE}\n"
            + _three_column("ID", "Destination", "Time")
            + "-" * 40
            + "\n"
            + rows
        )

    def _body(self) -> str:
        return (
            self._matched_section()
            + self.format_unmatched_freights()
            + self.format_unassigned_cargos()
        )

    def format_schedule(self) -> str:
        """Return the whole schedule as it is shown on screen."""
        return "\n" + self._body()

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the schedule to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self._body())


class _Section(Enum):
    NONE = auto()
    MATCHED = auto()
    UNMATCHED = auto()
    UNASSIGNED = auto()


def render_schedule_file(path: str | os.PathLike[str]) -> str:
    """Read a saved schedule file and lay its sections out for display."""
    name = os.path.basename(os.fspath(path))
    parts = [f"\n===== Schedule File Content ({name}) =====\n\n"]
    section = _Section.NONE

    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                parts.append("\n")
                continue

            if _MATCHED_TITLE in line:
                parts.append(f"{_MATCHED_TITLE}\n")
                section = _Section.MATCHED
                continue
            if _UNMATCHED_TITLE in line:
                parts.append(f"\n{_UNMATCHED_TITLE}\n" + "-" * 40 + "\n")
                section = _Section.UNMATCHED
                continue
            if _UNASSIGNED_TITLE in line:
                parts.append(f"\n{_UNASSIGNED_TITLE}\n" + "-" * 40 + "\n")
                section = _Section.UNASSIGNED
                continue

            if any(marker in line for marker in _SKIPPED_MARKERS):
                continue

            if (
                section is _Section.MATCHED
                and "," in line
                and line.startswith("F")
                and line == "F01,C01"
            ):
                parts.append(_matched_header())

            fields = line.split(",")[:3]
            fields += [""] * (3 - len(fields))
            first, second, third = fields

            if section is _Section.MATCHED:
                parts.append(f"{first:<15}{second:<15}\n")
            elif section in (_Section.UNMATCHED, _Section.UNASSIGNED):
                parts.append(_three_column(first, second, third))

    return "".join(parts)