"""Cargo and freight records and the comma-separated files that hold them."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


def is_valid_time(time: str) -> bool:
    """Check that ``time`` is four ASCII digits forming HHMM from 0000 to 2359."""
    if len(time) != 4 or not set(time) <= _DIGITS:
        return False
    return int(time[:2]) <= 23 and int(time[2:]) <= 59


@dataclass(frozen=True)
class Cargo:
    """A cargo consignment bound for a destination by a given time."""

    id: str
    destination: str
    time_to_reach: str

    def row(self) -> str:
        """Return the record as a fixed-width table row."""
        return f"{self.id:<10}{self.destination:<20}{self.time_to_reach:<10}"


@dataclass(frozen=True)
class Freight:
    """A freight run with its refuelling stop and time."""

    id: str
    refuel_stop: str
    refuel_time: str

    def row(self) -> str:
        """Return the record as a fixed-width table row."""
        return f"{self.id:<15}{self.refuel_stop:<20}{self.refuel_time:<10}"


def _read_fields(path: str | os.PathLike[str]) -> Iterator[tuple[str, str, str]]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\n").split(",")[:3]
            fields += [""] * (3 - len(fields))
            yield fields[0], fields[1], fields[2]


def load_cargos(path: str | os.PathLike[str]) -> list[Cargo]:
    """Read cargo records, one ``id,destination,time`` line each."""
    return [Cargo(*fields) for fields in _read_fields(path)]


def load_freights(path: str | os.PathLike[str]) -> list[Freight]:
    """Read freight records, one ``id,refuel stop,refuel time`` line each."""
    return [Freight(*fields) for fields in _read_fields(path)]