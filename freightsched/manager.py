"""Tabular display, editing and saving of cargo and freight lists."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from itertools import zip_longest
from typing import TypeVar

from .ids import generate_sequential_id, max_id_number
from .records import Cargo, Freight, is_valid_time

_Record = TypeVar("_Record", Cargo, Freight)

_GAP = " " * 4


def format_table(cargos: Sequence[Cargo], freights: Sequence[Freight]) -> str:
    """Lay out cargos and freights side by side as a text table."""
    lines = [
        f"{'Cargo ID':<10}{'Destination':<20}{'Time':<10}"
        + _GAP
        + f"{'Freight ID':<15}{'Refuel Stop':<20}{'Refuel Time':<10}",
        "-" * 34 + " " * 10 + "-" * 46,
    ]
    for cargo, freight in zip_longest(cargos, freights):
        left = cargo.row() if cargo is not None else " " * 40
        right = freight.row() if freight is not None else ""
        lines.append(left + _GAP + right)
    return "\n".join(lines) + "\n"


def next_cargo_id(cargos: Iterable[Cargo]) -> str:
    """Return the identifier the next added cargo receives."""
    return generate_sequential_id("C", max_id_number((c.id for c in cargos), "C") + 1)


def next_freight_id(freights: Iterable[Freight]) -> str:
    """Return the identifier the next added freight receives."""
    return generate_sequential_id("F", max_id_number((f.id for f in freights), "F") + 1)


def _check_time(time: str) -> None:
    if not is_valid_time(time):
        raise ValueError(
            f"invalid time {time!r}: expected HHMM between 0000 and 2359"
        )


def _index_of(records: Sequence[_Record], record_id: str) -> int:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    raise KeyError(record_id)


def add_cargo(cargos: list[Cargo], destination: str, time: str) -> Cargo:
    """Append a new cargo with the next free identifier and return it."""
    _check_time(time)
    cargo = Cargo(next_cargo_id(cargos), destination, time)
    cargos.append(cargo)
    return cargo


def edit_cargo(cargos: list[Cargo], cargo_id: str, destination: str, time: str) -> Cargo:
    """Replace the first cargo with ``cargo_id``; raise KeyError if absent."""
    index = _index_of(cargos, cargo_id)
    _check_time(time)
    cargo = Cargo(cargo_id, destination, time)
    cargos[index] = cargo
    return cargo


def delete_cargo(cargos: list[Cargo], cargo_id: str) -> Cargo:
    """Remove and return the first cargo with ``cargo_id``; raise KeyError if absent."""
    return cargos.pop(_index_of(cargos, cargo_id))


def add_freight(freights: list[Freight], refuel_stop: str, refuel_time: str) -> Freight:
    """Append a new freight with the next free identifier and return it."""
    _check_time(refuel_time)
    freight = Freight(next_freight_id(freights), refuel_stop, refuel_time)
    freights.append(freight)
    return freight


def edit_freight(
    freights: list[Freight], freight_id: str, refuel_stop: str, refuel_time: str
) -> Freight:
    """Replace the first freight with ``freight_id``; raise KeyError if absent."""
    index = _index_of(freights, freight_id)
    _check_time(refuel_time)
    freight = Freight(freight_id, refuel_stop, refuel_time)
    freights[index] = freight
    return freight


def delete_freight(freights: list[Freight], freight_id: str) -> Freight:
    """Remove and return the first freight with ``freight_id``; raise KeyError if absent."""
    return freights.pop(_index_of(freights, freight_id))


def save_cargos(path: str | os.PathLike[str], cargos: Iterable[Cargo]) -> None:
    """Write cargos as ``id,destination,time`` lines."""
    with open(path, "w", encoding="utf-8") as handle:
        for cargo in cargos:
            handle.write(f"{cargo.id},{cargo.destination},{cargo.time_to_reach}\n")


def save_freights(path: str | os.PathLike[str], freights: Iterable[Freight]) -> None:
    """Write freights as ``id,refuel stop,refuel time`` lines."""
    with open(path, "w", encoding="utf-8") as handle:
        for freight in freights:
            handle.write(f"{freight.id},{freight.refuel_stop},{freight.refuel_time}\n")