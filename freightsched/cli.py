"""Interactive menu for managing cargos, freights and schedules."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .manager import (
    add_cargo,
    add_freight,
    delete_cargo,
    delete_freight,
    edit_cargo,
    edit_freight,
    format_table,
    next_cargo_id,
    next_freight_id,
    save_cargos,
    save_freights,
)
from .records import is_valid_time, load_cargos, load_freights
from .scheduler import Scheduler, render_schedule_file

_MENU = (
    "\n========== MAIN MENU ==========\n\n"
    "1.  View Cargo\n"
    "2.  View Schedule\n"
    "3.  Add Cargo\n"
    "4.  Edit Cargo\n"
    "5.  Delete Cargo\n"
    "6.  Add Freight\n"
    "7.  Edit Freight\n"
    "8.  Delete Freight\n"
    "9.  Generate & View Schedule\n"
    "10. Save Schedule to File\n"
    "11. Exit\n\n"
    "Select an option: "
)
_EXIT = 11
_INVALID_TIME = "Invalid time. Please enter a valid time between 0000 and 2359.\n"


class Console:
    """Menu-driven session over cargo and freight files."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        cargo_path: str | os.PathLike[str] = "Cargo.txt",
        freight_path: str | os.PathLike[str] = "Freight.txt",
        schedule_path: str | os.PathLike[str] = "schedule.txt",
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else sys.stderr
        self.cargo_path = cargo_path
        self.freight_path = freight_path
        self.schedule_path = schedule_path
        self.scheduler = Scheduler()
        self.cargos = self._load(load_cargos, cargo_path)
        self.freights = self._load(load_freights, freight_path)

    def _load(self, loader, path):
        try:
            return loader(path)
        except OSError:
            self._err.write(f"Error: Could not open {os.fspath(path)}\n")
            return []

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _read_token(self) -> str:
        while True:
            tokens = self._read_line().split()
            if tokens:
                return tokens[0]

    def _ask_time(self, prompt: str) -> str:
        while True:
            self._write(prompt)
            time = self._read_token()
            if is_valid_time(time):
                return time
            self._write(_INVALID_TIME)

    def ask_yes_no(self, prompt: str) -> bool:
        """Ask until the answer starts with Y or N; end of input means no."""
        while True:
            self._write(f"{prompt} (Y/N): ")
            try:
                line = self._read_line()
            except EOFError:
                return False
            answer = line.lstrip(" \t\r\n")
            if not answer:
                continue
            letter = answer[0].lower()
            if letter in ("y", "n"):
                return letter == "y"
            self._write("Please enter Y or N and press Enter.\n")

    def _add_cargo(self) -> None:
        self._write(f"Generated Cargo ID: {next_cargo_id(self.cargos)}\n")
        self._write("Enter Destination: ")
        destination = self._read_line()
        time = self._ask_time("Enter Time to Reach (HHMM, 0000-2359): ")
        add_cargo(self.cargos, destination, time)
        self._write("Cargo added successfully.\n")

    def _edit_cargo(self) -> None:
        self._write("Enter Cargo ID to edit: ")
        cargo_id = self._read_token()
        if not any(cargo.id == cargo_id for cargo in self.cargos):
            self._write("Cargo not found.\n")
            return
        self._write("Enter new Destination: ")
        destination = self._read_line()
        time = self._ask_time("Enter new Time (HHMM, 0000-2359): ")
        edit_cargo(self.cargos, cargo_id, destination, time)
        self._write("Cargo updated.\n")

    def _delete_cargo(self) -> None:
        self._write("Enter Cargo ID to delete: ")
        try:
            delete_cargo(self.cargos, self._read_token())
        except KeyError:
            self._write("Cargo not found.\n")
        else:
            self._write("Cargo deleted.\n")

    def _add_freight(self) -> None:
        self._write(f"Generated Freight ID: {next_freight_id(self.freights)}\n")
        self._write("Enter Refuel Stop: ")
        stop = self._read_line()
        time = self._ask_time("Enter Refuel Time (HHMM, 0000-2359): ")
        add_freight(self.freights, stop, time)
        self._write("Freight added successfully.\n")

    def _edit_freight(self) -> None:
        self._write("Enter Freight ID to edit: ")
        freight_id = self._read_token()
        if not any(freight.id == freight_id for freight in self.freights):
            self._write("Freight not found.\n")
            return
        self._write("Enter new Refuel Stop: ")
        stop = self._read_line()
        time = self._ask_time("Enter new Refuel Time (HHMM, 0000-2359): ")
        edit_freight(self.freights, freight_id, stop, time)
        self._write("Freight updated.\n")

    def _delete_freight(self) -> None:
        self._write("Enter Freight ID to delete: ")
        try:
            delete_freight(self.freights, self._read_token())
        except KeyError:
            self._write("Freight not found.\n")
        else:
            self._write("Freight deleted.\n")

    def _view_schedule_file(self) -> None:
        try:
            self._write(render_schedule_file(self.schedule_path))
        except OSError:
            name = os.fspath(self.schedule_path)
            self._err.write(f"Error: Could not open {name} for reading.\n")

    def _generate_schedule(self) -> None:
        self.scheduler.generate(self.freights, self.cargos)
        self._write(self.scheduler.format_schedule())

    def _save_schedule(self) -> None:
        name = os.fspath(self.schedule_path)
        try:
            self.scheduler.save(self.schedule_path)
        except OSError:
            self._err.write(f"Error: Unable to open {name} for writing.\n")
        else:
            self._write(f"Schedule saved to {name}\n")

    def _exit(self) -> None:
        if self.ask_yes_no("Would you like to save changes before exiting?"):
            save_cargos(self.cargo_path, self.cargos)
            save_freights(self.freight_path, self.freights)
            self._write("Data saved successfully. Exiting...\n")
        else:
            self._write("Exiting without saving changes.\n")

    def run(self) -> None:
        """Show the menu and carry out choices until Exit or end of input."""
        actions = {
            1: lambda: self._write(format_table(self.cargos, self.freights)),
            2: self._view_schedule_file,
            3: self._add_cargo,
            4: self._edit_cargo,
            5: self._delete_cargo,
            6: self._add_freight,
            7: self._edit_freight,
            8: self._delete_freight,
            9: self._generate_schedule,
            10: self._save_schedule,
            _EXIT: self._exit,
        }
        try:
            while True:
                self._write(_MENU)
                try:
                    choice = int(self._read_token())
                except ValueError:
                    self._write("Invalid input. Please enter a number.\n")
                    continue
                action = actions.get(choice)
                if action is None:
                    self._write("Invalid choice. Please try again.\n")
                    continue
                action()
                if choice == _EXIT:
                    return
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="freightsched", description="Match freight refuelling stops with cargo."
    )
    parser.add_argument("--cargo", default="Cargo.txt", help="cargo data file")
    parser.add_argument("--freight", default="Freight.txt", help="freight data file")
    parser.add_argument("--schedule", default="schedule.txt", help="schedule output file")
    args = parser.parse_args(argv)
    Console(
        cargo_path=args.cargo,
        freight_path=args.freight,
        schedule_path=args.schedule,
    ).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())