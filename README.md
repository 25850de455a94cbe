# freightsched

A small console tool for pairing freights with cargos. Each freight has a
refuel stop and a refuel time. Each cargo has a destination and a time by
which it must arrive. A freight is matched with the first cargo that:

- is still free,
- goes to the same place, and
- has a time that is not earlier than the freight's refuel time.

## Installing

    pip install .

## Running

Start the menu from a directory that holds your data files:

    freightsched

By default it reads `Cargo.txt` and `Freight.txt` from the current directory
and uses `schedule.txt` for the schedule. Other files can be named:

    freightsched --cargo cargo.csv --freight freight.csv --schedule out.txt

If a data file cannot be opened, an error is printed and the menu starts with
an empty list.

### Data files

Each line of a data file is a comma-separated record:

    C01,Singapore,1400
    F01,Singapore,1200

### Menu

The menu offers these choices:

1. View cargos and freights side by side.
2. View the schedule last saved to the schedule file.
3. Add, edit or delete a cargo.
4. Add, edit or delete a freight.
5. Generate the schedule and view it.
6. Save the schedule to the schedule file.
7. Exit. If you answer `Y`, your changes are saved to the data files first.

New IDs are the prefix (`C` or `F`) followed by one more than the highest
number already in use. After `C01` the next cargo gets `C2`. An empty list
starts at `C1` or `F1`.

Times are entered as four digits, `HHMM`, from `0000` to `2359`. Any other
value is refused and asked for again.

The menu ends at Exit or at the end of input. At the save question, end of
input counts as "no".

## Using it from Python

    from freightsched.records import load_cargos, load_freights
    from freightsched.scheduler import Scheduler, render_schedule_file

    scheduler = Scheduler()
    scheduler.generate(load_freights("Freight.txt"), load_cargos("Cargo.txt"))
    print(scheduler.format_schedule())
    scheduler.save("schedule.txt")
    print(render_schedule_file("schedule.txt"))

After `generate`, the results are held on the scheduler:

- `Scheduler.matches` maps each matched freight ID to its cargo ID.
- `unmatched_freights` lists the freights that found no cargo.
- `unassigned_cargos` lists the cargos that were left over.

Matched pairs are written in order of freight ID.

### Records and IDs

- `freightsched.records` has the `Cargo` and `Freight` records, the `is_valid_time` check, and `load_cargos` / `load_freights`.
- `freightsched.ids` has `generate_sequential_id` and `max_id_number`.

### Editing functions

`freightsched.manager` has the functions behind the menu entries. They take their values as arguments rather than prompting for them:

- `add_cargo`, `edit_cargo` and `delete_cargo`
- `add_freight`, `edit_freight` and `delete_freight`
- `next_cargo_id` and `next_freight_id`
- `format_table`
- `save_cargos` and `save_freights`

An invalid time raises `ValueError`. An unknown ID raises `KeyError`.

## Tests

    pip install .[test]
    pytest