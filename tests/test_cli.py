import io

import pytest

from freightsched.cli import Console, main
from freightsched.records import Cargo, Freight, load_cargos, load_freights
from freightsched.scheduler import Scheduler


@pytest.fixture
def data_files(tmp_path):
    cargo = tmp_path / "Cargo.txt"
    freight = tmp_path / "Freight.txt"
    cargo.write_text("C1,Oslo,0900\n", encoding="utf-8")
    freight.write_text("F1,Oslo,0800\n", encoding="utf-8")
    return cargo, freight, tmp_path / "schedule.txt"


def _console(data_files, text):
    cargo, freight, schedule = data_files
    out = io.StringIO()
    err = io.StringIO()
    console = Console(
        stdin=io.StringIO(text),
        stdout=out,
        stderr=err,
        cargo_path=cargo,
        freight_path=freight,
        schedule_path=schedule,
    )
    return console, out, err


def test_add_cargo_with_retry_and_save(data_files):
    console, out, _ = _console(data_files, "3\nLima\n2500\n1200\n11\ny\n")
    console.run()
    text = out.getvalue()
    assert "Generated Cargo ID: C2" in text
    assert "Invalid time. Please enter a valid time between 0000 and 2359." in text
    assert "Data saved successfully. Exiting..." in text
    assert load_cargos(data_files[0]) == [
        Cargo("C1", "Oslo", "0900"),
        Cargo("C2", "Lima", "1200"),
    ]


def test_exit_without_saving_leaves_files(data_files):
    console, out, _ = _console(data_files, "5\nC1\n11\nn\n")
    console.run()
    assert "Cargo deleted." in out.getvalue()
    assert "Exiting without saving changes." in out.getvalue()
    assert console.cargos == []
    assert load_cargos(data_files[0]) == [Cargo("C1", "Oslo", "0900")]


def test_missing_records_are_reported(data_files):
    console, out, _ = _console(data_files, "4\nC9\n5\nC9\n7\nF9\n8\nF9\n11\nn\n")
    console.run()
    text = out.getvalue()
    assert text.count("Cargo not found.") == 2
    assert text.count("Freight not found.") == 2


def test_edit_freight(data_files):
    console, out, _ = _console(data_files, "7\nF1\nRome\n0730\n11\ny\n")
    console.run()
    assert "Freight updated." in out.getvalue()
    assert load_freights(data_files[1]) == [Freight("F1", "Rome", "0730")]


def test_add_and_delete_freight(data_files):
    console, out, _ = _console(data_files, "6\nRome\n0100\n8\nF1\n11\nn\n")
    console.run()
    assert "Generated Freight ID: F2" in out.getvalue()
    assert console.freights == [Freight("F2", "Rome", "0100")]


def test_edit_cargo(data_files):
    console, out, _ = _console(data_files, "4\nC1\nBern\n9999\n2359\n11\nn\n")
    console.run()
    assert "Cargo updated." in out.getvalue()
    assert console.cargos == [Cargo("C1", "Bern", "2359")]


def test_invalid_number_and_choice(data_files):
    console, out, _ = _console(data_files, "abc\n42\n11\nn\n")
    console.run()
    text = out.getvalue()
    assert "Invalid input. Please enter a number." in text
    assert "Invalid choice. Please try again." in text


def test_generate_and_save_schedule(data_files):
    console, out, _ = _console(data_files, "9\n10\n2\n11\nn\n")
    console.run()
    expected = Scheduler()
    expected.generate(console.freights, console.cargos)
    text = out.getvalue()
    assert expected.format_schedule() in text
    assert console.scheduler.matches == {"F1": "C1"}
    assert data_files[2].read_text(encoding="utf-8") == expected.format_schedule()[1:]
    assert "Schedule File Content" in text


def test_view_missing_schedule_reports_error(data_files):
    console, _, err = _console(data_files, "2\n11\nn\n")
    console.run()
    assert "for reading" in err.getvalue()


def test_missing_data_files_start_empty(tmp_path):
    err = io.StringIO()
    console = Console(
        stdin=io.StringIO("11\nn\n"),
        stdout=io.StringIO(),
        stderr=err,
        cargo_path=tmp_path / "none_c.txt",
        freight_path=tmp_path / "none_f.txt",
    )
    assert console.cargos == []
    assert console.freights == []
    assert err.getvalue().count("Error: Could not open") == 2


def test_view_cargo_table(data_files):
    console, out, _ = _console(data_files, "1\n11\nn\n")
    console.run()
    assert Cargo("C1", "Oslo", "0900").row() in out.getvalue()


def test_ask_yes_no_reprompts(data_files):
    console, out, _ = _console(data_files, "\nmaybe\n  Yes\n")
    assert console.ask_yes_no("Continue?") is True
    assert out.getvalue().count("Please enter Y or N and press Enter.") == 1
    assert out.getvalue().count("Continue? (Y/N): ") == 3


def test_ask_yes_no_eof_is_no(data_files):
    console, _, _ = _console(data_files, "")
    assert console.ask_yes_no("Continue?") is False


def test_run_stops_at_end_of_input(data_files):
    console, out, _ = _console(data_files, "3\nLima\n")
    console.run()
    assert "MAIN MENU" in out.getvalue()
    assert len(console.cargos) == 1


def test_main_uses_given_paths(data_files, monkeypatch, capsys):
    cargo, freight, schedule = data_files
    monkeypatch.setattr("sys.stdin", io.StringIO("5\nC1\n11\ny\n"))
    code = main(
        ["--cargo", str(cargo), "--freight", str(freight), "--schedule", str(schedule)]
    )
    assert code == 0
    assert "Data saved successfully. Exiting..." in capsys.readouterr().out
    assert load_cargos(cargo) == []