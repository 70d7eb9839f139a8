import pytest

import main
from application.services import BoardPresenter
from conftest import DATA_FILE
from domain.models import Catalog


@pytest.fixture
def presenter(session) -> BoardPresenter:
    return BoardPresenter(session)


def test_parse_element_id_prefers_string_ids(mud_catalog):
    assert main.parse_element_id("water", mud_catalog) == "water"
    assert main.parse_element_id("42", mud_catalog) == "42"


def test_parse_element_id_converts_numeric_ids():
    catalog = Catalog.from_dict({"library": [{"id": 1, "name": "Water", "tier": 0}]})

    assert main.parse_element_id("1", catalog) == 1


def test_play_commands(session, presenter):
    main.run_command(session, presenter, "select water")
    main.run_command(session, presenter, "select earth")
    output = main.run_command(session, presenter, "combine")

    assert "SUCCESS! Discovered: Mud" in output
    assert session.unlocked.contains("mud")


def test_clear_command(session, presenter):
    main.run_command(session, presenter, "select water")
    main.run_command(session, presenter, "clear 1")

    assert session.slots.is_empty()
    assert main.run_command(session, presenter, "clear one") == "⚠️ Slot must be 1 or 2"


def test_misc_commands(session, presenter):
    assert main.run_command(session, presenter, "quit") is None
    assert main.run_command(session, presenter, "   ") == ""
    assert main.run_command(session, presenter, "help") == main.HELP_TEXT
    assert "Unknown command: dance" in main.run_command(session, presenter, "dance")
    assert "combine_attempts: 0" in main.run_command(session, presenter, "stats")
    assert "Cannot parse command" in main.run_command(session, presenter, 'select "water')


def test_validate_command(capsys):
    assert main.main(["validate", "--catalog", DATA_FILE]) == 0

    out = capsys.readouterr().out
    assert "Elements of Nature" in out
    assert "Recipes: 15" in out


def test_validate_reports_load_error(tmp_path, capsys):
    assert main.main(["validate", "--catalog", str(tmp_path / "missing.json")]) == 1

    assert "not found" in capsys.readouterr().out


def test_play_session_from_stdin(monkeypatch, capsys):
    commands = iter(["select water", "select earth", "combine", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

    assert main.main(["play", "--catalog", DATA_FILE]) == 0

    out = capsys.readouterr().out
    assert "SUCCESS! Discovered: Mud" in out
    assert "Leaving with Discovered: 5/17" in out


def test_play_ends_on_eof(monkeypatch, capsys):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)

    assert main.main(["play", "--catalog", DATA_FILE]) == 0
    assert "Leaving with Discovered: 4/17" in capsys.readouterr().out
