import io
import sys

import pytest

from pokedexcli.api import Config
from pokedexcli.cache import Cache
from pokedexcli.cli import WELCOME, Session, main, run_interactive, run_piped
from pokedexcli.commands import GOODBYE, ReplState, get_commands


@pytest.fixture
def state():
    with Cache(60) as cache:
        yield ReplState(config=Config(next=None), cache=cache)


@pytest.fixture
def session(state):
    return Session(state, get_commands())


def test_unknown_command_is_recorded(session):
    assert session.submit("foo") is True
    assert session.last_output == "Unknown command: foo"
    assert session.content.endswith("> foo\nUnknown command: foo")
    assert session.content.startswith(WELCOME)


def test_empty_input_does_nothing(session):
    assert session.submit("") is True
    assert session.history == []
    assert session.content == WELCOME


def test_blank_input_goes_to_history_only(session):
    assert session.submit("   ") is True
    assert session.history == ["   "]
    assert session.content == WELCOME


def test_history_skips_repeats(session):
    for text in ["help", "help", "foo", "help"]:
        session.submit(text)
    assert session.history == ["help", "foo", "help"]
    assert session.history_index == len(session.history)


def test_history_navigation(session):
    session.submit("alpha")
    session.submit("beta")
    assert session.history_previous() == "beta"
    assert session.history_previous() == "alpha"
    assert session.history_previous() == "alpha"
    assert session.history_next() == "beta"
    assert session.history_next() == ""
    assert session.history_index == 2


def test_history_navigation_without_history(session):
    assert session.history_previous() is None
    assert session.history_next() is None


def test_exit_ends_session(session):
    assert session.submit("exit") is False


def test_command_error_is_shown(session):
    session.submit("mapb")
    assert session.last_output == "Error: you are on the first page"
    assert session.content.endswith("> mapb\nError: you are on the first page")


def test_input_is_case_insensitive(session, state):
    session.submit("HELP")
    expected = get_commands()["help"].callback(state, [])
    assert session.last_output == expected
    assert session.history == ["HELP"]
    assert "> HELP\n" in session.content


def test_entries_are_separated_by_newlines(session):
    session.submit("one")
    session.submit("two")
    assert "Unknown command: one\n> two\nUnknown command: two" in session.content


def test_run_piped(state):
    out, err = io.StringIO(), io.StringIO()
    lines = ["help\n", "bogus\n", "\n", "mapb\n", "exit\n", "help\n"]
    run_piped(lines, state, get_commands(), out, err)
    assert out.getvalue().count("Welcome to the Pokedex!") == 1
    assert out.getvalue().endswith(GOODBYE + "\n")
    assert "unknown command: bogus\n" in err.getvalue()
    assert "error: you are on the first page\n" in err.getvalue()


def test_run_piped_without_exit_reads_all_lines(state):
    out, err = io.StringIO(), io.StringIO()
    run_piped(["inspect pikachu", "inspect raichu"], state, get_commands(), out, err)
    assert out.getvalue().count("you have not caught that pokemon\n") == 2
    assert err.getvalue() == ""


def test_run_interactive(session, monkeypatch, capsys):
    inputs = iter(["help", "exit", "help"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    run_interactive(session)
    printed = capsys.readouterr().out
    assert printed.startswith(WELCOME)
    assert "Displays a help message" in printed
    assert printed.endswith(GOODBYE + "\n")
    assert next(inputs) == "help"


def test_run_interactive_stops_at_end_of_input(session, monkeypatch, capsys):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    run_interactive(session)
    assert capsys.readouterr().out == WELCOME + "\n\n"


def test_main_with_piped_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("inspect pikachu\nexit\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "you have not caught that pokemon\n" + GOODBYE + "\n"
    assert captured.err == ""