"""The Pokedex prompt: an interactive session and a line-by-line mode for piped input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping
from typing import TextIO

from pokedexcli.api import ApiError
from pokedexcli.commands import (
    GOODBYE,
    CliCommand,
    CommandError,
    ExitRequested,
    ReplState,
    clean_input,
    get_commands,
    initial_repl_state,
)

WELCOME = "Welcome to the Pokedex!\nType 'help' for a list of commands."


class Session:
    """An interactive session: its transcript, command history and state."""

    def __init__(self, state: ReplState, commands: Mapping[str, CliCommand]) -> None:
        self.state = state
        self.commands = commands
        self.history: list[str] = []
        self.history_index = 0
        self.content = WELCOME
        self.last_output = ""

    def _echo(self, text: str) -> None:
        if self.content and not self.content.endswith("\n"):
            self.content += "\n"
        self.content += f"> {text}\n"

    def submit(self, text: str) -> bool:
        """Run one line of input. Return False when the session should end."""
        self.last_output = ""
        if text == "":
            return True

        if not self.history or self.history[-1] != text:
            self.history.append(text)
        self.history_index = len(self.history)

        words = clean_input(text)
        if not words:
            return True
        name, *args = words

        self._echo(text)
        command = self.commands.get(name)
        if command is None:
            output = f"Unknown command: {name}"
        else:
            try:
                output = command.callback(self.state, args)
            except ExitRequested:
                return False
            except (CommandError, ApiError) as exc:
                output = f"Error: {exc}"

        self.content += output
        self.last_output = output
        return True

    def history_previous(self) -> str | None:
        """Step back in the history; None when there is no history."""
        if not self.history:
            return None
        if self.history_index > 0:
            self.history_index -= 1
        return self.history[self.history_index]

    def history_next(self) -> str | None:
        """Step forward in the history; an empty string past the newest entry."""
        if not self.history:
            return None
        if self.history_index < len(self.history) - 1:
            self.history_index += 1
            return self.history[self.history_index]
        self.history_index = len(self.history)
        return ""


def run_piped(
    lines: Iterable[str],
    state: ReplState,
    commands: Mapping[str, CliCommand],
    out: TextIO,
    err: TextIO,
) -> None:
    """Run each line as a command, writing results to ``out`` and problems to ``err``."""
    for line in lines:
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("unknown command:", name, file=err)
            continue
        try:
            output = command.callback(state, args)
        except ExitRequested as exc:
            print(exc, file=out)
            return
        except (CommandError, ApiError) as exc:
            print("error:", exc, file=err)
            continue
        if output:
            print(output, file=out)


def run_interactive(session: Session) -> None:
    """Prompt for commands until exit, end of input or an interrupt."""
    try:
        import readline  # noqa: F401  (line editing and arrow-key history)
    except ImportError:
        pass

    print(session.content)
    while True:
        try:
            text = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not session.submit(text):
            print(GOODBYE)
            return
        if session.last_output:
            print(session.last_output.rstrip("\n"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pokedexcli",
        description="Explore location areas and catch Pokémon from the command line.",
    )
    parser.parse_args(argv)

    state = initial_repl_state()
    commands = get_commands()
    with state.cache:
        if sys.stdin.isatty():
            run_interactive(Session(state, commands))
        else:
            run_piped(sys.stdin, state, commands, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())