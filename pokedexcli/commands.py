"""The commands available at the Pokedex prompt and the state they share."""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from pokedexcli.api import (
    LOCATION_AREA_URL,
    Config,
    Pokemon,
    get_location_area,
    get_location_areas,
    get_pokemon,
)
from pokedexcli.cache import Cache

CACHE_INTERVAL = 10.0
CATCH_THRESHOLD = 60
GOODBYE = "Closing the Pokedex... Goodbye!"
_RULE = "--------------------------------\n"


class ExitRequested(Exception):
    """Raised by the exit command to end the session."""

    def __init__(self, message: str = GOODBYE) -> None:
        super().__init__(message)


class CommandError(Exception):
    """Raised when a command is used wrongly or cannot proceed."""


@dataclass
class ReplState:
    """Everything the commands read and change between calls."""

    config: Config
    cache: Cache
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


Callback = Callable[[ReplState, Sequence[str]], str]


@dataclass(frozen=True)
class CliCommand:
    name: str
    description: str
    callback: Callback


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it on whitespace."""
    return text.lower().split()


def initial_repl_state() -> ReplState:
    """A fresh state starting on the first page of location areas."""
    return ReplState(
        config=Config(next=LOCATION_AREA_URL),
        cache=Cache(CACHE_INTERVAL),
    )


def command_catch(state: ReplState, args: Sequence[str]) -> str:
    """Throw a Pokeball; the higher the base experience, the harder the catch."""
    if not args:
        raise CommandError("you must provide a pokemon name")
    pokemon_name = args[0]
    pokemon = get_pokemon(pokemon_name, state.cache)

    lines = [f"Throwing a Pokeball at {pokemon.name}...\n"]
    if state.rng.randrange(pokemon.base_experience) > CATCH_THRESHOLD:
        lines.append(f"{pokemon.name} escaped!")
        return "".join(lines)

    lines.append(f"{pokemon.name} was caught!")
    lines.append("\n(You may now inspect it with the 'inspect' command)")
    state.pokedex[pokemon_name] = pokemon
    return "".join(lines)


def command_exit(state: ReplState, args: Sequence[str]) -> str:
    """End the session."""
    raise ExitRequested()


def command_explore(state: ReplState, args: Sequence[str]) -> str:
    """List the Pokémon that can be met in a location area."""
    if not args:
        raise CommandError("you must provide a location area name")
    url = f"{LOCATION_AREA_URL}{args[0]}/"
    return get_location_area(url, state.cache)


def command_help(
    state: ReplState, commands: Mapping[str, CliCommand], args: Sequence[str]
) -> str:
    """Describe every command."""
    lines = ["\nWelcome to the Pokedex!\n", "Usage:\n", _RULE]
    lines.extend(f"{command.name}: {command.description}\n" for command in commands.values())
    lines.append(_RULE)
    return "".join(lines)


def command_inspect(state: ReplState, args: Sequence[str]) -> str:
    """Show the details of a Pokémon already caught."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    pokemon = state.pokedex.get(args[0])
    if pokemon is None:
        return "you have not caught that pokemon"

    lines = [
        f"Name: {pokemon.name}\n",
        f"Height: {pokemon.height}\n",
        f"Weight: {pokemon.weight}\n",
        "Stats:\n",
    ]
    lines.extend(f"  -{stat.name}: {stat.base_stat}\n" for stat in pokemon.stats)
    lines.append("Types:\n")
    lines.extend(f"  - {type_name}\n" for type_name in pokemon.types)
    return "".join(lines)


def command_map(state: ReplState, args: Sequence[str]) -> str:
    """Show the next page of location areas."""
    if state.config.next is None:
        raise CommandError("you are on the last page")
    return get_location_areas(state.config, state.config.next, state.cache)


def command_mapb(state: ReplState, args: Sequence[str]) -> str:
    """Show the previous page of location areas."""
    if state.config.previous is None:
        raise CommandError("you are on the first page")
    return get_location_areas(state.config, state.config.previous, state.cache)


def get_commands() -> dict[str, CliCommand]:
    """Every command, keyed by the word that starts it."""
    commands = {
        "map": CliCommand("map", "Get the next page of locations", command_map),
        "mapb": CliCommand("mapb", "Get the previous page of locations", command_mapb),
        "explore": CliCommand(
            "explore <area_name>",
            "Lists the pokemon in a given location area",
            command_explore,
        ),
        "catch": CliCommand(
            "catch <pokemon_name>",
            "Attempt to catch a pokemon and add it to your pokedex",
            command_catch,
        ),
        "inspect": CliCommand(
            "inspect <pokemon_name>",
            "View details about a caught pokemon",
            command_inspect,
        ),
        "exit": CliCommand("exit", "Exit the Pokedex", command_exit),
    }

    def _help(state: ReplState, args: Sequence[str]) -> str:
        return command_help(state, commands, args)

    commands["help"] = CliCommand("help", "Displays a help message", _help)
    return commands