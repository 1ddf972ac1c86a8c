# pokedexcli

A small command-line Pokedex. It pages through Pokemon world location areas,
shows which Pokemon can be found in an area, lets you try to catch them, and
shows details of the ones you have caught. Data comes from the public PokeAPI.

Responses are held in memory for about ten seconds, so asking for the same page
again within that time does not hit the network; when a listing or an area
comes from memory, the output says `Cache hit!`.

## Installation

```
pip install .
```

## Running

```
pokedexcli
```

Started from a terminal, it prints a welcome message and prompts with `> `.
Each line you enter is run as a command and its output is printed. Where
Python's `readline` module is available, the arrow keys give line editing and
recall earlier lines. The `exit` command, Ctrl-C or end of input (Ctrl-D) end
the session. Unknown commands are reported as `Unknown command: <name>`, and
failed commands as `Error: <message>`; neither ends the session.

When standard input is not a terminal, it reads one command per line and writes
results to standard output. Errors (`error: ...`) and unknown commands
(`unknown command: ...`) go to standard error and do not stop the run. An
`exit` line prints the goodbye message and stops reading:

```
printf 'map\nexplore canalave-city-area\ncatch pikachu\ninspect pikachu\n' | pokedexcli
```

`pokedexcli --help` shows a short usage message; there are no other options.

## Commands

Commands are not case-sensitive, and extra spaces are ignored.

| Command                  | What it does                                           |
|--------------------------|--------------------------------------------------------|
| `help`                   | Displays a help message                                |
| `map`                    | Get the next page of locations                         |
| `mapb`                   | Get the previous page of locations                     |
| `explore <area_name>`    | Lists the pokemon in a given location area             |
| `catch <pokemon_name>`   | Attempt to catch a pokemon and add it to your pokedex  |
| `inspect <pokemon_name>` | View details about a caught pokemon                    |
| `exit`                   | Exit the Pokedex                                       |

`map` starts at the first page of location areas; `mapb` on the first page
reports `you are on the first page`. A Pokemon with a higher base experience
is harder to catch. `inspect` shows the height, weight, stats and types of a
Pokemon caught during the current session, and otherwise says
`you have not caught that pokemon`.

## Using it from Python

- `pokedexcli.cache.Cache(interval)` stores bytes by key and drops entries
  older than `interval` seconds from a background thread. Use it as a context
  manager, or call `stop_reaping()`, to stop that thread.
- `pokedexcli.api` has `get_location_areas(config, url, cache)`,
  `get_location_area(url, cache)` and `get_pokemon(name, cache)`. They raise
  `ApiError` when data cannot be fetched or decoded.
- `pokedexcli.commands` holds the command functions, `get_commands()`,
  `initial_repl_state()` and `clean_input(text)`. Commands raise
  `CommandError` on misuse and `ExitRequested` for `exit`.
- `pokedexcli.cli` has `Session`, which keeps the transcript and command
  history of an interactive session, and `run_piped(lines, state, commands,
  out, err)` for line-by-line input.

## Limitations

- The interactive mode is a plain line prompt, not a full-screen interface:
  there is no scrollable output pane or mouse support.
- Caught Pokemon are kept in memory only and are gone when the program ends.

## Development

```
pip install -e ".[test]"
pytest
```