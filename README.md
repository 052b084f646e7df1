# pokedexcli

An interactive Pokedex that runs in your terminal. It pages through the
location areas of the Pokemon world, shows which Pokemon live in an area, and
lets you throw Pokeballs, keep a Pokedex of what you caught and look at a
caught Pokemon's stats. The data comes from the public PokeAPI, so an internet
connection is needed.

Pages of location areas are kept in an in-memory cache that is cleared of
entries older than five seconds every five seconds, so asking for the same page
again shortly afterwards does not go back to the network. Area lookups and
Pokemon lookups are always fetched.

## Installation

```
pip install .
```

The package uses only the Python standard library (Python 3.10 or later).

## Running

```
pokedexcli
```

or, equivalently:

```
python -m pokedexcli.repl
```

The command takes no options besides `--help`. You get a `Pokedex > ` prompt.
Input is lower-cased before it is read, so commands and names are not
case-sensitive. Blank lines are ignored. The session ends on `exit` or at the
end of input.

## Commands

| Command             | What it does                                                   |
|---------------------|----------------------------------------------------------------|
| `help`              | Shows a short help message                                     |
| `map`               | Lists the next 20 location areas                               |
| `mapb`              | Lists the previous 20 location areas                           |
| `explore <area>`    | Lists the Pokemon that can be found in a location area         |
| `catch <pokemon>`   | Throws a Pokeball; Pokemon with more base experience escape more often |
| `pokedex`           | Lists the Pokemon you have caught                              |
| `inspect <pokemon>` | Shows name, height, weight, base stats and types of a catch    |
| `exit`              | Closes the Pokedex                                             |

Notes on behaviour:

- `map` and `mapb` start from the first page until the API has given a next or
  previous link.
- A catch succeeds when a roll from 0 to 99 is greater than the Pokemon's base
  experience divided by 5 (capped at 90). A Pokemon without a base experience
  value cannot be caught, and nothing is printed after the throw.
- If a command needs an argument and none is given, a short message says so.
  Anything else prints `Unknown Command`.
- When a request fails or the answer is not what was expected (for example a
  Pokemon or area name that does not exist), the line `Error: ...` is printed
  and the prompt comes back.
- The built-in `help` text mentions only `map`, `help` and `exit`; the table
  above lists every command.

## Example session

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
- tentacool
- tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
  - hp: 40
  ...
Types: [water poison]
Pokedex > exit
Closing the Pokedex... Goodbye!
```

## Using it from Python

- `pokedexcli.cache.Cache(interval)` stores bytes under string keys and drops
  entries older than `interval` seconds from a background thread. It has
  `add(key, val)`, `get(key)` (returns `None` when absent), `close()`, and works
  as a context manager.
- `pokedexcli.api.PokeApiClient(cache, fetcher=None)` has `location_page(url)`,
  `location_area(name)` and `pokemon(name)`; it raises `ApiError` on failure.
  `fetcher` is any callable taking a URL and returning bytes, `fetch_url` by
  default.
- `pokedexcli.pokemon` has `save_pokemon(data)`, which returns a
  `SavedPokemon`, and `catch_probability(base_experience, rng)`.
- `pokedexcli.repl.Session(client, out, rng)` carries one session's state;
  `Session.dispatch(words)` runs one command, and `run(session, lines)` feeds it
  lines of input. `clean_input(text)` lower-cases and splits a line.

## What it does not do

Caught Pokemon are kept only in memory while the program runs; there is no
saving or loading of a Pokedex between sessions.

## Running the tests

```
pip install ".[test]"
pytest
```