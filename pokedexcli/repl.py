"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Any, Callable, Iterable, Sequence, TextIO

from pokedexcli.api import ApiError, PokeApiClient
from pokedexcli.cache import Cache
from pokedexcli.pokemon import catch_probability, save_pokemon

PROMPT = "Pokedex > "
CACHE_INTERVAL = 5.0


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


class Session:
    """State of one Pokedex session: map position and caught Pokémon."""

    def __init__(
        self,
        client: PokeApiClient,
        out: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.client = client
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.next: str | None = None
        self.previous: str | None = None
        self.caught: dict[str, dict[str, Any]] = {}

    def _write(self, text: str = "") -> None:
        print(text, file=self.out)

    def help(self) -> None:
        """Show the help message."""
        self._write("Welcome to the Pokedex! ")
        self._write("Usage: ")
        self._write()
        self._write()
        self._write("map: shows the map of pokemon")
        self._write("help: Displays a help message ")
        self._write("exit: Exit the Pokedex ")

    def _show_page(self, url: str | None) -> None:
        page = self.client.location_page(url)
        for name in page.names:
            self._write(name)
        if page.next is not None:
            self.next = page.next
        if page.previous is not None:
            self.previous = page.previous

    def map_next(self) -> None:
        """Show the next page of location areas."""
        self._show_page(self.next)

    def map_back(self) -> None:
        """Show the previous page of location areas."""
        self._show_page(self.previous)

    def explore(self, location: str) -> None:
        """List the Pokémon found in a location area."""
        self._write(f"Exploring {location}...")
        names = self.client.location_area(location)
        self._write("Found Pokemon:")
        for name in names:
            self._write(f"- {name} ")

    def catch(self, name: str) -> None:
        """Throw a Pokéball; a successful catch adds the Pokémon to the Pokedex."""
        name = name.lower()
        self._write(f"Throwing a Pokeball at {name}...")
        data = self.client.pokemon(name)
        base_experience = data.get("base_experience") or 0
        if not base_experience:
            return
        if catch_probability(base_experience, self.rng):
            self._write(f"{name} was caught!")
            self.caught[str(data.get("name") or "").lower()] = data
        else:
            self._write(f"{name} escaped!")

    def pokedex(self) -> None:
        """List the caught Pokémon."""
        self._write("Your Pokedex:")
        if not self.caught:
            self._write(" - (no Pokémon caught yet)")
            return
        for name in self.caught:
            self._write(f" - {name}")

    def inspect(self, name: str) -> None:
        """Show details of a caught Pokémon."""
        data = self.caught.get(name.lower())
        if data is None:
            self._write("Pokémon not found in your caught list.")
            return
        saved = save_pokemon(data)
        self._write(f"Name: {saved.name}")
        self._write(f"Height: {saved.height}")
        self._write(f"Weight: {saved.weight}")
        self._write("Stats:")
        for stat, value in saved.stats.items():
            self._write(f"  - {stat}: {value}")
        self._write(f"Types: [{' '.join(saved.types)}]")

    def dispatch(self, words: Sequence[str]) -> bool:
        """Run one command; return False when the session should end."""
        if not words:
            return True
        command, *args = words
        try:
            if command == "exit":
                self._write("Closing the Pokedex... Goodbye! ")
                return False
            if command in _PLAIN_COMMANDS:
                _PLAIN_COMMANDS[command](self)
            elif command in _ARG_COMMANDS:
                action, missing = _ARG_COMMANDS[command]
                if args:
                    action(self, args[0])
                else:
                    self._write(missing)
            else:
                self._write("Unknown Command")
        except ApiError as exc:
            self._write(f"Error: {exc}")
        return True


_PLAIN_COMMANDS: dict[str, Callable[[Session], None]] = {
    "help": Session.help,
    "map": Session.map_next,
    "mapb": Session.map_back,
    "pokedex": Session.pokedex,
}

_ARG_COMMANDS: dict[str, tuple[Callable[[Session, str], None], str]] = {
    "explore": (Session.explore, "User forgot to mention region"),
    "catch": (Session.catch, "No Pokemon encountered"),
    "inspect": (Session.inspect, "No Pokemon mentioned"),
}


def run(session: Session, lines: Iterable[str]) -> bool:
    """Feed input lines to the session; return True if it ended with exit."""
    for line in lines:
        session.out.write(PROMPT)
        if not session.dispatch(clean_input(line)):
            return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive Pokedex on standard input."""
    parser = argparse.ArgumentParser(prog="pokedexcli", description="Interactive Pokedex.")
    parser.parse_args(argv)
    with Cache(CACHE_INTERVAL) as cache:
        session = Session(PokeApiClient(cache))
        session.out.write(PROMPT)
        session.out.flush()
        lines = _prompted(session, sys.stdin)
        for words in lines:
            if not session.dispatch(words):
                break
    return 0


def _prompted(session: Session, stream: TextIO) -> Iterable[list[str]]:
    for line in stream:
        yield clean_input(line)
        session.out.write(PROMPT)
        session.out.flush()


if __name__ == "__main__":
    sys.exit(main())