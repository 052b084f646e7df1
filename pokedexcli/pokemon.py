"""Pokémon records and the catch roll."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

MAX_DIFFICULTY = 90


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class SavedPokemon:
    """The parts of a Pokémon record shown when it is inspected."""

    name: str = ""
    height: int = 0
    weight: int = 0
    stats: dict[str, int] = field(default_factory=dict)
    types: list[str] = field(default_factory=list)


def save_pokemon(data: Mapping[str, Any]) -> SavedPokemon:
    """Extract name, size, base stats and types from a pokemon API record."""
    stats = {
        entry.get("stat", {}).get("name", ""): entry.get("base_stat", 0)
        for entry in data.get("stats") or []
    }
    types = [entry.get("type", {}).get("name", "") for entry in data.get("types") or []]
    return SavedPokemon(
        name=data.get("name") or "",
        height=data.get("height") or 0,
        weight=data.get("weight") or 0,
        stats=stats,
        types=types,
    )


def catch_probability(base_experience: int, rng: _RandRange | None = None) -> bool:
    """Roll for a catch; higher base experience makes it harder.

    A roll in [0, 100) must beat base_experience / 5, capped at 90.
    """
    rng = rng if rng is not None else random.Random()
    chance = rng.randrange(100)
    # Truncate toward zero, as integer division of the experience value does.
    difficulty = int(base_experience / 5)
    difficulty = min(difficulty, MAX_DIFFICULTY)
    return chance > difficulty