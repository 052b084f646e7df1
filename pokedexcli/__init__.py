"""Interactive command-line Pokedex backed by PokeAPI, with an expiring cache."""

__version__ = "0.1.0"

__all__ = ["__version__"]