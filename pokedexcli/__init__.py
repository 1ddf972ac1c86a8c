"""A command-line Pokedex backed by the PokeAPI, with an in-memory response cache."""

__version__ = "0.1.0"