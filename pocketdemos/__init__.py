"""Small console programs for arithmetic, text, matrices, games and web lookups."""

__version__ = "0.1.0"