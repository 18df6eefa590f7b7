"""A console role-playing game with battles, a market and save slots."""

__version__ = "0.1.0"