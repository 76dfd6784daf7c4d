"""Matchmaking service pairing waiting players by skill, wait time and rank."""

__version__ = "0.1.0"
