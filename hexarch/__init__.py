"""Hexagonal-architecture services for membership, wallet balances and payments."""

__version__ = "0.1.0"