"""Bracket balance validation for (), [] and {}."""

__version__ = "0.1.0"
