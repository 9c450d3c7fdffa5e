"""Quoridie - rules engine and text front end for a 9x9 wall-placement race game."""

__version__ = "0.1.0"
