"""Tiles, boards, word checks, game info, messages and user storage for a word-tile puzzle game."""

__version__ = "0.1.0"