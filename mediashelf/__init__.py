"""Catalogue movies, books and songs and write reports from a command file."""

__version__ = "0.1.0"