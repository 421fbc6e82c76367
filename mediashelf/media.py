"""Media items held in the library: movies, books and songs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

TITLE_WIDTH = 50
NAME_WIDTH = 30
GENRE_WIDTH = 15
NUMBER_WIDTH = 10


@dataclass
class Media(ABC):
    """Common fields of every media item."""

    kind: ClassVar[str] = " "

    title: str = ""
    name: str = ""
    rating: int = -1
    genre: str = ""
    length: int = -1
    year_released: int = -1

    def _columns(self) -> str:
        """The fixed-width columns shared by every report line."""
        return (
            f"{self.title:<{TITLE_WIDTH}}"
            f"{self.name:<{NAME_WIDTH}}"
            f"{self.genre:<{GENRE_WIDTH}}"
            f"{self.rating:<{NUMBER_WIDTH}}"
            f"{self.length:<{NUMBER_WIDTH}}"
            f"{self.year_released:<{NUMBER_WIDTH}}"
        )

    @abstractmethod
    def format_line(self) -> str:
        """Return the report line for this item, without a line ending."""


@dataclass
class Movie(Media):
    """A movie together with its list of stars."""

    kind: ClassVar[str] = "M"

    stars: list[str] = field(default_factory=list)

    def format_line(self) -> str:
        return self._columns() + "".join(f" {star}" for star in self.stars)


@dataclass
class Book(Media):
    """A book and the number of weeks it spent on the NYT list."""

    kind: ClassVar[str] = "B"

    weeks_nyt: int = 0

    def format_line(self) -> str:
        return f"{self._columns()} WeeksNYT: {self.weeks_nyt}"


@dataclass
class Song(Media):
    """A song and whether it reached the top 40."""

    kind: ClassVar[str] = "S"

    top40: bool = False

    def format_line(self) -> str:
        return f"{self._columns()} Top40: {'Yes' if self.top40 else 'No'}"