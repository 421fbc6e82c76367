"""Loading the media list and producing the library's reports."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from typing import TextIO

from mediashelf.media import Book, Media, Movie, Song

_WHITESPACE = " \t\n\r"
_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

MIN_RATING = 1
MAX_RATING = 10
MIN_YEAR = 1920
MAX_YEAR = 2024
RULE_WIDTH = 125

_HEADER = (
    f"{'Title':<50}{'Name':<30}{'Genre':<15}"
    f"{'Rating':<10}{'Length':<10}{'Year':<10} Additional Info"
)


class _NotANumber(ValueError):
    """The text does not start with an integer."""


class _NumberOutOfRange(ValueError):
    """The integer does not fit in 32 bits."""


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def _split_fields(text: str, delimiter: str) -> list[str]:
    """Split like repeated delimited reads: a trailing empty field is dropped."""
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise _NotANumber(text)
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise _NumberOutOfRange(text)
    return value


def is_digits(text: str) -> bool:
    """Return True if ``text`` holds only ASCII digits (an empty string does)."""
    return all(char in _DIGITS for char in text)


def _valid_count(text: str) -> bool:
    """True for a non-empty run of digits that fits in a 32-bit integer."""
    return bool(text) and is_digits(text) and int(text) <= _INT_MAX


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def read_media_list(infile: Iterable[str], err: TextIO) -> list[Media]:
    """Read tab-separated media records, reporting rejected lines to ``err``."""
    library: list[Media] = []
    for raw in infile:
        line = _strip_newline(raw)
        tokens = [_trim(token) for token in _split_fields(line, "\t")]
        if not any(tokens):
            continue
        if len(tokens) < 7:
            err.write(f"Invalid record (insufficient fields): {line}\n")
            continue
        kind = tokens[0]
        if kind not in ("M", "B", "S"):
            err.write(f"Invalid type in record: {line}\n")
            continue
        if not tokens[1] or not tokens[2] or not tokens[4]:
            err.write(f"Missing required field in record: {line}\n")
            continue
        try:
            rating = _leading_int(tokens[3])
            length = _leading_int(tokens[5])
            year = _leading_int(tokens[6])
        except _NotANumber:
            err.write(f"Non-numeric value in numeric field: {line}\n")
            continue
        except _NumberOutOfRange:
            err.write(f"Numeric value out of range: {line}\n")
            continue
        if not MIN_RATING <= rating <= MAX_RATING:
            err.write(f"Rating out of range (1-10): {line}\n")
            continue
        if length <= 0:
            err.write(f"Invalid length (must be positive): {line}\n")
            continue
        if not MIN_YEAR <= year <= MAX_YEAR:
            err.write(f"Year out of range (1920-2024): {line}\n")
            continue

        common = dict(
            title=tokens[1],
            name=tokens[2],
            rating=rating,
            genre=tokens[4],
            length=length,
            year_released=year,
        )
        if kind == "M":
            library.append(Movie(**common, stars=tokens[7:]))
        elif kind == "B":
            if len(tokens) != 8:
                err.write(f"Invalid number of fields for Book (expected 8): {line}\n")
                continue
            if not _valid_count(tokens[7]):
                err.write(f"Invalid weeksNYT for Book: {line}\n")
                continue
            library.append(Book(**common, weeks_nyt=int(tokens[7])))
        else:
            if len(tokens) != 8:
                err.write(f"Invalid number of fields for Song (expected 8): {line}\n")
                continue
            if tokens[7] not in ("0", "1"):
                err.write(f"Invalid top40 value for Song (must be 0 or 1): {line}\n")
                continue
            library.append(Song(**common, top40=tokens[7] == "1"))
    return library


def print_totals(out: TextIO, library: Iterable[Media]) -> None:
    """Write the number of movies, books and songs in the library."""
    counts = Counter(media.kind for media in library)
    out.write(f"Total Movies: {counts['M']}\n")
    out.write(f"Total Books: {counts['B']}\n")
    out.write(f"Total Songs: {counts['S']}\n")


def _write_report(command: str, out: TextIO, items: Iterable[Media]) -> None:
    out.write(f"Report for command: {command}\n")
    out.write(_HEADER + "\n")
    out.write("-" * RULE_WIDTH + "\n")
    found = False
    for media in items:
        out.write(media.format_line() + "\n")
        found = True
    if not found:
        out.write(f"No entries found for command: {command}\n")
    out.write("\n")


def _matches_kind(selector: str, media: Media) -> bool:
    return selector == "A" or media.kind == selector


def print_report(command: str, out: TextIO, err: TextIO, library: list[Media]) -> None:
    """Report every item of the kind named by the command ('A' for all)."""
    selector = command[:1]
    _write_report(
        command, out, (m for m in library if _matches_kind(selector, m))
    )


def print_report_rating(
    command: str, out: TextIO, err: TextIO, library: list[Media]
) -> None:
    """Report items of a kind whose rating is at least the one in the command."""
    selector_part, _, rating_text = command.partition(",")
    if not rating_text or not is_digits(rating_text):
        err.write(f"Invalid rating in command: {command}\n")
        return
    rating = int(rating_text)
    if not MIN_RATING <= rating <= MAX_RATING:
        err.write(f"Rating out of range in command: {command}\n")
        return
    selector = selector_part[:1]
    _write_report(
        command,
        out,
        (m for m in library if _matches_kind(selector, m) and m.rating >= rating),
    )


def print_report_genre(
    command: str, out: TextIO, err: TextIO, library: list[Media]
) -> None:
    """Report items of a kind whose genre equals the one in the command."""
    selector_part, _, genre = command.partition(",")
    selector = selector_part[:1]
    _write_report(
        command,
        out,
        (m for m in library if _matches_kind(selector, m) and m.genre == genre),
    )


def add_content(
    command: str, out: TextIO, err: TextIO, library: list[Media]
) -> Media | None:
    """Add the item described by an 'N' command; return it, or None if rejected."""
    tokens = [_trim(token) for token in _split_fields(command, ",")]
    if len(tokens) < 8 or tokens[0] != "N":
        err.write(f"Invalid new media command: {command}\n")
        return None
    kind = tokens[1]
    if kind not in ("M", "B", "S"):
        err.write(f"Invalid type in new media: {command}\n")
        return None
    title, name, rating_text, genre, length_text, year_text = tokens[2:8]
    if not all(_valid_count(text) for text in (rating_text, length_text, year_text)):
        err.write(f"Invalid numeric fields in new media: {command}\n")
        return None
    rating, length, year = int(rating_text), int(length_text), int(year_text)
    if (
        not MIN_RATING <= rating <= MAX_RATING
        or length <= 0
        or not MIN_YEAR <= year <= MAX_YEAR
    ):
        err.write(f"Invalid values in new media: {command}\n")
        return None

    common = dict(
        title=title,
        name=name,
        rating=rating,
        genre=genre,
        length=length,
        year_released=year,
    )
    item: Media
    if kind == "M":
        if len(tokens) < 9:
            err.write(f"Insufficient fields for new Movie: {command}\n")
            return None
        item = Movie(**common, stars=tokens[8:])
        label = "Movie"
    elif kind == "B":
        if len(tokens) != 9:
            err.write(f"Invalid number of fields for new Book: {command}\n")
            return None
        if not _valid_count(tokens[8]):
            err.write(f"Invalid weeksNYT in new Book: {command}\n")
            return None
        item = Book(**common, weeks_nyt=int(tokens[8]))
        label = "Book"
    else:
        if len(tokens) != 9:
            err.write(f"Invalid number of fields for new Song: {command}\n")
            return None
        if tokens[8] not in ("0", "1"):
            err.write(f"Invalid top40 in new Song: {command}\n")
            return None
        item = Song(**common, top40=tokens[8] == "1")
        label = "Song"
    library.append(item)
    out.write(f"Added new {label}: {title}\n")
    return item


def list_stars(title: str, out: TextIO, err: TextIO, library: list[Media]) -> None:
    """Write the stars of the first movie with the given title."""
    movie = next(
        (m for m in library if isinstance(m, Movie) and m.title == title), None
    )
    if movie is None:
        err.write(f"Movie not found: {title}\n")
        return
    out.write(f"Stars in {title}: " + "".join(f"{star} " for star in movie.stars) + "\n")


def list_movies_by_star(
    star: str, out: TextIO, err: TextIO, library: list[Media]
) -> None:
    """Write the titles of every movie featuring the given star."""
    out.write(f"Movies featuring {star}:\n")
    titles = [m.title for m in library if isinstance(m, Movie) and star in m.stars]
    for title in titles:
        out.write(f"{title}\n")
    if not titles:
        err.write(f"No movies found for star: {star}\n")


def list_media_by_name(
    name: str, out: TextIO, err: TextIO, library: list[Media]
) -> None:
    """Write every item whose creator name equals ``name``."""
    out.write(f"Media by {name}:\n")
    items = [m for m in library if m.name == name]
    for media in items:
        out.write(media.format_line() + "\n")
    if not items:
        err.write(f"No media found for name: {name}\n")