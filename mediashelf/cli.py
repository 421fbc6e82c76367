"""Command-line entry point: load the media list and run the command file."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from contextlib import ExitStack
from pathlib import Path
from typing import TextIO

from mediashelf.library import (
    add_content,
    is_digits,
    list_media_by_name,
    list_movies_by_star,
    list_stars,
    print_report,
    print_report_genre,
    print_report_rating,
    print_totals,
    read_media_list,
)
from mediashelf.media import Media

MEDIA_LIST = "mediaList.txt"
MEDIA_COMMANDS = "mediaCommands.txt"
MEDIA_REPORT = "mediaReport.txt"
MEDIA_ERROR = "mediaError.txt"

FAREWELL = "Thank You for Using Media Everywhere"

_LOOKUPS = {
    "L": list_stars,
    "F": list_movies_by_star,
    "K": list_media_by_name,
}


def process_commands(
    commands: Iterable[str], out: TextIO, err: TextIO, library: list[Media]
) -> bool:
    """Run each command line against the library.

    Returns True if a quit command stopped processing, False otherwise.
    """
    for raw in commands:
        record = raw[:-1] if raw.endswith("\n") else raw
        if not record:
            continue

        command = record[0]
        head, comma, param = record.partition(",")

        if comma:
            lookup = _LOOKUPS.get(command)
            if lookup is not None:
                lookup(param, out, err, library)
            elif is_digits(param):
                print_report_rating(record, out, err, library)
            else:
                print_report_genre(record, out, err, library)
            continue

        if command == "Q":
            out.write(f"{FAREWELL}\n")
            return True
        if command in ("A", "M", "B", "S"):
            print_report(record, out, err, library)
        elif command == "T":
            print_totals(out, library)
        elif command == "N":
            add_content(record, out, err, library)
        else:
            err.write(f"Unknown command: {record}\n")
    return False


def main(argv: list[str] | None = None) -> int:
    """Read the media list and commands from a directory and write the reports."""
    parser = argparse.ArgumentParser(
        description="Produce media reports from a media list and a command file."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding the input files and receiving the reports",
    )
    args = parser.parse_args(argv)
    base = Path(args.directory)

    with ExitStack() as stack:
        try:
            media_list = stack.enter_context(open(base / MEDIA_LIST, encoding="utf-8"))
            commands = stack.enter_context(
                open(base / MEDIA_COMMANDS, encoding="utf-8")
            )
            report = stack.enter_context(
                open(base / MEDIA_REPORT, "w", encoding="utf-8")
            )
            errors = stack.enter_context(
                open(base / MEDIA_ERROR, "w", encoding="utf-8")
            )
        except OSError:
            print("Could not open file: File opening failed")
            return 1

        library = read_media_list(media_list, errors)
        process_commands(commands, report, errors, library)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())