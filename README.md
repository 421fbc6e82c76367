# mediashelf

mediashelf keeps a catalogue of movies, books and songs. It reads the catalogue from a tab-separated list and then works through a file of commands. Reports go to one file and rejected records and commands go to another.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

The program works in one directory. That directory must hold:

- `mediaList.txt`: the catalogue, with one item per line
- `mediaCommands.txt`: the commands, with one per line

Run it in the current directory:

```
mediashelf
```

You can also name another directory:

```
mediashelf path/to/directory
```

Reports are written to `mediaReport.txt` in the same directory. Rejected catalogue lines and rejected commands are written to `mediaError.txt`. Both files are overwritten on every run. If any of the four files cannot be opened, the program prints `Could not open file: File opening failed` and exits with status 1.

## The catalogue file

Each line holds tab-separated fields. Spaces around a field are ignored, and blank lines are skipped.

```
type  title  name  rating  genre  length  year  [extra...]
```

- `type` is `M` (movie), `B` (book) or `S` (song).
- `title`, `name` and `genre` must not be empty.
- `rating` is between 1 and 10, `length` must be positive, and `year` is between 1920 and 2024.
- A movie may be followed by any number of star names.
- A book takes exactly one extra field: the number of weeks it spent on the NYT list, written as digits.
- A song takes exactly one extra field: `1` if it was a Top 40 hit and `0` if it was not.

A line that fails these checks is written to the error file, with the reason, and skipped.

## Commands

| Command | Effect |
|---|---|
| `A`, `M`, `B`, `S` | List all media, or only movies, books or songs |
| `M,7` (type, then digits) | List items of that type with a rating of at least 7 (the rating must be 1 to 10) |
| `A,Drama` (type, then text) | List items of that type whose genre is exactly that text |
| `T` | Show the number of movies, books and songs |
| `L,<title>` | List the stars of the first movie with that title |
| `F,<star>` | List the titles of the movies a star appears in |
| `K,<name>` | List the media by that director, author or artist |
| `N,<type>,<title>,<name>,<rating>,<genre>,<length>,<year>,<extra...>` | Add a new item; the extra fields follow the catalogue rules |
| `Q` | Write `Thank You for Using Media Everywhere` and stop processing commands |

Empty command lines are skipped. Any other command is written to the error file as `Unknown command: ...`.

Reports list each item in fixed-width columns (title, name, genre, rating, length, year), followed by the stars for a movie, `WeeksNYT: <n>` for a book, or `Top40: Yes`/`Top40: No` for a song. A report with no matching items says `No entries found for command: ...`.

## Using it from Python

The items are dataclasses in `mediashelf.media`: `Movie` (with `stars`), `Book` (with `weeks_nyt`) and `Song` (with `top40`), all sharing the fields of `Media`. Each has a `format_line()` method that returns its report line.

The operations are in `mediashelf.library`. Each takes an output stream and, where it reports problems, an error stream:

```python
import io
from mediashelf.library import read_media_list, print_report, add_content

err = io.StringIO()
with open("mediaList.txt", encoding="utf-8") as listing:
    library = read_media_list(listing, err)

out = io.StringIO()
add_content("N,S,Hello,Adele,9,Pop,5,2015,1", out, err, library)
print_report("A", out, err, library)
print(out.getvalue())
```

`read_media_list` returns the list of valid items. `add_content` appends the new item to the library and returns it, or returns `None` if the command was rejected. The other functions are `print_totals`, `print_report_rating`, `print_report_genre`, `list_stars`, `list_movies_by_star`, `list_media_by_name` and `is_digits`.

`mediashelf.cli.process_commands` runs a sequence of command lines against a library and returns `True` if a `Q` command stopped it.

## What it does not do

Items added with `N` exist only for the rest of that run: the catalogue file is never rewritten, so nothing added is stored for the next run.