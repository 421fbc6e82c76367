import pytest

from mediashelf.media import Book, Media, Movie, Song


def _movie():
    return Movie("Alien", "Ridley Scott", 9, "Horror", 117, 1979, ["Sigourney Weaver", "Tom Skerritt"])


def _check_columns(line, item):
    assert line[:50].rstrip() == item.title
    assert line[50:80].rstrip() == item.name
    assert line[80:95].rstrip() == item.genre
    assert line[95:105].rstrip() == str(item.rating)
    assert line[105:115].rstrip() == str(item.length)
    assert line[115:125].rstrip() == str(item.year_released)


def test_media_is_abstract():
    with pytest.raises(TypeError):
        Media()


def test_kinds():
    movie = _movie()
    book = Book("Dune", "Frank Herbert", 10, "SciFi", 412, 1965, 3)
    song = Song("Hey Jude", "The Beatles", 9, "Rock", 7, 1968, True)
    assert (movie.kind, book.kind, song.kind) == ("M", "B", "S")


def test_defaults_match_source():
    book = Book()
    assert book.title == ""
    assert book.rating == -1
    assert book.length == -1
    assert book.year_released == -1
    assert book.weeks_nyt == 0
    assert Song().top40 is False
    assert Movie().stars == []


def test_movie_line_columns_and_stars():
    movie = _movie()
    line = movie.format_line()
    _check_columns(line, movie)
    assert line[125:] == " Sigourney Weaver Tom Skerritt"


def test_movie_without_stars_has_only_columns():
    movie = Movie("Up", "Pete Docter", 8, "Family", 96, 2009)
    line = movie.format_line()
    assert len(line) == 125
    _check_columns(line, movie)


def test_movie_stars_lists_are_independent():
    a = Movie()
    b = Movie()
    a.stars.append("Someone")
    assert b.stars == []


def test_book_line():
    book = Book("Dune", "Frank Herbert", 10, "SciFi", 412, 1965, 3)
    line = book.format_line()
    _check_columns(line, book)
    assert line[125:] == " WeeksNYT: 3"


@pytest.mark.parametrize("top40, text", [(True, "Yes"), (False, "No")])
def test_song_line(top40, text):
    song = Song("Hey Jude", "The Beatles", 9, "Rock", 7, 1968, top40)
    line = song.format_line()
    _check_columns(line, song)
    assert line[125:] == f" Top40: {text}"


def test_long_title_is_not_truncated():
    title = "T" * 60
    book = Book(title, "Author", 5, "Drama", 100, 2000, 1)
    line = book.format_line()
    assert line.startswith(title + "Author")
    assert line.endswith(" WeeksNYT: 1")


def test_line_has_no_line_ending():
    assert not _movie().format_line().endswith("\n")


def test_fields_are_mutable():
    song = Song("A", "B", 5, "Pop", 3, 2001, False)
    song.top40 = True
    song.rating = 7
    line = song.format_line()
    assert line.endswith(" Top40: Yes")
    assert line[95:105].rstrip() == "7"