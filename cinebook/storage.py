"""The movie and show catalog and its text-file database."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .models import Hall, Movie, Show, ShowTime

MOVIE_DB = "MovieDB.txt"
SHOW_DB = "ShowDB.txt"

_INT = re.compile(r"[+-]?\d+")
_SHOW_FIELDS = 8


def _pad(value: int) -> str:
    return f"{'' if value > 9 else '0'}{value}"


def _remove_first(items: list, value) -> None:
    for position, item in enumerate(items):
        if item == value:
            del items[position]
            return


@dataclass
class Catalog:
    """All movies and shows, in the order they were added."""

    movies: list[Movie] = field(default_factory=list)
    shows: list[Show] = field(default_factory=list)

    def next_film_id(self) -> int:
        """Return the id for a new movie: one past the last added."""
        return self.movies[-1].film_id + 1 if self.movies else 1

    def next_show_id(self) -> int:
        """Return the id for a new show: one past the last added."""
        return self.shows[-1].sid + 1 if self.shows else 1

    def add_movie(self, movie: Movie) -> None:
        self.movies.append(movie)

    def add_show(self, movie: Movie, show: Show) -> None:
        """Add a show for the movie to the catalog and to the movie."""
        show.movie_id = movie.film_id
        self.shows.append(show)
        movie.shows.append(show)

    def remove_movie(self, movie: Movie) -> None:
        """Remove the movie and all of its shows."""
        for show in movie.shows:
            _remove_first(self.shows, show)
        _remove_first(self.movies, movie)

    def remove_show(self, movie: Movie, show: Show) -> None:
        _remove_first(self.shows, show)
        _remove_first(movie.shows, show)

    def find_show(self, sid: int) -> Show:
        for show in self.shows:
            if show.sid == sid:
                return show
        raise KeyError(sid)


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def exhausted(self) -> bool:
        self._skip_space()
        return self.pos >= len(self.text)

    def read_int(self) -> int:
        self._skip_space()
        match = _INT.match(self.text, self.pos)
        if match is None:
            raise ValueError(f"expected a number at offset {self.pos}")
        self.pos = match.end()
        return int(match.group())

    def skip_one(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1

    def read_until(self, delimiter: str) -> str:
        end = self.text.find(delimiter, self.pos)
        if end == -1:
            if self.pos >= len(self.text):
                raise ValueError("unexpected end of movie data")
            value, self.pos = self.text[self.pos:], len(self.text)
            return value
        value, self.pos = self.text[self.pos:end], end + 1
        return value


def parse_movies(text: str) -> list[Movie]:
    """Parse movie records of the form ``id title, duration director, genre, language,``."""
    cursor = _Cursor(text)
    movies = []
    while not cursor.exhausted():
        film_id = cursor.read_int()
        cursor.skip_one()
        title = cursor.read_until(",")
        duration = cursor.read_int()
        cursor.skip_one()
        director = cursor.read_until(",")
        cursor.skip_one()
        genre = cursor.read_until(",")
        cursor.skip_one()
        language = cursor.read_until(",")
        movies.append(Movie(film_id, title, duration, director, genre, language))
    return movies


def parse_shows(text: str) -> list[Show]:
    """Parse show records: id, hall, movie id, day, month, year, hour, minute."""
    tokens = text.split()
    if len(tokens) % _SHOW_FIELDS:
        raise ValueError("incomplete show record")
    shows = []
    for start in range(0, len(tokens), _SHOW_FIELDS):
        sid, hall, movie_id, *when = tokens[start:start + _SHOW_FIELDS]
        try:
            numbers = [int(sid), int(movie_id), *map(int, when)]
        except ValueError:
            raise ValueError(f"malformed show record: {' '.join(tokens[start:start + _SHOW_FIELDS])}") from None
        show_id, film_id, *time_fields = numbers
        shows.append(Show(show_id, film_id, Hall(hall), ShowTime(*time_fields)))
    return shows


def format_movie_record(movie: Movie) -> str:
    """Return the database line for a movie."""
    return (
        f"{movie.film_id} {movie.title}, {movie.duration} {movie.director}, "
        f"{movie.genre}, {movie.language},\n"
    )


def format_show_record(show: Show) -> str:
    """Return the database line for a show."""
    time = show.time
    fields = [time.day, time.month, time.year, time.hour, time.minute]
    return f"{show.sid} {show.hall.name} {show.movie_id} " + " ".join(map(_pad, fields)) + "\n"


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def load_catalog(directory: str | Path = ".") -> Catalog:
    """Read the movie and show databases in a directory; missing files count as empty."""
    base = Path(directory)
    catalog = Catalog(parse_movies(_read(base / MOVIE_DB)))
    for show in parse_shows(_read(base / SHOW_DB)):
        for movie in catalog.movies:
            if movie.film_id == show.movie_id:
                movie.shows.append(show)
        catalog.shows.append(show)
    return catalog


def save_catalog(catalog: Catalog, directory: str | Path = ".") -> None:
    """Write the catalog to the movie and show databases in a directory."""
    base = Path(directory)
    (base / MOVIE_DB).write_text(
        "".join(map(format_movie_record, catalog.movies)), encoding="utf-8"
    )
    (base / SHOW_DB).write_text(
        "".join(map(format_show_record, catalog.shows)), encoding="utf-8"
    )