"""Core domain objects: show times, seats, halls, shows and movies."""

from __future__ import annotations

from dataclasses import dataclass, field

TICKET_PRICE = 85000
HALL_ROWS = 10
HALL_COLS = 10

_SCREEN_HEADER = (
    "=================================================\n"
    "-------- S     C     R     E     E     N --------\n"
    "=================================================\n"
    "<- EXIT                               ENTRANCE <-\n\n"
)
_SCREEN_LEGEND = "- White: Empty\n- Red: Booked\n"


def _pad(value: int) -> str:
    return f"{'' if value > 9 else '0'}{value}"


@dataclass
class ShowTime:
    """Calendar date and clock time at which a show starts."""

    day: int = 0
    month: int = 0
    year: int = 0
    hour: int = 0
    minute: int = 0

    def date_text(self) -> str:
        """Return the date as DD/MM/YYYY."""
        return f"{_pad(self.day)}/{_pad(self.month)}/{self.year}"

    def clock(self, separator: str) -> str:
        """Return the time as HH<separator>MM."""
        return f"{_pad(self.hour)}{separator}{_pad(self.minute)}"


class SeatTakenError(Exception):
    """Raised when booking a seat that is already booked."""


@dataclass
class Seat:
    """One seat of a hall, addressed by row and column."""

    row: int = -1
    col: int = -1
    booked: bool = False

    def label(self) -> str:
        """Return the seat label, a row letter followed by the column, e.g. A0."""
        return f"{chr(ord('A') + self.row)}{self.col}"

    def toggle(self) -> None:
        """Flip the booked state."""
        self.booked = not self.booked

    def __str__(self) -> str:
        return f"[{self.label()}] "


def seat_position(label: str) -> tuple[int, int]:
    """Turn a label such as ``A0`` into a (row, col) pair."""
    text = label.strip()
    if not text:
        raise ValueError("empty seat label")
    letter, rest = text[0], text[1:].strip()
    try:
        col = int(rest)
    except ValueError:
        raise ValueError(f"invalid seat label: {label!r}") from None
    if not "A" <= letter <= chr(ord("A") + HALL_ROWS - 1) or not 0 <= col < HALL_COLS:
        raise ValueError(f"seat out of range: {label!r}")
    return ord(letter) - ord("A"), col


def _seat_grid() -> list[list[Seat]]:
    return [[Seat(row, col) for col in range(HALL_COLS)] for row in range(HALL_ROWS)]


@dataclass
class Hall:
    """A named hall with a 10 by 10 grid of seats."""

    name: str = ""
    seats: list[list[Seat]] = field(default_factory=_seat_grid, repr=False)

    def seat(self, row: int, col: int) -> Seat:
        """Return the seat at the given position."""
        if not (0 <= row < HALL_ROWS and 0 <= col < HALL_COLS):
            raise IndexError(f"no seat at row {row}, column {col}")
        return self.seats[row][col]

    def book(self, row: int, col: int) -> Seat:
        """Mark a free seat as booked and return it."""
        seat = self.seat(row, col)
        if seat.booked:
            raise SeatTakenError(f"seat {seat.label()} is already booked")
        seat.toggle()
        return seat

    def render(self) -> str:
        """Return the seat map as text."""
        rows = "".join(
            "".join(str(seat) for seat in row) + "\n\n" for row in self.seats
        )
        return _SCREEN_HEADER + rows + _SCREEN_LEGEND


@dataclass(eq=False)
class Show:
    """A screening of a movie in a hall; shows compare equal by id."""

    sid: int = 0
    movie_id: int = 0
    hall: Hall = field(default_factory=Hall)
    time: ShowTime = field(default_factory=ShowTime)
    created_tickets: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Show):
            return NotImplemented
        return self.sid == other.sid

    def row_text(self) -> str:
        """Return the one-line listing of this show."""
        return (
            f"{self.sid:<5} | {self.hall.name:<10} | {self.time.date_text()} |  "
            f"{self.time.clock(' : ')}"
        )


@dataclass(eq=False)
class Movie:
    """A movie with its shows; movies compare equal by film id."""

    film_id: int = -1
    title: str = "Unknown"
    duration: int = -1
    director: str = "Unknown"
    genre: str = "Unknown"
    language: str = "Unknown"
    shows: list[Show] = field(default_factory=list)
    total_tickets: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return self.film_id == other.film_id

    def row_text(self) -> str:
        """Return the one-line listing of this movie."""
        return (
            f"{self.film_id:<3} | {self.title:<30} | {self.duration:<8} | "
            f"{self.director:<20} | {self.genre:<25} | {self.language:<15}"
        )

    def revenue(self) -> int:
        """Return the money taken for the tickets sold."""
        return self.total_tickets * TICKET_PRICE