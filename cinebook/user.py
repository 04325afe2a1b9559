"""Booking tickets for a signed-in customer."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from .billing import Bill, Ticket, TicketCounter
from .console import (
    Profile,
    Terminal,
    choose,
    render_menu,
    render_movie_list,
    render_show_list,
)
from .models import Movie, SeatTakenError, Show, seat_position
from .storage import Catalog

USER_MENU = ("1. Create a ticket", "2. View bills", "3. Show infomation", "4. Exit")
SEAT_PROMPT = "Enter seat(Eg: A0): "
SEAT_ERROR = "Error! Enter again.\n"
COUNT_PROMPT = "How many ticket(s) do you want to book?\nInput your index: "


def book_tickets(
    movie: Movie, show: Show, seat_labels: Iterable[str], counter: TicketCounter
) -> Bill:
    """Book the labelled seats of a show and return the bill.

    Either every seat is booked or, on a bad or taken seat, none is.
    """
    positions = [seat_position(label) for label in seat_labels]
    if len(set(positions)) != len(positions):
        raise SeatTakenError("the same seat was requested twice")
    for row, col in positions:
        seat = show.hall.seat(row, col)
        if seat.booked:
            raise SeatTakenError(f"seat {seat.label()} is already booked")
    tickets = []
    for row, col in positions:
        seat = show.hall.book(row, col)
        tickets.append(counter.issue(movie.title, seat))
        show.created_tickets += 1
        movie.total_tickets += 1
    return Bill(tickets, show.hall.name, replace(show.time))


def write_bill(bill: Bill, path: str | Path) -> None:
    """Write the bill's text to a file."""
    Path(path).write_text(bill.render(), encoding="utf-8")


class UserSession:
    """The customer's menu: book tickets, list bills, show the profile."""

    def __init__(
        self,
        catalog: Catalog,
        terminal: Terminal | None = None,
        counter: TicketCounter | None = None,
        profile: Profile | None = None,
        bill_dir: str | Path = ".",
    ) -> None:
        self.catalog = catalog
        self.terminal = terminal if terminal is not None else Terminal()
        self.counter = counter if counter is not None else TicketCounter()
        self.profile = profile if profile is not None else Profile()
        self.bill_dir = Path(bill_dir)
        self.bills: list[Bill] = []
        self._bill_numbers = itertools.count(1)

    def create_ticket(self, show: Show, movie_name: str) -> Ticket:
        """Ask for a free seat of the show until one is given, and issue its ticket."""
        while True:
            answer = self.terminal.prompt(SEAT_PROMPT)
            try:
                row, col = seat_position(answer)
                seat = show.hall.book(row, col)
            except (ValueError, SeatTakenError):
                self.terminal.write(SEAT_ERROR)
                continue
            show.created_tickets += 1
            return self.counter.issue(movie_name, seat)

    def _ask_count(self) -> int:
        while True:
            self.terminal.clear()
            try:
                count = int(self.terminal.prompt(COUNT_PROMPT).strip())
            except ValueError:
                continue
            if count >= 0:
                return count

    def book(self) -> Bill | None:
        """Pick a movie and a show, book seats and print and save the bill."""
        terminal = self.terminal
        movies = self.catalog.movies
        number = next(self._bill_numbers)
        chosen = choose(terminal, len(movies), lambda p: render_movie_list(movies, p))
        if chosen is None:
            raise SystemExit(0)
        movie = movies[chosen]
        shows = movie.shows
        picked = choose(terminal, len(shows), lambda p: render_show_list(shows, p))
        if picked is None:
            return None
        show = shows[picked]

        count = self._ask_count()
        terminal.clear()
        terminal.write(show.hall.render())
        tickets = []
        for _ in range(count):
            tickets.append(self.create_ticket(show, movie.title))
            movie.total_tickets += 1
            terminal.clear()
            terminal.write(show.hall.render())
        terminal.clear()

        bill = Bill(tickets, show.hall.name, replace(show.time))
        self.bills.append(bill)
        terminal.write(bill.render())
        write_bill(bill, self.bill_dir / f"Bill{number}.txt")
        terminal.pause()
        return bill

    def run(self) -> None:
        """Run the menu until Exit is chosen; Escape ends the program."""
        terminal = self.terminal
        while True:
            choice = choose(
                terminal, len(USER_MENU), lambda p: render_menu(USER_MENU, p, "Main menu")
            )
            if choice is None:
                raise SystemExit(0)
            terminal.clear()
            if choice == 0:
                self.book()
            elif choice == 1:
                terminal.write("".join(bill.render() for bill in self.bills))
                terminal.pause()
            elif choice == 2:
                terminal.write(self.profile.render())
                terminal.pause()
            else:
                return