"""Tickets and the bills printed for a booking."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import TICKET_PRICE, Seat, ShowTime

FIRST_TICKET_ID = 1000


@dataclass
class Ticket:
    """A ticket for one seat of a movie."""

    ticket_id: int
    movie_name: str
    seat: Seat

    def __str__(self) -> str:
        return str(self.seat)


class TicketCounter:
    """Hands out tickets with increasing ids."""

    def __init__(self, next_id: int = FIRST_TICKET_ID) -> None:
        self.next_id = next_id

    def issue(self, movie_name: str, seat: Seat) -> Ticket:
        """Create a ticket for the seat under the next free id."""
        ticket = Ticket(self.next_id, movie_name, Seat(seat.row, seat.col, seat.booked))
        self.next_id += 1
        return ticket


@dataclass
class Bill:
    """The receipt for a set of tickets bought for one show."""

    tickets: list[Ticket] = field(default_factory=list)
    hall_name: str = ""
    time: ShowTime = field(default_factory=ShowTime)

    @property
    def movie_name(self) -> str:
        return self.tickets[0].movie_name if self.tickets else ""

    def total(self) -> int:
        """Return the amount to pay."""
        return TICKET_PRICE * len(self.tickets)

    def render(self) -> str:
        """Return the bill as printable text."""
        seats = "".join(str(ticket) for ticket in self.tickets)
        return (
            "--------------- BILL ---------------\n"
            f"{'Film:':<15}{self.movie_name}\n"
            f"{'Hall:':<15}{self.hall_name}\n"
            f"{'Date:':<15}{self.time.clock(':')} {self.time.date_text()}\n"
            f"{'Ticket:':<15}{len(self.tickets)} x Ticket ( {seats})\n"
            f"{'Total Price: ':<15}{self.total()}\n"
            "\n"
        )