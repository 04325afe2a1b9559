# cinebook

A small console application for running a cinema box office. Staff keep
the catalogue of movies and their shows up to date; customers pick a
movie, pick a show, choose seats on the hall plan and receive a bill.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
cinebook
cinebook --data-dir path/to/data
```

`--data-dir` (default: the current directory) is where the movie and show
databases are read from and saved to, and where bills are written.

The program opens a sign-in prompt asking for an account and a password.
There are two built-in accounts, one for administrators and one for
customers; `cinebook.app.authenticate` maps an account and password to a
`Role` (`Role.ADMIN` or `Role.USER`), or to `None` for a wrong pair, which
is reported before the prompt is shown again. The sign-in loop runs until
input ends or Ctrl-C is pressed.

### Keys

On a terminal, menus and lists react to single key presses:

| Key        | Action                     |
|------------|----------------------------|
| Up arrow   | move the cursor up         |
| Down arrow | move the cursor down       |
| Enter      | choose the highlighted row |
| Esc        | leave the current screen   |

When input is not a terminal (for instance piped from a file), each input
line stands for one key: `up`, `w` or `k` for Up; `down`, `s` or `j` for
Down; an empty line or `enter` for Enter; `esc`, `escape` or `q` for Esc.

### Administrator menu

1. View revenue – tickets sold and money taken per movie
2. Add movie – asks for title, duration, director, genre and language;
   the new film id is one past that of the last movie added
3. Remove movie – its shows are removed as well
4. Edit movie – title, duration, director, genre or language, repeatedly
   until "Back to main menu"
5. Add show – asks for the hall and the start day, month, year, hour and
   minute
6. Remove show
7. Edit show – start time or hall
8. Show movie list
9. Exit and save – writes the catalogue back to the data directory and
   returns to sign-in

Esc in this menu returns to sign-in without saving.

### Customer menu

1. Create a ticket – choose a movie, a show and how many seats, then enter
   each seat as a row letter `A`–`J` followed by a column `0`–`9`
   (for example `C7`). A seat that is out of range or already booked is
   refused and asked for again.
2. View bills – every bill issued in this session
3. Show infomation – the customer profile
4. Exit – back to sign-in

Esc in this menu, or on the movie list while booking, ends the program.

Each ticket costs 85000. Every booking also writes its bill to a file
named `Bill1.txt`, `Bill2.txt`, … in the data directory.

## Data files

`MovieDB.txt` holds one movie per line:

```
1 Spirited Away, 125 Hayao Miyazaki, Animation, Japanese,
```

that is the film id, the title up to a comma, the duration in minutes, the
director up to a comma, the genre and the language, each ended by a comma.

`ShowDB.txt` holds one show per line:

```
3 H2 1 09 05 2024 18 30
```

that is the show id, the hall name, the id of the movie it plays, and the
day, month, year, hour and minute it starts. A missing file counts as
empty.

## Using it as a library

```python
from pathlib import Path

from cinebook.storage import load_catalog, save_catalog
from cinebook.billing import TicketCounter
from cinebook.user import book_tickets, write_bill

catalog = load_catalog(Path("."))
show = catalog.find_show(3)          # KeyError if there is no such show
movie = next(m for m in catalog.movies if m.film_id == show.movie_id)

bill = book_tickets(movie, show, ["A0", "A1"], TicketCounter())
print(bill.render())
print(bill.total())
write_bill(bill, Path("Bill1.txt"))

save_catalog(catalog, Path("."))
```

`book_tickets` books either all the requested seats or none: a malformed
label raises `ValueError`, and a taken or repeated seat raises
`cinebook.models.SeatTakenError`.

Other pieces:

- `cinebook.models` – `ShowTime`, `Seat`, `seat_position`, `Hall`
  (with `book` and `render` for the seat plan), `Show` and `Movie`
- `cinebook.storage` – `Catalog`, `parse_movies`, `parse_shows`,
  `format_movie_record`, `format_show_record`
- `cinebook.admin` – `render_revenue` and `AdminSession`
- `cinebook.user` – `UserSession`
- `cinebook.console` – `Terminal`, `Key`, `choose`, `Profile` and the
  list and menu renderers

## What it does not do

- Booked seats and ticket counts live only in memory: the databases keep
  movies and shows, not which seats are taken or how many tickets were
  sold, so revenue starts from zero at every start.
- Bills are listed only for the current session; the bill files are
  written but never read back.
- There are no user accounts beyond the two built-in ones, and the
  customer profile is a fixed guest profile.