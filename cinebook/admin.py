"""The administrator's menu: revenue, and editing movies and shows."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .console import (
    Terminal,
    choose,
    render_menu,
    render_movie_list,
    render_show_list,
)
from .models import Movie, Show
from .storage import Catalog, save_catalog

ADMIN_MENU = (
    "1. View revenue",
    "2. Add movie",
    "3. Remove movie",
    "4. Edit movie",
    "5. Add show",
    "6. Remove show",
    "7. Edit show",
    "8. Show movie list",
    "9. Exit and save",
)
EDIT_MOVIE_MENU = (
    "1. Change movie name",
    "2. Change duration",
    "3. Change director",
    "4. Change genre",
    "5. Change language",
    "6. Back to main menu",
)
EDIT_SHOW_MENU = (
    "1. Change time start",
    "2. Change hall name",
    "3. Back to main menu",
)
REVENUE_RULE = "=" * 67
BACK_TO_MAIN = "Press any key to back to main menu"
BACK = "Press any key to back"
DONE = "Done!\n"


def render_revenue(movies: Sequence[Movie]) -> str:
    """Return the table of tickets sold and money taken for each movie."""
    header = (
        f"{REVENUE_RULE}\n"
        "                            Revenue\n"
        f"{REVENUE_RULE}\n"
        f"{'Movie':<30}{'Sold Ticket':<15}{'TotalMoney':<15}\n"
    )
    rows = "".join(
        f"{movie.title:<30}{movie.total_tickets:<15}{movie.revenue():<15}\n"
        for movie in movies
    )
    return header + rows


class AdminSession:
    """The administrator's menu over a catalog."""

    def __init__(
        self,
        catalog: Catalog,
        terminal: Terminal | None = None,
        data_dir: str | Path = ".",
    ) -> None:
        self.catalog = catalog
        self.terminal = terminal if terminal is not None else Terminal()
        self.data_dir = Path(data_dir)

    def _wait(self, text: str) -> None:
        self.terminal.write(text)
        self.terminal.read_key()

    def _ask_int(self, text: str) -> int:
        while True:
            answer = self.terminal.prompt(text).strip()
            try:
                return int(answer)
            except ValueError:
                continue

    def _ask_word(self, text: str) -> str:
        while True:
            words = self.terminal.prompt(text).split()
            if words:
                return words[0]

    def _ask_time(self, show: Show) -> None:
        time = show.time
        time.day = self._ask_int("Enter Day Start: ")
        time.month = self._ask_int("Enter Month Start: ")
        time.year = self._ask_int("Enter Year Start: ")
        time.hour = self._ask_int("Enter Hour: ")
        time.minute = self._ask_int("Enter Minute: ")

    def _pick_movie(self) -> Movie | None:
        movies = self.catalog.movies
        index = choose(self.terminal, len(movies), lambda p: render_movie_list(movies, p))
        return None if index is None else movies[index]

    def _pick_show(self, movie: Movie) -> Show | None:
        shows = movie.shows
        index = choose(self.terminal, len(shows), lambda p: render_show_list(shows, p))
        return None if index is None else shows[index]

    def view_revenue(self) -> str:
        """Write the revenue table and return it."""
        text = render_revenue(self.catalog.movies)
        self.terminal.write(text)
        return text

    def add_movie(self) -> Movie:
        """Ask for a new movie's details and add it to the catalog."""
        movie = Movie(film_id=self.catalog.next_film_id())
        movie.title = self.terminal.prompt("Enter movie name: ")
        movie.duration = self._ask_int("Enter duration(minute): ")
        movie.director = self.terminal.prompt("Enter director name: ")
        movie.genre = self.terminal.prompt("Enter genre: ")
        movie.language = self.terminal.prompt("Enter language: ")
        self.catalog.add_movie(movie)
        return movie

    def remove_movie(self) -> Movie | None:
        """Pick a movie and remove it with all its shows."""
        movie = self._pick_movie()
        if movie is not None:
            self.catalog.remove_movie(movie)
        return movie

    def edit_movie(self) -> Movie | None:
        """Pick a movie and change its details until Back is chosen."""
        movie = self._pick_movie()
        if movie is None:
            return None
        terminal = self.terminal
        while True:
            choice = choose(
                terminal, len(EDIT_MOVIE_MENU), lambda p: render_menu(EDIT_MOVIE_MENU, p)
            )
            if choice is None or choice == 5:
                return movie
            if choice == 0:
                movie.title = terminal.prompt("Enter movie name: ")
            elif choice == 1:
                movie.duration = self._ask_int("Enter duration: ")
            elif choice == 2:
                movie.director = terminal.prompt("Enter director: ")
            elif choice == 3:
                movie.genre = terminal.prompt("Enter genre: ")
            else:
                movie.language = terminal.prompt("Enter language: ")
            terminal.write(DONE)
            self._wait(BACK)

    def add_show(self) -> Show | None:
        """Pick a movie and add a new show for it."""
        movie = self._pick_movie()
        if movie is None:
            return None
        show = Show(sid=self.catalog.next_show_id(), movie_id=movie.film_id)
        self.terminal.clear()
        self.terminal.write(render_show_list(movie.shows, -1))
        show.hall.name = self._ask_word("Enter Hall Number: ")
        self._ask_time(show)
        self.catalog.add_show(movie, show)
        self.terminal.clear()
        return show

    def remove_show(self) -> Show | None:
        """Pick a movie and one of its shows, and remove the show."""
        movie = self._pick_movie()
        if movie is None:
            return None
        show = self._pick_show(movie)
        if show is not None:
            self.catalog.remove_show(movie, show)
        return show

    def edit_show(self) -> Show | None:
        """Pick a show and change its start time or its hall once."""
        movie = self._pick_movie()
        if movie is None:
            return None
        show = self._pick_show(movie)
        if show is None:
            return None
        choice = choose(
            self.terminal, len(EDIT_SHOW_MENU), lambda p: render_menu(EDIT_SHOW_MENU, p)
        )
        if choice is None or choice == 2:
            return show
        if choice == 0:
            self._ask_time(show)
        else:
            show.hall.name = self._ask_word("Enter Hall Number: ")
        self.terminal.write(DONE)
        self._wait(BACK)
        return show

    def save(self) -> None:
        """Write the catalog to the databases in the data directory."""
        save_catalog(self.catalog, self.data_dir)

    def run(self) -> None:
        """Run the menu until Exit and save is chosen or Escape is pressed."""
        terminal = self.terminal
        while True:
            choice = choose(
                terminal, len(ADMIN_MENU), lambda p: render_menu(ADMIN_MENU, p, "Main menu")
            )
            if choice is None:
                return
            terminal.clear()
            if choice == 0:
                self.view_revenue()
                self._wait(BACK_TO_MAIN)
            elif choice in (1, 2, 4, 5):
                action = {
                    1: self.add_movie,
                    2: self.remove_movie,
                    4: self.add_show,
                    5: self.remove_show,
                }[choice]
                action()
                terminal.write(DONE)
                self._wait(BACK_TO_MAIN)
            elif choice == 3:
                self.edit_movie()
            elif choice == 6:
                self.edit_show()
            elif choice == 7:
                terminal.write(render_movie_list(self.catalog.movies, -1))
                self._wait(BACK_TO_MAIN)
            else:
                self.save()
                return