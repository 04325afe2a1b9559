import io

import pytest

from cinebook.admin import AdminSession, render_revenue
from cinebook.console import Terminal
from cinebook.models import Hall, Movie, Show, ShowTime
from cinebook.storage import MOVIE_DB, SHOW_DB, Catalog, load_catalog


def _catalog():
    catalog = Catalog()
    first = Movie(1, "Alpha", 100, "Ann", "Drama", "English")
    second = Movie(2, "Beta", 90, "Bob", "Comedy", "French")
    catalog.add_movie(first)
    catalog.add_movie(second)
    catalog.add_show(first, Show(1, 0, Hall("H1"), ShowTime(1, 2, 2024, 10, 30)))
    catalog.add_show(second, Show(2, 0, Hall("H2"), ShowTime(3, 4, 2024, 18, 5)))
    catalog.add_show(second, Show(3, 0, Hall("H3"), ShowTime(5, 6, 2024, 20, 0)))
    return catalog


def _session(catalog, text, data_dir="."):
    out = io.StringIO()
    terminal = Terminal(io.StringIO(text), out)
    return AdminSession(catalog, terminal, data_dir), out


def test_render_revenue_lists_movies_in_order():
    catalog = _catalog()
    catalog.movies[0].total_tickets = 3
    text = render_revenue(catalog.movies)
    assert "Revenue" in text
    assert text.index("Alpha") < text.index("Beta")
    assert str(catalog.movies[0].revenue()) in text
    assert catalog.movies[0].revenue() == 255000


def test_add_movie_uses_next_id():
    catalog = _catalog()
    session, _ = _session(catalog, "Gamma\n120\nCara\nAction\nEnglish\n")
    movie = session.add_movie()
    assert movie.film_id == 3
    assert catalog.movies[-1] is movie
    assert (movie.title, movie.duration, movie.director) == ("Gamma", 120, "Cara")
    assert (movie.genre, movie.language) == ("Action", "English")


def test_add_movie_asks_again_for_bad_duration():
    catalog = _catalog()
    session, _ = _session(catalog, "Gamma\nlong\n95\nCara\nAction\nEnglish\n")
    movie = session.add_movie()
    assert movie.duration == 95


def test_remove_movie_removes_its_shows():
    catalog = _catalog()
    session, _ = _session(catalog, "down\n\n")
    removed = session.remove_movie()
    assert removed.title == "Beta"
    assert [m.title for m in catalog.movies] == ["Alpha"]
    assert [s.sid for s in catalog.shows] == [1]


def test_remove_movie_escape_keeps_catalog():
    catalog = _catalog()
    session, _ = _session(catalog, "esc\n")
    assert session.remove_movie() is None
    assert len(catalog.movies) == 2


def test_add_show_attaches_to_movie():
    catalog = _catalog()
    session, _ = _session(catalog, "\nH9\n7\n8\n2025\n9\n15\n")
    show = session.add_show()
    assert show.sid == 4
    assert show.movie_id == 1
    assert show in catalog.movies[0].shows
    assert catalog.shows[-1] is show
    assert show.hall.name == "H9"
    assert show.time == ShowTime(7, 8, 2025, 9, 15)


def test_remove_show():
    catalog = _catalog()
    session, _ = _session(catalog, "down\n\ndown\n\n")
    removed = session.remove_show()
    assert removed.sid == 3
    assert [s.sid for s in catalog.movies[1].shows] == [2]
    assert [s.sid for s in catalog.shows] == [1, 2]


def test_edit_movie_changes_title_then_back():
    catalog = _catalog()
    session, out = _session(catalog, "\n\nRenamed\nx\nesc\n")
    movie = session.edit_movie()
    assert movie.title == "Renamed"
    assert catalog.movies[0].title == "Renamed"
    assert "Done!" in out.getvalue()


def test_edit_movie_duration():
    catalog = _catalog()
    session, _ = _session(catalog, "down\n\ndown\n\n77\nx\ndown\ndown\ndown\ndown\ndown\n\n")
    movie = session.edit_movie()
    assert movie.duration == 77
    assert movie.title == "Beta"


def test_edit_show_hall_is_seen_in_catalog():
    catalog = _catalog()
    session, _ = _session(catalog, "\n\ndown\n\nH7\nx\n")
    show = session.edit_show()
    assert show.hall.name == "H7"
    assert catalog.find_show(1).hall.name == "H7"


def test_edit_show_time():
    catalog = _catalog()
    session, _ = _session(catalog, "\n\n\n9\n10\n2026\n11\n45\nx\n")
    show = session.edit_show()
    assert show.time == ShowTime(9, 10, 2026, 11, 45)


def test_save_round_trip(tmp_path):
    catalog = _catalog()
    session, _ = _session(catalog, "", tmp_path)
    session.save()
    loaded = load_catalog(tmp_path)
    assert [m.title for m in loaded.movies] == ["Alpha", "Beta"]
    assert [s.sid for s in loaded.shows] == [1, 2, 3]
    assert [s.sid for s in loaded.movies[1].shows] == [2, 3]


def test_run_exit_and_save_writes_files(tmp_path):
    catalog = _catalog()
    session, _ = _session(catalog, "down\n" * 8 + "\n", tmp_path)
    session.run()
    assert (tmp_path / MOVIE_DB).exists()
    assert (tmp_path / SHOW_DB).exists()
    assert len(load_catalog(tmp_path).movies) == 2


def test_run_escape_does_not_save(tmp_path):
    catalog = _catalog()
    session, _ = _session(catalog, "esc\n", tmp_path)
    session.run()
    assert not (tmp_path / MOVIE_DB).exists()


def test_run_view_revenue_then_escape(tmp_path):
    catalog = _catalog()
    session, out = _session(catalog, "\nx\nesc\n", tmp_path)
    session.run()
    assert "Sold Ticket" in out.getvalue()
    assert "Press any key to back to main menu" in out.getvalue()


def test_run_runs_out_of_input():
    catalog = _catalog()
    session, _ = _session(catalog, "down\n")
    with pytest.raises(EOFError):
        session.run()