import io
from datetime import date

import pytest

from cinebook.console import (
    Key,
    Profile,
    Terminal,
    choose,
    render_menu,
    render_movie_list,
    render_show_list,
)
from cinebook.models import Hall, Movie, Show, ShowTime


def make_terminal(text):
    return Terminal(io.StringIO(text), io.StringIO())


@pytest.mark.parametrize(
    "line, key",
    [
        ("up\n", Key.UP),
        ("down\n", Key.DOWN),
        ("\n", Key.ENTER),
        ("esc\n", Key.ESCAPE),
        ("x\n", Key.OTHER),
    ],
)
def test_read_key_line_mode(line, key):
    assert make_terminal(line).read_key() is key


def test_read_key_at_end_of_input():
    with pytest.raises(EOFError):
        make_terminal("").read_key()


def test_prompt_returns_line_and_writes_text():
    terminal = make_terminal("Some Title\n")
    assert terminal.prompt("Enter movie name: ") == "Some Title"
    assert terminal.stdout.getvalue() == "Enter movie name: "


def test_prompt_at_end_of_input():
    with pytest.raises(EOFError):
        make_terminal("").prompt("x")


def test_render_menu_with_title():
    text = render_menu(["1. View revenue", "2. Add movie"], 1, "Main menu")
    assert text.startswith("   -----------------\n       Main menu\n")
    assert "   1. View revenue\n" in text
    assert "-> 2. Add movie\n" in text


def test_render_menu_without_title_marks_one_line():
    options = ["a", "b", "c"]
    text = render_menu(options, 0)
    lines = text.splitlines()
    assert len(lines) == len(options)
    assert sum(line.startswith("-> ") for line in lines) == 1


def test_render_movie_list_keeps_order_and_marks_position():
    movies = [Movie(1, "First"), Movie(2, "Second")]
    text = render_movie_list(movies, 1)
    assert text.startswith("Choose movie\n")
    assert "   " + movies[0].row_text() in text
    assert "-> " + movies[1].row_text() in text
    assert text.index(movies[0].row_text()) < text.index(movies[1].row_text())


def test_render_show_list_marks_position():
    shows = [Show(1, 1, Hall("H1"), ShowTime(1, 2, 2024, 9, 5)), Show(2, 1, Hall("H2"))]
    text = render_show_list(shows, 0)
    assert text.startswith("Choose show\n")
    assert "-> " + shows[0].row_text() in text
    assert "   " + shows[1].row_text() in text


def test_choose_moves_down_and_selects():
    terminal = make_terminal("down\ndown\n\n")
    assert choose(terminal, 3, lambda p: f"<{p}>") == 2
    assert "<2>" in terminal.stdout.getvalue()


def test_choose_clamps_at_both_ends():
    assert choose(make_terminal("up\n\n"), 3, str) == 0
    assert choose(make_terminal("down\ndown\ndown\ndown\n\n"), 2, str) == 1


def test_choose_escape_returns_none():
    assert choose(make_terminal("down\nesc\n"), 3, str) is None


def test_choose_with_nothing_to_choose():
    assert choose(make_terminal("\n"), 0, str) is None


def test_profile_render_and_ids_increase():
    first = Profile(name="Tester", birth=date(2001, 3, 4), gender="Male", phone="none")
    second = Profile()
    assert second.uid == first.uid + 1
    text = first.render()
    assert f"{'ID: ':<15}{first.uid}\n" in text
    assert f"{'Name: ':<15}Tester\n" in text
    assert "04/03/2001" in text