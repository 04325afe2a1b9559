"""Sign-in screen and program entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum

from .admin import AdminSession
from .console import Terminal
from .storage import load_catalog
from .user import UserSession

SIGN_IN_HEADER = "--------------------SIGN IN---------------------\n\n"
WRONG_LOGIN = "Wrong account or password!\n"
_SIGN_IN_PROMPTS = ("Account: ", "Password: ")


class Role(Enum):
    """What a signed-in account may do."""

    ADMIN = "admin"
    USER = "user"


# Each built-in account signs in with its own name as the password.
_ACCOUNTS = {role.value: role for role in Role}


def authenticate(account: str, password: str) -> Role | None:
    """Return the role of a valid account and password, or None."""
    role = _ACCOUNTS.get(account)
    if role is None or password != account:
        return None
    return role


def _read_word(terminal: Terminal, label: str) -> str:
    """Prompt until a non-blank answer is given and return its first word."""
    while True:
        words = terminal.prompt(f"{label:>22}").split()
        if words:
            return words[0]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cinebook", description="Cinema ticket booking at the console."
    )
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the movie and show databases and the bills",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the databases and run the sign-in loop until input ends."""
    args = _parse_args(argv)
    catalog = load_catalog(args.data_dir)
    terminal = Terminal()
    user = UserSession(catalog, terminal, bill_dir=args.data_dir)
    admin = AdminSession(catalog, terminal, data_dir=args.data_dir)

    try:
        while True:
            terminal.write(SIGN_IN_HEADER)
            account, phrase = (_read_word(terminal, label) for label in _SIGN_IN_PROMPTS)
            role = authenticate(account, phrase)
            if role is Role.ADMIN:
                admin.run()
            elif role is Role.USER:
                user.run()
            else:
                terminal.clear()
                terminal.write(WRONG_LOGIN)
    except (EOFError, KeyboardInterrupt):
        return 0