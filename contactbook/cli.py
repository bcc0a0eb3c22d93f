"""A line-oriented command shell for the address book.

Commands are read from standard input, one per line, with shell-style
quoting: ``add NAME ADDRESS``, ``edit NAME ADDRESS``, ``remove``, ``next``,
``previous``, ``find NAME``, ``show``, ``list``, ``load PATH``, ``save PATH``,
``export PATH`` and ``quit``.
"""

from __future__ import annotations

import argparse
import shlex
import sys
from collections.abc import Callable, Sequence

from contactbook.app import AddressBook
from contactbook.book import AddressBookError, Mode
from contactbook.datastream import DataStreamError
from contactbook.search import EmptySearchError

__all__ = ["main"]


class _CommandError(Exception):
    """A command that cannot be carried out as typed."""


def _describe(book: AddressBook) -> str:
    return f"Name: {book.name}\nAddress: {book.address}"


def _expect(args: list[str], count: int, usage: str) -> list[str]:
    if len(args) != count:
        raise _CommandError(f"usage: {usage}")
    return args


def _require(book: AddressBook, action: str) -> None:
    if action not in book.enabled:
        raise _CommandError(f"{action} is not available now")


def _submit(book: AddressBook, name: str, address: str) -> str | None:
    try:
        return book.submit_contact(name, address)
    except AddressBookError:
        if book.mode is not Mode.NAVIGATION:
            book.cancel()
        raise


def _add(book: AddressBook, args: list[str]) -> str | None:
    name, address = _expect(args, 2, "add NAME ADDRESS")
    _require(book, "add")
    book.add_contact()
    return _submit(book, name, address)


def _edit(book: AddressBook, args: list[str]) -> str | None:
    name, address = _expect(args, 2, "edit NAME ADDRESS")
    _require(book, "edit")
    book.edit_contact()
    return _submit(book, name, address)


def _remove(book: AddressBook, args: list[str]) -> str | None:
    _expect(args, 0, "remove")
    _require(book, "remove")
    return book.remove_contact()


def _next(book: AddressBook, args: list[str]) -> str:
    _expect(args, 0, "next")
    _require(book, "next")
    book.next()
    return _describe(book)


def _previous(book: AddressBook, args: list[str]) -> str:
    _expect(args, 0, "previous")
    _require(book, "previous")
    book.previous()
    return _describe(book)


def _find(book: AddressBook, args: list[str]) -> str:
    (name,) = _expect(args, 1, "find NAME")
    _require(book, "find")
    book.find_contact(name)
    return _describe(book)


def _show(book: AddressBook, args: list[str]) -> str:
    _expect(args, 0, "show")
    return _describe(book)


def _list(book: AddressBook, args: list[str]) -> str:
    _expect(args, 0, "list")
    return "\n".join(book._sorted_names())


def _load(book: AddressBook, args: list[str]) -> str:
    (path,) = _expect(args, 1, "load PATH")
    _require(book, "load")
    book.load_from_file(path)
    return _describe(book)


def _save(book: AddressBook, args: list[str]) -> None:
    (path,) = _expect(args, 1, "save PATH")
    _require(book, "save")
    book.save_to_file(path)


def _export(book: AddressBook, args: list[str]) -> str | None:
    (path,) = _expect(args, 1, "export PATH")
    _require(book, "export")
    return book.export_as_vcard(path)


_COMMANDS: dict[str, Callable[[AddressBook, list[str]], str | None]] = {
    "add": _add,
    "edit": _edit,
    "remove": _remove,
    "next": _next,
    "previous": _previous,
    "find": _find,
    "show": _show,
    "list": _list,
    "load": _load,
    "save": _save,
    "export": _export,
}

_FAILURES = (
    _CommandError,
    AddressBookError,
    EmptySearchError,
    DataStreamError,
    OSError,
)


def _error(message: object) -> None:
    print(f"error: {message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the address book shell on standard input."""
    parser = argparse.ArgumentParser(
        prog="contactbook", description="Simple Address Book"
    )
    parser.add_argument("file", nargs="?", help="contact file to load at start")
    args = parser.parse_args(argv)

    book = AddressBook()
    if args.file:
        try:
            book.load_from_file(args.file)
        except _FAILURES as exc:
            _error(exc)

    for line in sys.stdin:
        try:
            words = shlex.split(line)
        except ValueError as exc:
            _error(exc)
            continue
        if not words:
            continue
        command, *rest = words
        if command in ("quit", "exit"):
            break
        handler = _COMMANDS.get(command)
        if handler is None:
            _error(f"unknown command {command!r}")
            continue
        try:
            message = handler(book, rest)
        except _FAILURES as exc:
            _error(exc)
            continue
        if message:
            print(message)
    return 0