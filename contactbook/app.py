"""The full address book: browsing plus search, file storage and vCard export."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Union

from contactbook.book import AddressBookError, ContactBook, Mode
from contactbook.datastream import dump_contacts, load_contacts
from contactbook.search import FindDialog
from contactbook.vcard import format_vcard

__all__ = ["AddressBook"]

PathLike = Union[str, "os.PathLike[str]"]


def _is_blank(path: PathLike) -> bool:
    return not os.fspath(path)


class AddressBook(ContactBook):
    """A contact book that can also search, save, load and export contacts.

    Besides the browsing actions, ``enabled`` names ``find`` once more than
    two contacts are stored, ``load`` whenever the book is browsing, and
    ``save`` and ``export`` once the book holds a contact.
    """

    def __init__(self, contacts: Mapping[str, str] | None = None) -> None:
        self.dialog = FindDialog()
        super().__init__(contacts)

    def _enabled_actions(self) -> set[str]:
        actions = super()._enabled_actions()
        if self.mode is Mode.NAVIGATION:
            number = len(self.contacts)
            actions.add("load")
            if number > 2:
                actions.add("find")
            if number >= 1:
                actions |= {"save", "export"}
        return actions

    def find_contact(self, name: str) -> None:
        """Show the contact called *name*.

        An empty *name* raises :class:`~contactbook.search.EmptySearchError`;
        a name that is not in the book raises :class:`AddressBookError` and
        leaves the display as it was.
        """
        wanted = self.dialog.find_clicked(name)
        if wanted not in self.contacts:
            raise AddressBookError(f'Sorry, "{wanted}" is not in your address book.')
        self._show(wanted)
        self._update_interface(Mode.NAVIGATION)

    def save_to_file(self, path: PathLike) -> None:
        """Write all contacts to *path*; an empty path does nothing."""
        if _is_blank(path):
            return
        with open(path, "wb") as fp:
            dump_contacts(self.contacts, fp)
        self._update_interface(Mode.NAVIGATION)

    def load_from_file(self, path: PathLike) -> None:
        """Replace the contacts with those stored in *path* and show the first.

        An empty path does nothing. A file without contacts leaves the book
        empty and raises :class:`AddressBookError`.
        """
        if _is_blank(path):
            return
        with open(path, "rb") as fp:
            loaded = load_contacts(fp)
        self.contacts = dict(loaded)
        if self.contacts:
            self._show(self._sorted_names()[0])
            self._update_interface(Mode.NAVIGATION)
            return
        self._update_interface(Mode.NAVIGATION)
        raise AddressBookError(
            "The file you are attempting to open contains no contacts."
        )

    def export_as_vcard(self, path: PathLike) -> str | None:
        """Write the displayed contact to *path* as a vCard.

        Returns the confirmation message, or ``None`` for an empty path.
        """
        if _is_blank(path):
            return None
        text = format_vcard(self.name, self.address)
        with open(path, "w", encoding="utf-8", newline="") as fp:
            fp.write(text)
        return f'"{self.name}" has been exported as a vCard.'