"""The contact book: a sorted name-to-address map browsed one entry at a time."""

from __future__ import annotations

import enum
from collections.abc import Mapping

__all__ = ["Mode", "AddressBookError", "ContactBook"]


class Mode(enum.Enum):
    """What the book is currently doing with its displayed entry."""

    NAVIGATION = enum.auto()
    ADDING = enum.auto()
    EDITING = enum.auto()


class AddressBookError(ValueError):
    """Raised when an operation on the contact book is refused."""


def _order(name: str) -> bytes:
    # Names are ordered by UTF-16 code units, which big-endian bytes preserve.
    return name.encode("utf-16-be", "surrogatepass")


class ContactBook:
    """A name-to-address book with a displayed entry and an editing mode.

    ``name`` and ``address`` hold what is currently displayed. ``read_only``
    tells whether the displayed entry may be typed into, and ``enabled``
    holds the names of the actions that are currently available.
    """

    title = "Simple Address Book"

    def __init__(self, contacts: Mapping[str, str] | None = None) -> None:
        self.contacts: dict[str, str] = dict(contacts or {})
        self.name = ""
        self.address = ""
        self.old_name = ""
        self.old_address = ""
        self.mode = Mode.NAVIGATION
        self.read_only = True
        self.enabled: frozenset[str] = frozenset()
        self._update_interface(Mode.NAVIGATION)

    def _sorted_names(self) -> list[str]:
        return sorted(self.contacts, key=_order)

    def _show(self, name: str) -> None:
        self.name = name
        self.address = self.contacts[name]

    def _clear(self) -> None:
        self.name = ""
        self.address = ""

    def _enabled_actions(self) -> set[str]:
        if self.mode is not Mode.NAVIGATION:
            return {"submit", "cancel"}
        number = len(self.contacts)
        actions = {"add"}
        if number >= 1:
            actions |= {"edit", "remove"}
        if number > 1:
            actions |= {"next", "previous"}
        return actions

    def _update_interface(self, mode: Mode) -> None:
        self.mode = mode
        if mode is Mode.NAVIGATION:
            if not self.contacts:
                self._clear()
            self.read_only = True
        else:
            self.read_only = False
        self.enabled = frozenset(self._enabled_actions())

    def add_contact(self) -> None:
        """Start entering a new contact, remembering the displayed one."""
        self.old_name = self.name
        self.old_address = self.address
        self._clear()
        self._update_interface(Mode.ADDING)

    def edit_contact(self) -> None:
        """Start editing the displayed contact."""
        self.old_name = self.name
        self.old_address = self.address
        self._update_interface(Mode.EDITING)

    def submit_contact(self, name: str, address: str) -> str | None:
        """Store the entry typed as *name* and *address*.

        Returns the confirmation message, or ``None`` when nothing changed.
        An empty field is refused and the book stays in its mode. A name that
        is already taken is refused after the book has returned to navigation.
        """
        self.name = name
        self.address = address
        if not name or not address:
            raise AddressBookError("Please enter a name and address.")

        message: str | None = None
        refusal: str | None = None
        if self.mode is Mode.ADDING:
            if name not in self.contacts:
                self.contacts[name] = address
                message = f'"{name}" has been added to your address book.'
            else:
                refusal = f'Sorry, "{name}" is already in your address book.'
        elif self.mode is Mode.EDITING:
            if self.old_name != name:
                if name not in self.contacts:
                    message = f'"{self.old_name}" has been edited in your address book.'
                    self.contacts.pop(self.old_name, None)
                    self.contacts[name] = address
                else:
                    refusal = f'Sorry, "{name}" is already in your address book.'
            elif self.old_address != address:
                message = f'"{name}" has been edited in your address book.'
                self.contacts[name] = address

        self._update_interface(Mode.NAVIGATION)
        if refusal is not None:
            raise AddressBookError(refusal)
        return message

    def cancel(self) -> None:
        """Abandon adding or editing and show the entry displayed before."""
        self.name = self.old_name
        self.address = self.old_address
        self._update_interface(Mode.NAVIGATION)

    def remove_contact(self) -> str | None:
        """Remove the displayed contact and show the one before it.

        Returns the confirmation message, or ``None`` if the displayed name
        is not in the book.
        """
        name = self.name
        message: str | None = None
        if name in self.contacts:
            self.previous()
            del self.contacts[name]
            message = f'"{name}" has been removed from your address book.'
        self._update_interface(Mode.NAVIGATION)
        return message

    def next(self) -> None:
        """Show the contact after the displayed one, wrapping to the first."""
        names = self._sorted_names()
        if not names:
            raise AddressBookError("The address book is empty.")
        if self.name in self.contacts:
            position = names.index(self.name) + 1
            self._show(names[position % len(names)])
        else:
            self._show(names[0])

    def previous(self) -> None:
        """Show the contact before the displayed one, wrapping to the last.

        If the displayed name is not in the book the display is cleared.
        """
        if self.name not in self.contacts:
            self._clear()
            return
        names = self._sorted_names()
        self._show(names[names.index(self.name) - 1])