"""The search step that looks up a contact by name."""

from __future__ import annotations

__all__ = ["EmptySearchError", "FindDialog"]


class EmptySearchError(ValueError):
    """Raised when a search is started without a name to look for."""


class FindDialog:
    """Collects the name of a contact to search for.

    ``find_text`` holds the last name that was accepted, or an empty string
    before any search has been made.
    """

    title = "Find a Contact"
    prompt = "Enter the name of a contact:"

    def __init__(self) -> None:
        self.find_text = ""

    def find_clicked(self, text: str) -> str:
        """Accept *text* as the name to search for and return it.

        An empty *text* is refused and leaves the previous search untouched.
        """
        if not text:
            raise EmptySearchError("Please enter a name.")
        self.find_text = text
        return text