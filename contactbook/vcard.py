"""Export of a single contact as a vCard 2.1 record."""

from __future__ import annotations

import re

__all__ = ["split_name", "escape_address", "format_vcard"]

_WHITESPACE = re.compile(r"\s+")


def _name_parts(name: str) -> list[str]:
    """Whitespace-separated parts of *name*, or an empty list if it has no space."""
    if " " not in name:
        return []
    return [part for part in _WHITESPACE.split(name) if part]


def split_name(name: str) -> tuple[str, str]:
    """Split *name* into its first and last name.

    A name without a space is taken whole as the first name, with an empty
    last name. Otherwise the first and last whitespace-separated words are
    used; middle words are dropped.
    """
    if " " not in name:
        return name, ""
    parts = _name_parts(name)
    if not parts:
        return "", ""
    return parts[0], parts[-1]


def escape_address(address: str) -> str:
    """Fold a multi-line address into a single vCard ADR value.

    Semicolons are escaped, line breaks become field separators and commas
    become spaces, in that order.
    """
    return address.replace(";", "\\;").replace("\n", ";").replace(",", " ")


def format_vcard(name: str, address: str) -> str:
    """Return the vCard 2.1 text for the contact *name* living at *address*."""
    first, last = split_name(name)
    parts = _name_parts(name)
    full_name = " ".join(parts) if parts else first
    lines = [
        "BEGIN:VCARD",
        "VERSION:2.1",
        f"N:{last};{first}",
        f"FN:{full_name}",
        f"ADR;HOME:;{escape_address(address)}",
        "END:VCARD",
    ]
    return "".join(f"{line}\n" for line in lines)