"""Binary contact-book files in the QDataStream layout (protocol 4.3 to 5.x).

A contact book is stored as a string-to-string map: a big-endian 32-bit
entry count followed by the key/value pairs in descending key order. Each
string is a big-endian 32-bit byte length followed by UTF-16BE code units;
a length of ``0xFFFFFFFF`` marks a null string. An optional trailer, written
as a C string, is a 32-bit length that counts the terminating NUL, followed
by the bytes and the NUL.
"""

from __future__ import annotations

import struct
from collections.abc import Mapping
from typing import BinaryIO

__all__ = ["DataStreamError", "dump_contacts", "load_contacts"]

_UINT32 = struct.Struct(">I")
_NULL_STRING = 0xFFFFFFFF


class DataStreamError(ValueError):
    """Raised when a contact-book stream is truncated or corrupt."""


def _sort_key(text: str) -> bytes:
    # Keys are ordered by UTF-16 code units, which big-endian bytes preserve.
    return text.encode("utf-16-be", "surrogatepass")


def _write_uint32(fp: BinaryIO, value: int) -> None:
    fp.write(_UINT32.pack(value))


def _write_string(fp: BinaryIO, text: str) -> None:
    data = text.encode("utf-16-be", "surrogatepass")
    _write_uint32(fp, len(data))
    fp.write(data)


def _write_cstring(fp: BinaryIO, trailer: str | bytes) -> None:
    data = trailer.encode("utf-8") if isinstance(trailer, str) else bytes(trailer)
    if b"\x00" in data:
        raise ValueError("trailer must not contain a NUL byte")
    _write_uint32(fp, len(data) + 1)
    fp.write(data + b"\x00")


def dump_contacts(
    contacts: Mapping[str, str],
    fp: BinaryIO,
    trailer: str | bytes | None = None,
) -> None:
    """Write *contacts* to the binary file *fp*, optionally followed by *trailer*."""
    _write_uint32(fp, len(contacts))
    for name in sorted(contacts, key=_sort_key, reverse=True):
        _write_string(fp, name)
        _write_string(fp, contacts[name])
    if trailer is not None:
        _write_cstring(fp, trailer)


def _read_exact(fp: BinaryIO, size: int) -> bytes:
    data = fp.read(size)
    if data is None or len(data) != size:
        raise DataStreamError("unexpected end of stream")
    return data


def _read_uint32(fp: BinaryIO) -> int:
    (value,) = _UINT32.unpack(_read_exact(fp, _UINT32.size))
    return value


def _read_string(fp: BinaryIO) -> str:
    length = _read_uint32(fp)
    if length == _NULL_STRING:
        return ""
    if length % 2:
        raise DataStreamError(f"string length {length} is not a whole number of UTF-16 units")
    return _read_exact(fp, length).decode("utf-16-be", "surrogatepass")


def load_contacts(fp: BinaryIO) -> dict[str, str]:
    """Read a contact map from the binary file *fp*.

    The result is ordered by name. Data after the map, such as a trailer,
    is left unread.
    """
    count = _read_uint32(fp)
    entries: dict[str, str] = {}
    for _ in range(count):
        name = _read_string(fp)
        entries[name] = _read_string(fp)
    return {name: entries[name] for name in sorted(entries, key=_sort_key)}