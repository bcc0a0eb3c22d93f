# contactbook

An address book that keeps contacts as name/address pairs in name order.
It can:

- add, edit and remove contacts, one editing mode at a time
- step forward and backward through the book, wrapping at either end
- find a contact by name
- save the book to a binary file and load it back
- export the displayed contact as a vCard 2.1 file

The package also holds a small model of a remote-controlled car, `Car`, that
speeds up, slows down, steers and moves one tick at a time.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The command shell

```
contactbook [FILE]
```

If `FILE` is given, contacts are loaded from it at start. Commands are then
read from standard input, one per line, with shell-style quoting:

| Command | Effect |
| --- | --- |
| `add NAME ADDRESS` | add a contact |
| `edit NAME ADDRESS` | replace the displayed contact's name and address |
| `remove` | remove the displayed contact and show the one before it |
| `next`, `previous` | show the next or previous contact, wrapping around |
| `find NAME` | show the contact called `NAME` |
| `show` | print the displayed contact |
| `list` | print all names in order |
| `load PATH`, `save PATH` | read or write a binary contact file |
| `export PATH` | write the displayed contact as a vCard |
| `quit`, `exit` | stop reading commands |

A command is only accepted when it is available: `edit`, `remove`, `save`
and `export` need at least one contact, `next` and `previous` at least two,
and `find` at least three. Messages go to standard output; errors are
printed to standard error as `error: ...` and the shell carries on. The
command always exits with status 0.

For example:

```
$ printf 'add "Ada Lovelace" "12 Example Street"\nlist\n' | contactbook
"Ada Lovelace" has been added to your address book.
Ada Lovelace
```

## Using it from Python

```python
from contactbook.app import AddressBook

book = AddressBook()
book.add_contact()
book.submit_contact("Ada Lovelace", "12 Example Street\nLondon")
book.add_contact()
book.submit_contact("Charles Babbage", "1 Sample Road\nLondon")

book.next()        # wraps from "Charles Babbage" to "Ada Lovelace"
book.previous()
book.find_contact("Ada Lovelace")

book.save_to_file("contacts.abk")
book.load_from_file("contacts.abk")
book.export_as_vcard("ada.vcf")
```

### `contactbook.book`

`ContactBook` holds the contacts, the displayed entry (`name`, `address`),
the current `Mode` (`NAVIGATION`, `ADDING`, `EDITING`), `read_only`, and
`enabled`, the set of action names available now. Its methods are
`add_contact`, `edit_contact`, `submit_contact(name, address)`, `cancel`,
`remove_contact`, `next` and `previous`. `submit_contact` and
`remove_contact` return a confirmation message, or `None` when nothing
changed.

`AddressBookError` is raised when an action is refused: submitting an empty
name or address (the book stays in its mode), adding or renaming to a name
that is already taken (the book returns to navigation first), or calling
`next` on an empty book.

### `contactbook.app`

`AddressBook` extends `ContactBook` with:

- `find_contact(name)`: shows the named contact; an empty name raises
  `EmptySearchError`, an unknown one raises `AddressBookError`.
- `save_to_file(path)` and `load_from_file(path)`: an empty path does
  nothing. Loading replaces all contacts and shows the first; a file with no
  contacts leaves the book empty and raises `AddressBookError`.
- `export_as_vcard(path)`: writes the displayed contact and returns a
  confirmation message, or `None` for an empty path.

It also adds `find`, `load`, `save` and `export` to `enabled`.

### `contactbook.vcard`

`split_name(name)` returns the first and last whitespace-separated words (a
name without a space is all first name). `escape_address(address)` escapes
`;`, turns line breaks into `;` and commas into spaces. `format_vcard(name,
address)` returns the whole vCard 2.1 record with `N`, `FN` and `ADR;HOME`
lines.

### `contactbook.datastream`

`dump_contacts(contacts, fp, trailer=None)` writes a 32-bit big-endian
entry count, then the entries in descending name order, each string as a
32-bit byte length followed by UTF-16BE text; an optional trailer is written
after them as a NUL-terminated string. `load_contacts(fp)` reads the map
back, ordered by name, leaving any trailer unread. A truncated or malformed
stream raises `DataStreamError`.

### `contactbook.search`

`FindDialog.find_clicked(text)` accepts and returns the name to search for,
keeping it in `find_text`; empty text raises `EmptySearchError`.

### `contactbook.car`

`Car` has `speed` (from -10 to 10), `wheels_angle` (from -30 to 30 degrees,
in steps of 5) and a pose `x`, `y`, `heading` (degrees clockwise from
straight up; `y` grows downwards). `accelerate`, `decelerate`, `turn_left`
and `turn_right` change speed and steering; `step` turns the car and moves
it along its axis by one tick. `bounding_rect` returns a `Rect`.
`TICK_INTERVAL_MS` is the intended time between ticks.

## What it does not do

There is no graphical window: the address book is driven from Python or the
line shell. The car is a plain model with no drawing, no timer of its own
and no way to control it from another process; call `step` yourself.