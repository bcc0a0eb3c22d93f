import pytest

from contactbook.app import AddressBook
from contactbook.book import AddressBookError, Mode
from contactbook.datastream import DataStreamError, dump_contacts, load_contacts
from contactbook.search import EmptySearchError
from contactbook.vcard import format_vcard

CONTACTS = {"Carol": "3 Hill Road", "Alice": "1 Main Street", "Bob": "2 Side Street"}


def test_empty_book_enables_only_add_and_load():
    book = AddressBook()
    assert book.enabled == frozenset({"add", "load"})


def test_find_needs_more_than_two_contacts():
    book = AddressBook({"Alice": "1", "Bob": "2"})
    assert "find" not in book.enabled
    assert {"save", "export"} <= book.enabled
    book.add_contact()
    book.submit_contact("Carol", "3")
    assert "find" in book.enabled


def test_adding_mode_disables_file_actions():
    book = AddressBook(CONTACTS)
    book.add_contact()
    assert book.enabled == frozenset({"submit", "cancel"})


def test_find_contact_shows_entry():
    book = AddressBook(CONTACTS)
    book.find_contact("Bob")
    assert (book.name, book.address) == ("Bob", "2 Side Street")
    assert book.dialog.find_text == "Bob"
    assert book.mode is Mode.NAVIGATION


def test_find_missing_contact_is_refused():
    book = AddressBook(CONTACTS)
    book.next()
    shown = book.name
    with pytest.raises(AddressBookError, match="not in your address book"):
        book.find_contact("Dave")
    assert book.name == shown


def test_find_empty_name_is_refused():
    book = AddressBook(CONTACTS)
    with pytest.raises(EmptySearchError):
        book.find_contact("")


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "book.abk"
    AddressBook(CONTACTS).save_to_file(path)
    other = AddressBook()
    other.load_from_file(path)
    assert other.contacts == CONTACTS
    assert other.name == "Alice"
    assert other.address == CONTACTS["Alice"]
    assert "save" in other.enabled


def test_saved_file_is_a_contact_stream(tmp_path):
    path = tmp_path / "book.abk"
    AddressBook(CONTACTS).save_to_file(path)
    with open(path, "rb") as fp:
        assert load_contacts(fp) == CONTACTS


def test_load_replaces_existing_contacts(tmp_path):
    path = tmp_path / "book.abk"
    with open(path, "wb") as fp:
        dump_contacts({"Zed": "9 End"}, fp)
    book = AddressBook(CONTACTS)
    book.load_from_file(path)
    assert book.contacts == {"Zed": "9 End"}


def test_load_file_without_contacts(tmp_path):
    path = tmp_path / "empty.abk"
    with open(path, "wb") as fp:
        dump_contacts({}, fp)
    book = AddressBook(CONTACTS)
    with pytest.raises(AddressBookError, match="contains no contacts"):
        book.load_from_file(path)
    assert book.contacts == {}
    assert book.name == ""


def test_load_truncated_file(tmp_path):
    path = tmp_path / "broken.abk"
    path.write_bytes(b"\x00\x00")
    with pytest.raises(DataStreamError):
        AddressBook().load_from_file(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AddressBook().load_from_file(tmp_path / "absent.abk")


def test_export_writes_vcard(tmp_path):
    path = tmp_path / "card.vcf"
    book = AddressBook({"John Smith": "1 Main Street"})
    book.next()
    message = book.export_as_vcard(path)
    assert message == '"John Smith" has been exported as a vCard.'
    assert path.read_text(encoding="utf-8") == format_vcard("John Smith", "1 Main Street")


def test_empty_paths_do_nothing():
    book = AddressBook(CONTACTS)
    assert book.export_as_vcard("") is None
    book.load_from_file("")
    assert book.contacts == CONTACTS