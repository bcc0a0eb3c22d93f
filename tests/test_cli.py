import io

from contactbook.cli import main


def _run(monkeypatch, capsys, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main(argv or [])
    out, err = capsys.readouterr()
    return status, out, err


def test_add_and_list(monkeypatch, capsys):
    status, out, err = _run(
        monkeypatch, capsys,
        'add Bob "2 Side Street"\nadd Alice "1 Main Street"\nlist\n',
    )
    assert status == 0
    assert out.splitlines()[-2:] == ["Alice", "Bob"]
    assert '"Alice" has been added to your address book.' in out
    assert err == ""


def test_duplicate_add_is_reported(monkeypatch, capsys):
    _, out, err = _run(
        monkeypatch, capsys, 'add Alice "1 Main"\nadd Alice "2 Other"\n'
    )
    assert "already in your address book" in err


def test_unknown_command_is_reported(monkeypatch, capsys):
    _, _, err = _run(monkeypatch, capsys, "fly\n")
    assert "unknown command" in err


def test_next_needs_two_contacts(monkeypatch, capsys):
    _, _, err = _run(monkeypatch, capsys, 'add Alice "1 Main"\nnext\n')
    assert "next is not available" in err


def test_quit_stops_reading(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, 'quit\nadd Alice "1 Main"\n')
    assert "Alice" not in out


def test_save_then_load_at_start(monkeypatch, capsys, tmp_path):
    path = tmp_path / "book.abk"
    _run(monkeypatch, capsys, f'add Alice "1 Main"\nsave "{path}"\n')
    status, out, err = _run(monkeypatch, capsys, "show\n", [str(path)])
    assert status == 0
    assert "Name: Alice" in out
    assert err == ""


def test_export_writes_card(monkeypatch, capsys, tmp_path):
    path = tmp_path / "card.vcf"
    _, out, _ = _run(
        monkeypatch, capsys, f'add "John Smith" "1 Main"\nexport "{path}"\n'
    )
    assert path.read_text(encoding="utf-8").startswith("BEGIN:VCARD\n")
    assert "has been exported as a vCard." in out