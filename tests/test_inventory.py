import io

import pytest

from crossbow_toolkit.inventory import (
    BANNER,
    Item,
    format_items,
    load_items,
    main,
    run,
    save_items,
)


@pytest.fixture
def items():
    return [Item("Pen", 3, 4), Item("Book", 10, 1)]


def test_save_and_load_round_trip(tmp_path, items):
    path = tmp_path / "db.dat"
    save_items(items, path)
    assert load_items(path) == items


def test_file_layout(tmp_path, items):
    path = tmp_path / "db.dat"
    save_items(items, path)
    data = path.read_bytes()
    assert data[:4] == (2).to_bytes(4, "little")
    assert len(data) == 4 + 40 * len(items)
    assert data[4:7] == b"Pen"
    assert data[4 + 32:4 + 36] == (3).to_bytes(4, "little")


def test_empty_round_trip(tmp_path):
    path = tmp_path / "db.dat"
    save_items([], path)
    assert load_items(path) == []


def test_load_missing_database(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_items(tmp_path / "missing.dat")


def test_load_truncated_header(tmp_path):
    path = tmp_path / "db.dat"
    path.write_bytes(b"\x01\x00")
    with pytest.raises(ValueError):
        load_items(path)


def test_load_reads_only_complete_records(tmp_path, items):
    path = tmp_path / "db.dat"
    save_items(items, path)
    path.write_bytes(path.read_bytes()[:-5])
    assert load_items(path) == items[:1]


def test_name_too_long():
    with pytest.raises(ValueError):
        Item("x" * 30, 1, 1)


def test_price_out_of_range():
    with pytest.raises(ValueError):
        Item("Pen", 2**31, 1)


def test_format_items(items):
    text = format_items(items)
    assert text.splitlines() == [
        "",
        "=== Loading Data from Disk ===",
        "Item 1: Pen | Price: $3 | Quantity: 4",
        "Item 2: Book | Price: $10 | Quantity: 1",
    ]


def test_run_stores_and_shows_items(tmp_path, items):
    path = tmp_path / "db.dat"
    out = io.StringIO()
    status = run(io.StringIO("2\nPen\n3\n4\nBook 10 1\n"), out, path)
    assert status == 0
    assert load_items(path) == items
    text = out.getvalue()
    assert text.startswith(BANNER)
    assert ">> Data saved to db.dat" in text
    assert text.endswith(format_items(items))


def test_run_zero_items(tmp_path):
    path = tmp_path / "db.dat"
    out = io.StringIO()
    assert run(io.StringIO("0\n"), out, path) == 0
    assert load_items(path) == []
    assert out.getvalue().endswith(format_items([]))


def test_run_rejects_bad_price(tmp_path):
    path = tmp_path / "db.dat"
    out = io.StringIO()
    assert run(io.StringIO("1\nPen abc 4\n"), out, path) == 1
    assert "[ERROR]" in out.getvalue()
    assert not path.exists()


def test_run_rejects_negative_count(tmp_path):
    out = io.StringIO()
    assert run(io.StringIO("-1\n"), out, tmp_path / "db.dat") == 1
    assert "[ERROR]" in out.getvalue()


def test_run_end_of_input(tmp_path):
    out = io.StringIO()
    assert run(io.StringIO("2\nPen 3 4\n"), out, tmp_path / "db.dat") == 1


def test_main_uses_database_option(tmp_path, monkeypatch, capsys):
    path = tmp_path / "store.dat"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nPen 3 4\n"))
    assert main(["--database", str(path)]) == 0
    assert load_items(path) == [Item("Pen", 3, 4)]
    assert "Item 1: Pen | Price: $3 | Quantity: 4" in capsys.readouterr().out