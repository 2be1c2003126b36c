import pytest

from kimchi.buffer import MAIN_CURSOR, Buffer, Cursor, Cursors, load_buffer, new_empty_buffer


def test_load_buffer_splits_lines(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_bytes(b"one\ntwo\nthree")
    buf = load_buffer(target)
    assert buf.content == ["one", "two", "three"]
    assert buf.name == "notes.txt"
    assert buf.path == str(target)
    assert buf.modified is False


def test_load_buffer_normalises_crlf(tmp_path):
    target = tmp_path / "dos.txt"
    target.write_bytes(b"a\r\nb\r\n")
    buf = load_buffer(target)
    assert buf.content == ["a", "b", ""]


def test_load_empty_file_has_one_line(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    assert load_buffer(target).content == [""]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_buffer(tmp_path / "missing.txt")


def test_save_round_trip_and_clears_modified(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"first\nsecond")
    buf = load_buffer(target)
    buf.content.append("third")
    buf.modified = True
    buf.save()
    assert buf.modified is False
    assert load_buffer(target).content == ["first", "second", "third"]


def test_save_preserves_unicode(tmp_path):
    target = tmp_path / "u.txt"
    buf = Buffer(name="u.txt", path=str(target), content=["héllo", "wörld"])
    buf.save()
    assert load_buffer(target).content == buf.content


def test_text_joins_lines():
    buf = Buffer(name="x", content=["a", "b"])
    assert buf.text() == "a\nb"


def test_new_empty_buffer():
    buf = new_empty_buffer("scratch")
    assert buf.name == "scratch"
    assert buf.content == [""]
    assert buf.path is None
    assert buf.cursors.list == []


def test_save_without_path_raises():
    with pytest.raises(ValueError):
        new_empty_buffer("scratch").save()


def test_cursors_main_cursor_is_first():
    cursors = Cursors([Cursor(1, 2), Cursor(3, 4)])
    assert cursors.list[MAIN_CURSOR] == Cursor(x=1, y=2)