"""Tests for loading and saving files."""

from pathlib import Path

import pytest

from kibi.core.document import Document
from kibi.io import load, save


class TestLoad:
    """Tests for load()."""

    def test_lines_without_terminators(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\ntwo\n")
        assert load(path) == ["one", "two"]

    def test_crlf_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\r\ntwo\r\n")
        assert load(path) == ["one", "two"]

    def test_missing_final_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\ntwo")
        assert load(path) == ["one", "two"]

    def test_blank_lines_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\n\n\ntwo\n")
        assert load(path) == ["one", "", "", "two"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"")
        assert load(path) == []

    def test_tabs_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"\tx\n")
        assert load(path) == ["\tx"]

    def test_invalid_utf8_kept_as_escapes(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"a\xffb\n")
        assert load(path) == ["a\udcffb"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "nope.txt")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load(tmp_path)


class TestSave:
    """Tests for save()."""

    def test_writes_text_and_returns_byte_count(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        assert save(path, "a\nb\tc\n") == 6
        assert path.read_bytes() == b"a\nb\tc\n"

    def test_byte_count_is_encoded_length(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        assert save(path, "héllo\n") == 7

    def test_replaces_existing_content(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        path.write_text("a much longer original body\n")
        save(path, "x\n")
        assert path.read_text() == "x\n"

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            save(tmp_path / "missing" / "out.txt", "x\n")

    def test_invalid_utf8_round_trip_is_byte_exact(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        original = b"caf\xe9\n\tna\xefve \xff\xfe\n"
        path.write_bytes(original)
        assert save(path, "".join(f"{line}\n" for line in load(path))) == len(original)
        assert path.read_bytes() == original

    def test_invalid_utf8_document_save(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")
        Document.load(path).save()
        assert path.read_bytes() == b"caf\xe9\n"

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        save(path, "fn main() {\n\tprintln!(\"hi\");\n}\n")
        assert load(path) == ["fn main() {", "\tprintln!(\"hi\");", "}"]
