"""Integration tests for the file-level API."""

import io
import sys

import pytest

from linemark import convert, convert_file
from linemark.api import read_source, write_output
from linemark.exceptions import FileAccessError, InputFileNotFoundError, OutputWriteError


@pytest.mark.integration
class TestConvertFile:
    """Tests for convert_file and its helpers."""

    def test_path_roundtrip_to_output(self, tmp_path, sample_markup, sample_html):
        source = tmp_path / "doc.txt"
        source.write_text(sample_markup, encoding="utf-8")
        target = tmp_path / "nested" / "doc.html"

        assert convert_file(source, output=target) == sample_html
        assert target.read_text(encoding="utf-8") == sample_html

    def test_string_path_without_output(self, tmp_path):
        source = tmp_path / "doc.txt"
        source.write_text("## Sub", encoding="utf-8")
        assert convert_file(str(source)) == "<h2>Sub</h2>"

    def test_windows_line_endings_are_normalized(self, tmp_path):
        """Test that files read in text mode split on CRLF as well."""
        source = tmp_path / "crlf.txt"
        source.write_bytes(b"# A\r\nPlain\r\n## B")
        assert convert_file(source) == "<h1>A</h1><p>Plain</p><h2>B</h2>"

    def test_text_stream(self):
        assert convert_file(io.StringIO("---")) == "<hr></hr>"

    def test_stdin_marker(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("# From stdin"))
        assert convert_file("-") == "<h1>From stdin</h1>"

    def test_matches_in_memory_conversion(self, tmp_path, sample_markup):
        source = tmp_path / "doc.txt"
        source.write_text(sample_markup, encoding="utf-8")
        assert convert_file(source) == convert(sample_markup)

    def test_progress_callback_is_forwarded(self, tmp_path):
        source = tmp_path / "doc.txt"
        source.write_text("a\nb", encoding="utf-8")
        events = []
        convert_file(source, progress_callback=events.append)
        assert events[0].event_type == "started"
        assert events[0].total == 2


@pytest.mark.integration
class TestFileErrors:
    """Tests for file error reporting."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputFileNotFoundError) as exc_info:
            read_source(tmp_path / "missing.txt")
        assert exc_info.value.file_path.endswith("missing.txt")

    def test_directory_input(self, tmp_path):
        with pytest.raises(FileAccessError, match="Not a regular file"):
            read_source(tmp_path)

    def test_decode_error(self, tmp_path):
        source = tmp_path / "bad.txt"
        source.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(FileAccessError) as exc_info:
            read_source(source)
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        with pytest.raises(OutputWriteError) as exc_info:
            write_output("<p></p>", blocker / "out.html")
        assert exc_info.value.rendering_stage == "write"

    def test_unknown_read_encoding(self, tmp_path):
        source = tmp_path / "doc.txt"
        source.write_text("# Title", encoding="utf-8")
        with pytest.raises(FileAccessError, match="Unknown encoding") as exc_info:
            read_source(source, encoding="no-such-codec")
        assert isinstance(exc_info.value.original_error, LookupError)

    def test_unknown_write_encoding(self, tmp_path):
        with pytest.raises(OutputWriteError, match="Unknown encoding") as exc_info:
            write_output("<p></p>", tmp_path / "out.html", encoding="no-such-codec")
        assert isinstance(exc_info.value.original_error, LookupError)

    def test_output_not_representable_in_encoding(self, tmp_path):
        """Test that characters the output codec lacks raise OutputWriteError."""
        with pytest.raises(OutputWriteError, match="Cannot encode") as exc_info:
            write_output("<h1>caf\xe9</h1>", tmp_path / "out.html", encoding="ascii")
        assert isinstance(exc_info.value.original_error, UnicodeEncodeError)
