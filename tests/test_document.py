"""Tests for document sources."""

import os

import pytest

from docpager.document import FileDocument, HtmlDocument
from docpager.exceptions import ParsingError


class TestHtmlDocument:
    """Test cases for HtmlDocument."""

    def test_notifies_on_each_change(self):
        document = HtmlDocument("<p>A</p>")
        calls = []
        document.subscribe(lambda: calls.append(document.html))

        document.set_html("<p>B</p>")
        document.set_html("<p>C</p>")

        assert calls == ["<p>B</p>", "<p>C</p>"]

    def test_unsubscribe(self):
        document = HtmlDocument()
        calls = []
        unsubscribe = document.subscribe(lambda: calls.append(1))

        unsubscribe()
        unsubscribe()
        document.set_html("<p>B</p>")

        assert calls == []
        assert document.subscriber_count == 0

    def test_text_view(self):
        document = HtmlDocument("<h1>Title</h1><p>Body <b>text</b></p>")

        assert document.get_content() == "<h1>Title</h1><p>Body <b>text</b></p>"
        assert document.get_text() == "Title\n\nBody text"


class TestFileDocument:
    """Test cases for FileDocument."""

    def test_reads_file(self, temp_dir):
        path = temp_dir / "doc.html"
        path.write_text("<p>Hello</p>", encoding="utf-8")

        document = FileDocument(path)

        assert document.get_content() == "<p>Hello</p>"
        assert document.get_text() == "Hello"

    def test_missing_file(self, temp_dir):
        with pytest.raises(ParsingError):
            FileDocument(temp_dir / "missing.html")

    def test_invalid_encoding(self, temp_dir):
        path = temp_dir / "doc.html"
        path.write_bytes(b"<p>\xff\xfe</p>")

        with pytest.raises(ParsingError):
            FileDocument(path)

    def test_poll_detects_change(self, temp_dir):
        path = temp_dir / "doc.html"
        path.write_text("<p>One</p>", encoding="utf-8")
        document = FileDocument(path)
        calls = []
        document.subscribe(lambda: calls.append(document.get_content()))

        assert document.poll() is False

        path.write_text("<p>Two</p>", encoding="utf-8")
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 5))

        assert document.poll() is True
        assert calls == ["<p>Two</p>"]
        assert document.poll() is False
