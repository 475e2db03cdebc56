"""Tests for the command-line interface."""

import json
import logging

import pytest

from docpager.cli import create_parser, main
from docpager.version import __version__


@pytest.fixture
def html_file(temp_dir, sample_html):
    path = temp_dir / "contract.html"
    path.write_text(sample_html, encoding="utf-8")
    return path


class TestCli:
    """Test cases for docpager CLI commands."""

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: docpager" in capsys.readouterr().out

    def test_paginate_to_html(self, html_file, temp_dir):
        output = temp_dir / "pages.html"

        assert main(["paginate", str(html_file), "-o", str(output)]) == 0

        content = output.read_text(encoding="utf-8")
        assert '<section class="page"' in content
        assert "page-decoration page-number" in content
        assert "Services Agreement" in content

    def test_paginate_default_output(self, html_file):
        assert main(["paginate", str(html_file)]) == 0
        assert html_file.with_suffix(".pages.html").exists()

    def test_paginate_print_mode(self, html_file, temp_dir):
        output = temp_dir / "print.html"

        assert main(["paginate", str(html_file), "--print", "-o", str(output)]) == 0

        assert 'class="page-decoration' not in output.read_text(encoding="utf-8")

    def test_paginate_json(self, html_file, temp_dir):
        output = temp_dir / "pages.json"

        assert main(["paginate", str(html_file), "--json", "-o", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["page_count"] == 1
        assert data["word_count"] == 21
        assert [block["tag"] for block in data["pages"][0]["blocks"]] == ["h1", "p", "h2", "ul", "p"]

    def test_info_json(self, html_file, capsys):
        assert main(["info", str(html_file), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["file"] == str(html_file)
        assert data["page_count"] == 1

    def test_info_table(self, html_file, capsys):
        assert main(["info", str(html_file)]) == 0

        out = capsys.readouterr().out
        assert "Height (px)" in out
        assert "Fill" in out

    def test_page_geometry_is_fixed(self, html_file, capsys):
        assert main(["info", str(html_file), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["capacity"] == 864

        with pytest.raises(SystemExit):
            create_parser().parse_args(["info", str(html_file), "--margin", "20"])

    def test_default_log_level(self, html_file):
        logging.getLogger().setLevel(logging.DEBUG)

        assert main(["info", str(html_file), "--json"]) == 0

        assert logging.getLogger().level == logging.WARNING

    def test_log_file(self, html_file, temp_dir):
        log_file = temp_dir / "logs" / "run.log"
        output = temp_dir / "pages.html"
        args = ["--log-level", "INFO", "--log-file", str(log_file), "paginate", str(html_file), "-o", str(output)]

        assert main(args) == 0
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Exported 1 page to HTML" in log_file.read_text()
        for handler in logging.getLogger().handlers:
            handler.close()

    def test_missing_file(self, temp_dir, capsys):
        assert main(["paginate", str(temp_dir / "missing.html")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_watch_requires_output(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["watch", "doc.html"])
