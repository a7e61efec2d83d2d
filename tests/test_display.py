"""
Tests for CLI output formatting.

Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import contextlib
import importlib
import re
import sys

import pytest
import structlog

from pair import log as pair_log
from pair import output
from pair.coauthors import CoAuthor
from pair.output import print_error, print_success, print_warning, render_coauthor_table

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


@pytest.fixture
def no_colors(monkeypatch):
    monkeypatch.setattr(output, "COLORS_ENABLED", False)


@pytest.fixture
def coauthors():
    return [
        CoAuthor(name="Jane Doe", email="jane@x.com", alias="jane"),
        CoAuthor(name="John Doe", email="john@x.com", alias="john"),
    ]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

class TestCoAuthorTable:

    def test_rows_are_numbered_in_order(self, capsys, no_colors, coauthors):
        render_coauthor_table("Available co-authors:", coauthors)
        lines = capsys.readouterr().out.split('\n')

        assert lines[0] == "Available co-authors:"
        jane = next(i for i, l in enumerate(lines) if "Jane Doe" in l)
        john = next(i for i, l in enumerate(lines) if "John Doe" in l)
        assert jane < john
        assert re.search(r"\b0\b", lines[jane])
        assert re.search(r"\b1\b", lines[john])

    def test_has_header(self, capsys, no_colors, coauthors):
        render_coauthor_table("Available co-authors:", coauthors)
        out = capsys.readouterr().out
        for header in ("#", "Alias", "Name", "Email"):
            assert header in out

    def test_alias_lookup(self, capsys, no_colors):
        active = [CoAuthor(name="John Doe", email="john@x.com")]
        render_coauthor_table("Active co-authors:", active, lambda c: "jd")
        out = capsys.readouterr().out
        assert "jd" in out

    def test_no_ansi_when_colors_off(self, capsys, no_colors, coauthors):
        render_coauthor_table("Available co-authors:", coauthors)
        assert not ANSI_RE.search(capsys.readouterr().out)


# ---------------------------------------------------------------------------
# Message helpers
# ---------------------------------------------------------------------------

class TestMessages:

    def test_error_goes_to_stderr(self, capsys, no_colors):
        print_error("no co-authors were added")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "no co-authors were added" in captured.err

    def test_success_and_warning_go_to_stdout(self, capsys, no_colors):
        print_success("All co-authors have been cleared")
        print_warning("Co-author already active: Jane Doe <jane@x.com>")
        out = capsys.readouterr().out
        assert "All co-authors have been cleared" in out
        assert "Co-author already active" in out

    def test_set_colors_off(self, monkeypatch):
        monkeypatch.setattr(output, "COLORS_ENABLED", True)
        output.set_colors(False)
        assert output.success("ok") == "ok"


# ---------------------------------------------------------------------------
# Logging before main() configures it
# ---------------------------------------------------------------------------

class TestDefaultLogging:

    @pytest.fixture
    def unconfigured(self, capsys):
        yield
        structlog.reset_defaults()
        with contextlib.redirect_stderr(sys.__stderr__):
            importlib.reload(pair_log)

    def test_warnings_go_to_stderr(self, capsys, unconfigured):
        structlog.reset_defaults()
        importlib.reload(pair_log)
        pair_log.get_logger("pair.test").warning("template missing")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "template missing" in captured.err

    def test_debug_is_dropped(self, capsys, unconfigured):
        structlog.reset_defaults()
        importlib.reload(pair_log)
        pair_log.get_logger("pair.test").debug("parsed commit template")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
