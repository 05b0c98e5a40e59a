"""Tests for double-quote escape resolution."""

from __future__ import annotations

from dotparse.escapes import unescape


def test_control_escapes():
    assert unescape("a\\nb\\rc") == "a\nb\rc"


def test_other_escapes_collapse():
    assert unescape('\\"q\\" \\\\ \\t') == '"q" \\ t'


def test_escaped_dollar_survives():
    assert unescape("\\$HOME") == "\\$HOME"


def test_escaped_backslash_then_n_is_literal():
    assert unescape("\\\\n") == "\\n"


def test_trailing_backslash_kept():
    assert unescape("abc\\") == "abc\\"


def test_no_backslashes_unchanged():
    assert unescape("plain $TEXT") == "plain $TEXT"
