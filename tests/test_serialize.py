"""Tests for rendering a mapping back to env file text."""

from __future__ import annotations

import pytest

from dotparse import marshal, parse
from dotparse.serialize import double_quote_escape

TRICKY = {
    "PLAIN": "value",
    "SPACES": "  padded  ",
    "DOLLAR": "cost $5 and $HOME",
    "ESCAPED_DOLLAR": "\\$x",
    "QUOTES": "say \"hi\" it's",
    "NEWLINES": "one\ntwo\r\nthree",
    "BACKSLASH_END": "path\\",
    "LITERAL_BACKSLASH_N": "\\n",
    "HASH": "a # not a comment",
    "BANG": "wow!`cmd`",
    "EMPTY": "",
    "NUMBER": "42",
    "NEGATIVE": "-7",
    "ZERO_PADDED": "007",
}


def test_double_quote_escape():
    assert double_quote_escape('a"b') == 'a\\"b'
    assert double_quote_escape("a\nb") == "a\\nb"
    assert double_quote_escape("\\$") == "\\\\\\$"


def test_marshal_sorted_lines():
    text = marshal({"B": "2", "A": "x y"})
    assert text == 'A="x y"\nB=2'


def test_marshal_integers_bare():
    assert marshal({"N": "10"}) == "N=10"
    assert marshal({"N": "010"}) == 'N="010"'


def test_marshal_single_quote_style():
    assert marshal({"A": "lit $eral"}, quote="single") == "A='lit $eral'"
    assert marshal({"A": "it's"}, quote="single") == 'A="it\'s"'


@pytest.mark.parametrize("quote", ["double", "single"])
def test_round_trip(quote):
    assert parse(marshal(TRICKY, quote=quote), environ={"HOME": "/root"}) == TRICKY


def test_marshal_empty_mapping():
    assert marshal({}) == ""


def test_marshal_unknown_quote_style():
    with pytest.raises(ValueError, match="Unknown quote style"):
        marshal({"A": "1"}, quote="backtick")


def test_marshal_rejects_invalid_key():
    with pytest.raises(ValueError, match="Invalid variable name"):
        marshal({"BAD KEY": "1"})


def test_marshal_trailing_backslash_written_bare():
    assert marshal({"P": "C:\\dir\\"}) == "P=C:\\dir\\"
    assert parse(marshal({"P": "C:\\dir\\"}), environ={}) == {"P": "C:\\dir\\"}


def test_marshal_rejects_unquotable_trailing_backslash():
    with pytest.raises(ValueError, match="ending in a backslash"):
        marshal({"A": "two words $HOME\\"})
    with pytest.raises(ValueError, match="ending in a backslash"):
        marshal({"A": " padded\\"}, quote="single")
