"""Tests for variable name extraction."""

from __future__ import annotations

import pytest

from dotparse.errors import EmptyKey, InvalidKeyCharacter, MissingDelimiter
from dotparse.keys import extract_key, is_key_char
from dotparse.util import Cursor


def _key(text: str) -> tuple[str, str]:
    name, rest = extract_key(Cursor(text))
    return name, rest.rest


def test_plain_key():
    assert _key("FOO=bar") == ("FOO", "bar")


def test_colon_delimiter():
    assert _key("FOO:bar") == ("FOO", "bar")


def test_only_first_delimiter_splits():
    assert _key("URL=http://x?a=1") == ("URL", "http://x?a=1")


def test_spaces_around_delimiter():
    assert _key("FOO  =  bar") == ("FOO", "bar")


def test_value_quote_is_kept():
    assert _key("FOO= 'bar'") == ("FOO", "'bar'")


def test_remainder_trim_stops_at_newline():
    assert _key("FOO= \nBAR=1") == ("FOO", "\nBAR=1")


def test_export_prefix_stripped():
    assert _key("export FOO=1") == ("FOO", "1")
    assert _key("export \t  FOO=1") == ("FOO", "1")


def test_export_without_space_is_part_of_key():
    assert _key("exportFOO=1") == ("exportFOO", "1")
    assert _key("export=1") == ("export", "1")


def test_unicode_letters_digits_and_dots():
    assert _key("app.name_2=x") == ("app.name_2", "x")
    assert _key("ÜBER=1") == ("ÜBER", "1")
    assert _key("1ST=one") == ("1ST", "one")


def test_invalid_character():
    with pytest.raises(InvalidKeyCharacter) as exc_info:
        extract_key(Cursor("FOO-BAR=1"))
    assert exc_info.value.char == "-"
    assert exc_info.value.near == "-BAR=1"
    assert "unexpected character '-' in variable name" in str(exc_info.value)


def test_space_inside_key():
    with pytest.raises(InvalidKeyCharacter) as exc_info:
        extract_key(Cursor("A B=1"))
    assert exc_info.value.char == " "
    assert exc_info.value.offset == 1


def test_missing_delimiter_at_end_of_input():
    with pytest.raises(MissingDelimiter):
        extract_key(Cursor("FOO"))


def test_missing_delimiter_before_newline():
    with pytest.raises(MissingDelimiter) as exc_info:
        extract_key(Cursor("FOO \nBAR=1"))
    assert exc_info.value.near == "FOO "


def test_empty_key():
    with pytest.raises(EmptyKey):
        extract_key(Cursor(":value"))


def test_is_key_char():
    assert is_key_char("a")
    assert is_key_char("_")
    assert is_key_char(".")
    assert is_key_char("٣")
    assert not is_key_char("-")
    assert not is_key_char("$")
