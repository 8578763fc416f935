from __future__ import annotations

import pytest

from cheatsheets.notes import strings


def test_split_without_separator_discards_empty_tokens() -> None:
    assert strings.split_words("\t one  two\n") == ["one", "two"]
    assert strings.split_on("one,,two,", ",") == ["one", "", "two", ""]


def test_collapse_and_partition() -> None:
    assert strings.collapse_whitespace(" a \n b ") == "a b"
    assert strings.split_key_value("host=db01") == ("host", "db01")
    assert strings.split_key_value("host:db01", ":") == ("host", "db01")


def test_translate_and_palindrome() -> None:
    assert strings.lowercase_letters("BAD", "AB") == "baD"
    assert strings.is_palindrome("No 'x' in Nixon")
    assert not strings.is_palindrome("python")


def test_format_helpers() -> None:
    assert strings.format_fixed(2.0, 3) == "2.000"
    assert strings.pad_number(42, 5) == "00042"
    assert strings.pad_number(42, 4, fill="*") == "**42"


def test_find_versus_index() -> None:
    assert strings.find_or_minus_one("haystack", "st") == 3
    assert strings.find_or_minus_one("haystack", "needle") == -1
    with pytest.raises(ValueError):
        "haystack".index("needle")


def test_affixes_and_casefold() -> None:
    assert strings.strip_affixes("v1.2.tar.gz", "v", ".tar.gz") == "1.2"
    assert strings.caseless_equal("Groß", "GROSS")
