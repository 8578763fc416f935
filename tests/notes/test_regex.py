from __future__ import annotations

import re

import pytest

from cheatsheets.notes import regex


def test_parse_firewall_style_line() -> None:
    line = "src=10.0.0.5 dst=8.8.8.8 action=allow port=53"
    assert regex.parse_key_values(line) == {"src": "10.0.0.5", "dst": "8.8.8.8", "action": "allow", "port": "53"}


def test_find_urls_stops_at_whitespace() -> None:
    assert regex.find_urls("go to http://a.io/x?y=1 then ftp://nope") == ["http://a.io/x?y=1"]


def test_named_groups() -> None:
    assert regex.parse_year_month("from 1999-12 to 2000-01") == {"year": "1999", "month": "12"}
    assert regex.parse_year_month("199-1") is None


def test_split_and_mask() -> None:
    assert regex.split_on_delimiters("x;y,  z") == ["x", "y", "z"]
    assert regex.mask_digits("a1b22") == "a#b##"
    assert regex.collapse_spaces("\n  keep   one  \n") == "keep one"


def test_invalid_pattern() -> None:
    with pytest.raises(re.error):
        re.compile("[a-")
