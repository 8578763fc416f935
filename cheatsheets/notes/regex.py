"""
Cheat sheet for the `re` module.
Covers substitution, extraction, named groups and the match/search/fullmatch distinction.
"""

from __future__ import annotations

import re

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "regex"

URL_PATTERN = re.compile(r"https?://\S+")
KEY_VALUE_PATTERN = re.compile(r"(\w+)=(\S+)")
YEAR_MONTH_PATTERN = re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})")


def collapse_spaces(text: str) -> str:
    return re.sub(r"\s+", " ", text.strip())


def find_urls(text: str) -> list[str]:
    return URL_PATTERN.findall(text)


def parse_key_values(line: str) -> dict[str, str]:
    """Parse `key=value` tokens, e.g. `src=10.1.1.2 dst=1.2.3.4 action=block`."""

    return dict(KEY_VALUE_PATTERN.findall(line))


def parse_year_month(text: str) -> dict[str, str] | None:
    match = YEAR_MONTH_PATTERN.search(text)
    if match is None:
        return None
    return match.groupdict()


def split_on_delimiters(text: str) -> list[str]:
    return re.split(r"[,;]\s*", text)


def mask_digits(text: str) -> str:
    return re.sub(r"\d", "#", text)


def collect_checks() -> list[NoteCheck]:
    firewall_line = "src=10.1.1.2 dst=1.2.3.4 action=block"
    return [
        expect_equal(TOPIC, "sub_collapses_whitespace_runs", collapse_spaces("  a \t b\n\nc  "), "a b c"),
        expect_equal(
            TOPIC,
            "findall_extracts_urls",
            find_urls("see https://docs.python.org/3/ and http://example.com now"),
            ["https://docs.python.org/3/", "http://example.com"],
        ),
        expect_equal(
            TOPIC,
            "findall_with_two_groups_returns_tuples",
            parse_key_values(firewall_line),
            {"src": "10.1.1.2", "dst": "1.2.3.4", "action": "block"},
        ),
        expect_equal(TOPIC, "findall_with_one_group_returns_group_text", re.findall(r"(\d)x", "1x2x3y"), ["1", "2"]),
        expect_equal(TOPIC, "named_groups_groupdict", parse_year_month("period 2024-05"), {"year": "2024", "month": "05"}),
        expect_equal(TOPIC, "search_returns_none_without_match", parse_year_month("no date"), None),
        expect_equal(TOPIC, "match_anchors_at_start", re.match("b", "abc"), None),
        expect_equal(TOPIC, "search_scans_whole_string", re.search("b", "abc").group(), "b"),  # type: ignore[union-attr]
        expect_equal(TOPIC, "fullmatch_requires_entire_string", re.fullmatch(r"\d+", "123a"), None),
        expect_true(TOPIC, "fullmatch_accepts_entire_string", re.fullmatch(r"\d+", "123") is not None),
        expect_equal(TOPIC, "split_on_character_class", split_on_delimiters("a, b;c"), ["a", "b", "c"]),
        expect_equal(TOPIC, "split_with_capture_group_keeps_separators", re.split(r"(-)", "a-b"), ["a", "-", "b"]),
        expect_equal(TOPIC, "sub_replaces_every_match", mask_digits("pin 1234"), "pin ####"),
        expect_equal(TOPIC, "sub_count_limits_replacements", re.sub(r"\d", "#", "1234", count=2), "##34"),
        expect_equal(TOPIC, "sub_with_backreference", re.sub(r"(\w+)@(\w+)", r"\2 at \1", "user@host"), "host at user"),
        expect_equal(TOPIC, "escape_quotes_metacharacters", re.escape("a.b*c"), r"a\.b\*c"),
        expect_true(TOPIC, "ignorecase_flag", re.compile("hello", re.IGNORECASE).search("Say HELLO") is not None),
        expect_equal(TOPIC, "finditer_exposes_spans", [m.span() for m in re.finditer(r"o", "foo")], [(1, 2), (2, 3)]),
        expect_equal(TOPIC, "non_greedy_quantifier", re.findall(r"<.+?>", "<a><b>"), ["<a>", "<b>"]),
        expect_equal(TOPIC, "greedy_quantifier", re.findall(r"<.+>", "<a><b>"), ["<a><b>"]),
        expect_raises(TOPIC, "invalid_pattern_raises_re_error", lambda: re.compile("(unclosed"), re.error),
    ]
