"""
Cheat sheet for `str` methods and format specs.
Snippets follow the standard library documentation; collect_checks() restates their documented results.
"""

from __future__ import annotations

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises

TOPIC = "strings"


def split_words(text: str) -> list[str]:
    """Split on runs of whitespace. Leading, trailing and repeated blanks yield no empty tokens."""

    return text.split()


def split_on(text: str, sep: str) -> list[str]:
    """Split on an explicit separator. Adjacent separators produce empty tokens."""

    return text.split(sep)


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def strip_chars(text: str, chars: str) -> str:
    # `chars` is a set of characters, not a prefix/suffix string.
    return text.strip(chars)


def split_key_value(pair: str, sep: str = "=") -> tuple[str, str]:
    key, _, value = pair.partition(sep)
    return key, value


def lowercase_letters(text: str, letters: str) -> str:
    table = str.maketrans(letters.upper(), letters.lower())
    return text.translate(table)


def is_palindrome(text: str) -> bool:
    filtered = [ch.lower() for ch in text if ch.isalnum()]
    return filtered == filtered[::-1]


def format_fixed(value: float, places: int = 2) -> str:
    return f"{value:.{places}f}"


def pad_number(value: int, width: int, *, fill: str = "0") -> str:
    return f"{value:{fill}>{width}}"


def find_or_minus_one(text: str, sub: str) -> int:
    """`str.find` returns -1 where `str.index` raises ValueError."""

    return text.find(sub)


def strip_affixes(text: str, prefix: str, suffix: str) -> str:
    return text.removeprefix(prefix).removesuffix(suffix)


def caseless_equal(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def collect_checks() -> list[NoteCheck]:
    return [
        expect_equal(TOPIC, "split_without_separator_drops_empty_tokens", split_words("  a  b\tc \n"), ["a", "b", "c"]),
        expect_equal(TOPIC, "split_with_separator_keeps_empty_tokens", split_on("a,,b", ","), ["a", "", "b"]),
        expect_equal(TOPIC, "split_of_empty_string_without_separator", split_words(""), []),
        expect_equal(TOPIC, "split_of_empty_string_with_separator", split_on("", ","), [""]),
        expect_equal(TOPIC, "maxsplit_limits_splits", "a b c d".split(" ", 2), ["a", "b", "c d"]),
        expect_equal(TOPIC, "rsplit_splits_from_the_right", "a.b.c".rsplit(".", 1), ["a.b", "c"]),
        expect_equal(TOPIC, "collapse_whitespace", collapse_whitespace("  hello   big \t world "), "hello big world"),
        expect_equal(TOPIC, "strip_treats_argument_as_character_set", strip_chars("xyhixyx", "xy"), "hi"),
        expect_equal(TOPIC, "partition_splits_on_first_separator", split_key_value("k=v=w"), ("k", "v=w")),
        expect_equal(TOPIC, "partition_without_separator", split_key_value("novalue"), ("novalue", "")),
        expect_equal(TOPIC, "translate_with_maketrans", lowercase_letters("ABCAB", "AB"), "abCab"),
        expect_equal(TOPIC, "join_requires_strings", "-".join(["a", "b", "c"]), "a-b-c"),
        expect_raises(TOPIC, "join_rejects_non_strings", lambda: "-".join(["a", 1]), TypeError),  # type: ignore[list-item]
        expect_equal(TOPIC, "palindrome_ignores_case_and_punctuation", is_palindrome("A man, a plan, a canal: Panama"), True),
        expect_equal(TOPIC, "non_palindrome", is_palindrome("race a car"), False),
        expect_equal(TOPIC, "fixed_point_format", format_fixed(3.14159), "3.14"),
        expect_equal(TOPIC, "zero_padded_format", pad_number(7, 3), "007"),
        expect_equal(TOPIC, "right_aligned_format", f"{42:>5}", "   42"),
        expect_equal(TOPIC, "thousands_separator_format", f"{1234567:,}", "1,234,567"),
        expect_equal(TOPIC, "find_returns_minus_one_when_missing", find_or_minus_one("abc", "z"), -1),
        expect_raises(TOPIC, "index_raises_when_missing", lambda: "abc".index("z"), ValueError),
        expect_equal(TOPIC, "removeprefix_and_removesuffix", strip_affixes("test_strings.py", "test_", ".py"), "strings"),
        expect_equal(TOPIC, "removeprefix_is_noop_without_prefix", "strings".removeprefix("test_"), "strings"),
        expect_equal(TOPIC, "casefold_compares_caselessly", caseless_equal("Straße", "STRASSE"), True),
        expect_equal(TOPIC, "startswith_accepts_tuple", "report.csv".endswith((".csv", ".json")), True),
        expect_raises(TOPIC, "strings_are_immutable", lambda: _assign_first_char("abc"), TypeError),
        expect_equal(TOPIC, "count_non_overlapping", "aaaa".count("aa"), 2),
    ]


def _assign_first_char(text: str) -> None:
    text[0] = "z"  # type: ignore[index]
