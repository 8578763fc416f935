"""
Cheat sheet for the `json` module.
Covers lossy round trips (tuples, int keys), canonical output, custom encoders and decoder error reporting.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "json_codec"


class NoteJSONEncoder(json.JSONEncoder):
    """Encode datetimes as ISO-8601 strings and sets as sorted lists."""

    def default(self, o: Any) -> Any:
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, (set, frozenset)):
            return sorted(o)
        return super().default(o)


def round_trip(value: Any) -> Any:
    return json.loads(json.dumps(value))


def canonical(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


def parse_json_lines(lines: Iterable[str]) -> list[Any]:
    return [json.loads(line) for line in lines if line.strip()]


def decode_error_position(text: str) -> tuple[int, int, int]:
    try:
        json.loads(text)
    except json.JSONDecodeError as exc:
        return exc.lineno, exc.colno, exc.pos
    raise ValueError(f"{text!r} is valid JSON")


def collect_checks() -> list[NoteCheck]:
    payload = {"name": "heap", "sizes": [1, 2], "nested": {"ok": True, "none": None}}
    stamped = json.dumps(
        {"ts": datetime(2024, 1, 2, 3, 4, 5), "tags": {"b", "a"}},
        cls=NoteJSONEncoder,
        sort_keys=True,
    )
    hooked = json.loads('{"x": 1}', object_hook=lambda d: sorted(d.items()))

    return [
        expect_equal(TOPIC, "dumps_loads_round_trip", round_trip(payload), payload),
        expect_equal(TOPIC, "python_literals_map_to_json_literals", json.dumps([True, None, 1.5]), "[true, null, 1.5]"),
        expect_equal(TOPIC, "tuples_decode_as_lists", round_trip({"point": (1, 2)}), {"point": [1, 2]}),
        expect_equal(TOPIC, "int_keys_decode_as_strings", round_trip({1: "a"}), {"1": "a"}),
        expect_equal(TOPIC, "canonical_form_sorts_and_compacts", canonical({"b": 1, "a": [1, 2]}), '{"a":[1,2],"b":1}'),
        expect_equal(TOPIC, "default_separators_include_spaces", json.dumps({"a": 1, "b": 2}), '{"a": 1, "b": 2}'),
        expect_equal(TOPIC, "indent_pretty_prints", json.dumps({"a": 1}, indent=2), '{\n  "a": 1\n}'),
        expect_equal(TOPIC, "custom_encoder_handles_datetime_and_set", stamped, '{"tags": ["a", "b"], "ts": "2024-01-02T03:04:05"}'),
        expect_equal(TOPIC, "default_hook_str_fallback", json.dumps({"d": date(2024, 5, 1)}, default=str), '{"d": "2024-05-01"}'),
        expect_raises(TOPIC, "unsupported_type_raises_type_error", lambda: json.dumps({"s": {1, 2}}), TypeError),
        expect_raises(TOPIC, "custom_encoder_defers_unknown_types", lambda: json.dumps(object(), cls=NoteJSONEncoder), TypeError),
        expect_raises(TOPIC, "malformed_input_raises_decode_error", lambda: json.loads("{'single': 1}"), json.JSONDecodeError),
        expect_true(TOPIC, "decode_error_is_value_error", issubclass(json.JSONDecodeError, ValueError)),
        expect_equal(TOPIC, "decode_error_reports_position", decode_error_position('{"a": 1,\n "b": }'), (2, 7, 15)),
        expect_raises(TOPIC, "trailing_comma_is_rejected", lambda: json.loads("[1, 2,]"), json.JSONDecodeError),
        expect_equal(TOPIC, "object_hook_transforms_objects", hooked, [("x", 1)]),
        expect_equal(TOPIC, "ensure_ascii_escapes_by_default", json.dumps("é"), '"\\u00e9"'),
        expect_equal(TOPIC, "ensure_ascii_false_keeps_text", json.dumps("é", ensure_ascii=False), '"é"'),
        expect_equal(TOPIC, "nan_is_emitted_by_default", json.dumps(float("nan")), "NaN"),
        expect_raises(TOPIC, "allow_nan_false_rejects_nan", lambda: json.dumps(float("inf"), allow_nan=False), ValueError),
        expect_equal(
            TOPIC,
            "json_lines_skip_blank_lines",
            parse_json_lines(['{"host": "a"}\n', "\n", '{"host": "b"}']),
            [{"host": "a"}, {"host": "b"}],
        ),
        expect_equal(TOPIC, "top_level_scalars_are_valid", json.loads("42"), 42),
    ]
