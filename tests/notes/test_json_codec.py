from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from cheatsheets.notes import json_codec


def test_round_trip_is_lossy_for_tuples_and_int_keys() -> None:
    assert json_codec.round_trip({2: (1, "a")}) == {"2": [1, "a"]}


def test_canonical_output_is_order_independent() -> None:
    assert json_codec.canonical({"b": 1, "a": 2}) == json_codec.canonical({"a": 2, "b": 1})


def test_encoder_handles_dates_and_frozensets() -> None:
    encoded = json.dumps([date(2020, 2, 29), frozenset({3, 1}), datetime(2020, 1, 1, 8)], cls=json_codec.NoteJSONEncoder)
    assert encoded == '["2020-02-29", [1, 3], "2020-01-01T08:00:00"]'


def test_decode_error_position() -> None:
    assert json_codec.decode_error_position("[1, }") == (1, 5, 4)
    with pytest.raises(ValueError, match="is valid JSON"):
        json_codec.decode_error_position("[]")


def test_parse_json_lines() -> None:
    lines = ['{"ts": "2024-01-01T00:00:00", "host": "h1"}', "   ", "[1]"]
    assert json_codec.parse_json_lines(lines) == [{"ts": "2024-01-01T00:00:00", "host": "h1"}, [1]]
    with pytest.raises(json.JSONDecodeError):
        json_codec.parse_json_lines(["{bad}"])
