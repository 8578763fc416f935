"""
Cheat sheet for schema validation with pydantic v2.
Every schema mismatch surfaces as `pydantic.ValidationError`; `exc.errors()` lists the `type` and `loc` of each failure.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "validation"

IndicatorType = Literal["ip", "url", "domain", "hash"]


class Indicator(BaseModel):
    value: str
    type: IndicatorType = "hash"


class Page(BaseModel):
    page: int = Field(ge=1)
    page_size: int = Field(default=50, ge=1, le=500)


class StrictCount(BaseModel):
    model_config = ConfigDict(strict=True)

    count: int


class ClosedRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str


class Domain(BaseModel):
    name: str
    tags: list[str] = Field(default_factory=list)
    parent: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        cleaned = value.strip().lower().rstrip(".")
        if "." not in cleaned:
            raise ValueError("domain needs at least one dot")
        return cleaned


def first_error(model: type[BaseModel], data: Any) -> tuple[str, tuple[Any, ...]]:
    """Validate `data` and return the (type, loc) of the first reported error."""

    try:
        model.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        return error["type"], tuple(error["loc"])
    raise ValueError(f"{data!r} is valid for {model.__name__}")


def collect_checks() -> list[NoteCheck]:
    indicator = Indicator.model_validate({"value": "d41d8cd98f00b204e9800998ecf8427e"})
    url_indicator = Indicator(value="https://example.com", type="url")
    domain = Domain(name="  Example.COM. ")
    dumped = url_indicator.model_dump_json()

    return [
        expect_equal(TOPIC, "literal_field_default", indicator.type, "hash"),
        expect_equal(TOPIC, "model_dump_returns_dict", url_indicator.model_dump(), {"value": "https://example.com", "type": "url"}),
        expect_equal(TOPIC, "model_dump_json_is_compact", dumped, '{"value":"https://example.com","type":"url"}'),
        expect_equal(TOPIC, "model_validate_json_round_trip", Indicator.model_validate_json(dumped), url_indicator),
        expect_raises(TOPIC, "schema_mismatch_raises_validation_error", lambda: Indicator(value="x", type="email"), ValidationError),  # type: ignore[arg-type]
        expect_true(TOPIC, "validation_error_is_value_error", issubclass(ValidationError, ValueError)),
        expect_equal(TOPIC, "literal_mismatch_error", first_error(Indicator, {"value": "x", "type": "email"}), ("literal_error", ("type",))),
        expect_equal(TOPIC, "missing_field_error", first_error(Indicator, {"type": "ip"}), ("missing", ("value",))),
        expect_equal(TOPIC, "lax_mode_coerces_numeric_strings", Page.model_validate({"page": "3"}).page, 3),
        expect_equal(TOPIC, "unparsable_int_error", first_error(Page, {"page": "three"}), ("int_parsing", ("page",))),
        expect_equal(TOPIC, "field_lower_bound_error", first_error(Page, {"page": 0}), ("greater_than_equal", ("page",))),
        expect_equal(TOPIC, "field_upper_bound_error", first_error(Page, {"page": 1, "page_size": 501}), ("less_than_equal", ("page_size",))),
        expect_equal(TOPIC, "strict_mode_rejects_coercion", first_error(StrictCount, {"count": "3"}), ("int_type", ("count",))),
        expect_equal(TOPIC, "extra_fields_ignored_by_default", Indicator.model_validate({"value": "x", "note": "dropped"}).model_dump(), {"value": "x", "type": "hash"}),
        expect_equal(TOPIC, "extra_forbid_rejects_unknown_fields", first_error(ClosedRecord, {"name": "a", "age": 3}), ("extra_forbidden", ("age",))),
        expect_equal(TOPIC, "field_validator_normalizes", domain.name, "example.com"),
        expect_equal(TOPIC, "field_validator_value_error", first_error(Domain, {"name": "localhost"}), ("value_error", ("name",))),
        expect_equal(TOPIC, "default_factory_and_optional", (domain.tags, domain.parent), ([], None)),
        expect_equal(TOPIC, "nested_error_loc_includes_index", first_error(Domain, {"name": "a.b", "tags": ["ok", 5]}), ("string_type", ("tags", 1))),
        expect_equal(TOPIC, "type_adapter_validates_bare_types", TypeAdapter(list[int]).validate_python(["1", 2]), [1, 2]),
        expect_raises(TOPIC, "type_adapter_raises_validation_error", lambda: TypeAdapter(list[int]).validate_python("nope"), ValidationError),
    ]
