# This module loads and validates the notes catalog used by the runner.
# The catalog decides which topic modules a run imports and which keyword params they receive.
# Structural problems fail fast with ValueError so a broken catalog never yields a partial report.

from __future__ import annotations

import importlib
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cheatsheets.notes.base import NoteModule

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CATALOG_PATH = "configs/notes_catalog.yaml"

REQUIRED_CATALOG_KEYS = {"catalog_version", "notes"}
REQUIRED_NOTE_KEYS = {"topic", "title", "module"}


@dataclass(frozen=True)
class NoteEntry:
    topic: str
    title: str
    module: str
    enabled: bool = True
    params: dict[str, Any] = field(default_factory=dict)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Catalog file {path} must be a YAML mapping")
    return dict(loaded)


def _validate_required(config: dict[str, Any], required: set[str], where: str) -> None:
    missing = required.difference(config.keys())
    if missing:
        raise ValueError(f"{where} missing required keys: {sorted(missing)}")


def resolve_catalog_path(path: str | Path | None = None) -> Path:
    candidate = Path(path or DEFAULT_CATALOG_PATH)
    if candidate.is_absolute():
        return candidate
    return PROJECT_ROOT / candidate


def parse_catalog(config: dict[str, Any], *, source: str = "catalog") -> list[NoteEntry]:
    _validate_required(config, REQUIRED_CATALOG_KEYS, f"Catalog {source}")

    raw_notes = config.get("notes") or []
    if not isinstance(raw_notes, list):
        raise ValueError(f"Catalog {source} `notes` must be a list")

    entries: list[NoteEntry] = []
    seen: set[str] = set()
    for position, raw in enumerate(raw_notes):
        if not isinstance(raw, dict):
            raise ValueError(f"Catalog {source} note #{position} must be a mapping")
        _validate_required(raw, REQUIRED_NOTE_KEYS, f"Catalog {source} note #{position}")

        topic = str(raw["topic"])
        if topic in seen:
            raise ValueError(f"Catalog {source} lists topic {topic!r} more than once")
        seen.add(topic)

        params = raw.get("params") or {}
        if not isinstance(params, dict):
            raise ValueError(f"Catalog {source} topic {topic!r} params must be a mapping")

        enabled = raw.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError(f"Catalog {source} topic {topic!r} enabled must be a boolean, got {enabled!r}")

        entries.append(
            NoteEntry(
                topic=topic,
                title=str(raw["title"]),
                module=str(raw["module"]),
                enabled=enabled,
                params=dict(params),
            )
        )
    return entries


def load_catalog(path: str | Path | None = None) -> list[NoteEntry]:
    catalog_path = resolve_catalog_path(path)
    return parse_catalog(_load_yaml(catalog_path), source=str(catalog_path))


def select_entries(
    entries: Iterable[NoteEntry],
    topics: Iterable[str] | None = None,
    *,
    include_disabled: bool = False,
) -> list[NoteEntry]:
    available = list(entries)
    if topics is None:
        return [entry for entry in available if entry.enabled or include_disabled]

    by_topic = {entry.topic: entry for entry in available}
    requested = list(dict.fromkeys(topics))
    unknown = [topic for topic in requested if topic not in by_topic]
    if unknown:
        raise ValueError(f"Unknown topics requested: {unknown}; available: {sorted(by_topic)}")
    # An explicit request runs the topic even when the catalog disables it.
    return [by_topic[topic] for topic in requested]


def load_note_module(entry: NoteEntry) -> NoteModule:
    module = importlib.import_module(entry.module)
    topic = getattr(module, "TOPIC", None)
    if topic != entry.topic:
        raise ValueError(f"Module {entry.module} declares TOPIC={topic!r}, catalog expects {entry.topic!r}")
    if not callable(getattr(module, "collect_checks", None)):
        raise ValueError(f"Module {entry.module} does not define collect_checks()")
    return module  # type: ignore[return-value]
