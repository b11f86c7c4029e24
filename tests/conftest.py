"""Shared fixtures for the readie test suite."""

from __future__ import annotations

import collections.abc as cabc
import json
import typing as typ
from pathlib import Path

import pytest

JsonWriter = cabc.Callable[[Path, typ.Any], Path]


@pytest.fixture
def write_json() -> JsonWriter:
    """Return a helper that writes a JSON payload, creating parent folders."""

    def _write(path: Path, payload: typ.Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_payload() -> dict[str, typ.Any]:
    """Return a minimal valid project config payload."""
    return {"title": "My Package", "description": "Project level description."}
