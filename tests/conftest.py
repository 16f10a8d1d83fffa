"""Shared helpers for building LML box markup in tests."""

from __future__ import annotations

import base64
import json
from pathlib import Path

import pytest

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def encode_box_value(box_value: object) -> str:
    """Encode *box_value* the way the editor stores it: Base64 over UTF-8 JSON."""
    raw = json.dumps(box_value, ensure_ascii=False).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


@pytest.fixture
def make_box():
    """Return a factory building a complete ``<lake-box>`` tag."""

    def _make(name: str, box_value: object | None = None, closed: bool = True) -> str:
        tag = f'<lake-box name="{name}"'
        if box_value is not None:
            tag += f' value="{encode_box_value(box_value)}"'
        tag += ">"
        if closed:
            tag += "</lake-box>"
        return tag

    return _make
