"""Box value resolution.

A box carries its payload in the ``value`` attribute as Base64-encoded
UTF-8 JSON.  The decoded object must be flat: renderers read plain strings
from it and never see nested structures.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from lml2html.encoding import decode_base64_utf8
from lml2html.errors import StructureError

BoxValue = dict[str, str]


def resolve_box_value(attrs: Mapping[str, str]) -> BoxValue:
    """Decode the ``value`` attribute of a box into a string mapping.

    A missing ``value`` attribute yields an empty mapping; renderers then
    fall back field by field.

    Raises:
        DecodeError: the attribute is not Base64-encoded UTF-8.
        StructureError: the decoded text is not a flat JSON object.
    """
    payload = attrs.get("value")
    if payload is None:
        return {}
    return parse_box_json(decode_base64_utf8(payload))


def parse_box_json(text: str) -> BoxValue:
    """Parse decoded box text into a :data:`BoxValue`.

    Strings are kept verbatim, numbers and booleans become their JSON
    spelling and ``null`` drops the key.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise StructureError(f"box value is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise StructureError(
            f"box value must be a JSON object, got {type(data).__name__}"
        )

    box_value: BoxValue = {}
    for key, item in data.items():
        text_item = _scalar_to_str(key, item)
        if text_item is not None:
            box_value[key] = text_item
    return box_value


def _scalar_to_str(key: str, item: Any) -> str | None:
    if item is None:
        return None
    if isinstance(item, str):
        return item
    if isinstance(item, (bool, int, float)):
        return json.dumps(item)
    raise StructureError(
        f"box value field {key!r} must be a scalar, got {type(item).__name__}"
    )
