"""Tests for box value resolution."""

from __future__ import annotations

import pytest

from lml2html.box import parse_box_json, resolve_box_value
from lml2html.errors import DecodeError, StructureError
from lml2html.scanner import parse_attributes

from conftest import encode_box_value


class TestResolveBoxValue:

    def test_missing_value_is_empty(self) -> None:
        assert resolve_box_value({"name": "image"}) == {}

    def test_empty_object(self) -> None:
        assert resolve_box_value({"value": "e30="}) == {}

    @pytest.mark.parametrize(
        "box_value",
        [
            {"url": "a.png"},
            {"url": "图片.png", "caption": "caption with \"quotes\" & <tags>"},
            {"code": "line1\nline2", "lang": "js"},
        ],
    )
    def test_through_attribute_parser(self, box_value: dict[str, str]) -> None:
        tag = f'<lake-box name="x" value="{encode_box_value(box_value)}">'
        assert resolve_box_value(parse_attributes(tag)) == box_value

    def test_invalid_base64(self) -> None:
        with pytest.raises(DecodeError):
            resolve_box_value({"value": "invalid-base64!"})

    def test_invalid_json(self) -> None:
        with pytest.raises(StructureError):
            resolve_box_value({"value": "bm90IGpzb24="})

    def test_array_rejected(self) -> None:
        with pytest.raises(StructureError):
            resolve_box_value({"value": "WzFd"})

    def test_nested_object_rejected(self) -> None:
        with pytest.raises(StructureError):
            resolve_box_value({"value": "eyJhIjp7ImIiOiJjIn19"})


class TestParseBoxJson:

    def test_strings_verbatim(self) -> None:
        assert parse_box_json('{"url": " a.png "}') == {"url": " a.png "}

    def test_scalars_use_json_spelling(self) -> None:
        assert parse_box_json('{"width": 100, "ratio": 1.5, "inline": true}') == {
            "width": "100",
            "ratio": "1.5",
            "inline": "true",
        }

    def test_null_drops_key(self) -> None:
        assert parse_box_json('{"url": null, "name": "x"}') == {"name": "x"}

    def test_list_field_rejected(self) -> None:
        with pytest.raises(StructureError, match="tags"):
            parse_box_json('{"tags": ["a"]}')
