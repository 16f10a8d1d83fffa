"""High-level LML-to-HTML conversion driver.

Ties together the tag scanner, attribute parser, box value resolver,
renderer registry and serializer into a single public API.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from lml2html.box import resolve_box_value
from lml2html.encoding import encode
from lml2html.errors import BoxValueError
from lml2html.renderers import BOX_TYPES, Registry, get_default_box_renderers
from lml2html.scanner import Token, TokenType, parse_attributes, scan_tags
from lml2html.serializer import serialize

logger = logging.getLogger(__name__)


class Converter:
    """Convert LML content to display HTML.

    Usage::

        converter = Converter()
        html = converter.convert_text('<lake-box name="hr"></lake-box>')

        # or with custom renderers
        renderers = get_default_box_renderers()
        renderers["image"] = my_image_renderer
        converter = Converter(renderers)
        converter.convert_file("input.lml", "output.html")
    """

    BOX_TYPES = BOX_TYPES

    def __init__(self, renderers: Optional[Registry] = None) -> None:
        if renderers is None:
            renderers = get_default_box_renderers()
        self.renderers = renderers

    def convert_text(self, value: str) -> str:
        """Convert LML text to HTML.

        Text outside ``<lake-box>``, ``<anchor/>`` and ``<focus/>`` tags is
        copied verbatim.  A box whose value cannot be decoded renders as an
        empty string and is reported through the module logger.

        Args:
            value: LML source string.

        Returns:
            HTML string.
        """
        return "".join(self._convert_token(tok) for tok in scan_tags(value))

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> None:
        """Read an LML file and write the HTML output as UTF-8.

        Args:
            input_path: Path to the input LML file.
            output_path: Path for the output ``.html`` file.
            encoding: Text encoding of the source file.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        lml_text = input_path.read_text(encoding=encoding)
        html = self.convert_text(lml_text)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")

    # -- internals ----------------------------------------------------------

    def _convert_token(self, tok: Token) -> str:
        if tok.type is TokenType.TEXT:
            return tok.source
        if tok.type is TokenType.BOX:
            return self._render_box(tok.open_tag)
        # anchor / focus selection markers have no display form
        return ""

    def _render_box(self, open_tag: str) -> str:
        attrs = parse_attributes(open_tag)
        name = attrs.get("name", "")
        renderer = self.renderers.get(name)
        if renderer is None:
            logger.debug("No renderer for lake-box %r; dropping it", name)
            return ""
        try:
            box_value = resolve_box_value(attrs)
        except BoxValueError as exc:
            logger.error(
                "Failed to parse lake-box value for %r box: %s",
                name,
                exc,
                exc_info=exc,
            )
            return ""
        return serialize(renderer(box_value, encode))


def to_html(value: str, renderers: Optional[Registry] = None) -> str:
    """Convert LML string *value* to an HTML string.

    *renderers* defaults to a fresh :func:`get_default_box_renderers`
    registry for this call.
    """
    return Converter(renderers).convert_text(value)
