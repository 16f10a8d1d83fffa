"""Turn renderer output into HTML text."""

from __future__ import annotations

from lml2html.encoding import encode
from lml2html.renderers import Node, RawHtml, RenderResult


def serialize(result: RenderResult) -> str:
    """Serialize a :class:`Node`, :class:`RawHtml` or raw string.

    Node attribute values are entity-encoded; keys, inner HTML and raw
    HTML are emitted unchanged.

    Raises:
        TypeError: *result* is none of the supported shapes.
    """
    if isinstance(result, Node):
        return _serialize_node(result)
    if isinstance(result, RawHtml):
        return result.html
    if isinstance(result, str):
        return result
    raise TypeError(
        f"renderer returned {type(result).__name__}; expected Node, RawHtml or str"
    )


def _serialize_node(node: Node) -> str:
    parts = [f"<{node.tag_name}"]
    if node.attributes:
        parts.append(" ")
        parts.append(
            " ".join(
                f'{key}="{encode(str(value))}"'
                for key, value in node.attributes.items()
            )
        )
    if node.is_void:
        parts.append(" />")
    else:
        parts.append(f">{node.inner_html or ''}</{node.tag_name}>")
    return "".join(parts)
