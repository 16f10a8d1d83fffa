"""lml2html - render Lake Markup Language documents as display HTML."""

from lml2html.converter import Converter, to_html
from lml2html.errors import BoxValueError, DecodeError, LmlError, StructureError
from lml2html.renderers import Node, RawHtml, get_default_box_renderers

__version__ = "0.1.0"

__all__ = [
    "BoxValueError",
    "Converter",
    "DecodeError",
    "LmlError",
    "Node",
    "RawHtml",
    "StructureError",
    "__version__",
    "get_default_box_renderers",
    "to_html",
]
