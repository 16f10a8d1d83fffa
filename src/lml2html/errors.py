"""lml2html exception hierarchy.

Only box-value failures are exceptions.  An unknown box type is ordinary
control flow and renders to an empty string.
"""


class LmlError(Exception):
    """Base exception for all lml2html errors."""


class BoxValueError(LmlError, ValueError):
    """Raised when a ``value`` attribute cannot be turned into a box value."""


class DecodeError(BoxValueError):
    """Raised for invalid Base64 input or bytes that are not valid UTF-8."""


class StructureError(BoxValueError):
    """Raised when decoded text is not a flat JSON object."""
