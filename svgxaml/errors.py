"""Conversion error taxonomy.

Only malformed input, invalid colors and invalid numbers are fatal. Empty documents,
unknown gradient references and unsupported elements or transforms are soft-fails
handled inside the converter.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for every fatal conversion failure."""


class MalformedInputError(ConversionError):
    """The source text is not well-formed XML."""


class InvalidColorError(ConversionError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid color literal: {value!r}")
        self.value = value


class InvalidNumberError(ConversionError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid numeric literal: {value!r}")
        self.value = value
