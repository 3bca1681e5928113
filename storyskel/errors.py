"""Exceptions raised while converting story files."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import ClauseKind


class StoryConversionError(Exception):
    """Base class for errors that abort the conversion of one story."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class FormatError(StoryConversionError):
    """Raised when a story file does not follow the Given/When/Then structure.

    Attributes:
        line_number: 1-based line of a misplaced continuation, if any
        missing: Clause kinds that were never opened (incomplete document)
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        line_number: int | None = None,
        missing: list[ClauseKind] | None = None,
    ):
        super().__init__(message, source)
        self.line_number = line_number
        self.missing = missing or []


class NormalizationError(StoryConversionError):
    """Raised when no identifier can be derived from a piece of text."""

    def __init__(self, message: str, text: str = "", source: str | None = None):
        super().__init__(message, source)
        self.text = text


class ConfigurationError(StoryConversionError):
    """Raised when converter settings cannot be loaded or are invalid."""

    pass


class StoryEncodingError(StoryConversionError):
    """Raised when a story cannot be decoded or its skeleton encoded."""

    def __init__(self, message: str, encoding: str, source: str | None = None):
        super().__init__(message, source)
        self.encoding = encoding
