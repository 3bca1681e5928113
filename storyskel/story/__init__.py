"""Story file parsing."""

from .models import ClauseRecord, ConversionResult, IdentifierTable
from .parser import StoryParser, clean_fragment, normalize_whitespace, strip_comment

__all__ = [
    "ClauseRecord",
    "ConversionResult",
    "IdentifierTable",
    "StoryParser",
    "clean_fragment",
    "normalize_whitespace",
    "strip_comment",
]
