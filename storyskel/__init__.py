"""storyskel: generate code skeletons from Given/When/Then story files."""

from .config import ClauseKind
from .converter import ConversionReport, StoryConverter
from .errors import (
    ConfigurationError,
    FormatError,
    NormalizationError,
    StoryConversionError,
    StoryEncodingError,
)
from .naming import derive_method_name, derive_type_name
from .render import JavaSkeletonRenderer
from .settings import ConverterSettings, load_settings
from .story import ClauseRecord, IdentifierTable, StoryParser

__version__ = "0.1.0"

__all__ = [
    "ClauseKind",
    "ClauseRecord",
    "ConfigurationError",
    "ConversionReport",
    "ConverterSettings",
    "FormatError",
    "IdentifierTable",
    "JavaSkeletonRenderer",
    "NormalizationError",
    "StoryConversionError",
    "StoryEncodingError",
    "StoryConverter",
    "StoryParser",
    "derive_method_name",
    "derive_type_name",
    "load_settings",
]
