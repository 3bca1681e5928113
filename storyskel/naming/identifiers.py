"""Identifier generation for generated skeletons.

Type names come from story file names, method names from clause fragments:

    Open-Door.story       -> OpenDoor
    open the door         -> openTheDoor
    RESET counter         -> resetCounter

Only the first word is lower-cased; later words get an upper-case first
character and otherwise keep their case (``use HTTPS`` -> ``useHTTPS``).
"""

import re
from collections.abc import Iterable
from pathlib import PurePath

from ..config import ClauseKind
from ..errors import NormalizationError
from ..story.models import ClauseRecord, IdentifierTable

_NON_ALPHANUMERIC_RUN = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """Split text on runs of characters that are not ASCII letters or digits."""
    return [word for word in _NON_ALPHANUMERIC_RUN.split(text) if word]


def transform_to_camel_case(words: Iterable[str], capitalize_first: bool) -> str:
    """Join words into a camel-case identifier.

    Args:
        words: Words in order; empty strings are skipped
        capitalize_first: Upper-case the first character of the result

    Returns:
        The concatenated identifier

    Raises:
        NormalizationError: If there is no non-empty word
    """
    usable = [word for word in words if word]
    if not usable:
        raise NormalizationError("No words to build an identifier from")

    first = usable[0].lower()
    if capitalize_first:
        first = first[0].upper() + first[1:]

    rest = "".join(word[0].upper() + word[1:] for word in usable[1:])
    return first + rest


def derive_type_name(base_name: str) -> str:
    """Derive a class name from an extension-stripped file name."""
    try:
        return transform_to_camel_case(split_words(base_name), capitalize_first=True)
    except NormalizationError as e:
        raise NormalizationError(f"Cannot derive a type name from '{base_name}'", text=base_name) from e


def type_name_for_file(file_name: str) -> str:
    """Derive a class name from a story file name, dropping its extension."""
    return derive_type_name(PurePath(file_name).stem)


def derive_method_name(fragment: str) -> str:
    """Derive a method name from a normalized clause fragment."""
    try:
        return transform_to_camel_case(fragment.split(), capitalize_first=False)
    except NormalizationError as e:
        raise NormalizationError(
            f"Cannot derive a method name from '{fragment}'", text=fragment
        ) from e


def build_identifier_table(file_name: str, record: ClauseRecord) -> IdentifierTable:
    """Derive the type name and every method name for one story."""
    methods = {
        kind.name.lower(): tuple(derive_method_name(f) for f in record.fragments_for(kind))
        for kind in ClauseKind.ordered()
    }
    return IdentifierTable(type_name=type_name_for_file(file_name), **methods)
