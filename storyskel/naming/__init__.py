"""Class and method name derivation."""

from .identifiers import (
    build_identifier_table,
    derive_method_name,
    derive_type_name,
    split_words,
    transform_to_camel_case,
    type_name_for_file,
)

__all__ = [
    "build_identifier_table",
    "derive_method_name",
    "derive_type_name",
    "split_words",
    "transform_to_camel_case",
    "type_name_for_file",
]
