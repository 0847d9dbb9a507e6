"""
Dart code generator module.

Generates json_serializable Dart classes from the inferred class model.
"""

from .generator import DartGenerator, create_dart_generator, dart_type_name
from .naming import (
    DART_BUILTIN_TYPES,
    DART_RESERVED_WORDS,
    create_dart_sanitizer,
    escape_dart_string,
)

__all__ = [
    "DartGenerator",
    "create_dart_generator",
    "dart_type_name",
    "create_dart_sanitizer",
    "escape_dart_string",
    "DART_RESERVED_WORDS",
    "DART_BUILTIN_TYPES",
]
