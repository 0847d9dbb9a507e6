"""
Dart code generator implementation.

Generates json_serializable classes from the finalized class model.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, NamingRule
from ...core.schema import (
    ClassDefinition,
    ClassRef,
    Container,
    Field,
    FieldType,
    Primitive,
    PrimitiveKind,
)
from .naming import create_dart_sanitizer, escape_dart_string

logger = get_logger(__name__)

DART_TYPE_MAP = {
    PrimitiveKind.BOOL: "bool",
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.FLOAT: "double",
    PrimitiveKind.TEXT: "String",
    PrimitiveKind.UNTYPED: "dynamic",
}

# json_serializable's FieldRename values
FIELD_RENAME = {
    NamingRule.NONE: None,
    NamingRule.SNAKE: "FieldRename.snake",
    NamingRule.PASCAL: "FieldRename.pascal",
    NamingRule.KEBAB: "FieldRename.kebab",
}

DEFAULT_ANNOTATION_IMPORT = "package:json_annotation/json_annotation.dart"


def dart_type_name(field_type: FieldType) -> str:
    """Get the Dart type expression for a field type."""
    if isinstance(field_type, ClassRef):
        return field_type.target.name
    if isinstance(field_type, Container):
        return f"List<{dart_type_name(field_type.element)}>"
    if isinstance(field_type, Primitive):
        return DART_TYPE_MAP[field_type.kind]
    raise TypeError(f"Unknown field type: {field_type!r}")


class DartGenerator(CodeGenerator):
    """Code generator for Dart classes using json_serializable."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "dart"

    @property
    def file_extension(self) -> str:
        """Return Dart file extension."""
        return ".dart"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Dart templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_dart_sanitizer()

    @property
    def indent(self) -> str:
        return " " * self.config.indent_size

    def generate(self, classes: List[ClassDefinition]) -> str:
        """Generate a complete Dart file for all classes, root first."""
        root = classes[0]
        class_blocks = [self.generate_single_class(c) for c in classes]
        logger.debug("Rendering %d Dart classes", len(class_blocks))

        context = {
            "annotation_import": self.config.custom.get(
                "annotation_import", DEFAULT_ANNOTATION_IMPORT
            ),
            "root_name": root.name,
            "body": "\n\n".join(class_blocks),
        }
        return self.render_template("file.dart.j2", context)

    def generate_single_class(self, definition: ClassDefinition) -> str:
        """Generate the Dart class for a single class definition."""
        field_rename = FIELD_RENAME[self.config.naming_rule]
        context = {
            "class_name": definition.name,
            "annotation_args": f"fieldRename: {field_rename}" if field_rename else "",
            "fields": [self._generate_field_data(f) for f in definition.fields],
            "indent": self.indent,
        }
        return self.render_template("class.dart.j2", context)

    def _generate_field_data(self, field: Field) -> Dict[str, Any]:
        wire_name = None
        if field.has_wire_name:
            wire_name = escape_dart_string(field.wire_name)

        return {
            "name": field.name,
            "type": dart_type_name(field.type),
            "wire_name": wire_name,
        }

    def format_code(self, code: str) -> str:
        """Apply Dart formatting: base cleanup plus a single trailing newline."""
        return super().format_code(code).rstrip("\n") + "\n"


def create_dart_generator(config: Optional[Dict[str, Any]] = None) -> DartGenerator:
    """Create a Dart generator with default configuration."""
    return DartGenerator(config)
