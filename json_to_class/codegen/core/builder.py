"""
Class model construction from parsed JSON.

Walks a JSON object depth-first, producing one ClassDefinition per object
and recording the nested classes each one discovers.
"""

from typing import Any, Dict, Optional, Set, Union

from ...logging_config import get_logger
from .classifier import TypeClassifier
from .naming import Casing, NameSanitizer, NamingRule, legalize
from .schema import ClassDefinition, Field, InferenceError

logger = get_logger(__name__)

DEFAULT_ROOT_NAME = "Untitled"


class RootNotObjectError(InferenceError):
    """Raised when the document root is not a JSON object."""

    pass


def contains_object(value: Any) -> bool:
    """Check whether a value is, or (through arrays) contains, an object."""
    if isinstance(value, dict):
        return True
    if isinstance(value, list):
        return any(contains_object(item) for item in value)
    return False


class ModelBuilder:
    """Builds the class tree for one JSON document."""

    def __init__(
        self,
        naming_rule: Union[NamingRule, str] = NamingRule.NONE,
        sanitizer: Optional[NameSanitizer] = None,
    ):
        """
        Initialize the builder.

        Args:
            naming_rule: Wire-name convention of the generated serializer
            sanitizer: Name sanitizer carrying the target's reserved words
        """
        self.naming_rule = NamingRule(naming_rule)
        self.sanitizer = sanitizer or NameSanitizer()
        self.classifier = TypeClassifier(self.build_class)
        self.class_count = 0

    def build(self, data: Any, root_name: str = DEFAULT_ROOT_NAME) -> ClassDefinition:
        """
        Build the class tree for a whole document.

        Args:
            data: Parsed JSON document; must be an object
            root_name: Name of the root class, Pascal-cased before use

        Returns:
            The root class definition, owning all nested classes
        """
        if not isinstance(data, dict):
            raise RootNotObjectError(
                f"Root value must be a JSON object, got {type(data).__name__}"
            )

        name = self.sanitizer.sanitize_name(root_name, Casing.PASCAL)
        self.class_count = 0
        root = self.build_class(name, data)
        logger.debug("Built %d classes for root %s", self.class_count, name)
        return root

    def build_class(self, name: str, obj: Dict[str, Any]) -> ClassDefinition:
        """Build one class from an object, recursing into nested objects."""
        definition = ClassDefinition(name)
        self.class_count += 1
        used_names: Set[str] = set()

        for position, (key, value) in enumerate(obj.items(), start=1):
            field_name = self._field_name(key, position, used_names)
            class_name = (
                self._class_name(key, position) if contains_object(value) else None
            )
            field_type = self.classifier.classify(
                value, class_name, definition.children
            )
            definition.add_field(
                Field(
                    key=key,
                    name=field_name,
                    type=field_type,
                    wire_name=self._wire_name(key, field_name),
                )
            )

        return definition

    def _field_name(self, key: str, position: int, used_names: Set[str]) -> str:
        placeholder = f"field{position}"
        name = self.sanitizer.sanitize_name(key, Casing.CAMEL, placeholder=placeholder)
        if not legalize(key, Casing.CAMEL):
            logger.warning(
                "Key %r has no usable characters, using field name %s", key, name
            )
        return self.sanitizer.make_unique(name, used_names)

    def _class_name(self, key: str, position: int) -> str:
        placeholder = f"Field{position}"
        name = self.sanitizer.sanitize_name(key, Casing.PASCAL, placeholder=placeholder)
        if not legalize(key, Casing.PASCAL):
            logger.warning(
                "Key %r has no usable characters, using class name %s", key, name
            )
        return name

    def _wire_name(self, key: str, field_name: str) -> Optional[str]:
        """Return ``key`` unless the naming rule turns it into ``field_name``."""
        if self.naming_rule.transform_key(key) == field_name:
            return None
        return key


def build_model(
    data: Any,
    root_name: str = DEFAULT_ROOT_NAME,
    naming_rule: Union[NamingRule, str] = NamingRule.NONE,
    sanitizer: Optional[NameSanitizer] = None,
) -> ClassDefinition:
    """Convenience wrapper building the class tree for ``data``."""
    return ModelBuilder(naming_rule, sanitizer).build(data, root_name)
