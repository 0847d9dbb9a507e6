"""
Type classification for parsed JSON values.

Maps a single value to a FieldType. Objects are handed back to the model
builder, which turns them into nested classes.
"""

import math
from typing import Any, Callable, Dict, List, Optional

from ...logging_config import get_logger
from .schema import (
    BOOL,
    FLOAT,
    INTEGER,
    TEXT,
    UNTYPED,
    ClassDefinition,
    ClassRef,
    Container,
    FieldType,
    InferenceError,
)

logger = get_logger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ObjectBuilder = Callable[[str, Dict[str, Any]], ClassDefinition]


class UnclassifiableNumberError(InferenceError):
    """Raised for numbers that are neither a 64-bit integer nor a finite double."""

    pass


def classify_number(value) -> FieldType:
    """
    Classify a JSON number.

    Python's decoder only produces ``int`` for literals without a fraction or
    exponent, so ``1.0`` stays a float. Integers beyond 64 bits fall back to
    float when a double can hold them.
    """
    if isinstance(value, int):
        if INT64_MIN <= value <= INT64_MAX:
            return INTEGER
        try:
            as_float = float(value)
        except OverflowError as e:
            raise UnclassifiableNumberError(
                f"Integer {value} fits neither a 64-bit integer nor a double"
            ) from e
        value = as_float

    if math.isfinite(value):
        return FLOAT
    raise UnclassifiableNumberError(f"Number {value!r} is not a finite double")


class TypeClassifier:
    """Classifies JSON values, delegating objects to a builder callback."""

    def __init__(self, build_object: ObjectBuilder):
        """
        Args:
            build_object: Called with a class name and an object; returns the
                class definition built for it
        """
        self._build_object = build_object

    def classify(
        self, value: Any, class_name: Optional[str], sink: List[ClassDefinition]
    ) -> FieldType:
        """
        Classify ``value``.

        Args:
            value: Parsed JSON value
            class_name: Name for any class built from an object in ``value``
            sink: Receives the class definitions built while classifying

        Returns:
            The field type for ``value``
        """
        if value is None:
            return UNTYPED
        if isinstance(value, bool):
            return BOOL
        if isinstance(value, (int, float)):
            return classify_number(value)
        if isinstance(value, str):
            return TEXT
        if isinstance(value, list):
            return self._classify_array(value, class_name, sink)
        if isinstance(value, dict):
            nested = self._build_object(class_name, value)
            sink.append(nested)
            return ClassRef(nested)

        raise InferenceError(f"Unsupported JSON value of type {type(value).__name__}")

    def _classify_array(
        self, values: List[Any], class_name: Optional[str], sink: List[ClassDefinition]
    ) -> FieldType:
        """Classify an array; mixed element types collapse to untyped."""
        if not values:
            return Container(UNTYPED)

        element_type = None
        element_classes: List[ClassDefinition] = []
        homogeneous = True

        # All elements are classified, even after a mismatch.
        for index, item in enumerate(values):
            item_classes: List[ClassDefinition] = []
            item_type = self.classify(item, class_name, item_classes)
            if index == 0:
                element_type = item_type
                element_classes = item_classes
            elif homogeneous and item_type != element_type:
                homogeneous = False

        if not homogeneous:
            logger.debug(
                "Array for %s has mixed element types, using untyped", class_name
            )
            return Container(UNTYPED)

        sink.extend(element_classes)
        return Container(element_type)
