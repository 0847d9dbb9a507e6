"""
Core class model for code generation.

A JSON document is turned into a tree of ClassDefinition objects whose
fields carry a FieldType. Generators only ever read this model; they never
look at the JSON value again.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Union


class InferenceError(Exception):
    """Base exception for failures while inferring the class model."""

    pass


class PrimitiveKind(Enum):
    """Scalar type vocabulary shared by all target languages."""

    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    UNTYPED = "untyped"  # null, or anything we cannot narrow down


@dataclass(frozen=True)
class Primitive:
    """A scalar field type."""

    kind: PrimitiveKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Container:
    """An array field type holding elements of a single type."""

    element: "FieldType"

    def __str__(self) -> str:
        return f"container<{self.element}>"


@dataclass(frozen=True, eq=False)
class ClassRef:
    """Reference to a nested class; the builder's class tree owns the target."""

    target: "ClassDefinition"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassRef):
            return NotImplemented
        return self.target == other.target

    __hash__ = None

    def __str__(self) -> str:
        return self.target.name


FieldType = Union[Primitive, Container, ClassRef]

UNTYPED = Primitive(PrimitiveKind.UNTYPED)
BOOL = Primitive(PrimitiveKind.BOOL)
INTEGER = Primitive(PrimitiveKind.INTEGER)
FLOAT = Primitive(PrimitiveKind.FLOAT)
TEXT = Primitive(PrimitiveKind.TEXT)


@dataclass
class Field:
    """Represents a single field of a generated class."""

    key: str  # Original JSON key
    name: str  # Legalized identifier used in generated code
    type: FieldType
    wire_name: Optional[str] = None  # Explicit key override, unescaped

    @property
    def has_wire_name(self) -> bool:
        return self.wire_name is not None

    def is_untyped(self) -> bool:
        """Check whether this field, or its innermost element, is untyped."""
        field_type = self.type
        while isinstance(field_type, Container):
            field_type = field_type.element
        return field_type == UNTYPED


@dataclass(eq=False)
class ClassDefinition:
    """One class to be emitted.

    ``declared_name`` is fixed when the builder creates the class and is what
    structural equality looks at. ``name`` starts out equal to it and may be
    rewritten by the namer to resolve collisions; everything that renders a
    class reference reads ``name``.
    """

    declared_name: str
    fields: List[Field] = field(default_factory=list)
    children: List["ClassDefinition"] = field(default_factory=list)
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.declared_name

    def __eq__(self, other: object) -> bool:
        """Compare by ``declared_name`` and fields; renaming does not affect equality."""
        if not isinstance(other, ClassDefinition):
            return NotImplemented
        if self is other:
            return True
        if self.declared_name != other.declared_name:
            return False
        if len(self.fields) != len(other.fields):
            return False
        return all(
            mine.key == theirs.key and mine.type == theirs.type
            for mine, theirs in zip(self.fields, other.fields)
        )

    __hash__ = None

    def __repr__(self) -> str:
        fields = ", ".join(f"{f.name}: {f.type}" for f in self.fields)
        return f"ClassDefinition({self.name}{{{fields}}})"

    @property
    def renamed(self) -> bool:
        return self.name != self.declared_name

    def add_field(self, field: Field) -> None:
        """Add a field to this class."""
        self.fields.append(field)

    def get_field(self, key: str) -> Optional[Field]:
        """Get field by its original JSON key."""
        for field in self.fields:
            if field.key == key:
                return field
        return None

    def walk(self) -> Iterator["ClassDefinition"]:
        """Yield this class and every nested class, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def get_max_depth(self, current_depth: int = 1) -> int:
        """Get maximum nesting depth below this class."""
        max_depth = current_depth
        for child in self.children:
            max_depth = max(max_depth, child.get_max_depth(current_depth + 1))
        return max_depth

    def get_attention_summary(self) -> Dict[str, int]:
        """Get summary of attention-worthy issues in this class."""
        return {
            "untyped": sum(1 for f in self.fields if f.is_untyped()),
            "wire_names": sum(1 for f in self.fields if f.has_wire_name),
            "total_fields": len(self.fields),
        }
