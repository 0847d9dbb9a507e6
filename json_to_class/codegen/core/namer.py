"""
Class deduplication and final naming.

Flattens the class tree built for a document, collapses structurally
identical classes into one and gives the survivors collision-free names.
"""

from dataclasses import replace
from typing import Dict, List, Set

from ...logging_config import get_logger
from .schema import ClassDefinition, ClassRef, Container, FieldType

logger = get_logger(__name__)


def flatten_classes(root: ClassDefinition) -> List[ClassDefinition]:
    """
    Flatten a class tree, pre-order, root first.

    Identical classes found at different paths all appear; nothing is
    deduplicated yet.
    """
    return list(root.walk())


class ClassNamer:
    """Deduplicates a class tree and assigns final class names."""

    def __init__(self):
        self._variants: Dict[str, List[ClassDefinition]] = {}
        self._counts: Dict[str, int] = {}
        self._replacements: Dict[int, ClassDefinition] = {}
        self._taken: Set[str] = set()

    def finalize(self, root: ClassDefinition) -> List[ClassDefinition]:
        """
        Produce the ordered list of classes to render.

        Args:
            root: Root of the tree built by the model builder

        Returns:
            Surviving classes in flattened order, root first. Classes sharing
            a declared name but differing in shape are renamed in place with a
            numeric suffix; every class reference points at a survivor.
        """
        self._variants.clear()
        self._counts.clear()
        self._replacements.clear()

        flattened = flatten_classes(root)
        self._taken = {definition.declared_name for definition in flattened}

        survivors = []
        for definition in flattened:
            variants = self._variants.setdefault(definition.declared_name, [])
            match = next((v for v in variants if v == definition), None)
            if match is not None:
                logger.debug("Dropping duplicate of class %s", match.name)
                self._replacements[id(definition)] = match
                continue

            count = self._counts.get(definition.declared_name, -1) + 1
            if count > 0:
                count = self._rename(definition, count)
            self._counts[definition.declared_name] = count
            variants.append(definition)
            survivors.append(definition)

        for definition in survivors:
            self._redirect_references(definition)

        logger.debug(
            "Finalized %d of %d classes", len(survivors), len(flattened)
        )
        return survivors

    def _rename(self, definition: ClassDefinition, count: int) -> int:
        """Rename a colliding class, skipping suffixes that are already names."""
        candidate = f"{definition.declared_name}{count}"
        while candidate in self._taken:
            count += 1
            candidate = f"{definition.declared_name}{count}"

        logger.debug("Renaming class %s to %s", definition.name, candidate)
        definition.name = candidate
        self._taken.add(candidate)
        return count

    def _redirect_references(self, definition: ClassDefinition) -> None:
        definition.fields = [
            replace(f, type=self._resolve(f.type)) for f in definition.fields
        ]
        definition.children = [
            self._replacements.get(id(child), child) for child in definition.children
        ]

    def _resolve(self, field_type: FieldType) -> FieldType:
        if isinstance(field_type, ClassRef):
            target = self._replacements.get(id(field_type.target))
            return ClassRef(target) if target is not None else field_type
        if isinstance(field_type, Container):
            return Container(self._resolve(field_type.element))
        return field_type


def finalize_classes(root: ClassDefinition) -> List[ClassDefinition]:
    """Deduplicate and name the classes of a built tree."""
    return ClassNamer().finalize(root)
