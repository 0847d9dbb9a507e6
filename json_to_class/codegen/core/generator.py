"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .naming import NameSanitizer
from .schema import ClassDefinition
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if config is None:
            config = load_config(self.language_name)
        elif isinstance(config, dict):
            config = load_config(self.language_name, custom_config=config)
        self.config = config
        self.sanitizer = self.create_sanitizer()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'dart')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.dart')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def create_sanitizer(self) -> NameSanitizer:
        """
        Create the name sanitizer used while building the class model.

        Subclasses return one that knows the language's reserved words.
        """
        return NameSanitizer()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, classes: List[ClassDefinition]) -> str:
        """
        Generate code for all classes.

        Args:
            classes: Finalized classes, root first

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_class(self, definition: ClassDefinition) -> str:
        """Generate code for a single class."""
        pass

    def validate_classes(self, classes: List[ClassDefinition]) -> List[str]:
        """
        Collect warnings about the classes being generated.

        Args:
            classes: Classes to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for definition in classes:
            if not definition.fields:
                warnings.append(f"Class '{definition.name}' has no fields")

            if definition.renamed:
                warnings.append(
                    f"Class '{definition.declared_name}' renamed to "
                    f"'{definition.name}' to avoid a name collision"
                )

            for field in definition.fields:
                if field.is_untyped():
                    warnings.append(
                        f"Untyped field {definition.name}.{field.name} "
                        "(null, empty or mixed-type values)"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, classes: List[ClassDefinition]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        classes: Finalized classes, root first

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_classes(classes)

        code = generator.generate(classes)

        formatted_code = generator.format_code(code)

        root = classes[0]
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_count": len(classes),
            "root_class": root.name,
            "naming_rule": str(generator.config.naming_rule),
            "max_depth": root.get_max_depth(),
            "has_untyped": any(
                field.is_untyped() for definition in classes for field in definition.fields
            ),
            "wire_name_overrides": sum(
                definition.get_attention_summary()["wire_names"] for definition in classes
            ),
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
