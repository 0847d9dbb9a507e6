"""
Core code generation components.

Provides the class model, its construction from JSON and the base classes
used by all language generators.
"""

from .builder import DEFAULT_ROOT_NAME, ModelBuilder, RootNotObjectError, build_model
from .classifier import TypeClassifier, UnclassifiableNumberError, classify_number
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .namer import ClassNamer, finalize_classes, flatten_classes
from .naming import (
    Casing,
    EmptyIdentifierError,
    NameSanitizer,
    NamingRule,
    convert_case,
    legalize,
)
from .schema import (
    BOOL,
    FLOAT,
    INTEGER,
    TEXT,
    UNTYPED,
    ClassDefinition,
    ClassRef,
    Container,
    Field,
    FieldType,
    InferenceError,
    Primitive,
    PrimitiveKind,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Class model
    "ClassDefinition",
    "ClassRef",
    "Container",
    "Field",
    "FieldType",
    "Primitive",
    "PrimitiveKind",
    "BOOL",
    "FLOAT",
    "INTEGER",
    "TEXT",
    "UNTYPED",
    # Model construction
    "ModelBuilder",
    "TypeClassifier",
    "ClassNamer",
    "build_model",
    "classify_number",
    "finalize_classes",
    "flatten_classes",
    "DEFAULT_ROOT_NAME",
    # Errors
    "InferenceError",
    "UnclassifiableNumberError",
    "EmptyIdentifierError",
    "RootNotObjectError",
    # Naming utilities
    "Casing",
    "NamingRule",
    "NameSanitizer",
    "convert_case",
    "legalize",
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
