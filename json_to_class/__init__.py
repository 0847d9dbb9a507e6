"""Generate serializable data classes from JSON documents."""

from .codegen import (
    ClassDefinition,
    ConfigError,
    EmptyIdentifierError,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    InferenceError,
    NamingRule,
    OutputTarget,
    RegistryError,
    RootNotObjectError,
    TemplateError,
    UnclassifiableNumberError,
    __version__,
    build_model,
    finalize_classes,
    generate_from_json,
    json_to_class,
    list_supported_languages,
)
from .utils import JSONLoaderError, load_json_from_file

__all__ = [
    "ClassDefinition",
    "GenerationResult",
    "GeneratorConfig",
    "NamingRule",
    "OutputTarget",
    "build_model",
    "finalize_classes",
    "generate_from_json",
    "json_to_class",
    "list_supported_languages",
    "load_json_from_file",
    "ConfigError",
    "EmptyIdentifierError",
    "GeneratorError",
    "InferenceError",
    "JSONLoaderError",
    "RegistryError",
    "RootNotObjectError",
    "TemplateError",
    "UnclassifiableNumberError",
    "__version__",
]
