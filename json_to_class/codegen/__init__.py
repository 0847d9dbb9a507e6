"""
JSON to class code generation.

Infers a class model from a JSON document and renders it in a target
language.
"""

import json
from typing import Any, Dict, Optional, Union

from ..logging_config import get_logger
from .core.builder import RootNotObjectError, build_model
from .core.classifier import UnclassifiableNumberError
from .core.config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.namer import finalize_classes
from .core.naming import EmptyIdentifierError, NamingRule
from .core.schema import ClassDefinition, Field, FieldType, InferenceError
from .core.templates import TemplateError
from .registry import (
    OutputTarget,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)

logger = get_logger(__name__)

# Version info
__version__ = "0.1.0"


def generate_from_json(
    data: Any,
    language: Union[str, OutputTarget] = "dart",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
    root_name: Optional[str] = None,
    naming_rule: Optional[Union[NamingRule, str]] = None,
) -> GenerationResult:
    """
    Generate code from parsed JSON data.

    Args:
        data: Parsed JSON document; the root must be an object
        language: Target language name
        config: Generator configuration, dict or config file path
        root_name: Name of the root class, overrides the configuration
        naming_rule: Wire-name rule, overrides the configuration

    Returns:
        GenerationResult with generated code; failures to build the class
        model are reported through the result, not raised
    """
    generator = get_generator(
        language, config, root_name=root_name, naming_rule=naming_rule
    )

    try:
        root = build_model(
            data,
            generator.config.root_name,
            generator.config.naming_rule,
            generator.sanitizer,
        )
        classes = finalize_classes(root)
    except InferenceError as e:
        logger.error("Failed to infer classes: %s", e)
        return GenerationResult.error(f"Failed to infer classes: {e}", exception=e)
    except RecursionError as e:
        logger.error("Document is nested too deeply")
        return GenerationResult.error("Document is nested too deeply", exception=e)

    return generate_code(generator, classes)


def json_to_class(
    json_string: str,
    language: Union[str, OutputTarget] = "dart",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
    root_name: Optional[str] = None,
    naming_rule: Optional[Union[NamingRule, str]] = None,
) -> str:
    """
    Generate code from JSON text.

    Returns:
        Generated code string

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
        GeneratorError: If generation fails
    """
    data = json.loads(json_string)
    result = generate_from_json(data, language, config, root_name, naming_rule)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message) from result.exception


# Export main interfaces
__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "ClassDefinition",
    "Field",
    "FieldType",
    "GeneratorConfig",
    "ConfigManager",
    "NamingRule",
    "OutputTarget",
    "build_model",
    "finalize_classes",
    "generate_code",
    "generate_from_json",
    "json_to_class",
    "get_generator",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    # Errors
    "InferenceError",
    "UnclassifiableNumberError",
    "EmptyIdentifierError",
    "RootNotObjectError",
    "GeneratorError",
    "TemplateError",
    "ConfigError",
    "RegistryError",
]
