"""
Generator registry for the supported output targets.

Targets form a closed set; each one maps to its generator class.
"""

from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from .languages.dart import DartGenerator


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class OutputTarget(Enum):
    """Languages code can be generated for."""

    DART = "dart"


_GENERATORS: Dict[OutputTarget, Type[CodeGenerator]] = {
    OutputTarget.DART: DartGenerator,
}

_ALIASES: Dict[str, OutputTarget] = {
    "flutter": OutputTarget.DART,
}


def resolve_target(language: Union[str, OutputTarget]) -> OutputTarget:
    """
    Resolve a language name or alias to its output target.

    Raises:
        RegistryError: If the language is not supported
    """
    if isinstance(language, OutputTarget):
        return language

    language_key = language.lower()
    if language_key in _ALIASES:
        return _ALIASES[language_key]

    try:
        return OutputTarget(language_key)
    except ValueError:
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(list_supported_languages())}"
        ) from None


def get_generator_class(language: Union[str, OutputTarget]) -> Type[CodeGenerator]:
    """Get the generator class for a language name, alias or target."""
    return _GENERATORS[resolve_target(language)]


def get_generator(
    language: Union[str, OutputTarget] = OutputTarget.DART,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    **overrides: Any,
) -> CodeGenerator:
    """
    Create a generator instance for a language.

    Args:
        language: Language name, alias or target
        config: Configuration as GeneratorConfig, dict, or JSON file path
        **overrides: Individual settings applied on top of ``config``

    Returns:
        Configured generator instance

    Raises:
        RegistryError: If the language is not supported
        ConfigError: If the configuration is invalid
    """
    target = resolve_target(language)
    generator_class = _GENERATORS[target]
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if isinstance(config, GeneratorConfig):
        final_config = replace(config, **overrides) if overrides else config
    elif isinstance(config, (str, Path)):
        final_config = load_config(
            target.value, custom_config=overrides, config_file=config
        )
    elif isinstance(config, dict):
        final_config = load_config(target.value, custom_config={**config, **overrides})
    elif config is None:
        final_config = load_config(target.value, custom_config=overrides)
    else:
        raise RegistryError(f"Invalid config type: {type(config)}")

    return generator_class(final_config)


def list_supported_languages() -> List[str]:
    """List all supported language names."""
    return sorted(target.value for target in OutputTarget)


def is_language_supported(language: str) -> bool:
    """Check if a language name or alias is supported."""
    language_key = language.lower()
    return language_key in _ALIASES or language_key in list_supported_languages()


def get_aliases_for_language(language: Union[str, OutputTarget]) -> List[str]:
    target = resolve_target(language)
    return sorted(alias for alias, aliased in _ALIASES.items() if aliased is target)


def get_language_info(language: Union[str, OutputTarget]) -> Dict[str, Any]:
    """
    Get information about a supported language.

    Raises:
        RegistryError: If language not found
    """
    generator = get_generator(language)
    generator_class = type(generator)

    return {
        "name": generator.language_name,
        "class": generator_class.__name__,
        "file_extension": generator.file_extension,
        "aliases": get_aliases_for_language(language),
        "module": generator_class.__module__,
    }


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {language: get_language_info(language) for language in list_supported_languages()}
