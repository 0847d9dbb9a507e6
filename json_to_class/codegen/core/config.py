"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import NamingRule


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    language: str = "dart"

    # Model settings
    root_name: str = "Untitled"
    naming_rule: NamingRule = NamingRule.NONE

    # Output settings
    output_file: Optional[str] = None
    indent_size: int = 4

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.naming_rule, NamingRule):
            try:
                self.naming_rule = NamingRule(self.naming_rule)
            except ValueError:
                valid = ", ".join(rule.value for rule in NamingRule)
                raise ConfigError(
                    f"Invalid naming_rule: {self.naming_rule!r} (expected one of {valid})"
                )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["dart"] = {
            "language": "dart",
            "root_name": "Untitled",
            "naming_rule": "none",
            "indent_size": 4,
            "custom": {
                "annotation_import": "package:json_annotation/json_annotation.dart",
            },
        }

    def get_config(
        self,
        language: str = "dart",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = dict(self._configs.get(language, {"language": language}))
        base_config["custom"] = dict(base_config.get("custom", {}))

        if config_file:
            base_config = self._merge(base_config, self._load_config_file(config_file))

        if custom_config:
            base_config = self._merge(base_config, custom_config)

        config = self._dict_to_config(base_config)

        problems = self.validate_config(config)
        if problems:
            raise ConfigError("; ".join(problems))
        return config

    @staticmethod
    def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                merged["custom"] = {**merged.get("custom", {}), **value}
            else:
                merged[key] = value
        return merged

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation problems
        """
        problems = []

        if not isinstance(config.root_name, str):
            problems.append("root_name must be a string")

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            problems.append(f"Invalid indent_size: {config.indent_size}")

        if not isinstance(config.custom, dict):
            problems.append("custom must be a JSON object")

        return problems


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "dart",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
