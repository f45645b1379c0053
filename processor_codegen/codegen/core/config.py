"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .naming import sanitize_identifier, InvalidIdentifierError


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""

    # Output settings
    output_root: str = "generated"
    base_package: str = ""
    dto_subpackage: str = "dto"
    file_extension: str = ".java"
    encoding: str = "utf-8"

    # Code style settings
    add_comments: bool = True

    # Expansion guard for deeply nested request bodies
    max_depth: int = 32

    # Capability contract definition file; None uses the built-in contract
    contract_file: Optional[str] = None

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "file_extension": ".java",
            "dto_subpackage": "dto",
            "add_comments": True,
        }

    def get_config(
        self,
        language: str = "java",
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
        # Start with defaults
        base_config = dict(self._configs.get(language, {}))

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides, skipping unset CLI values
        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

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

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.max_depth < 1:
            warnings.append(f"Invalid max_depth: {config.max_depth}")

        if not config.file_extension.startswith("."):
            warnings.append(f"file_extension should start with '.': {config.file_extension}")

        if config.base_package:
            for segment in config.base_package.split("."):
                try:
                    if sanitize_identifier(segment) != segment:
                        raise InvalidIdentifierError(segment)
                except InvalidIdentifierError:
                    warnings.append(f"Invalid base_package segment: '{segment}'")

        try:
            if sanitize_identifier(config.dto_subpackage) != config.dto_subpackage:
                raise InvalidIdentifierError(config.dto_subpackage)
        except InvalidIdentifierError:
            warnings.append(f"Invalid dto_subpackage: '{config.dto_subpackage}'")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "java",
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
