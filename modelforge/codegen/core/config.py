"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Package metadata, passed through to support files
    package_name: str = "modelforge-models"
    package_version: str = "0.0.0"
    authors: List[str] = field(default_factory=lambda: ["modelforge"])
    homepage: str = ""
    repository: str = ""
    license: str = "Apache-2.0"
    description: str = "Models generated by modelforge"
    edition: str = "2018"
    package_features: List[str] = field(default_factory=lambda: ["json"])

    # Code style settings
    indent_size: int = 4
    add_comments: bool = True

    # Rendering toggles
    render_initializer: bool = True
    render_defaults: bool = True
    render_supporting_files: bool = True

    # Fan-out for independent models; 1 renders sequentially
    max_workers: int = 1

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["rust"] = {
            "package_name": "modelforge-models",
            "package_version": "0.0.0",
            "license": "Apache-2.0",
            "edition": "2018",
            "package_features": ["json"],
            "render_initializer": True,
            "render_defaults": True,
            "render_supporting_files": True,
        }

    def get_config(
        self,
        language: str = "rust",
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
        base_config = self._configs.get(language, {}).copy()

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

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
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

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

        # Unknown keys land in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig, language: str = "rust") -> list[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings/errors
        """
        warnings = []

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.max_workers < 1:
            warnings.append(f"Invalid max_workers: {config.max_workers}")

        if language == "rust":
            if not re.match(r"^[A-Za-z][A-Za-z0-9_-]*$", config.package_name or ""):
                warnings.append(f"Invalid Cargo package name: {config.package_name}")

            if config.edition not in RUST_EDITIONS:
                warnings.append(f"Invalid Rust edition: {config.edition}")

            unknown = [f for f in config.package_features if f not in RUST_PACKAGE_FEATURES]
            if unknown:
                warnings.append(f"Unknown package features: {unknown}")

        return warnings


RUST_EDITIONS = {"2015", "2018", "2021", "2024"}
RUST_PACKAGE_FEATURES = {"json", "jwt"}

# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "rust",
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
