"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from lrjs_deadline.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Nested YAML section -> {yaml key: Config field}
    SECTION_MAPPINGS = {
        "calendar": {
            "default_comunidad": "default_comunidad",
            "static_enabled": "static_calendar_enabled",
            "language": "holiday_language",
            "max_search_days": "max_search_days",
        },
        "discovery": {
            "enabled": "discovery_enabled",
            "endpoint": "ollama_endpoint",
            "model": "ollama_model",
            "timeout": "ollama_timeout",
            "max_retries": "ollama_max_retries",
        },
        "output": {
            "format": "output_format",
        },
        "logging": {
            "level": "log_level",
        },
        "api": {
            "host": "api_host",
            "port": "api_port",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file {config_path} not found, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                return self._flatten_config(config) if config else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}
        for section, mapping in self.SECTION_MAPPINGS.items():
            values = config.get(section) or {}
            for yaml_key, field in mapping.items():
                if yaml_key in values and values[yaml_key] is not None:
                    result[field] = values[yaml_key]
        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - LRJS_DEFAULT_COMUNIDAD -> default_comunidad
        - LRJS_STATIC_CALENDAR_ENABLED -> static_calendar_enabled
        - LRJS_HOLIDAY_LANGUAGE -> holiday_language
        - LRJS_MAX_SEARCH_DAYS -> max_search_days
        - LRJS_DISCOVERY_ENABLED -> discovery_enabled
        - LRJS_OLLAMA_ENDPOINT -> ollama_endpoint
        - LRJS_OLLAMA_MODEL -> ollama_model
        - LRJS_OLLAMA_TIMEOUT -> ollama_timeout
        - LRJS_OLLAMA_MAX_RETRIES -> ollama_max_retries
        - LRJS_OUTPUT_FORMAT -> output_format
        - LRJS_LOG_LEVEL -> log_level
        - LRJS_API_HOST -> api_host
        - LRJS_API_PORT -> api_port

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "LRJS_DEFAULT_COMUNIDAD": "default_comunidad",
            "LRJS_STATIC_CALENDAR_ENABLED": ("static_calendar_enabled", self._parse_bool),
            "LRJS_HOLIDAY_LANGUAGE": "holiday_language",
            "LRJS_MAX_SEARCH_DAYS": ("max_search_days", int),
            "LRJS_DISCOVERY_ENABLED": ("discovery_enabled", self._parse_bool),
            "LRJS_OLLAMA_ENDPOINT": "ollama_endpoint",
            "LRJS_OLLAMA_MODEL": "ollama_model",
            "LRJS_OLLAMA_TIMEOUT": ("ollama_timeout", int),
            "LRJS_OLLAMA_MAX_RETRIES": ("ollama_max_retries", int),
            "LRJS_OUTPUT_FORMAT": "output_format",
            "LRJS_LOG_LEVEL": "log_level",
            "LRJS_API_HOST": "api_host",
            "LRJS_API_PORT": ("api_port", int),
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
            else:
                config_dict[mapping] = env_value

        return config_dict

    def _parse_bool(self, value: str) -> bool:
        """Parse a boolean from string."""
        return value.lower() in ("true", "1", "yes", "on")

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path
        values = config.model_dump(mode="json")

        config_dict = {
            section: {yaml_key: values[field] for yaml_key, field in mapping.items()}
            for section, mapping in self.SECTION_MAPPINGS.items()
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
