#!/usr/bin/env python3

"""
Configuration management for the Rosalind toolkit.

Centralized configuration with support for file-based configuration
and environment variable overrides.
"""

import os
import json
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

import yaml

from .exceptions import ConfigurationError

LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR')


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


def _is_yaml(path: str) -> bool:
    return path.lower().endswith('.yaml') or path.lower().endswith('.yml')


@dataclass
class RosalindConfig:
    """Centralized configuration for the toolkit."""

    # Logging
    log_level: str = 'WARNING'
    show_timestamps: bool = False
    report_diagnostics: bool = True

    # Performance monitoring
    enable_performance_monitoring: bool = False
    memory_limit_mb: int = 1024

    @classmethod
    def from_file(cls, config_path: str) -> 'RosalindConfig':
        """Load configuration from file (JSON or YAML)."""
        return cls.from_dict(read_config_file(config_path))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RosalindConfig':
        """Create configuration from dictionary."""
        # Filter out unknown keys
        known_keys = set(cls.__dataclass_fields__.keys())
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_keys}

        try:
            return cls(**filtered_dict)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration parameters: {e}")

    @classmethod
    def from_env(cls) -> 'RosalindConfig':
        """Load configuration from environment variables."""
        config = cls()

        env_mappings = {
            'ROSALIND_LOG_LEVEL': ('log_level', str.upper),
            'ROSALIND_SHOW_TIMESTAMPS': ('show_timestamps', _parse_bool),
            'ROSALIND_REPORT_DIAGNOSTICS': ('report_diagnostics', _parse_bool),
            'ROSALIND_PERFORMANCE_MONITORING': ('enable_performance_monitoring', _parse_bool),
            'ROSALIND_MEMORY_LIMIT_MB': ('memory_limit_mb', int),
        }

        for env_var, (field_name, converter) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                try:
                    setattr(config, field_name, converter(env_value))
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(f"Invalid environment variable {env_var}: {e}")

        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to file."""
        config_dict = self.to_dict()

        try:
            with open(config_path, 'w') as f:
                if _is_yaml(config_path):
                    yaml.safe_dump(config_dict, f, default_flow_style=False)
                else:
                    json.dump(config_dict, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

        if self.memory_limit_mb < 16:
            raise ConfigurationError("memory_limit_mb must be >= 16")

    def __post_init__(self):
        """Normalize and validate configuration after initialization."""
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
        self.validate()


def read_config_file(config_path: str) -> Dict[str, Any]:
    """Read a JSON or YAML configuration file into a dictionary."""
    if not os.path.exists(config_path):
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            if _is_yaml(config_path):
                config_data = yaml.safe_load(f)
            else:
                config_data = json.load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML configuration file format: {e}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid configuration file format: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {e}")

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")
    return config_data


def load_config(config_path: Optional[str] = None,
                use_env: bool = True) -> RosalindConfig:
    """
    Load configuration with priority: file > environment > defaults.

    Args:
        config_path: Path to configuration file (optional)
        use_env: Whether to load environment variables

    Returns:
        RosalindConfig: Loaded configuration
    """
    config = RosalindConfig.from_env() if use_env else RosalindConfig()

    if config_path:
        merged = config.to_dict()
        merged.update(read_config_file(config_path))
        config = RosalindConfig.from_dict(merged)

    return config
