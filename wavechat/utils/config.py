"""
Configuration utilities for WaveChat.

This module provides functions for loading and accessing configuration from YAML files.
"""

import os
import re
import yaml
from typing import Dict, Any, Optional

from wavechat.core.exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_PATH_ENV_VAR = "WAVECHAT_CONFIG_PATH"


# ${VAR} or $VAR
ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)\}|\$(\w+)")


def _substitute_env_var(match: "re.Match") -> str:
    name = match.group(1) or match.group(2)
    # Unknown variables are left as written
    return os.environ.get(name, match.group(0))


def _process_env_vars(value: Any) -> Any:
    """
    Substitute environment variables into every string of a loaded config tree.

    Args:
        value: A scalar, list or mapping from the parsed YAML

    Returns:
        The same structure with $VAR and ${VAR} references expanded
    """
    if isinstance(value, dict):
        return {key: _process_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_process_env_vars(item) for item in value]
    if isinstance(value, str):
        return ENV_VAR_PATTERN.sub(_substitute_env_var, value)
    return value


def resolve_config_path(config_path: Optional[str] = None) -> str:
    """Return the explicit path, else $WAVECHAT_CONFIG_PATH, else 'config.yaml'."""
    if config_path is not None:
        return config_path
    return os.environ.get(CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the configuration file. If None, uses the environment
                    variable WAVECHAT_CONFIG_PATH or defaults to 'config.yaml'

    Returns:
        Dict[str, Any]: The loaded configuration with environment variables processed

    Raises:
        ConfigurationError: If the configuration file cannot be loaded
    """
    config_path = resolve_config_path(config_path)

    try:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        # An empty file loads as None
        if config is None:
            config = {}

        if not isinstance(config, dict):
            raise ValueError(f"Invalid configuration format: expected dictionary, got {type(config)}")

        return _process_env_vars(config)

    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file error: {str(e)}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML parsing error: {str(e)}")
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {str(e)}")


def get_component_config(component_name: str, config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration for a specific component.

    Args:
        component_name: Dotted path of the component section
                        (e.g., 'database_service', 'storage.audio')
        config_path: Optional path to the configuration file

    Returns:
        Dict[str, Any]: The component's configuration section ({} if absent)

    Raises:
        ConfigurationError: If the configuration cannot be loaded or the component
                           section is not a mapping
    """
    try:
        config = load_config(config_path)

        component_config: Any = config
        for component in component_name.split("."):
            component_config = component_config.get(component, {})
            if component_config is None:
                component_config = {}
            if not isinstance(component_config, dict):
                raise ValueError(
                    f"Invalid configuration for component '{component_name}': "
                    f"expected dictionary, got {type(component_config)}"
                )

        return component_config

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to get configuration for component '{component_name}': {str(e)}")
