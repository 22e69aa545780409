"""Configuration loader module.

Configuration is assembled from a YAML file and environment variables, in
that order of precedence (environment wins), and validated into a
`BindgenConfig`.
"""

import logging
import os
import re
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError

from bindgen.config.schema import BindgenConfig
from bindgen.errors import ConfigError

logger = logging.getLogger(__name__)

_ENV_REF = re.compile(r"\$\{([^}]+)\}")


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _expand(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _expand(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand(item) for item in value]
    if isinstance(value, str):
        return _ENV_REF.sub(lambda match: os.environ.get(match.group(1), ""), value)
    return value


def resolve_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Replace ${VAR} patterns with environment variables.

    Unset variables expand to an empty string.
    """
    return _expand(config)


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from a YAML file.

    Returns:
        Dictionary read from the file; empty when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data


def _normalize_env_key(env_key: str) -> Optional[List[str]]:
    """Map an environment key without prefix to a configuration path.

    ``CLASS_SUFFIX`` -> ``["class_suffix"]``,
    ``LOGGING_LEVEL`` -> ``["logging", "level"]``. Keys that name no
    configuration field map to None.
    """
    key = env_key.lower()
    fields = BindgenConfig.model_fields
    if key in fields:
        return [key]
    section, _, rest = key.partition("_")
    if not rest or section not in fields:
        return None
    section_type = fields[section].annotation
    if isinstance(section_type, type) and issubclass(section_type, BaseModel):
        if rest in section_type.model_fields:
            return [section, rest]
    return None


def load_from_env(prefix: str = "BINDGEN") -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    ``<PREFIX>_CONFIG`` names the config file and is not treated as a value.
    Variables that name no configuration field are ignored. Values are kept
    as strings; the schema validates them.
    """
    result: Dict[str, Any] = {}
    prefix_upper = f"{prefix.upper()}_"

    for key, value in os.environ.items():
        if not key.startswith(prefix_upper):
            continue
        env_key = key[len(prefix_upper):]
        if not env_key or env_key == "CONFIG":
            continue

        path = _normalize_env_key(env_key)
        if path is None:
            logger.debug("Ignoring %s: not a configuration key", key)
            continue
        current = result
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = value

    return result


def load_config(file_path: Optional[str] = None, env_prefix: str = "BINDGEN") -> BindgenConfig:
    """Load a `BindgenConfig` from file and environment.

    Args:
        file_path: Path to the YAML file. Defaults to ``<PREFIX>_CONFIG`` or
            ``bindgen.yaml``.
        env_prefix: Prefix for environment variables

    Returns:
        Validated BindgenConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix.upper()}_CONFIG", "bindgen.yaml")

    config_data: Dict[str, Any] = {}
    if os.path.exists(path):
        logger.debug("Loading configuration from %s", path)
        config_data = merge_dicts(config_data, load_yaml_file(path))

    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    config_data = resolve_env_vars(config_data)

    try:
        return BindgenConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


__all__ = [
    "load_config",
    "load_from_env",
    "load_yaml_file",
    "merge_dicts",
    "resolve_env_vars",
]
