"""Configuration for bindgen."""

from bindgen.config.loader import load_config
from bindgen.config.schema import BindgenConfig, LoggingConfig

__all__ = ["BindgenConfig", "LoggingConfig", "load_config"]
