"""Configuration schema module.

The schema stays small; unknown keys are rejected so typos in a config file
surface as errors instead of being silently ignored.
"""

import logging
from typing import Union

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoggingConfig(BaseModel):
    """Logging preferences.

    Attributes:
        level: Name of the level applied to the ``bindgen`` logger.
    """

    level: str = "WARNING"

    model_config = {"extra": "forbid"}

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Union[str, int]) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            value = logging.getLevelName(value)
        level = str(value).upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


class BindgenConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        class_suffix: Suffix of generated binding class names.
        module_package: Package generated classes live under.
        output_dir: Directory generated sources are written to.
        logging: Logging preferences.
    """

    class_suffix: str = "Binding"
    module_package: str = ""
    output_dir: str = "generated"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}
