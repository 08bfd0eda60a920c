from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kgtools.config.loader import load_yaml

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _to_camel(string: str) -> str:
    parts = string.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class BaseConfigModel(BaseModel):
    """
    Base model for kgtools config sections: camelCase keys, unknown keys rejected.
    """

    model_config: ConfigDict = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )


class LoggingConfig(BaseConfigModel):
    level: LogLevel = "INFO"


class LocatorConfig(BaseConfigModel):
    thread_safe: bool = True
    log_missing: bool = True


class KGToolsConfig(BaseConfigModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    locator: LocatorConfig = Field(default_factory=LocatorConfig)

    def summary(self) -> str:
        return (
            f"log_level={self.logging.level} | "
            f"thread_safe={self.locator.thread_safe} | "
            f"log_missing={self.locator.log_missing}"
        )


def load_config(path: Optional[str] = None) -> KGToolsConfig:
    """
    Load the toolkit config from YAML; defaults are used when no path is given.
    """
    if path is None:
        return KGToolsConfig()
    data = load_yaml(path)
    try:
        config = KGToolsConfig(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config {path}: {exc}") from exc
    logger.info("Loaded KGToolsConfig: %s", config.summary())
    return config
