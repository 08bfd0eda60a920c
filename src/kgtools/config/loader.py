from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def load_yaml(path: str) -> Dict[str, Any]:
    resolved = Path(path).resolve()
    with resolved.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {resolved}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {resolved}, got {type(data).__name__}")
    logger.debug("YAML loaded | path=%s", resolved)
    return data


def save_yaml(path: str, data: Dict[str, Any]) -> None:
    resolved = Path(path).resolve()
    with resolved.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(data, fp, sort_keys=False)
    logger.debug("YAML saved | path=%s", resolved)
