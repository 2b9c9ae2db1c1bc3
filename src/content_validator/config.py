"""ValidatorConfig dataclass and loader for validator settings."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".content-validator.json"
OUTPUT_FORMATS = ("text", "json")


@dataclass
class ValidatorConfig:
    fail_fast: bool = True
    output_format: str = "text"
    skip_checks: list[str] = field(default_factory=list)


def load_validator_config(path: Path | None = None) -> ValidatorConfig:
    """Load validator config from .content-validator.json with env var overrides."""
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME

    config = ValidatorConfig()
    if path.exists():
        try:
            text = path.read_text(encoding="utf-8")
            if text.strip():
                raw: object = json.loads(text)
                section = raw.get("validator", {}) if isinstance(raw, dict) else {}
                if isinstance(section, dict):
                    _apply(config, cast("dict[str, object]", section))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load validator config from {path}: {e}")

    if env_val := os.environ.get("CONTENT_VALIDATOR_FAIL_FAST"):
        config.fail_fast = env_val.lower() in ("true", "1", "yes")
    if env_format := os.environ.get("CONTENT_VALIDATOR_FORMAT"):
        if env_format in OUTPUT_FORMATS:
            config.output_format = env_format
        else:
            logger.warning(f"Ignoring unknown CONTENT_VALIDATOR_FORMAT={env_format!r}")
    return config


def _apply(cfg: ValidatorConfig, data: dict[str, object]) -> None:
    if "fail_fast" in data and isinstance(data["fail_fast"], bool):
        cfg.fail_fast = data["fail_fast"]
    if "output_format" in data and data["output_format"] in OUTPUT_FORMATS:
        cfg.output_format = cast(str, data["output_format"])
    if "skip_checks" in data and isinstance(data["skip_checks"], list):
        items = cast("list[object]", data["skip_checks"])
        cfg.skip_checks = [item for item in items if isinstance(item, str)]
