# src/question_kit/intake/config_loader.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

from .config import IntakeConfig

logger = logging.getLogger(__name__)


class _IntakeConfigFile(BaseModel):
    min_text_chars: int = 20
    max_text_chars: int = 500_000
    fallback_to_whole_text: bool = True

    class Config:
        extra = "forbid"


def load_intake_config(path: str | Path) -> IntakeConfig:
    """Load an IntakeConfig from a YAML file.

    Missing keys keep their defaults, unknown keys are rejected.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping or values are out of range.
        pydantic.ValidationError: If keys are unknown or values have the wrong type.
    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.error("Intake config not found: %s", file_path)
        raise FileNotFoundError(f"Intake config '{file_path}' not found")

    with open(file_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Intake config '{file_path}' must be a mapping")

    parsed = _IntakeConfigFile(**data)
    config = IntakeConfig(
        min_text_chars=parsed.min_text_chars,
        max_text_chars=parsed.max_text_chars,
        fallback_to_whole_text=parsed.fallback_to_whole_text,
    )
    logger.info("Loaded intake config from %s: %s", file_path, config)
    return config
