# src/promptgen/core/config_loader.py
import json
from pathlib import Path
from typing import Union

import pydantic
from loguru import logger

from promptgen.core.errors import NotFoundError, ParseError, ValidationError
from promptgen.core.models import PromptConfig


def load_config(config_path: Union[str, Path]) -> PromptConfig:
    """
    Reads and validates the prompt configuration file.

    Args:
        config_path: Path to a JSON object holding the six substitution fields.

    Returns:
        The validated, immutable PromptConfig.
    """
    path = Path(config_path)
    if not path.is_file():
        raise NotFoundError(f"Configuration file not found: {path}")

    logger.info(f"Loading prompt configuration from: {path}")
    # utf-8-sig tolerates files saved with a byte-order mark
    text = path.read_text(encoding="utf-8-sig")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Could not deserialize configuration JSON '{path}': {e}", path) from e

    if not isinstance(data, dict):
        raise ParseError(f"Configuration '{path}' must be a JSON object.", path)

    try:
        config = PromptConfig.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        raise ValidationError(_field_alias(first["loc"]), first["msg"]) from e

    logger.debug(f"Configuration loaded for endpoint '{config.nome_endpoint}'")
    return config


def _field_alias(loc: tuple) -> str:
    """Maps a pydantic error location back to the JSON field name."""
    if not loc:
        return "<root>"
    name = str(loc[0])
    field = PromptConfig.model_fields.get(name)
    return field.alias if field is not None and field.alias else name
