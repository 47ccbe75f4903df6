# src/promptgen/settings.py
import os
import sys
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger
import pydantic
from pydantic import BaseModel, Field

from promptgen.core.errors import NotFoundError, ParseError

# Three levels above the entry module (src/promptgen/main.py) is the project root,
# which holds the 'Template' folder.
PROJ_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_TEMPLATE_DIR = PROJ_ROOT / "Template"
DEFAULT_SETTINGS_FILE = PROJ_ROOT / "config.yaml"
DEFAULT_CONFIG_PATH = "../../../prompt-config.json"
SETTINGS_ENV_VAR = "PROMPTGEN_SETTINGS"


class LoggingSettings(BaseModel):
    level: str = "INFO"


class TemplateSettings(BaseModel):
    directory: Path = DEFAULT_TEMPLATE_DIR
    extension: str = ".json"


class AppSettings(BaseModel):
    """Application-level settings, independent of the per-run prompt configuration."""
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    templates: TemplateSettings = Field(default_factory=TemplateSettings)


def load_settings(settings_path: Optional[Path] = None) -> AppSettings:
    """
    Loads the YAML settings file.

    The path comes from the argument, then the PROMPTGEN_SETTINGS environment
    variable, then config.yaml in the project root. Only an explicitly
    requested file has to exist; otherwise defaults are used.
    """
    explicit = settings_path is not None or bool(os.environ.get(SETTINGS_ENV_VAR))
    if settings_path is None:
        settings_path = Path(os.environ.get(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_FILE)

    if not settings_path.is_file():
        if explicit:
            raise NotFoundError(f"Settings file not found: {settings_path}")
        return AppSettings()

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML in settings file '{settings_path}': {e}", settings_path) from e

    if not isinstance(data, dict):
        raise ParseError(f"Settings file '{settings_path}' must be a mapping.", settings_path)

    try:
        settings = AppSettings(**data)
    except pydantic.ValidationError as e:
        raise ParseError(f"Failed to validate settings '{settings_path}'. Error: {e}", settings_path) from e

    directory = settings.templates.directory
    if not directory.is_absolute():
        settings.templates.directory = (settings_path.parent / directory).resolve()
    return settings


def setup_logging(settings: AppSettings):
    """Configures the logging level based on the settings file."""
    log_level = settings.logging.level.upper()

    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=log_level)
    logger.debug(f"Logging initialized with level: {log_level}")
