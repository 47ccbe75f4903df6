# src/promptgen/core/errors.py
from pathlib import Path
from typing import Optional, Union


class PromptGenError(Exception):
    """Base class for every failure raised by the prompt generation pipeline."""
    pass


class NotFoundError(PromptGenError, FileNotFoundError):
    """A required file or directory (config, template folder, template file) is missing."""
    pass


class ParseError(PromptGenError, ValueError):
    """Structured data (config, template or settings) could not be parsed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class ValidationError(PromptGenError, ValueError):
    """A required configuration field is missing or blank."""

    def __init__(self, field: str, message: str):
        super().__init__(f"Invalid configuration: {field}: {message}")
        self.field = field


class EmptyTemplateError(PromptGenError, ValueError):
    """The template has no 'steps' array, or the array is empty."""
    pass
