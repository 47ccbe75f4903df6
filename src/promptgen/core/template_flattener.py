# src/promptgen/core/template_flattener.py
import json
import os
from pathlib import Path
from typing import Any, List, Union

from loguru import logger

from promptgen.core.errors import EmptyTemplateError, ParseError
from promptgen.core.models import FieldValue, PromptTemplate, TemplateStep


def render_value(value: FieldValue) -> str:
    """Converts a step field value to the text placed in the prompt."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def parse_template(template_path: Union[str, Path]) -> PromptTemplate:
    """Reads a template file and returns its ordered steps."""
    path = Path(template_path)
    text = path.read_text(encoding="utf-8-sig")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in '{path}': {e}", path) from e

    if not isinstance(data, dict):
        raise ParseError(f"Template '{path}' must be a JSON object with a 'steps' array.", path)

    raw_steps = _get_case_insensitive(data, "steps")
    if not raw_steps:
        raise EmptyTemplateError(f"The JSON '{path}' does not contain a 'steps' array with content.")
    if not isinstance(raw_steps, list):
        raise ParseError(f"'steps' in '{path}' must be an array.", path)

    steps = []
    for index, raw_step in enumerate(raw_steps, start=1):
        if not isinstance(raw_step, dict):
            raise ParseError(f"Step {index} in '{path}' must be a JSON object.", path)
        steps.append(TemplateStep.from_mapping(raw_step))

    logger.debug(f"Parsed {len(steps)} step(s) from {path.name}")
    return PromptTemplate(steps=steps)


def flatten_template(template: PromptTemplate) -> str:
    """
    Concatenates every step into a single block of text.

    Each step gets an '===== Etapa N =====' header; each non-blank field is
    emitted as '# name', its trimmed value and a blank line. Steps are
    separated by an extra blank line.
    """
    lines: List[str] = []
    for number, step in enumerate(template.steps, start=1):
        lines.append(f"===== Etapa {number} =====")
        for field in step.entries:
            text = render_value(field.value)
            if text.strip():
                lines.append(f"# {field.name}")
                lines.append(text.strip())
                lines.append("")
        lines.append("")

    return os.linesep.join(lines)


def build_template_text(template_path: Union[str, Path]) -> str:
    """Parses and flattens the template at template_path."""
    return flatten_template(parse_template(template_path))


def _get_case_insensitive(data: dict, key: str) -> Any:
    if key in data:
        return data[key]
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == key:
            return value
    return None
