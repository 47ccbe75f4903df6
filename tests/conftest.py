"""
Shared test fixtures for the prompt generation pipeline.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable

import pytest
from loguru import logger


VALID_CONFIG: Dict[str, str] = {
    "nomeController": "User",
    "tipoEndpoint": "post",
    "nomeEndpoint": "CreateUser",
    "nomeMetodo": "Create",
    "colunas": "id,name",
    "pastaDestino": "./out",
}


@pytest.fixture(autouse=True)
def reset_logger():
    """setup_logging() binds loguru to the current sys.stderr; drop it after each test."""
    yield
    logger.remove()


@pytest.fixture
def config_data() -> Dict[str, str]:
    return dict(VALID_CONFIG)


@pytest.fixture
def write_json(tmp_path: Path):
    """Write any JSON document to tmp_path and return its path."""
    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config_file(write_json, config_data) -> Path:
    return write_json("prompt-config.json", config_data)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A Template folder holding two templates."""
    directory = tmp_path / "Template"
    directory.mkdir()
    (directory / "b_update.json").write_text(
        json.dumps({"steps": [{"titulo": "Atualizar {nomeEndpoint}"}]}), encoding="utf-8"
    )
    (directory / "a_create.json").write_text(
        json.dumps({"steps": [{"body": "{tipoEndpoint} {nomeEndpoint}: {colunas}"}]}), encoding="utf-8"
    )
    (directory / "notes.txt").write_text("not a template", encoding="utf-8")
    return directory


@pytest.fixture
def settings_file(tmp_path: Path, template_dir: Path) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(
        f"logging:\n  level: DEBUG\ntemplates:\n  directory: {template_dir.as_posix()}\n  extension: .json\n",
        encoding="utf-8",
    )
    return path


def scripted(answers: Iterable[str]):
    """Build a prompt function replaying the given answers, recording each prompt shown."""
    remaining = iter(answers)
    prompts = []

    def _prompt(message: str) -> str:
        prompts.append(message)
        return next(remaining)

    _prompt.prompts = prompts
    return _prompt
