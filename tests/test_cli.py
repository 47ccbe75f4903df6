"""
End-to-end tests for the promptgen command line.
"""

import json

import pytest
from typer.testing import CliRunner

from promptgen.main import app
from promptgen.settings import SETTINGS_ENV_VAR

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path, settings_file, monkeypatch):
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(settings_file))
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_generates_prompt_end_to_end(workspace, config_file):
    result = runner.invoke(app, [str(config_file)], input="1\n")

    assert result.exit_code == 0, result.output
    output = workspace / "out" / "CreateUser_Prompt.txt"
    assert output.exists()
    text = output.read_text(encoding="utf-8")
    assert "===== Etapa 1 =====" in text
    assert "Post CreateUser: id,name" in text
    assert "Prompt generated successfully" in result.output
    assert "1. a_create.json" in result.output
    assert "Selected file: a_create.json" in result.output


def test_invalid_choices_are_reprompted(workspace, config_file):
    result = runner.invoke(app, [str(config_file)], input="abc\n0\n2\n")

    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid option. Try again.") == 2
    text = (workspace / "out" / "CreateUser_Prompt.txt").read_text(encoding="utf-8")
    assert "Atualizar CreateUser" in text


def test_missing_config_exits_with_error(workspace):
    result = runner.invoke(app, [str(workspace / "missing.json")], input="1\n")

    assert result.exit_code == 1
    assert "Error generating prompt" in result.output
    assert not (workspace / "out").exists()


def test_blank_field_exits_with_error(workspace, write_json, config_data):
    config_data["colunas"] = " "
    result = runner.invoke(app, [str(write_json("bad.json", config_data))], input="1\n")

    assert result.exit_code == 1
    assert "colunas" in result.output
    assert not (workspace / "out").exists()


def test_empty_template_exits_with_error(workspace, config_file, template_dir):
    (template_dir / "0_empty.json").write_text(json.dumps({"steps": []}), encoding="utf-8")
    result = runner.invoke(app, [str(config_file)], input="1\n")

    assert result.exit_code == 1
    assert "EmptyTemplateError" in result.output


def test_end_of_input_exits_with_error(workspace, config_file):
    result = runner.invoke(app, [str(config_file)], input="")

    assert result.exit_code == 1
    assert not (workspace / "out").exists()
