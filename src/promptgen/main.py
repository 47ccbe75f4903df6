# src/promptgen/main.py
"""
promptgen - builds an LLM prompt file from a JSON template and prompt-config.json.
"""
import traceback
from pathlib import Path

import typer
from typing_extensions import Annotated
from loguru import logger

from promptgen.core.config_loader import load_config
from promptgen.core.output_writer import write_prompt
from promptgen.core.prompt_builder import build_prompt
from promptgen.core.template_flattener import build_template_text
from promptgen.core.template_selector import TemplateSelector
from promptgen.settings import DEFAULT_CONFIG_PATH, load_settings, setup_logging

app = typer.Typer(
    name="promptgen",
    help="Generates a prompt file from a template and a prompt configuration.",
    add_completion=False,
)


def generate(config_path: Path, selector: TemplateSelector) -> Path:
    """Runs the whole pipeline and returns the path of the written prompt."""
    config = load_config(config_path)

    # 1) Pick the template file in the 'Template' folder
    template_path = selector.select()

    # 2) Concatenate every step of the template into one text
    template = build_template_text(template_path)

    # 3) Apply the placeholders from the configuration
    prompt = build_prompt(config, template)

    # 4) Save the prompt at the destination
    return write_prompt(config, prompt)


@app.command()
def main(
    config_path: Annotated[Path, typer.Argument(help="Path to the prompt-config.json file.")] = Path(DEFAULT_CONFIG_PATH),
):
    """Select a template, fill in its placeholders and save the prompt."""
    try:
        settings = load_settings()
        setup_logging(settings)

        selector = TemplateSelector(settings.templates.directory, settings.templates.extension)
        output_file = generate(config_path, selector)
    except Exception as e:
        logger.debug(f"Prompt generation aborted: {e!r}")
        typer.echo("❌ Error generating prompt:", err=True)
        typer.echo("".join(traceback.format_exception(type(e), e, e.__traceback__)), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✅ Prompt generated successfully! Saved to: {output_file}")


if __name__ == "__main__":
    app()
