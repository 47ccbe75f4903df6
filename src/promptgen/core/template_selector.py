# src/promptgen/core/template_selector.py
from pathlib import Path
from typing import Callable, List

import typer
from loguru import logger

from promptgen.core.errors import NotFoundError

PromptFn = Callable[[str], str]
EchoFn = Callable[[str], None]

CHOICE_PROMPT = "\nEnter the number of the desired option: "


def list_templates(template_dir: Path, extension: str = ".json") -> List[Path]:
    """Returns the template files directly inside template_dir, sorted by file name."""
    if not template_dir.is_dir():
        raise NotFoundError(f"'Template' folder not found at: {template_dir}")

    files = sorted(
        (p for p in template_dir.iterdir() if p.is_file() and p.suffix.lower() == extension.lower()),
        key=lambda p: p.name,
    )
    if not files:
        raise NotFoundError(f"No {extension} file found in the 'Template' folder: {template_dir}")

    logger.debug(f"Found {len(files)} template(s) in {template_dir}")
    return files


def read_choice(count: int, prompt_fn: PromptFn = input, echo: EchoFn = typer.echo) -> int:
    """Keeps asking until the operator types an integer between 1 and count."""
    while True:
        answer = prompt_fn(CHOICE_PROMPT)
        try:
            choice = int(answer.strip())
        except ValueError:
            choice = 0
        if 1 <= choice <= count:
            return choice

        logger.warning(f"Invalid template choice: {answer!r}")
        echo(typer.style("Invalid option. Try again.", fg=typer.colors.YELLOW))


class TemplateSelector:
    """
    Lists the templates available in a folder and asks the operator to pick one.
    """
    def __init__(
        self,
        template_dir: Path,
        extension: str = ".json",
        prompt_fn: PromptFn = input,
        echo: EchoFn = typer.echo,
    ):
        self.template_dir = template_dir
        self.extension = extension
        self.prompt_fn = prompt_fn
        self.echo = echo

    def select(self) -> Path:
        files = list_templates(self.template_dir, self.extension)

        self.echo(f"Select the {self.extension} template file to use:")
        for index, path in enumerate(files, start=1):
            self.echo(f"{index}. {path.name}")

        choice = read_choice(len(files), self.prompt_fn, self.echo)
        selected = files[choice - 1]
        self.echo(f"\nSelected file: {selected.name}")
        logger.info(f"Template selected: {selected}")
        return selected
