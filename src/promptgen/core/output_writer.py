# src/promptgen/core/output_writer.py
from pathlib import Path

from loguru import logger

from promptgen.core.models import PromptConfig


def output_path_for(config: PromptConfig) -> Path:
    return Path(config.pasta_destino) / f"{config.nome_endpoint}_Prompt.txt"


def write_prompt(config: PromptConfig, prompt: str) -> Path:
    """
    Writes the prompt to '{pastaDestino}/{nomeEndpoint}_Prompt.txt'.

    The folder is created when missing and an existing file is overwritten.
    The text is stored as UTF-8 without BOM and without newline translation.
    """
    output_file = output_path_for(config)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8", newline="") as f:
        f.write(prompt)

    logger.info(f"Prompt written to {output_file} ({len(prompt)} chars)")
    return output_file
