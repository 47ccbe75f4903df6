# src/promptgen/core/prompt_builder.py
from loguru import logger

from promptgen.core.models import PromptConfig

HTTP_VERBS = ("Get", "Post", "Put", "Delete", "Patch", "Head")


def normalize_http_verb(value: str) -> str:
    """Canonicalizes an HTTP verb: 'POST' -> 'Post', '' -> 'Get', 'foo' -> 'Foo'."""
    verb = (value or "").strip()
    if not verb:
        return "Get"
    for known in HTTP_VERBS:
        if verb.lower() == known.lower():
            return known
    return verb[0].upper() + verb[1:].lower()


def build_prompt(config: PromptConfig, template: str) -> str:
    """Replaces the placeholder tokens of the flattened template with config values."""
    replacements = (
        ("{nomeController}", config.nome_controller),
        ("{nomeEndpoint}", config.nome_endpoint),
        ("{tipoEndpoint}", normalize_http_verb(config.tipo_endpoint)),
        ("{nomeMetodo}", config.nome_metodo),
        ("{colunas}", config.colunas),
    )

    prompt = template
    for token, value in replacements:
        if token in prompt:
            logger.debug(f"Replacing {prompt.count(token)} occurrence(s) of {token}")
        prompt = prompt.replace(token, value)
    return prompt
