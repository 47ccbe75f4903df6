# src/promptgen/core/models.py
from typing import List, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# JSON-native values a template field may hold.
FieldValue = Union[str, bool, int, float, None, Dict[str, Any], List[Any]]


class PromptConfig(BaseModel):
    """Substitution values read from prompt-config.json."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, validate_default=True)

    nome_controller: str = Field(default="", alias="nomeController")
    tipo_endpoint: str = Field(default="", alias="tipoEndpoint")
    nome_endpoint: str = Field(default="", alias="nomeEndpoint")
    nome_metodo: str = Field(default="", alias="nomeMetodo")
    colunas: str = Field(default="", alias="colunas")
    pasta_destino: str = Field(default="", alias="pastaDestino")

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitive(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {field.alias.lower(): field.alias for field in cls.model_fields.values()}
        return {aliases.get(str(key).lower(), key): value for key, value in data.items()}

    @field_validator("*", mode="before")
    @classmethod
    def _require_non_blank(cls, value: Any) -> Any:
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError("must be a string")
        value = value.strip()
        if not value:
            raise ValueError("is empty")
        return value


class StepField(BaseModel):
    """A single named field of a template step."""
    name: str
    value: FieldValue = None


class TemplateStep(BaseModel):
    """An ordered group of fields rendered as one 'Etapa' section."""
    entries: List[StepField] = Field(default_factory=list)

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> "TemplateStep":
        return cls(entries=[StepField(name=key, value=value) for key, value in mapping.items()])


class PromptTemplate(BaseModel):
    """A template made of ordered steps."""
    steps: List[TemplateStep] = Field(default_factory=list)
