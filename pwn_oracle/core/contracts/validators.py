"""
JSON Schema контракты документов деплоя (jsonschema, Draft 2020-12)

Схемы поставляются внутри пакета (schema/*.json):
- oracle_config: константы движка
- feed_registry: статическое отображение (base, quote) -> feed

Каждая схема проходит meta-validation при первой загрузке; validator
кэшируется на имя схемы.
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict

from jsonschema import Draft202012Validator

SCHEMA_NAMES = ("oracle_config", "feed_registry")


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """
    Validator для схемы из пакета.

    Raises:
        ValueError: Неизвестное имя схемы
        jsonschema.SchemaError: Схема не проходит meta-validation
    """
    if schema_name not in SCHEMA_NAMES:
        raise ValueError(f"Unknown schema: {schema_name!r}, expected one of {SCHEMA_NAMES}")

    resource = files(__package__) / "schema" / f"{schema_name}.json"
    schema = json.loads(resource.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_oracle_config(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    get_validator("oracle_config").validate(data)


def validate_feed_registry(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    get_validator("feed_registry").validate(data)
