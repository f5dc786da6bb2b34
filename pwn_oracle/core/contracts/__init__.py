"""
Contract Validation Module

Модуль для валидации JSON документов деплоя (конфигурация движка,
статический feed registry).
"""

from .validators import (
    SCHEMA_NAMES,
    get_validator,
    validate_feed_registry,
    validate_oracle_config,
)

__all__ = [
    "SCHEMA_NAMES",
    "get_validator",
    "validate_oracle_config",
    "validate_feed_registry",
]
