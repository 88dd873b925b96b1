"""
Contract Validation Module

Модуль для валидации JSON представления множеств.
"""

from .validators import (
    SET_PAYLOAD_SCHEMA,
    SetPayloadValidator,
    build_schema,
    load_set_payload,
    validate_set_payload,
)

__all__ = [
    # Schema
    "SET_PAYLOAD_SCHEMA",
    "build_schema",
    # Classes
    "SetPayloadValidator",
    # Functions
    "validate_set_payload",
    "load_set_payload",
]
