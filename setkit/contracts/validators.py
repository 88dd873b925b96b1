"""
JSON Schema Contract Validators

Модуль для валидации сериализованных множеств согласно JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Сериализованное множество: JSON массив без повторяющихся элементов.
В отличие от Set(...) и pydantic-валидации, которые молча сливают дубликаты,
контракт отвергает payload с дубликатами: это признак ошибки у отправителя.
"""

from typing import Any, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from setkit.core.hashset import Set
from setkit.logger import get_logger

_log = get_logger(__name__)


# =============================================================================
# SCHEMA
# =============================================================================

SET_PAYLOAD_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "setkit/set_payload.json",
    "title": "Set payload",
    "description": "Serialized set: array of unique elements, order is not significant",
    "type": "array",
    "uniqueItems": True,
}


def build_schema(items: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Схема payload с ограничением на тип элементов.

    Args:
        items: JSON Schema для элементов (например, {"type": "integer"})

    Returns:
        Новая схема (SET_PAYLOAD_SCHEMA не изменяется)

    Raises:
        ValueError: Если итоговая схема невалидна
    """
    schema = dict(SET_PAYLOAD_SCHEMA)
    if items is not None:
        schema["items"] = items

    # Валидируем саму схему (meta-validation)
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid set payload schema: {e.message}")

    return schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class SetPayloadValidator:
    """
    Валидатор сериализованного множества.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, items: dict[str, Any] | None = None):
        """
        Инициализация валидатора.

        Args:
            items: Необязательная JSON Schema для элементов
        """
        self.schema = build_schema(items)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            _log.debug("Set payload rejected: %s", e.message)
            raise

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_set_payload(data: Any, items: dict[str, Any] | None = None) -> None:
    """
    Валидация сериализованного множества.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SetPayloadValidator(items).validate(data)


def load_set_payload(data: Any, items: dict[str, Any] | None = None) -> Set[Any]:
    """
    Строгая загрузка множества из JSON payload.

    Args:
        data: Декодированный JSON (ожидается list)
        items: Необязательная JSON Schema для элементов

    Returns:
        Set из элементов payload

    Raises:
        ValidationError: Если payload не массив, содержит дубликаты
            или элементы не соответствуют items
        TypeError: Если элементы не hashable (например, вложенные массивы)
    """
    validate_set_payload(data, items)
    return Set(data)
