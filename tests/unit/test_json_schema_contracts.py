"""
Tests for JSON Schema Contract Validators

Комплексное тестирование валидатора сериализованного множества:
- Валидность самой схемы
- Валидация правильных данных
- Детекция дубликатов и нарушений типов
- Интеграция с Pydantic моделями (model_dump → контракт)
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from setkit.contracts import (
    SET_PAYLOAD_SCHEMA,
    SetPayloadValidator,
    build_schema,
    load_set_payload,
    validate_set_payload,
)
from setkit.core import Set


# =============================================================================
# SCHEMA TESTS
# =============================================================================


class TestSchema:
    """Тесты самой схемы"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        Draft202012Validator.check_schema(SET_PAYLOAD_SCHEMA)

    def test_schema_requires_unique_array(self) -> None:
        assert SET_PAYLOAD_SCHEMA["type"] == "array"
        assert SET_PAYLOAD_SCHEMA["uniqueItems"] is True

    def test_build_schema_does_not_modify_base(self) -> None:
        schema = build_schema({"type": "integer"})
        assert schema["items"] == {"type": "integer"}
        assert "items" not in SET_PAYLOAD_SCHEMA

    def test_build_schema_invalid_items_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid set payload schema"):
            build_schema({"type": "no-such-type"})


# =============================================================================
# VALIDATOR TESTS
# =============================================================================


class TestSetPayloadValidator:
    """Тесты SetPayloadValidator"""

    @pytest.fixture
    def int_validator(self) -> SetPayloadValidator:
        return SetPayloadValidator({"type": "integer"})

    def test_valid_payloads(self, int_validator: SetPayloadValidator) -> None:
        int_validator.validate([1, 2, 3])
        int_validator.validate([])
        assert int_validator.is_valid([5])

    def test_duplicates_rejected(self, int_validator: SetPayloadValidator) -> None:
        with pytest.raises(ValidationError, match="non-unique"):
            int_validator.validate([1, 2, 2])

    def test_wrong_item_type_rejected(self, int_validator: SetPayloadValidator) -> None:
        assert not int_validator.is_valid([1, "two"])

    def test_not_array_rejected(self, int_validator: SetPayloadValidator) -> None:
        with pytest.raises(ValidationError):
            int_validator.validate({"a": 1})

    def test_iter_errors_collects_all(self, int_validator: SetPayloadValidator) -> None:
        errors = list(int_validator.iter_errors(["x", "x"]))
        # uniqueItems + два нарушения items
        assert len(errors) == 3

    def test_untyped_validator_accepts_mixed_items(self) -> None:
        assert SetPayloadValidator().is_valid([1, "a", 2.5])


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


class TestConvenienceFunctions:
    """Тесты validate_set_payload / load_set_payload"""

    def test_validate_set_payload(self) -> None:
        validate_set_payload(["a", "b"])
        with pytest.raises(ValidationError):
            validate_set_payload(["a", "a"])

    def test_load_set_payload(self) -> None:
        loaded = load_set_payload(json.loads("[3, 1, 2]"), {"type": "integer"})
        assert isinstance(loaded, Set)
        assert loaded.equals(Set([1, 2, 3]))

    def test_load_rejects_duplicates(self) -> None:
        """Строгий контракт: дубликаты не сливаются молча"""
        with pytest.raises(ValidationError):
            load_set_payload([1, 1])

    def test_load_unhashable_items_raises(self) -> None:
        with pytest.raises(TypeError):
            load_set_payload([[1], [2]])


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class Labels(BaseModel):
    labels: Set[str]


class TestPydanticIntegration:
    """Сериализованное поле модели соответствует контракту"""

    def test_model_dump_satisfies_contract(self) -> None:
        model = Labels(labels=["x", "y", "x"])
        payload = json.loads(model.model_dump_json())["labels"]
        validate_set_payload(payload, {"type": "string"})

    def test_model_field_schema_validates_payloads(self) -> None:
        field_schema = Labels.model_json_schema()["properties"]["labels"]
        validator = Draft202012Validator(field_schema)

        assert validator.is_valid(["a", "b"])
        assert not validator.is_valid(["a", "a"])
