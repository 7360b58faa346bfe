"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самой схемы
- Валидация правильных описаний конверсии
- Детекция нарушений required полей
- Детекция нарушений типов и enum
- Условные требования (constant -> base, computed -> function)
- Интеграция с Pydantic моделями
"""

import pytest
from jsonschema import ValidationError

from radixconv.core.contracts import (
    ConversionConfigValidator,
    NumeralSystemValidator,
    SchemaLoader,
    validate_conversion_config,
    validate_numeral_system,
)
from radixconv.core.domain import ConversionDescription, RadixKind, SystemDescription


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_config():
    """Валидное описание конверсии hex -> factorial."""
    return {
        "source": {
            "kind": "constant",
            "base": 16,
            "alphabet": [[i, s] for i, s in enumerate("0123456789ABCDEF")],
        },
        "target": {
            "kind": "computed",
            "function": "factorial",
            "max_position": 1000,
        },
        "number": "FF",
    }


@pytest.fixture
def valid_negative_system():
    """Валидное описание системы с основанием -2."""
    return {"kind": "constant", "base": -2}


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_conversion_config():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()
    schema = loader.load_schema("conversion_config")

    assert schema["required"] == ["source", "target"]
    assert "numeral_system" in schema["$defs"]


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("conversion_config")
    schema2 = loader.load_schema("conversion_config")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_definition():
    loader = SchemaLoader()

    with pytest.raises(KeyError):
        loader.load_definition("conversion_config", "no_such_definition")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Схема, не проходящая meta-валидацию, отклоняется."""
    (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - CONVERSION CONFIG VALIDATION
# =============================================================================


def test_conversion_config_validator_accepts_valid_data(valid_config):
    """Валидация правильного описания."""
    validator = ConversionConfigValidator()
    validator.validate(valid_config)  # Не должно выбросить исключение
    assert validator.is_valid(valid_config)


def test_conversion_config_validate_function(valid_config):
    validate_conversion_config(valid_config)


def test_conversion_config_number_optional(valid_config):
    data = valid_config.copy()
    del data["number"]
    validate_conversion_config(data)


def test_conversion_config_rejects_missing_target(valid_config):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_config.copy()
    del data["target"]

    with pytest.raises(ValidationError) as exc_info:
        validate_conversion_config(data)
    assert "'target' is a required property" in str(exc_info.value)


def test_conversion_config_rejects_unknown_field(valid_config):
    data = valid_config.copy()
    data["precision"] = 3

    with pytest.raises(ValidationError):
        validate_conversion_config(data)


def test_conversion_config_rejects_numeric_number(valid_config):
    """Число передаётся строкой, а не JSON-числом."""
    data = valid_config.copy()
    data["number"] = 255

    with pytest.raises(ValidationError) as exc_info:
        validate_conversion_config(data)
    assert "is not of type" in str(exc_info.value)


# =============================================================================
# TESTS - NUMERAL SYSTEM VALIDATION
# =============================================================================


def test_numeral_system_accepts_negative_base(valid_negative_system):
    validate_numeral_system(valid_negative_system)


def test_numeral_system_rejects_invalid_kind():
    with pytest.raises(ValidationError):
        validate_numeral_system({"kind": "irrational", "base": 10})


def test_numeral_system_constant_requires_base():
    """kind=constant без base отклоняется."""
    with pytest.raises(ValidationError) as exc_info:
        validate_numeral_system({"kind": "constant"})
    assert "'base' is a required property" in str(exc_info.value)


def test_numeral_system_constant_rejects_null_base():
    with pytest.raises(ValidationError):
        validate_numeral_system({"kind": "constant", "base": None})


def test_numeral_system_computed_requires_function():
    with pytest.raises(ValidationError) as exc_info:
        validate_numeral_system({"kind": "computed", "base": 10})
    assert "'function' is a required property" in str(exc_info.value)


def test_numeral_system_rejects_float_base():
    with pytest.raises(ValidationError):
        validate_numeral_system({"kind": "constant", "base": 2.5})


def test_numeral_system_rejects_malformed_pair():
    """Пара алфавита — ровно [int >= 0, непустая строка]."""
    validator = NumeralSystemValidator()

    assert not validator.is_valid({"kind": "constant", "base": 2, "alphabet": [[0, "a", "b"]]})
    assert not validator.is_valid({"kind": "constant", "base": 2, "alphabet": [[-1, "a"]]})
    assert not validator.is_valid({"kind": "constant", "base": 2, "alphabet": [[0, ""]]})
    assert not validator.is_valid({"kind": "constant", "base": 2, "alphabet": []})


def test_numeral_system_rejects_negative_max_position():
    with pytest.raises(ValidationError):
        validate_numeral_system({"kind": "computed", "function": "n + 2", "max_position": -1})


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_system_description_generates_valid_json():
    """Проверка, что Pydantic SystemDescription генерирует валидный JSON."""
    description = SystemDescription(
        kind=RadixKind.CONSTANT,
        base=3,
        alphabet=[(0, "a"), (1, "b"), (2, "c")],
    )

    validate_numeral_system(description.model_dump(mode="json"))


def test_conversion_description_round_trip(valid_config):
    """JSON -> модель -> JSON проходит схему."""
    description = ConversionDescription.model_validate(valid_config)

    assert description.target.kind is RadixKind.COMPUTED
    validate_conversion_config(description.model_dump(mode="json"))


def test_iter_errors_returns_all_errors():
    """Проверка, что iter_errors возвращает все ошибки валидации."""
    validator = ConversionConfigValidator()

    invalid_data = {
        "source": {"kind": "constant"},  # нет base - НАРУШЕНИЕ
        "target": {"kind": "fractal", "base": 2},  # enum violation - НАРУШЕНИЕ
        "number": "",  # minLength: 1 - НАРУШЕНИЕ
    }

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) >= 3
