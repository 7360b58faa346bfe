"""
JSON Schema Contract Validators

Модуль для валидации JSON-описаний систем счисления согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema для проверки
соответствия данных схемам.

Схемы (radixconv/core/contracts/schema/):
- conversion_config.json — описание конверсии (source/target/number)
  - $defs/numeral_system — описание одной системы счисления
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в пакете рядом с этим модулем (schema/*.json).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'conversion_config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def load_definition(self, schema_name: str, definition: str) -> Dict[str, Any]:
        """
        Схема, указывающая на $defs/<definition> внутри schema_name.

        Raises:
            KeyError: Если определения нет в $defs
        """
        schema = self.load_schema(schema_name)
        defs = schema.get("$defs", {})
        if definition not in defs:
            raise KeyError(f"Definition {definition!r} not found in {schema_name}.json")
        return {
            "$schema": schema.get("$schema"),
            "$defs": defs,
            "$ref": f"#/$defs/{definition}",
        }


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, definition: Optional[str] = None):
        """
        Args:
            schema_name: Имя файла схемы
            definition: Имя определения из $defs (None — вся схема)
        """
        self.schema_name = schema_name
        self.definition = definition
        if definition is None:
            self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        else:
            self.schema = _SCHEMA_LOADER.load_definition(schema_name, definition)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class ConversionConfigValidator(ContractValidator):
    """Валидатор для conversion_config контракта."""

    def __init__(self):
        super().__init__("conversion_config")


class NumeralSystemValidator(ContractValidator):
    """Валидатор для описания одной системы счисления."""

    def __init__(self):
        super().__init__("conversion_config", definition="numeral_system")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_conversion_config(data: Dict[str, Any]) -> None:
    """
    Валидация описания конверсии.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ConversionConfigValidator().validate(data)


def validate_numeral_system(data: Dict[str, Any]) -> None:
    """
    Валидация описания одной системы счисления.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumeralSystemValidator().validate(data)
