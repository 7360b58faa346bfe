"""
Config — разрешение описаний систем счисления в NumeralSystem

Два источника описаний:
1. JSON-файл (load_config): проверка по JSON Schema, затем Pydantic модели
2. Аргументы командной строки (description_from_args): основание и/или
   алфавит одной стороны

Правила по умолчанию для аргументов:
- явное основание имеет приоритет
- иначе основание = длина алфавита
- иначе DEFAULT_BASE (10)
- алфавит не задан -> префикс мастер-таблицы длиной |base|
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Optional, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError as ModelValidationError

from radixconv.core.contracts import validate_conversion_config
from radixconv.core.domain.alphabet import DEFAULT_MASTER_TABLE, Alphabet
from radixconv.core.domain.numeral_system import NumeralSystem
from radixconv.core.domain.radix import ConstantRadix, PositionFunctionRadix
from radixconv.core.domain.system_description import (
    ConversionDescription,
    RadixKind,
    SystemDescription,
)
from radixconv.core.errors import ConfigurationError
from radixconv.core.math.expression import resolve_base_function

logger = logging.getLogger(__name__)

DEFAULT_BASE: Final[int] = 10

# Ограничение позиции для функций основания, если в описании не задано иное
DEFAULT_MAX_POSITION: Final[int] = 100_000


# =============================================================================
# JSON
# =============================================================================


def parse_config(data: Dict[str, Any]) -> ConversionDescription:
    """
    Описание конверсии из уже разобранного JSON.

    Raises:
        ConfigurationError: Если данные не проходят схему или модели
    """
    try:
        validate_conversion_config(data)
    except SchemaValidationError as exc:
        path = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigurationError(f"Config does not match schema at {path}: {exc.message}") from exc

    try:
        return ConversionDescription.model_validate(data)
    except ModelValidationError as exc:
        raise ConfigurationError(f"Invalid config: {exc}") from exc


def load_config(path: Union[str, Path]) -> ConversionDescription:
    """
    Загрузка описания конверсии из JSON-файла.

    Raises:
        ConfigurationError: Файл не читается, не JSON или не проходит валидацию
    """
    config_path = Path(path)
    logger.debug("loading config %s", config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file {config_path} is not valid JSON: {exc}") from exc

    return parse_config(data)


# =============================================================================
# SYSTEM RESOLUTION
# =============================================================================


def build_system(description: SystemDescription) -> NumeralSystem:
    """
    NumeralSystem из описания.

    Для constant заявленное основание |base| сверяется с алфавитом при
    NumeralSystem.validate(). Для computed без алфавита берётся вся
    мастер-таблица.

    Raises:
        ZeroBase: Постоянное основание 0
        ConfigurationError: Некорректная функция основания
        DuplicateSymbol, ValueOutOfRange: Некорректный алфавит
    """
    alphabet: Optional[Alphabet] = None
    if description.alphabet is not None:
        alphabet = Alphabet.from_pairs(description.alphabet)

    if description.kind is RadixKind.CONSTANT:
        radix = ConstantRadix(description.base)
        if alphabet is None:
            alphabet = Alphabet.sequential(radix.base_at(0))
        return NumeralSystem(alphabet=alphabet, radix=radix, declared_base=radix.base_at(0))

    function = resolve_base_function(description.function)
    max_position = description.max_position
    if max_position is None:
        max_position = DEFAULT_MAX_POSITION
    if alphabet is None:
        alphabet = Alphabet.sequential(len(DEFAULT_MASTER_TABLE))
    return NumeralSystem(
        alphabet=alphabet,
        radix=PositionFunctionRadix(function, max_position=max_position),
        declared_base=description.base,
    )


# =============================================================================
# COMMAND LINE
# =============================================================================


def description_from_args(
    base: Optional[int] = None,
    alphabet: Optional[str] = None,
    function: Optional[str] = None,
) -> SystemDescription:
    """
    Описание одной стороны из аргументов командной строки.

    Алфавит задаётся строкой: каждый символ — одна цифра.

    Raises:
        ConfigurationError: Если аргументы противоречат друг другу
    """
    pairs = list(enumerate(alphabet)) if alphabet else None

    try:
        if function is not None:
            if base is not None:
                raise ConfigurationError("A base function cannot be combined with a constant base")
            return SystemDescription(kind=RadixKind.COMPUTED, function=function, alphabet=pairs)

        if base is None:
            base = len(alphabet) if alphabet else DEFAULT_BASE
        return SystemDescription(kind=RadixKind.CONSTANT, base=base, alphabet=pairs)
    except ModelValidationError as exc:
        raise ConfigurationError(f"Invalid numeral system arguments: {exc}") from exc
