"""
Big Integer Contract — проверка interchange-формы BigInteger

Payload {"sign": 0|1, "limbs": [...]} проверяется в два шага:
1. JSON Schema (schema/big_integer.json, Draft 2020-12): обязательные поля,
   sign ∈ {0, 1}, непустой массив limbs в [0, 2^26)
2. Каноническая форма (только canonical=True): старший limb ненулевой при
   len(limbs) > 1, ноль записан с sign=0

JSON Schema не адресует последний элемент массива, поэтому второй шаг
выполняется кодом. Схема поставляется внутри пакета как package data.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, List, Mapping

from jsonschema import Draft202012Validator, ValidationError

from src.core.math.errors import MalformedIntegerError

SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "big_integer.json"


@lru_cache(maxsize=1)
def big_integer_schema_validator() -> Draft202012Validator:
    """
    Validator схемы big_integer; схема читается и мета-валидируется один раз.

    Raises:
        jsonschema.SchemaError: Если файл схемы не является валидной JSON Schema
    """
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def _describe(error: ValidationError) -> str:
    path = "/".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{path}: {error.message}"


def canonical_form_errors(data: Mapping[str, Any]) -> List[str]:
    """Нарушения канонической формы у payload, уже прошедшего схему."""
    limbs = data["limbs"]
    top = len(limbs) - 1
    if top > 0 and limbs[top] == 0:
        return [f"limbs/{top}: leading zero limb"]
    if top == 0 and limbs[0] == 0 and data["sign"] == 1:
        return ["sign: negative zero"]
    return []


def big_integer_errors(data: Any, canonical: bool = False) -> List[str]:
    """
    Все нарушения контракта с путём до поля.

    Args:
        data: Payload для проверки
        canonical: Дополнительно требовать каноническую форму

    Returns:
        Пустой список, если payload валиден
    """
    errors = sorted(_describe(e) for e in big_integer_schema_validator().iter_errors(data))
    if errors or not canonical:
        return errors
    return canonical_form_errors(data)


def validate_big_integer(data: Any, canonical: bool = False) -> None:
    """
    Проверка payload против контракта.

    Raises:
        MalformedIntegerError: Если payload не соответствует контракту
    """
    errors = big_integer_errors(data, canonical=canonical)
    if errors:
        raise MalformedIntegerError("Invalid big integer payload: " + "; ".join(errors))
