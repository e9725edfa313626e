"""
BigInt — Целое число произвольной точности со знаком

Immutable Pydantic модель: magnitude (десятичные цифры, старшая первая)
и флаг negative. Все операции чистые и возвращают новый экземпляр;
составные операторы (+=, -=, *=) лишь перепривязывают имя.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude непустая, только '0'-'9', без ведущих нулей (кроме "0")
2. Ноль никогда не бывает отрицательным: magnitude == "0" → negative == False
3. (magnitude, negative) однозначно задаёт значение: равные числа
   структурно равны
4. Единственная ошибка — InvalidFormat при разборе строки; арифметика
   и сравнение тотальны
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.digits import (
    DECIMAL_BASE,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    is_digit_string,
    multiply_magnitudes,
    strip_leading_zeros,
    subtract_magnitudes,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Диапазон нативного signed 64-bit целого
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Регулярное выражение канонической magnitude
CANONICAL_MAGNITUDE_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"

# Размер блока цифр при конвертации int <-> magnitude
_CHUNK_DIGITS: Final[int] = 18
_CHUNK_BASE: Final[int] = DECIMAL_BASE**_CHUNK_DIGITS


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormatReason(str, Enum):
    """Причина отказа при разборе строки"""

    EMPTY = "empty"
    INVALID_CHARACTER = "invalid_character"


class InvalidFormat(ValueError):
    """
    Строка не является десятичным целым числом.

    Единственная восстанавливаемая ошибка модуля. Возникает только при
    конструировании из строки: пустой ввод либо символ, отличный от цифры,
    вне необязательного ведущего '-'.
    """

    def __init__(self, reason: InvalidFormatReason, text: str):
        self.reason = reason
        self.text = text
        if reason is InvalidFormatReason.EMPTY:
            message = "Empty string cannot be converted"
        else:
            message = f"Invalid characters in {text!r}"
        super().__init__(message)


# =============================================================================
# PARSE RESULT
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """
    Результат разбора строки без исключений: value либо error.

    Используется, когда вызывающему коду нужно проверить ошибку,
    не полагаясь на раскрутку стека.
    """

    value: Optional["BigInt"] = None
    error: Optional[InvalidFormat] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "BigInt":
        """
        Извлечение значения.

        Raises:
            InvalidFormat: Если разбор завершился ошибкой
        """
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


# =============================================================================
# HELPERS
# =============================================================================


def _split_decimal(text: str) -> tuple[str, bool]:
    """
    Разбор десятичной строки в (magnitude, negative).

    Raises:
        InvalidFormat: Пустая строка или недопустимый символ
    """
    if not text:
        raise InvalidFormat(InvalidFormatReason.EMPTY, text)

    start = 0
    negative = False
    if text[0] == "-":
        negative = True
        start = 1

    # "-" без цифр: пустой диапазон формально состоит из цифр,
    # но magnitude не может быть пустой
    if start == len(text) or not is_digit_string(text, start):
        raise InvalidFormat(InvalidFormatReason.INVALID_CHARACTER, text)

    magnitude = strip_leading_zeros(text[start:])
    if magnitude == ZERO_DIGITS:
        negative = False
    return magnitude, negative


def _int_to_magnitude(value: int) -> str:
    """Десятичные цифры |value| без ограничения длины str(int)."""
    remaining = abs(value)
    if remaining < _CHUNK_BASE:
        return str(remaining)

    chunks: list[str] = []
    while remaining >= _CHUNK_BASE:
        remaining, chunk = divmod(remaining, _CHUNK_BASE)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(remaining))
    chunks.reverse()
    return "".join(chunks)


# =============================================================================
# BIGINT MODEL
# =============================================================================

BigIntLike = Union["BigInt", int]


class BigInt(BaseModel):
    """
    Целое число произвольной точности со знаком.

    Конструирование:
        BigInt()            → 0
        BigInt(-67890)      → из нативного int
        BigInt("-0012345")  → из десятичной строки (InvalidFormat при ошибке)
        BigInt(magnitude="5", negative=True) → из полей (pydantic-валидация)

    Операции: add / subtract / multiply / negate / compare_to, а также
    операторы + - * (и reflected), унарный -, == != < > <= >=.

    Examples:
        >>> str(BigInt("12345") + BigInt("67890"))
        '80235'
        >>> str(BigInt("12345") - BigInt("67890"))
        '-55545'
    """

    magnitude: str = Field(
        default=ZERO_DIGITS,
        min_length=1,
        pattern=CANONICAL_MAGNITUDE_PATTERN,
        description="Абсолютное значение: десятичные цифры, старшая первая",
    )
    negative: bool = Field(default=False, description="True iff значение строго < 0")

    model_config = {"frozen": True}

    def __init__(self, value: Union["BigInt", int, str, None] = None, /, **data: Any):
        if value is not None:
            if data:
                raise TypeError("BigInt accepts either a value or field keywords, not both")
            data = self._fields_from(value)
        super().__init__(**data)

    @field_validator("negative")
    @classmethod
    def validate_zero_not_negative(cls, v: bool, info) -> bool:
        """Ноль не имеет отрицательного представления."""
        if v and info.data.get("magnitude") == ZERO_DIGITS:
            raise ValueError("zero cannot be negative")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @staticmethod
    def _fields_from(value: Union["BigInt", int, str]) -> dict[str, Any]:
        if isinstance(value, BigInt):
            return {"magnitude": value.magnitude, "negative": value.negative}
        if isinstance(value, bool):
            raise TypeError("bool is not a valid BigInt source")
        if isinstance(value, int):
            return {"magnitude": _int_to_magnitude(value), "negative": value < 0}
        if isinstance(value, str):
            magnitude, negative = _split_decimal(value)
            return {"magnitude": magnitude, "negative": negative}
        raise TypeError(f"Cannot construct BigInt from {type(value).__name__}")

    @classmethod
    def _from_parts(cls, magnitude: str, negative: bool) -> "BigInt":
        """
        Сборка результата арифметики без повторной валидации.

        magnitude уже канонична (гарантируется алгоритмами digits);
        знак нуля принудительно сбрасывается.
        """
        return cls.model_construct(
            magnitude=magnitude,
            negative=negative and magnitude != ZERO_DIGITS,
        )

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Конструирование из нативного целого.

        Python int не переполняется, поэтому INT64_MIN обрабатывается
        без особых случаев.

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls._from_parts(_int_to_magnitude(value), value < 0)

    @classmethod
    def from_str(cls, text: str) -> "BigInt":
        """
        Конструирование из десятичной строки.

        Формат: необязательный '-' и затем только цифры '0'-'9'.
        Ведущие нули удаляются; "-000" даёт неотрицательный ноль.

        Raises:
            InvalidFormat: Пустая строка или недопустимый символ
        """
        magnitude, negative = _split_decimal(text)
        return cls._from_parts(magnitude, negative)

    @classmethod
    def parse(cls, text: str) -> ParseResult:
        """
        Разбор строки без исключений.

        Returns:
            ParseResult(value=...) при успехе, ParseResult(error=...) иначе
        """
        try:
            return ParseResult(value=cls.from_str(text))
        except InvalidFormat as e:
            logger.debug("BigInt parse rejected %r: %s", text, e)
            return ParseResult(error=e)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.magnitude == ZERO_DIGITS

    @property
    def is_negative(self) -> bool:
        return self.negative

    def fits_int64(self) -> bool:
        """Помещается ли значение в нативный signed 64-bit диапазон."""
        return BigInt.from_int(INT64_MIN) <= self <= BigInt.from_int(INT64_MAX)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: BigIntLike) -> int:
        """
        Полный порядок над BigInt.

        Алгоритм:
            1. Разные знаки → неотрицательное больше
            2. Одинаковые знаки → сравнение magnitude (длина, затем цифры)
            3. Оба отрицательные → результат шага 2 инвертируется

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        other = _coerce_operand(other)

        if self.negative != other.negative:
            return -1 if self.negative else 1

        order = compare_magnitudes(self.magnitude, other.magnitude)
        return -order if self.negative else order

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool) or not isinstance(other, (BigInt, int)):
            return NotImplemented
        other = _coerce_operand(other)
        return self.magnitude == other.magnitude and self.negative == other.negative

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: BigIntLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: BigIntLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: BigIntLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: BigIntLike) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        # Совпадает с hash(int(self)): BigInt(5) == 5 → равные хэши
        modulus = sys.hash_info.modulus
        residue = 0
        for digit in self.magnitude:
            residue = (residue * DECIMAL_BASE + ord(digit) - ord("0")) % modulus
        if self.negative:
            residue = -residue
        return -2 if residue == -1 else residue

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: BigIntLike) -> "BigInt":
        """
        Сложение.

        Одинаковые знаки → сложение magnitude с переносом, знак общий.
        Разные знаки → делегирование в subtract:
            (-a) + b = b - a
            a + (-b) = a - b
        """
        other = _coerce_operand(other)

        if self.negative == other.negative:
            return BigInt._from_parts(
                add_magnitudes(self.magnitude, other.magnitude), self.negative
            )
        if self.negative:
            return other.subtract(self.negate())
        return self.subtract(other.negate())

    def subtract(self, other: BigIntLike) -> "BigInt":
        """
        Вычитание.

        - Идентичные операнды → канонический ноль
        - Разные знаки → делегирование в add: a - b = a + (-b)
        - Одинаковые знаки → большая magnitude минус меньшая с заёмом;
          результат отрицателен iff (|self| < |other|) XOR (операнды < 0)
        """
        other = _coerce_operand(other)

        if self.magnitude == other.magnitude and self.negative == other.negative:
            return ZERO
        if self.negative != other.negative:
            return self.add(other.negate())

        if compare_magnitudes(self.magnitude, other.magnitude) < 0:
            return BigInt._from_parts(
                subtract_magnitudes(other.magnitude, self.magnitude), not self.negative
            )
        return BigInt._from_parts(
            subtract_magnitudes(self.magnitude, other.magnitude), self.negative
        )

    def multiply(self, other: BigIntLike) -> "BigInt":
        """
        Умножение schoolbook.

        Ноль в любом операнде → канонический ноль независимо от знаков.
        Иначе результат отрицателен iff знаки различны.
        """
        other = _coerce_operand(other)

        if self.is_zero or other.is_zero:
            return ZERO
        return BigInt._from_parts(
            multiply_magnitudes(self.magnitude, other.magnitude),
            self.negative != other.negative,
        )

    def negate(self) -> "BigInt":
        """Смена знака; ноль остаётся неотрицательным."""
        if self.is_zero:
            return self
        return BigInt._from_parts(self.magnitude, not self.negative)

    def increment(self) -> "BigInt":
        """self + 1. Аналог ++: a = a.increment()"""
        return self.add(ONE)

    def decrement(self) -> "BigInt":
        """self - 1. Аналог --: a = a.decrement()"""
        return self.subtract(ONE)

    def __add__(self, other: BigIntLike) -> "BigInt":
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> "BigInt":
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).add(self)

    def __sub__(self, other: BigIntLike) -> "BigInt":
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int) -> "BigInt":
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).subtract(self)

    def __mul__(self, other: BigIntLike) -> "BigInt":
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> "BigInt":
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).multiply(self)

    def __neg__(self) -> "BigInt":
        return self.negate()

    # -------------------------------------------------------------------------
    # Конвертация
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"-{self.magnitude}" if self.negative else self.magnitude

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        # Поблочно: int(str) ограничен sys.get_int_max_str_digits()
        value = 0
        for start in range(0, len(self.magnitude), _CHUNK_DIGITS):
            chunk = self.magnitude[start : start + _CHUNK_DIGITS]
            value = value * DECIMAL_BASE ** len(chunk) + int(chunk)
        return -value if self.negative else value


def _is_operand(value: object) -> bool:
    return isinstance(value, BigInt) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def _coerce_operand(value: BigIntLike) -> BigInt:
    """Приведение операнда к BigInt (int → from_int)."""
    if isinstance(value, BigInt):
        return value
    if _is_operand(value):
        return BigInt.from_int(value)
    raise TypeError(f"Unsupported operand type: {type(value).__name__}")


ZERO: Final[BigInt] = BigInt()
ONE: Final[BigInt] = BigInt.from_int(1)
