"""
Fixed-Width Integers — Арифметика целых фиксированной разрядности

Модуль описывает раскладку целого фиксированной разрядности
(IntegerLayout) и примитивы поверх неё:
- Проверка представимости значения
- Wrapping (перенос по модулю 2^bits, two's complement для signed)
- Деление с усечением к нулю и соответствующий остаток

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap(x) всегда в [minimum, maximum]
2. wrap(x) == x для любого представимого x
3. truncating_divide(a, b) * b + truncating_remainder(a, b) == a
4. Остаток имеет знак делимого
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ПЛАТФОРМЕННЫЕ ПАРАМЕТРЫ
# =============================================================================

# Разрядность машинного слова (Int / UInt)
WORD_BITS: Final[int] = 64

# Допустимые разрядности фиксированных целых
SUPPORTED_BITS: Final[tuple[int, ...]] = (8, 16, 32, 64)


# =============================================================================
# INTEGER LAYOUT
# =============================================================================


@dataclass(frozen=True)
class IntegerLayout:
    """
    Раскладка целого фиксированной разрядности.

    Attributes:
        bits: Разрядность (8, 16, 32, 64)
        signed: Знаковый (two's complement) или беззнаковый
    """

    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits not in SUPPORTED_BITS:
            raise ValueError(
                f"bits must be one of {SUPPORTED_BITS}, got {self.bits}"
            )

    @property
    def modulus(self) -> int:
        """2^bits"""
        return 1 << self.bits

    @property
    def minimum(self) -> int:
        """Минимальное представимое значение."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def maximum(self) -> int:
        """Максимальное представимое значение."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return self.modulus - 1

    def contains(self, value: int) -> bool:
        """
        Представимо ли значение в этой раскладке.

        Examples:
            >>> IntegerLayout(8, signed=True).contains(127)
            True
            >>> IntegerLayout(8, signed=True).contains(128)
            False
        """
        return self.minimum <= value <= self.maximum

    def wrap(self, value: int) -> int:
        """
        Приведение по модулю 2^bits.

        Для signed раскладки результат интерпретируется как two's complement.

        Examples:
            >>> IntegerLayout(8, signed=False).wrap(256)
            0
            >>> IntegerLayout(8, signed=True).wrap(128)
            -128
            >>> IntegerLayout(8, signed=True).wrap(-129)
            127
        """
        reduced = value % self.modulus
        if self.signed and reduced > self.maximum:
            reduced -= self.modulus
        return reduced

    def describe(self) -> str:
        prefix = "Int" if self.signed else "UInt"
        return f"{prefix}{self.bits}[{self.minimum}, {self.maximum}]"


# =============================================================================
# ДЕЛЕНИЕ С УСЕЧЕНИЕМ
# =============================================================================


def truncating_divide(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от Python `//` (floor), результат округляется к нулю:
    -7 / 2 == -3.

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> truncating_divide(7, 2)
        3
        >>> truncating_divide(-7, 2)
        -3
        >>> truncating_divide(7, -2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def truncating_remainder(numerator: int, denominator: int) -> int:
    """
    Остаток усечённого деления (знак делимого).

    Examples:
        >>> truncating_remainder(7, 2)
        1
        >>> truncating_remainder(-7, 2)
        -1
        >>> truncating_remainder(7, -2)
        1
    """
    return numerator - denominator * truncating_divide(numerator, denominator)
