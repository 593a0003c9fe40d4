"""
Floating Point — IEEE 754 примитивы для Float (binary32) и Double (binary64)

Python float всегда binary64, а деление на ноль в Python бросает
ZeroDivisionError. Модуль восстанавливает IEEE семантику:
- Округление результата до binary32 (с переполнением в ±inf)
- Деление на ноль → ±inf или nan, без исключения
- Остаток на ноль → nan, без исключения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ieee_divide / ieee_remainder никогда не бросают исключений
2. round_to_binary32(x) точно представим в binary32
"""

import math
import struct
import sys
from typing import Final

# =============================================================================
# ГРАНИЦЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Максимальное конечное значение binary32
FLT_MAX: Final[float] = 3.4028234663852886e38

# Максимальное конечное значение binary64
DBL_MAX: Final[float] = sys.float_info.max


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_binary32(value: float) -> float:
    """
    Округление binary64 → binary32 (round-to-nearest-even).

    Значения за пределами диапазона binary32 переполняются в ±inf,
    nan и ±inf сохраняются.

    Examples:
        >>> round_to_binary32(0.1)
        0.10000000149011612
        >>> round_to_binary32(1e39)
        inf
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE семантикой для нулевого знаменателя.

    Returns:
        - numerator / denominator, если denominator != 0
        - nan, если numerator равен 0 или nan
        - ±inf иначе (знак — произведение знаков, с учётом -0.0)

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def ieee_remainder(numerator: float, denominator: float) -> float:
    """
    Остаток усечённого деления (fmod) с IEEE семантикой.

    Returns:
        - math.fmod(numerator, denominator) для конечных операндов
        - nan при нулевом знаменателе или бесконечном числителе
        - numerator при бесконечном знаменателе и конечном числителе

    Examples:
        >>> ieee_remainder(7.5, 2.0)
        1.5
        >>> ieee_remainder(-7.5, 2.0)
        -1.5
        >>> math.isnan(ieee_remainder(1.0, 0.0))
        True
    """
    if math.isnan(numerator) or math.isnan(denominator):
        return math.nan
    if denominator == 0.0 or math.isinf(numerator):
        return math.nan
    if math.isinf(denominator):
        return numerator
    return math.fmod(numerator, denominator)
