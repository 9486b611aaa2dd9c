"""Formatter — целое число signed 64-bit → текст.

Алгоритм:
1. Валидация системы счисления и значения
2. Количество цифр модуля (digit_count); для unary = |value|,
   ограничено unsigned 32-bit счётчиком
3. Позиция знака:
   - SIGNED_MARKER: только для value < 0
   - остальные схемы: всегда
   - unary: никогда (знак теряется, пишется warning)
4. Извлечение цифр от старшей к младшей; для отрицательных:
   - TWOS_COMPLEMENT: модуль уменьшается на 1
   - ONES/TWOS_COMPLEMENT: каждая цифра d → base - d - 1
5. Символ знака: '-' (SIGNED_MARKER), максимальная цифра основания
   (остальные схемы) или '0' для неотрицательных
"""

import logging

from numsys.core.domain.alphabet import NEGATIVE_SIGN, max_symbol, symbol_of
from numsys.core.domain.number_system import (
    COMPLEMENT_SCHEMES,
    NumberSystem,
    SignScheme,
    ensure_number_system,
    validate_base,
)
from numsys.core.errors import OutOfMemoryError
from numsys.core.math.int64_safeguards import (
    checked_abs,
    validate_int64,
    validate_uint32,
)

_logger = logging.getLogger(__name__)


def digit_count(value: int, base: int) -> int:
    """
    Количество цифр модуля value в системе с основанием base.

    Знак не учитывается. Для base = 1 равно |value|.

    Args:
        value: Целое число signed 64-bit
        base: Основание (1-36)

    Returns:
        Количество цифр (>= 1 для base > 1; 0 для unary нуля)

    Raises:
        InvalidArgumentError: Невалидное основание или value не int
        NumberOverflowError: |value| не представим или для unary
            превышает UINT32_MAX

    Examples:
        >>> digit_count(255, 16)
        2
        >>> digit_count(-5, 1)
        5
    """
    validate_base(base)
    validate_int64(value, "value")

    magnitude = checked_abs(value)
    if base == 1:
        validate_uint32(magnitude, "unary digit count")
        return magnitude

    count = 1
    magnitude //= base
    while magnitude:
        magnitude //= base
        count += 1
    return count


def _extract_digits(magnitude: int, base: int, width: int) -> list[int]:
    digits = [0] * width
    for position in range(width - 1, -1, -1):
        magnitude, digits[position] = divmod(magnitude, base)
    return digits


def _sign_symbol(negative: bool, system: NumberSystem) -> str:
    if not negative:
        return "0"
    if system.scheme is SignScheme.SIGNED_MARKER:
        return NEGATIVE_SIGN
    return max_symbol(system.base)


def format_number(value: int, system: NumberSystem) -> str:
    """
    Запись целого числа в заданной системе счисления.

    Args:
        value: Целое число signed 64-bit
        system: Система счисления назначения

    Returns:
        Новая строка; буквенные цифры в верхнем регистре

    Raises:
        InvalidArgumentError: Невалидная система или value не int
        NumberOverflowError: value вне signed 64-bit, |value| не представим
            (INT64_MIN) или unary счётчик превышает UINT32_MAX
        OutOfMemoryError: Не удалось выделить выходную строку

    Examples:
        >>> format_number(-5, NumberSystem(base=10, scheme=SignScheme.SIGN_DIGIT))
        '95'
        >>> format_number(5, NumberSystem(base=1))
        '00000'
    """
    system = ensure_number_system(system)
    count = digit_count(value, system.base)
    negative = value < 0

    if system.is_unary:
        if negative:
            _logger.warning(
                "sign of %d is not representable in %s, formatting magnitude only",
                value,
                system,
            )
        try:
            return symbol_of(0) * count
        except MemoryError as exc:
            raise OutOfMemoryError(
                f"cannot allocate {count} unary digits for {system}"
            ) from exc

    has_sign = negative or system.reserves_sign_position
    magnitude = checked_abs(value)

    if negative and system.scheme is SignScheme.TWOS_COMPLEMENT:
        magnitude -= 1

    _logger.debug(
        "format %d in %s: digits=%d sign_position=%s", value, system, count, has_sign
    )

    try:
        digits = _extract_digits(magnitude, system.base, count)
        if negative and system.scheme in COMPLEMENT_SCHEMES:
            digits = [system.base - digit - 1 for digit in digits]

        symbols = [symbol_of(digit) for digit in digits]
        if has_sign:
            symbols.insert(0, _sign_symbol(negative, system))
        return "".join(symbols)
    except MemoryError as exc:
        raise OutOfMemoryError(
            f"cannot allocate {count + has_sign} characters for {system}"
        ) from exc
