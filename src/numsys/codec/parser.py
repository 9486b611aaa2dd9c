"""Parser — текст → целое число signed 64-bit.

Алгоритм:
1. Валидация системы счисления и входа
2. Позиция знака = первый символ, не являющийся разделителем
3. Определение знака:
   - SIGNED_MARKER: отрицательное iff символ знака == '-'
   - остальные схемы: отрицательное iff значение цифры-знака != 0
     (любая ненулевая цифра, не только каноническая максимальная)
4. Проход справа налево до позиции знака с накоплением модуля
   (checked арифметика, переполнение = NumberOverflowError)
5. Для ONES/TWOS_COMPLEMENT с отрицательным знаком каждая цифра
   инвертируется: v → base - 1 - v; для TWOS аккумулятор стартует с 1
6. Отрицательный результат отрицается (checked)

Unary (base = 1): позиция знака не резервируется, каждый символ '0'
считается как 1. Под SIGNED_MARKER ведущий '-' делает счёт отрицательным.
"""

import logging

from numsys.core.domain.alphabet import (
    NEGATIVE_SIGN,
    is_separator,
    valid_characters,
    value_of,
)
from numsys.core.domain.number_system import (
    COMPLEMENT_SCHEMES,
    NumberSystem,
    SignScheme,
    ensure_number_system,
)
from numsys.core.errors import InvalidArgumentError
from numsys.core.math.int64_safeguards import (
    INT64_MAX,
    checked_add,
    checked_mul,
    checked_negate,
)

_logger = logging.getLogger(__name__)


def locate_sign(text: str) -> int | None:
    """Индекс первого символа, не являющегося разделителем (None если его нет)."""
    for index, char in enumerate(text):
        if not is_separator(char):
            return index
    return None


def _check_character(char: str, valid: frozenset[str], system: NumberSystem) -> None:
    if char not in valid:
        raise InvalidArgumentError(f"invalid character {char!r} for {system}")


def _is_negative(sign_char: str, system: NumberSystem) -> bool:
    if system.scheme is SignScheme.SIGNED_MARKER:
        return sign_char == NEGATIVE_SIGN
    return value_of(sign_char) != 0


def _parse_unary(
    text: str, sign_index: int, valid: frozenset[str], system: NumberSystem
) -> int:
    negative = text[sign_index] == NEGATIVE_SIGN
    start = sign_index + 1 if negative else sign_index

    count = 0
    for char in text[start:]:
        _check_character(char, valid, system)
        if char == NEGATIVE_SIGN:
            raise InvalidArgumentError(
                f"misplaced {NEGATIVE_SIGN!r} in {text!r} for {system}"
            )
        if is_separator(char):
            continue
        count = checked_add(count, 1)

    return checked_negate(count) if negative else count


def parse(text: str, system: NumberSystem) -> int:
    """
    Разбор текста числа в заданной системе счисления.

    Args:
        text: Текст числа (разделители допустимы в любом месте)
        system: Система счисления источника

    Returns:
        Целое число в диапазоне signed 64-bit

    Raises:
        InvalidArgumentError: Невалидная система, text is None,
            недопустимый символ или неуместный '-'
        NumberOverflowError: Модуль не помещается в signed 64-bit
        OutOfMemoryError: Не удалось построить набор допустимых символов

    Examples:
        >>> parse("ff", NumberSystem(base=16))
        255
        >>> parse("1111", NumberSystem(base=2, scheme=SignScheme.TWOS_COMPLEMENT))
        -1
    """
    system = ensure_number_system(system)

    if text is None:
        raise InvalidArgumentError("text must not be None")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a str, got {type(text).__name__}")

    valid = valid_characters(system)

    sign_index = locate_sign(text)
    if sign_index is None:
        # Пустой текст или только разделители
        return 0

    sign_char = text[sign_index]
    _check_character(sign_char, valid, system)

    if system.is_unary:
        return _parse_unary(text, sign_index, valid, system)

    negative = _is_negative(sign_char, system)
    complement = negative and system.scheme in COMPLEMENT_SCHEMES

    # SIGNED_MARKER: цифра в позиции знака входит в модуль; '-' не входит
    skip_sign = system.reserves_sign_position or negative
    start = sign_index + 1 if skip_sign else sign_index

    _logger.debug(
        "parse %r in %s: sign_index=%d negative=%s", text, system, sign_index, negative
    )

    result = 1 if negative and system.scheme is SignScheme.TWOS_COMPLEMENT else 0
    weight = 1

    for char in reversed(text[start:]):
        _check_character(char, valid, system)
        if char == NEGATIVE_SIGN:
            raise InvalidArgumentError(
                f"misplaced {NEGATIVE_SIGN!r} in {text!r} for {system}"
            )
        if is_separator(char):
            continue

        digit = value_of(char)
        if complement:
            digit = system.base - 1 - digit

        if digit:
            result = checked_add(result, checked_mul(digit, weight))

        # Вес сверх INT64_MAX уже не нужен: любая ненулевая цифра переполнит
        if weight <= INT64_MAX:
            weight *= system.base

    return checked_negate(result) if negative else result
