"""
Alphabet — Алфавит цифр и набор допустимых символов

Единственный допустимый способ преобразований между:
- значением цифры (0-35)
- символом цифры ('0'-'9', 'A'-'Z', 'a'-'z')

Отображение задано явными таблицами (без арифметики над кодами символов):
- На выходе буквенные цифры всегда в верхнем регистре
- На входе принимаются оба регистра (62 символа на 36 значений)

Разделители (whitespace и '_') не несут значения и допустимы в любом месте.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from numsys.core.domain.number_system import NumberSystem, SignScheme, ensure_number_system
from numsys.core.errors import InvalidArgumentError, OutOfMemoryError

# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Символы-разделители: tab, newline, vtab, formfeed, CR, space, underscore
SEPARATORS: Final[frozenset[str]] = frozenset("\t\n\v\f\r _")

# Маркер отрицательного числа (только SIGNED_MARKER)
NEGATIVE_SIGN: Final[str] = "-"

# Значение -> символ (выход, верхний регистр)
DIGIT_SYMBOLS: Final[tuple[str, ...]] = tuple(
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Символ -> значение (вход, оба регистра)
DIGIT_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {
        **{symbol: value for value, symbol in enumerate(DIGIT_SYMBOLS)},
        **{symbol.lower(): value for value, symbol in enumerate(DIGIT_SYMBOLS)},
    }
)

# 10 цифр + 26 пар букв
ALPHABET_SIZE: Final[int] = len(DIGIT_VALUES)


# =============================================================================
# ОТОБРАЖЕНИЕ ЦИФР
# =============================================================================


def symbol_of(value: int) -> str:
    """
    Символ цифры по её значению.

    Examples:
        >>> symbol_of(9)
        '9'
        >>> symbol_of(35)
        'Z'
    """
    if not 0 <= value < len(DIGIT_SYMBOLS):
        raise InvalidArgumentError(
            f"digit value must be in [0, {len(DIGIT_SYMBOLS) - 1}], got {value}"
        )
    return DIGIT_SYMBOLS[value]


def value_of(symbol: str) -> int:
    """
    Значение цифры по символу (регистр не важен).

    Examples:
        >>> value_of("f")
        15
        >>> value_of("F")
        15
    """
    try:
        return DIGIT_VALUES[symbol]
    except KeyError:
        raise InvalidArgumentError(f"{symbol!r} is not a digit symbol") from None


def max_symbol(base: int) -> str:
    """Символ максимальной цифры основания ('9' для 10, 'F' для 16)."""
    return symbol_of(base - 1)


def is_separator(char: str) -> bool:
    return char in SEPARATORS


# =============================================================================
# НАБОР ДОПУСТИМЫХ СИМВОЛОВ
# =============================================================================


def valid_characters(system: NumberSystem) -> frozenset[str]:
    """
    Полный набор символов, допустимых в тексте числа данной системы.

    Состав:
    - все разделители
    - base символов цифр (буквенные в обоих регистрах)
    - '-' только для SIGNED_MARKER

    Набор не проверяет позицию '-': это делает парсер.

    Args:
        system: Система счисления

    Returns:
        frozenset допустимых символов

    Raises:
        InvalidArgumentError: Если система невалидна
        OutOfMemoryError: Если не удалось выделить память под набор
    """
    system = ensure_number_system(system)

    try:
        chars = set(SEPARATORS)
        for symbol in DIGIT_SYMBOLS[: system.base]:
            chars.add(symbol)
            chars.add(symbol.lower())
        if system.scheme is SignScheme.SIGNED_MARKER:
            chars.add(NEGATIVE_SIGN)
        return frozenset(chars)
    except MemoryError as exc:
        raise OutOfMemoryError(
            f"cannot allocate character set for {system}"
        ) from exc
