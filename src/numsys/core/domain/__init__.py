"""
Domain models and value objects.

Contains the number system value object and the digit alphabet.
"""

from numsys.core.domain.alphabet import (
    ALPHABET_SIZE,
    DIGIT_SYMBOLS,
    DIGIT_VALUES,
    NEGATIVE_SIGN,
    SEPARATORS,
    is_separator,
    max_symbol,
    symbol_of,
    valid_characters,
    value_of,
)
from numsys.core.domain.number_system import (
    COMPLEMENT_SCHEMES,
    MAX_BASE,
    MIN_BASE,
    NumberSystem,
    SignScheme,
    ensure_number_system,
    validate_base,
)

__all__ = [
    # Alphabet module
    "ALPHABET_SIZE",
    "DIGIT_SYMBOLS",
    "DIGIT_VALUES",
    "NEGATIVE_SIGN",
    "SEPARATORS",
    "is_separator",
    "max_symbol",
    "symbol_of",
    "valid_characters",
    "value_of",
    # NumberSystem model
    "COMPLEMENT_SCHEMES",
    "MAX_BASE",
    "MIN_BASE",
    "NumberSystem",
    "SignScheme",
    "ensure_number_system",
    "validate_base",
]
