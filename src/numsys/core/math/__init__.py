"""
Core math modules для numsys

Проверяемая целочисленная арифметика в фиксированном диапазоне.
"""

from numsys.core.math.int64_safeguards import (
    # Range constants
    INT64_MAX,
    INT64_MIN,
    UINT32_MAX,
    # Checked arithmetic
    checked_abs,
    checked_add,
    checked_mul,
    checked_negate,
    # Validation
    is_int64,
    validate_int64,
    validate_uint32,
)

__all__ = [
    # Int64 Safeguards — Range constants
    "INT64_MAX",
    "INT64_MIN",
    "UINT32_MAX",
    # Int64 Safeguards — Checked arithmetic
    "checked_abs",
    "checked_add",
    "checked_mul",
    "checked_negate",
    # Int64 Safeguards — Validation
    "is_int64",
    "validate_int64",
    "validate_uint32",
]
