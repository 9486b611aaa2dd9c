"""
numsys — integers in custom-radix number systems.

Parse and format signed 64-bit integers in bases 1-36 under four sign
schemes: signed marker, sign digit, one's complement, two's complement.
"""

from numsys.codec import (
    CodecResult,
    convert,
    digit_count,
    format_number,
    parse,
    try_convert,
    try_format,
    try_parse,
)
from numsys.core.domain import NumberSystem, SignScheme, valid_characters
from numsys.core.errors import (
    ErrorKind,
    InvalidArgumentError,
    NumberOverflowError,
    NumsysError,
    OutOfMemoryError,
)
from numsys.core.math import INT64_MAX, INT64_MIN, UINT32_MAX

__version__ = "1.0.0"

__all__ = [
    # Model
    "NumberSystem",
    "SignScheme",
    # Operations
    "convert",
    "digit_count",
    "format_number",
    "parse",
    "valid_characters",
    # Result wrappers
    "CodecResult",
    "try_convert",
    "try_format",
    "try_parse",
    # Errors
    "ErrorKind",
    "InvalidArgumentError",
    "NumberOverflowError",
    "NumsysError",
    "OutOfMemoryError",
    # Range constants
    "INT64_MAX",
    "INT64_MIN",
    "UINT32_MAX",
]
