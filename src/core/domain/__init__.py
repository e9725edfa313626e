"""
Domain models and value objects.

Contains the BigInt value type and its parse/error types.
"""

from src.core.domain.bigint import (
    INT64_MAX,
    INT64_MIN,
    ONE,
    ZERO,
    BigInt,
    InvalidFormat,
    InvalidFormatReason,
    ParseResult,
)

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "ONE",
    "ZERO",
    # Value type
    "BigInt",
    "ParseResult",
    # Errors
    "InvalidFormat",
    "InvalidFormatReason",
]
