"""
Utility functions package.

Exposes the fixed-layout timestamp formatter and 64-bit numeric helpers.
"""

from .formatters import (
    DateFormat,
    FormatCode,
    ISO8601_DATE,
    ISO8601_FULL,
    ISO8601_TIMESTAMP,
    NTP,
    NTP_UTC,
)
from .numeric import approx_pow, round_half_up, to_hex_string

__all__ = [
    'DateFormat',
    'FormatCode',
    'ISO8601_DATE',
    'ISO8601_FULL',
    'ISO8601_TIMESTAMP',
    'NTP',
    'NTP_UTC',
    'approx_pow',
    'round_half_up',
    'to_hex_string',
]
