"""
Numeric helpers with fixed 64-bit semantics.

- to_hex_string: minimal lowercase hex of a signed 64-bit two's-complement value.
- round_half_up: round to nearest integer, halves toward positive infinity.
- approx_pow: bit-level power approximation, fast and lossy.
"""

import math
import struct

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_UINT64_MASK = (1 << 64) - 1
_HEX_DIGITS = "0123456789abcdef"

# High word of the IEEE-754 bit pattern of 1.0, less a small bias
_POW_MAGIC = 1072632447


def _to_int64(value: int) -> int:
    """Reduce an arbitrary Python int to its low 64 bits, read as signed."""
    value &= _UINT64_MASK
    if value > INT64_MAX:
        value -= 1 << 64
    return value


def to_hex_string(value: int) -> str:
    """
    Convert an integer into its hexadecimal string representation.

    The value is treated as a signed 64-bit integer: ints outside that range
    are reduced to their low 64 bits first. Negative values are rendered as
    the 16 hex digits of their unsigned bit pattern, without a minus sign.
    Non-negative values get no leading zeros; 0 renders as "0".

    Example:
      to_hex_string(255) -> "ff"
      to_hex_string(-1)  -> "ffffffffffffffff"
    """
    value = _to_int64(value)

    # Exact digit count first, then fill a fixed buffer from the right
    count = 1
    if value < 0:
        count = 16
    else:
        j = value >> 4
        while j != 0:
            count += 1
            j >>= 4

    bits = value & _UINT64_MASK  # logical shifts from here on
    buffer = [""] * count
    while count > 0:
        count -= 1
        buffer[count] = _HEX_DIGITS[bits & 15]
        bits >>= 4
    return "".join(buffer)


def round_half_up(value: float) -> int:
    """
    Round a float to the closest 64-bit integer, ties toward positive infinity.

    Returns floor(value + 0.5), so 2.5 -> 3 and -2.5 -> -2 (no banker's
    rounding). NaN returns 0. Results saturate at the signed 64-bit limits,
    which is also what +inf and -inf map to.
    """
    try:
        value = float(value)
    except OverflowError:
        # ints too large for a float
        return INT64_MAX if value > 0 else INT64_MIN
    if math.isnan(value):
        return 0
    shifted = value + 0.5
    if math.isinf(shifted):
        return INT64_MAX if shifted > 0 else INT64_MIN
    result = math.floor(shifted)
    if result > INT64_MAX:
        return INT64_MAX
    if result < INT64_MIN:
        return INT64_MIN
    return result


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value > INT32_MAX:
        value -= 1 << 32
    return value


def _double_to_int32(value: float) -> int:
    # Truncate toward zero, saturate, NaN -> 0
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return int(value)


def approx_pow(a: float, b: float) -> float:
    """
    Approximate a ** b by scaling the exponent bits of a.

    Only the high 32 bits of the IEEE-754 pattern of a take part, so the
    result is a rough estimate with the low word always zero. There is no
    accuracy guarantee; use math.pow when precision matters.
    """
    bits = struct.unpack('<q', struct.pack('<d', float(a)))[0]
    x = bits >> 32
    # subtraction wraps at 32 bits
    y = _double_to_int32(b * _wrap_int32(x - _POW_MAGIC) + _POW_MAGIC)
    return struct.unpack('<d', struct.pack('<q', y << 32))[0]
