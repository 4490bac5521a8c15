"""Signed 64-bit integer discipline.

Wahlberg integers are 64-bit machine integers while Python ints are
unbounded, so every literal and every arithmetic step is squeezed through
`to_i64`. What happens to an out-of-range result depends on the overflow
policy (see wahlberg.config): "error" raises WahlbergOverflowError, "wrap"
wraps around in two's complement.
"""

from __future__ import annotations

from wahlberg.config import OVERFLOW_WRAP
from wahlberg.errors import WahlbergOverflowError, WahlbergZeroDivisionError

I64_BITS = 64
I64_MIN = -(1 << (I64_BITS - 1))
I64_MAX = (1 << (I64_BITS - 1)) - 1


def to_i64(value: int, overflow: str) -> int:
    """Return `value` if it fits in 64 bits, otherwise apply the overflow policy."""
    if I64_MIN <= value <= I64_MAX:
        return value
    if overflow == OVERFLOW_WRAP:
        return ((value - I64_MIN) % (1 << I64_BITS)) + I64_MIN
    raise WahlbergOverflowError(f"integer overflow: {value} does not fit in {I64_BITS} bits")


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero, as machine integers divide."""
    if divisor == 0:
        raise WahlbergZeroDivisionError(f"division by zero: {dividend} / 0")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient
