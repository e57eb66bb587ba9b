"""Q16.16 fixed-point arithmetic over plain Python ints.

A fixed-point value ``x`` stands for the real number ``x / 2**16``. Every
function here takes and returns such scaled integers unless documented
otherwise.

Rounding follows C ``long long`` semantics, not Python's: quotients truncate
toward zero and remainders take the sign of the dividend. Python's ``//`` and
``%`` floor toward -inf, which changes the last bit for negative operands, so
all division goes through ``_tdiv`` / ``_tmod``. Reference vectors produced by
the C implementation depend on this.
"""

from __future__ import annotations

import math

from .errors import FixptDomainError, FixptOverflowError
from .tables import SQUARE_ROOT_TABLE_SIZE, SQUARE_ROOTS

FP_BASE: int = 16
FP_FACTOR: int = 1 << FP_BASE

INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1

# Mask selecting values that are exact integers in [0, 127].
_TABLE_MASK: int = (SQUARE_ROOT_TABLE_SIZE - 1) << FP_BASE


# -- Basic helpers -----------------------------------------------------------

def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_int64(name: str, value: int) -> int:
    _require_int(name, value)
    if value < INT64_MIN or value > INT64_MAX:
        raise FixptOverflowError(f"{name} outside the signed 64-bit range: {value}")
    return value


def _tdiv(a: int, b: int) -> int:
    """Integer quotient truncated toward zero (C semantics)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend (C semantics)."""
    return a - b * _tdiv(a, b)


def msbpos(x: int) -> int:
    """Position of the most significant set bit, unit bit = 1; 0 for 0."""
    return x.bit_length() if x > 0 else 0


def fp_exp2(n: int) -> int:
    """``2**n`` as a fixed-point value (``n`` may be negative)."""
    return FP_FACTOR << n if n >= 0 else FP_FACTOR >> -n


# -- Conversions -------------------------------------------------------------

def fp_from_int(n: int) -> int:
    """Scale an integer up to fixed-point."""
    _require_int("n", n)
    return _require_int64("result", n << FP_BASE)


def fp_from_float(f: float) -> int:
    """Nearest fixed-point value to ``f``; halves round toward +inf."""
    if not math.isfinite(f):
        raise FixptDomainError(f"cannot convert non-finite value {f!r}")
    return _require_int64("result", math.floor(f * FP_FACTOR + 0.5))


def fp_to_float(x: int) -> float:
    _require_int("x", x)
    return x / FP_FACTOR


def fp_floor(x: int) -> int:
    """Integer part of ``x``, truncated toward zero (not rescaled)."""
    _require_int64("x", x)
    return _tdiv(x, FP_FACTOR)


# -- Arithmetic --------------------------------------------------------------

def fp_mul(x: int, y: int) -> int:
    """``x * y / 2**16`` with an unbounded intermediate product."""
    _require_int64("x", x)
    _require_int64("y", y)
    return _require_int64("product", _tdiv(x * y, FP_FACTOR))


def fp_div(x: int, y: int) -> int:
    """``x * 2**16 / y`` with an unbounded intermediate product."""
    _require_int64("x", x)
    _require_int64("y", y)
    if y == 0:
        raise FixptDomainError("fixed-point division by zero")
    return _require_int64("quotient", _tdiv(x * FP_FACTOR, y))


def fp_round(x: int) -> int:
    """Integer nearest to ``x``, halves away from zero.

    The result is a plain integer, not a fixed-point value.
    """
    _require_int64("x", x)
    div = _tdiv(x, FP_FACTOR)
    rem = _tmod(x, FP_FACTOR)
    sign = 1 if x >= 0 else -1
    half = FP_FACTOR // 2
    if rem >= half or rem <= -half:
        return div + sign
    return div


def fp_sqrt(u: int) -> int:
    """Square root by table lookup or bisection.

    Negative inputs return ``-fp_sqrt(-u)``. Exact integers 0..127 come straight
    from ``SQUARE_ROOTS``. Everything else bisects a power-of-two bracket until
    the bracket closes to adjacent values or ``mid * mid`` hits ``u`` exactly.
    """
    _require_int64("u", u)
    if u < 0:
        return -fp_sqrt(-u)
    if u & _TABLE_MASK == u:
        return SQUARE_ROOTS[u >> FP_BASE]

    # 2**(k-1) <= u < 2**k in real terms
    k = msbpos(u) - FP_BASE
    upper = fp_exp2(_tdiv(k + (1 if k > 0 else 0), 2))
    lower = upper // 2

    x = 0
    while upper != lower + 1:
        x = (upper + lower) // 2
        fx = _tdiv(x * x, FP_FACTOR) - u
        if fx == 0:
            break
        if fx > 0:
            upper = x
        else:
            lower = x
    return x


def fp_pow(base: int, expn: int) -> int:
    """``base ** expn`` for an integer exponent.

    A zero base yields 0 for every exponent, negative ones included. A negative
    exponent reciprocates the base first. The product is accumulated one factor
    at a time while the fractional remainder of each step is carried into the
    next and rounded back in at the end; this ordering fixes the final bit and
    differs from exponentiation by squaring.
    """
    _require_int64("base", base)
    _require_int("expn", expn)
    if base == 0:
        return 0

    if expn < 0:
        base = fp_div(FP_FACTOR, base)
        expn = -expn

    res = FP_FACTOR
    err = 0
    # Every step must stay inside int64; a wrapped step would silently change
    # the result.
    for _ in range(expn):
        scaled = _require_int64("intermediate product", res * base)
        carry = _tdiv(_require_int64("intermediate carry", err * base), FP_FACTOR)
        res = _require_int64("intermediate sum", scaled + carry)
        err = _tmod(res, FP_FACTOR)
        res = _tdiv(res, FP_FACTOR)

    return _require_int64("power", res + fp_round(err))
