"""`fixpt`: Q16.16 fixed-point arithmetic with C-compatible rounding.

Values are plain ints equal to the real value times ``2**16``. The functions
reproduce the reference C routines bit for bit, including their rounding quirks.

Public API:
- `fp_mul(x, y)`, `fp_div(x, y)`, `fp_round(x)`
- `fp_sqrt(u)` (lookup table for 0..127, bisection elsewhere)
- `fp_pow(base, expn)` (integer exponent, accumulated rounding error)
- conversions `fp_from_int`, `fp_from_float`, `fp_to_float`, `fp_floor`
"""

from .errors import FixptDomainError, FixptError, FixptOverflowError
from .math import (
    FP_BASE,
    FP_FACTOR,
    fp_div,
    fp_floor,
    fp_from_float,
    fp_from_int,
    fp_mul,
    fp_pow,
    fp_round,
    fp_sqrt,
    fp_to_float,
)
from .tables import SQUARE_ROOTS

__all__ = [
    "FP_BASE",
    "FP_FACTOR",
    "SQUARE_ROOTS",
    "fp_div",
    "fp_floor",
    "fp_from_float",
    "fp_from_int",
    "fp_mul",
    "fp_pow",
    "fp_round",
    "fp_sqrt",
    "fp_to_float",
    "FixptError",
    "FixptDomainError",
    "FixptOverflowError",
]
