"""
Core deterministic algorithms: generator streams and fixed-point arithmetic.
"""

from .fixpt import (
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
from .rng import GeneratorState, RandomRange, RandomStreams, Stream

__all__ = [
    "FP_BASE",
    "FP_FACTOR",
    "fp_div",
    "fp_floor",
    "fp_from_float",
    "fp_from_int",
    "fp_mul",
    "fp_pow",
    "fp_round",
    "fp_sqrt",
    "fp_to_float",
    "GeneratorState",
    "RandomRange",
    "RandomStreams",
    "Stream",
]
