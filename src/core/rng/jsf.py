"""
Small-state mixing generator (Bob Jenkins' "small fast" 32-bit variant).

The state is four unsigned 32-bit words. Each step mixes them with two rotates,
two adds and a subtract, all modulo 2**32, and emits the new ``d`` word.

Functions here are pure: they take a `GeneratorState` and return a new one.
Mutable, per-stream ownership lives in `streams.py`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SeedDomainError

WORD_MASK: int = 0xFFFFFFFF
SEED_MASK: int = (1 << 64) - 1

INIT_A: int = 0xF1EA5EED
WARMUP_ROUNDS: int = 20


@dataclass(frozen=True)
class GeneratorState:
    """The complete generator state: four unsigned 32-bit words."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d"):
            w = getattr(self, name)
            if not isinstance(w, int) or isinstance(w, bool) or not 0 <= w <= WORD_MASK:
                raise ValueError(f"state word {name} must be an unsigned 32-bit int")


def rot(x: int, k: int) -> int:
    """Rotate a 32-bit word left by ``k`` bits."""
    return ((x << k) | (x >> (32 - k))) & WORD_MASK


def ranval(state: GeneratorState) -> tuple[int, GeneratorState]:
    """Advance one step. Returns ``(output_word, next_state)``."""
    e = (state.a - rot(state.b, 27)) & WORD_MASK
    a = state.b ^ rot(state.c, 17)
    b = (state.c + state.d) & WORD_MASK
    c = (state.d + e) & WORD_MASK
    d = (e + a) & WORD_MASK
    return d, GeneratorState(a=a, b=b, c=c, d=d)


def raninit(seed: int) -> GeneratorState:
    """
    Build a warmed-up state from a 64-bit seed.

    ``b``, ``c`` and ``d`` start at the low word of the seed, the high word is
    folded into ``c``, and the first `WARMUP_ROUNDS` outputs are discarded.
    """
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError("seed must be an int")
    if seed < 0 or seed > SEED_MASK:
        raise SeedDomainError(f"seed must be an unsigned 64-bit int, got {seed}")

    lo = seed & WORD_MASK
    hi = (seed >> 32) & WORD_MASK
    state = GeneratorState(a=INIT_A, b=lo, c=lo ^ hi, d=lo)
    for _ in range(WARMUP_ROUNDS):
        _, state = ranval(state)
    return state
