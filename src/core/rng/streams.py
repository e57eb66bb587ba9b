"""Seeded generator streams and the draw helpers built on them.

`RandomStreams` owns one `GeneratorState` per `Stream`. Streams never share
state: draws on the cosmetic stream leave the substantive sequence untouched,
so the two may run side by side (each from a single thread).

Every caller names the stream explicitly; there is no process-wide "current
stream". Construct a fresh `RandomStreams` wherever isolation is needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, unique
from typing import MutableSequence, Union

from .errors import RangeDomainError, UnknownStreamError
from .jsf import WORD_MASK, GeneratorState, ranval, raninit

logger = logging.getLogger(__name__)

# Ceiling used to derive the rejection-sampling divisor.
RAND_MAX_COMBO: int = WORD_MASK


@unique
class Stream(IntEnum):
    """Generator stream indices."""
    SUBSTANTIVE = 0
    COSMETIC = 1


StreamLike = Union[Stream, int]


@dataclass(frozen=True)
class RandomRange:
    """An inclusive range with a clump factor (1 = uniform)."""

    lower_bound: int
    upper_bound: int
    clump_factor: int = 1


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp ``value`` into ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def fill_sequential_list(items: MutableSequence[int]) -> None:
    """Overwrite ``items`` in place with ``0, 1, 2, ...``."""
    for i in range(len(items)):
        items[i] = i


def _resolve(stream: StreamLike) -> Stream:
    try:
        return Stream(stream)
    except ValueError:
        raise UnknownStreamError(f"unknown stream index: {stream!r}") from None


class RandomStreams:
    """Two independent generator streams plus a substantive draw counter."""

    def __init__(self) -> None:
        self._states: dict[Stream, GeneratorState] = {s: GeneratorState() for s in Stream}
        self.random_numbers_generated = 0

    # -- State access ---------------------------------------------------------

    def state(self, stream: StreamLike) -> GeneratorState:
        """Current (immutable) state of ``stream``."""
        return self._states[_resolve(stream)]

    def reset_random_numbers_generated(self) -> None:
        self.random_numbers_generated = 0

    # -- Seeding --------------------------------------------------------------

    def seed(self, stream: StreamLike, seed: int) -> int:
        """
        Re-initialize one stream from a 64-bit seed and return the seed.

        ``seed == 0`` is a sentinel: nothing is seeded and 0 is returned.
        """
        s = _resolve(stream)
        if seed == 0:
            logger.debug("seed 0 on stream %s ignored", s.name)
            return 0
        self._states[s] = raninit(seed)
        logger.debug("stream %s seeded with %s", s.name, seed)
        return seed

    def seed_all(self, seed: int) -> int:
        """Seed every stream with ``seed`` and zero the draw counter.

        Same sentinel rule as `seed`: 0 leaves streams and counter unchanged.
        """
        if seed == 0:
            logger.debug("seed 0 ignored for all streams")
            return 0
        state = raninit(seed)
        for s in Stream:
            self._states[s] = state
        self.random_numbers_generated = 0
        logger.debug("all streams seeded with %s", seed)
        return seed

    # -- Raw and ranged draws -------------------------------------------------

    def draw(self, stream: StreamLike) -> int:
        """Advance ``stream`` one step and return the unsigned 32-bit output."""
        s = _resolve(stream)
        word, self._states[s] = ranval(self._states[s])
        return word

    def ranged_draw(self, stream: StreamLike, n: int) -> int:
        """Unbiased value in ``[0, n)``.

        Raw words are scaled down by ``RAND_MAX_COMBO // n`` and any quotient
        ``>= n`` is rejected and redrawn.
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError("n must be an int")
        if n <= 0 or n > RAND_MAX_COMBO:
            raise RangeDomainError(f"n must be in [1, {RAND_MAX_COMBO}], got {n}")
        s = _resolve(stream)
        divisor = RAND_MAX_COMBO // n
        while True:
            r = self.draw(s) // divisor
            if r < n:
                return r

    def rand_range(self, stream: StreamLike, lower_bound: int, upper_bound: int) -> int:
        """Uniform value in ``[lower_bound, upper_bound]``.

        An empty or single-point range returns ``lower_bound`` without drawing.
        """
        if upper_bound <= lower_bound:
            return lower_bound
        s = _resolve(stream)
        value = lower_bound + self.ranged_draw(s, upper_bound - lower_bound + 1)
        if s is Stream.SUBSTANTIVE:
            self.random_numbers_generated += 1
        return value

    def rand_64bits(self, stream: StreamLike) -> int:
        """Two consecutive words joined as ``hi << 32 | lo``."""
        s = _resolve(stream)
        if s is Stream.SUBSTANTIVE:
            self.random_numbers_generated += 1
        hi = self.draw(s)
        lo = self.draw(s)
        return (hi << 32) | lo

    # -- Derived helpers ------------------------------------------------------

    def rand_percent(self, stream: StreamLike, percent: int) -> bool:
        """True with probability ``percent``/100 (clamped to 0..100)."""
        return self.rand_range(stream, 0, 99) < clamp(percent, 0, 100)

    def rand_clumped_range(
        self,
        stream: StreamLike,
        lower_bound: int,
        upper_bound: int,
        clump_factor: int,
    ) -> int:
        """
        Sum of ``clump_factor`` dice spanning ``[lower_bound, upper_bound]``.

        The span is split as evenly as possible: the first
        ``span % clump_factor`` dice get one extra face.
        """
        if upper_bound <= lower_bound:
            return lower_bound
        if clump_factor <= 1:
            return self.rand_range(stream, lower_bound, upper_bound)

        span = upper_bound - lower_bound
        num_sides = span // clump_factor
        extra = span % clump_factor

        total = 0
        for i in range(clump_factor):
            sides = num_sides + 1 if i < extra else num_sides
            total += self.rand_range(stream, 0, sides)
        return total + lower_bound

    def rand_clump(self, stream: StreamLike, the_range: RandomRange) -> int:
        return self.rand_clumped_range(
            stream,
            the_range.lower_bound,
            the_range.upper_bound,
            the_range.clump_factor,
        )

    def shuffle_list(self, stream: StreamLike, items: MutableSequence) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(items) - 1):
            r = self.rand_range(stream, i, len(items) - 1)
            if i != r:
                items[i], items[r] = items[r], items[i]
