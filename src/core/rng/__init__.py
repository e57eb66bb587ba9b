"""`rng`: deterministic 32-bit generator streams.

- `jsf.py`: pure state mixing (`raninit`, `ranval`) over frozen `GeneratorState`.
- `streams.py`: `RandomStreams`, owning the substantive and cosmetic streams,
  with seeding, raw/ranged/inclusive draws and the derived dice helpers.

Seeding with 0 is a no-op sentinel, and an inclusive range whose upper bound does
not exceed its lower bound returns the lower bound without consuming a draw.
"""

from .errors import RangeDomainError, RngError, SeedDomainError, UnknownStreamError
from .jsf import GeneratorState, ranval, raninit, rot
from .streams import (
    RAND_MAX_COMBO,
    RandomRange,
    RandomStreams,
    Stream,
    clamp,
    fill_sequential_list,
)

__all__ = [
    "GeneratorState",
    "ranval",
    "raninit",
    "rot",
    "RAND_MAX_COMBO",
    "RandomRange",
    "RandomStreams",
    "Stream",
    "clamp",
    "fill_sequential_list",
    "RngError",
    "RangeDomainError",
    "SeedDomainError",
    "UnknownStreamError",
]
