"""
Loading and validation of reference scenarios.

`scenarios.yaml` (next to this module) is the source of truth for which vectors
the reference document contains. It is parsed with `yaml.safe_load` and checked
into frozen dataclasses; anything malformed raises `ScenarioError` rather than
producing a silently different document.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..core.fixpt.math import FP_BASE, INT64_MAX
from ..core.rng import Stream
from ..core.rng.jsf import SEED_MASK

SCENARIOS_VERSION = 1

# Largest integer whose fixed-point form still fits int64.
MAX_SQRT_INPUT = INT64_MAX >> FP_BASE


class ScenarioError(ValueError):
    """Raised when a scenario file is malformed."""


@dataclass(frozen=True)
class RngScenario:
    """Seed once, then draw ``count`` values from ``[lower, upper]``.

    With ``pair_base`` set, each value combines two consecutive draws as
    ``lo + hi * pair_base``.
    """

    label: str
    seed: int
    lower: int
    upper: int
    count: int
    pair_base: int | None = None


@dataclass(frozen=True)
class PowScenario:
    label: str
    base: int
    min_exponent: int
    max_exponent: int


@dataclass(frozen=True)
class ScenarioSet:
    stream: int
    rng: tuple[RngScenario, ...]
    sqrt_min: int
    sqrt_max: int
    pow: tuple[PowScenario, ...]


def default_scenarios_path() -> Path:
    return Path(__file__).resolve().parent / "scenarios.yaml"


def _require_mapping(where: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ScenarioError(f"{where} must be a mapping")
    return value


def _get_int(
    where: str,
    obj: Mapping[str, Any],
    key: str,
    *,
    lo: int | None = None,
    hi: int | None = None,
) -> int:
    if key not in obj:
        raise ScenarioError(f"{where}: missing {key!r}")
    v = obj[key]
    if not isinstance(v, int) or isinstance(v, bool):
        raise ScenarioError(f"{where}: {key!r} must be an int")
    if lo is not None and v < lo:
        raise ScenarioError(f"{where}: {key!r} must be >= {lo}")
    if hi is not None and v > hi:
        raise ScenarioError(f"{where}: {key!r} must be <= {hi}")
    return v


def _get_label(where: str, obj: Mapping[str, Any]) -> str:
    label = obj.get("label")
    if not isinstance(label, str) or not label:
        raise ScenarioError(f"{where}: 'label' must be a non-empty string")
    return label


def _parse_rng(obj: Mapping[str, Any], idx: int) -> RngScenario:
    where = f"rng.scenarios[{idx}]"
    _require_mapping(where, obj)
    scenario = RngScenario(
        label=_get_label(where, obj),
        seed=_get_int(where, obj, "seed", lo=1, hi=SEED_MASK),
        lower=_get_int(where, obj, "lower"),
        upper=_get_int(where, obj, "upper"),
        count=_get_int(where, obj, "count", lo=0),
        pair_base=_get_int(where, obj, "pair_base", lo=1) if "pair_base" in obj else None,
    )
    if scenario.upper < scenario.lower:
        raise ScenarioError(f"{where}: upper must be >= lower")
    return scenario


def _parse_pow(obj: Mapping[str, Any], idx: int) -> PowScenario:
    where = f"fixpt.pow[{idx}]"
    _require_mapping(where, obj)
    scenario = PowScenario(
        label=_get_label(where, obj),
        base=_get_int(where, obj, "base"),
        min_exponent=_get_int(where, obj, "min_exponent"),
        max_exponent=_get_int(where, obj, "max_exponent"),
    )
    if scenario.max_exponent < scenario.min_exponent:
        raise ScenarioError(f"{where}: max_exponent must be >= min_exponent")
    return scenario


def _unique_labels(where: str, labels: list[str]) -> None:
    seen: set[str] = set()
    for label in labels:
        if label in seen:
            raise ScenarioError(f"{where}: duplicate label {label!r}")
        seen.add(label)


def parse_scenarios(obj: Any) -> ScenarioSet:
    """Validate a decoded scenario document."""
    root = _require_mapping("scenario document", obj)
    version = root.get("version")
    if version != SCENARIOS_VERSION:
        raise ScenarioError(f"unsupported scenario version: {version!r}")

    rng = _require_mapping("rng", root.get("rng"))
    stream = _get_int("rng", rng, "stream", lo=int(min(Stream)), hi=int(max(Stream)))
    raw_rng = rng.get("scenarios")
    if not isinstance(raw_rng, list):
        raise ScenarioError("rng.scenarios must be a list")
    rng_scenarios = tuple(_parse_rng(item, i) for i, item in enumerate(raw_rng))
    _unique_labels("rng.scenarios", [s.label for s in rng_scenarios])

    fixpt = _require_mapping("fixpt", root.get("fixpt"))
    sqrt = _require_mapping("fixpt.sqrt", fixpt.get("sqrt"))
    sqrt_min = _get_int("fixpt.sqrt", sqrt, "min", lo=0)
    sqrt_max = _get_int("fixpt.sqrt", sqrt, "max", lo=sqrt_min, hi=MAX_SQRT_INPUT)
    raw_pow = fixpt.get("pow")
    if not isinstance(raw_pow, list):
        raise ScenarioError("fixpt.pow must be a list")
    pow_scenarios = tuple(_parse_pow(item, i) for i, item in enumerate(raw_pow))
    labels = [p.label for p in pow_scenarios]
    if "sqrt" in labels:
        raise ScenarioError("fixpt.pow: label 'sqrt' is reserved")
    _unique_labels("fixpt.pow", labels)

    return ScenarioSet(
        stream=stream,
        rng=rng_scenarios,
        sqrt_min=sqrt_min,
        sqrt_max=sqrt_max,
        pow=pow_scenarios,
    )


def load_scenarios(path: Path | None = None) -> ScenarioSet:
    """Load a scenario file (the packaged default when ``path`` is None)."""
    if path is None:
        return _load_default_scenarios()
    return _load_path(path)


def _load_path(path: Path) -> ScenarioSet:
    try:
        obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ScenarioError(f"invalid YAML in {path}: {exc}") from exc
    return parse_scenarios(obj)


@lru_cache(maxsize=1)
def _load_default_scenarios() -> ScenarioSet:
    return _load_path(default_scenarios_path())
