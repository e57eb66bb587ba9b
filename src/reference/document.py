"""Build the reference document: the `rng` and `fixpt` vector sections.

Shape::

    {
      "rng":   {label: [int, ...], ...},
      "fixpt": {"sqrt": {"0": int, ...}, "pow_2": {"-5": int, ...}, ...}
    }

Fixed-point keys are decimal strings of the integer input (the sqrt argument
or the exponent); values are Q16.16 integers.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.fixpt import fp_from_int, fp_pow, fp_sqrt
from ..core.rng import RandomStreams
from .scenarios import PowScenario, RngScenario, ScenarioSet, load_scenarios

logger = logging.getLogger(__name__)


def run_rng_scenario(scenario: RngScenario, *, stream: int = 0) -> list[int]:
    """Seed a fresh `RandomStreams` and draw the scenario's sequence."""
    streams = RandomStreams()
    streams.seed_all(scenario.seed)
    out: list[int] = []
    for _ in range(scenario.count):
        if scenario.pair_base is None:
            out.append(streams.rand_range(stream, scenario.lower, scenario.upper))
        else:
            lo = streams.rand_range(stream, scenario.lower, scenario.upper)
            hi = streams.rand_range(stream, scenario.lower, scenario.upper)
            out.append(lo + hi * scenario.pair_base)
    return out


def sqrt_table(lo: int, hi: int) -> dict[str, int]:
    return {str(i): fp_sqrt(fp_from_int(i)) for i in range(lo, hi + 1)}


def pow_table(scenario: PowScenario) -> dict[str, int]:
    base = fp_from_int(scenario.base)
    return {
        str(e): fp_pow(base, e)
        for e in range(scenario.min_exponent, scenario.max_exponent + 1)
    }


def build_rng_section(scenarios: ScenarioSet) -> dict[str, list[int]]:
    return {s.label: run_rng_scenario(s, stream=scenarios.stream) for s in scenarios.rng}


def build_fixpt_section(scenarios: ScenarioSet) -> dict[str, dict[str, int]]:
    section: dict[str, dict[str, int]] = {
        "sqrt": sqrt_table(scenarios.sqrt_min, scenarios.sqrt_max),
    }
    for p in scenarios.pow:
        section[p.label] = pow_table(p)
    return section


def build_reference_document(scenarios: ScenarioSet | None = None) -> dict[str, Any]:
    """Compute every reference vector. Deterministic for a given scenario set."""
    if scenarios is None:
        scenarios = load_scenarios()
    document = {
        "rng": build_rng_section(scenarios),
        "fixpt": build_fixpt_section(scenarios),
    }
    logger.info(
        "built reference document: %d rng scenarios, %d fixpt tables",
        len(document["rng"]),
        len(document["fixpt"]),
    )
    return document


def diff_documents(expected: Any, actual: Any, *, path: str = "") -> list[str]:
    """Dotted paths where two decoded documents disagree (empty when equal)."""
    if isinstance(expected, dict) and isinstance(actual, dict):
        out: list[str] = []
        for key in sorted(set(expected) | set(actual)):
            sub = f"{path}.{key}" if path else str(key)
            if key not in expected or key not in actual:
                out.append(sub)
            else:
                out.extend(diff_documents(expected[key], actual[key], path=sub))
        return out
    if isinstance(expected, list) and isinstance(actual, list):
        if len(expected) != len(actual):
            return [path]
        out = []
        for i, (e, a) in enumerate(zip(expected, actual)):
            out.extend(diff_documents(e, a, path=f"{path}[{i}]"))
        return out
    if type(expected) is not type(actual) or expected != actual:
        return [path]
    return []
