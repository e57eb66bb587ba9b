"""Tests for src/reference/scenarios.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.reference.document import run_rng_scenario
from src.reference.scenarios import (
    MAX_SQRT_INPUT,
    RngScenario,
    ScenarioError,
    load_scenarios,
    parse_scenarios,
)


def _minimal() -> dict:
    return {
        "version": 1,
        "rng": {
            "stream": 0,
            "scenarios": [{"label": "a", "seed": 5, "lower": 0, "upper": 9, "count": 3}],
        },
        "fixpt": {
            "sqrt": {"min": 0, "max": 3},
            "pow": [{"label": "pow_2", "base": 2, "min_exponent": -1, "max_exponent": 1}],
        },
    }


class TestDefaultScenarios:
    def test_labels(self):
        s = load_scenarios()
        assert [r.label for r in s.rng] == [
            "seed_12345_range_0_999",
            "seed_42_range_0_999",
            "seed_1_range_0_99",
            "seed_1_range_0_999",
            "seed_1_level_seeds",
        ]
        assert [p.label for p in s.pow] == ["pow_2", "pow_3"]

    def test_level_seed_pairing(self):
        s = load_scenarios()
        level = s.rng[-1]
        assert level.pair_base == 10000
        assert (level.lower, level.upper, level.count) == (0, 9999, 10)

    def test_sqrt_domain(self):
        s = load_scenarios()
        assert (s.sqrt_min, s.sqrt_max) == (0, 127)

    def test_cached(self):
        assert load_scenarios() is load_scenarios()


class TestParse:
    def test_minimal(self):
        s = parse_scenarios(_minimal())
        assert s.rng == (RngScenario(label="a", seed=5, lower=0, upper=9, count=3),)

    def test_bad_version(self):
        doc = _minimal()
        doc["version"] = 2
        with pytest.raises(ScenarioError, match="version"):
            parse_scenarios(doc)

    def test_missing_key(self):
        doc = _minimal()
        del doc["rng"]["scenarios"][0]["count"]
        with pytest.raises(ScenarioError, match="count"):
            parse_scenarios(doc)

    def test_zero_seed_rejected(self):
        doc = _minimal()
        doc["rng"]["scenarios"][0]["seed"] = 0
        with pytest.raises(ScenarioError, match="seed"):
            parse_scenarios(doc)

    def test_inverted_bounds(self):
        doc = _minimal()
        doc["rng"]["scenarios"][0]["upper"] = -1
        with pytest.raises(ScenarioError, match="upper"):
            parse_scenarios(doc)

    def test_bool_is_not_int(self):
        doc = _minimal()
        doc["rng"]["scenarios"][0]["count"] = True
        with pytest.raises(ScenarioError):
            parse_scenarios(doc)

    def test_duplicate_label(self):
        doc = _minimal()
        doc["rng"]["scenarios"].append(dict(doc["rng"]["scenarios"][0]))
        with pytest.raises(ScenarioError, match="duplicate"):
            parse_scenarios(doc)

    def test_reserved_pow_label(self):
        doc = _minimal()
        doc["fixpt"]["pow"][0]["label"] = "sqrt"
        with pytest.raises(ScenarioError, match="reserved"):
            parse_scenarios(doc)

    def test_largest_seed_accepted(self):
        doc = _minimal()
        doc["rng"]["scenarios"][0]["seed"] = (1 << 64) - 1
        assert parse_scenarios(doc).rng[0].seed == (1 << 64) - 1

    def test_seed_wider_than_64_bits(self):
        doc = _minimal()
        doc["rng"]["scenarios"][0]["seed"] = 1 << 64
        with pytest.raises(ScenarioError, match="seed"):
            parse_scenarios(doc)

    @pytest.mark.parametrize("stream", [-1, 2])
    def test_unknown_stream(self, stream):
        doc = _minimal()
        doc["rng"]["stream"] = stream
        with pytest.raises(ScenarioError, match="stream"):
            parse_scenarios(doc)

    def test_sqrt_input_too_wide_for_fixed_point(self):
        doc = _minimal()
        doc["fixpt"]["sqrt"]["max"] = MAX_SQRT_INPUT + 1
        with pytest.raises(ScenarioError, match="max"):
            parse_scenarios(doc)

    def test_not_a_mapping(self):
        with pytest.raises(ScenarioError):
            parse_scenarios(["nope"])


class TestLoadPath:
    def test_invalid_yaml(self, tmp_path: Path):
        p = tmp_path / "bad.yaml"
        p.write_text("rng: [unclosed\n", encoding="utf-8")
        with pytest.raises(ScenarioError, match="invalid YAML"):
            load_scenarios(p)

    def test_custom_file(self, tmp_path: Path):
        p = tmp_path / "s.yaml"
        p.write_text(
            "version: 1\n"
            "rng:\n"
            "  stream: 1\n"
            "  scenarios:\n"
            "    - {label: dice, seed: 7, lower: 1, upper: 6, count: 4}\n"
            "fixpt:\n"
            "  sqrt: {min: 2, max: 2}\n"
            "  pow: []\n",
            encoding="utf-8",
        )
        s = load_scenarios(p)
        assert s.stream == 1
        assert s.rng[0].label == "dice"


class TestRunScenario:
    def test_plain(self):
        s = RngScenario(label="x", seed=7, lower=1, upper=6, count=10)
        assert run_rng_scenario(s) == [2, 3, 6, 6, 4, 6, 4, 4, 5, 1]

    def test_paired(self):
        plain = run_rng_scenario(RngScenario(label="p", seed=1, lower=0, upper=9999, count=4))
        paired = run_rng_scenario(RngScenario(label="q", seed=1, lower=0, upper=9999, count=2, pair_base=10000))
        assert paired == [plain[0] + plain[1] * 10000, plain[2] + plain[3] * 10000]
