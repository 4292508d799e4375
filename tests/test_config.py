"""Tests for the generator configuration system."""

import json
from dataclasses import FrozenInstanceError, replace

import dacite
import pytest

from rmatgen.config import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    GraphConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_json,
    full_config_hash,
    graph_config_hash,
    load_config,
)


class TestDefaults:
    """DEFAULT_CONFIG has the documented values."""

    def test_default_values(self):
        assert DEFAULT_CONFIG.graph.n == 4
        assert DEFAULT_CONFIG.graph.directed is False
        assert DEFAULT_CONFIG.graph.self_connections_allowed is False
        assert DEFAULT_CONFIG.graph.probabilities == (0.5, 0.125, 0.125, 0.25)
        assert DEFAULT_CONFIG.graph.target_density == 0.25
        assert DEFAULT_CONFIG.seed == 42


class TestImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_graph_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.graph.n = 10  # type: ignore[misc]


class TestValidation:
    """GraphConfig.__post_init__ rejects invalid parameters."""

    def test_negative_n(self):
        with pytest.raises(ValueError, match="non-negative"):
            GraphConfig(n=-1)

    @pytest.mark.parametrize("density", [-0.1, 1.01])
    def test_density_out_of_range(self, density):
        with pytest.raises(ValueError, match="target_density"):
            GraphConfig(target_density=density)

    def test_density_bounds_accepted(self):
        assert GraphConfig(target_density=0.0).target_density == 0.0
        assert GraphConfig(target_density=1.0).target_density == 1.0

    def test_probability_count(self):
        with pytest.raises(ValueError, match="4 values"):
            GraphConfig(probabilities=(0.5, 0.5))

    def test_probability_sum(self):
        with pytest.raises(ValueError, match="sum to 1"):
            GraphConfig(probabilities=(0.1, 0.2, 0.3, 0.3))

    def test_probability_non_finite(self):
        with pytest.raises(ValueError, match="finite"):
            GraphConfig(probabilities=(float("inf"), float("-inf"), 1.0, 0.0))

    def test_replace_revalidates(self):
        with pytest.raises(ValueError):
            replace(DEFAULT_CONFIG.graph, n=-2)


class TestRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(restored) == config_hash(DEFAULT_CONFIG)
        assert restored == DEFAULT_CONFIG

    def test_round_trip_tuples(self):
        cfg = replace(DEFAULT_CONFIG, tags=("a", "b"))
        restored = config_from_json(config_to_json(cfg))
        assert restored.tags == ("a", "b")
        assert isinstance(restored.graph.probabilities, tuple)

    def test_unseeded_round_trip(self):
        cfg = replace(DEFAULT_CONFIG, seed=None)
        assert config_from_json(config_to_json(cfg)).seed is None

    def test_integer_probabilities_coerced(self):
        d = {"graph": {"probabilities": [1, 0, 0, 0]}}
        cfg = config_from_dict(d)
        assert cfg.graph.probabilities == (1.0, 0.0, 0.0, 0.0)

    def test_unknown_key_rejected(self):
        with pytest.raises(dacite.UnexpectedDataError):
            config_from_dict({"graph": {"n": 3, "colour": "red"}})

    def test_invalid_values_rejected_on_load(self):
        with pytest.raises(ValueError, match="target_density"):
            config_from_dict({"graph": {"target_density": 2.0}})

    def test_load_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"graph": {"n": 2, "directed": True}, "seed": 5}))
        cfg = load_config(path)
        assert cfg.graph.n == 2
        assert cfg.graph.directed is True
        assert cfg.seed == 5
        assert isinstance(cfg, GeneratorConfig)


class TestHashing:
    """Deterministic hashes; graph hash ignores seed and metadata."""

    def test_hash_is_16_hex_chars(self):
        h = config_hash(DEFAULT_CONFIG)
        assert len(h) == 16
        int(h, 16)

    def test_hash_deterministic(self):
        assert config_hash(DEFAULT_CONFIG) == config_hash(GeneratorConfig())

    def test_graph_hash_ignores_seed_and_tags(self):
        cfg = replace(DEFAULT_CONFIG, seed=7, tags=("x",), description="d")
        assert graph_config_hash(cfg) == graph_config_hash(DEFAULT_CONFIG)
        assert full_config_hash(cfg) != full_config_hash(DEFAULT_CONFIG)

    def test_graph_hash_tracks_graph_params(self):
        cfg = replace(DEFAULT_CONFIG, graph=GraphConfig(directed=True))
        assert graph_config_hash(cfg) != graph_config_hash(DEFAULT_CONFIG)

    def test_exclude_fields(self):
        a = replace(DEFAULT_CONFIG, seed=1)
        b = replace(DEFAULT_CONFIG, seed=2)
        assert config_hash(a, exclude_fields=["seed"]) == config_hash(
            b, exclude_fields=["seed"]
        )
