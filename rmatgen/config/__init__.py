"""Generator configuration system with frozen, hashable, serializable dataclasses."""

from rmatgen.config.experiment import GeneratorConfig, GraphConfig
from rmatgen.config.defaults import DEFAULT_CONFIG
from rmatgen.config.hashing import config_hash, graph_config_hash, full_config_hash
from rmatgen.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
    load_config,
)

__all__ = [
    "GeneratorConfig",
    "GraphConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "graph_config_hash",
    "full_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
    "load_config",
]
