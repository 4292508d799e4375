"""JSON serialization and deserialization for generator configs."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from rmatgen.config.experiment import GeneratorConfig

# strict rejects unknown keys; cast turns JSON arrays back into tuples
_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_json(config: GeneratorConfig) -> str:
    """Serialize a GeneratorConfig to a JSON string (sorted, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GeneratorConfig:
    """Deserialize a JSON string to a GeneratorConfig."""
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: GeneratorConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> GeneratorConfig:
    """Reconstruct a GeneratorConfig from a plain dictionary.

    Integer probabilities such as ``[1, 0, 0, 0]`` are accepted by
    coercing them to floats before type checking.
    """
    graph = d.get("graph")
    if isinstance(graph, dict) and "probabilities" in graph:
        d = {
            **d,
            "graph": {
                **graph,
                "probabilities": [float(p) for p in graph["probabilities"]],
            },
        }
    return from_dict(data_class=GeneratorConfig, data=d, config=_DACITE_CONFIG)


def load_config(path: str | Path) -> GeneratorConfig:
    return config_from_json(Path(path).read_text())
