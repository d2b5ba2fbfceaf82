from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from routesim.model import REMOVE_EDGE
from routesim.utils.io import load_yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class InputPaths:
    topology: Optional[str] = None
    messages: Optional[str] = None
    changes: Optional[str] = None


@dataclass(frozen=True)
class SimulationConfig:
    protocol: str = "distvec"
    inputs: InputPaths = InputPaths()
    output: str = "output.txt"
    removal_sentinel: int = REMOVE_EDGE
    strict_input: bool = False
    log_level: str = "INFO"


def parse_simulation_config(raw: Dict[str, Any], base_dir: str | Path | None = None) -> SimulationConfig:
    inputs_raw = dict(raw.get("inputs", {}) or {})
    changes_raw = dict(raw.get("changes", {}) or {})
    parsing_raw = dict(raw.get("parsing", {}) or {})

    inputs = InputPaths(
        topology=_resolve(inputs_raw.get("topology"), base_dir),
        messages=_resolve(inputs_raw.get("messages"), base_dir),
        changes=_resolve(inputs_raw.get("changes"), base_dir),
    )
    return SimulationConfig(
        protocol=str(raw.get("protocol", "distvec")).lower(),
        inputs=inputs,
        output=_resolve(raw.get("output"), base_dir) or "output.txt",
        removal_sentinel=int(changes_raw.get("removal_sentinel", REMOVE_EDGE)),
        strict_input=bool(parsing_raw.get("strict", False)),
        log_level=str(raw.get("log_level", "INFO")).upper(),
    )


def load_simulation_config(path: str | Path) -> SimulationConfig:
    return parse_simulation_config(load_yaml(path), base_dir=Path(path).parent)


def _resolve(value: Any, base_dir: str | Path | None) -> Optional[str]:
    if value is None:
        return None
    p = Path(str(value))
    if base_dir is not None and not p.is_absolute():
        p = Path(base_dir) / p
    return str(p)
