from __future__ import annotations

from typing import Any, Dict

from routesim.protocols.registry import available_solvers, load_solver
from routesim.runtime.config import LOG_LEVELS


def validate_config(cfg: Dict[str, Any]) -> list[str]:
    errors: list[str] = []

    protocol = cfg.get("protocol", "distvec")
    try:
        load_solver(str(protocol))
    except KeyError:
        errors.append(f"protocol must be one of {available_solvers()}, got {protocol!r}")

    for section in ("inputs", "changes", "parsing"):
        value = cfg.get(section, {})
        if value is not None and not isinstance(value, dict):
            errors.append(f"'{section}' must be a dict")

    changes = cfg.get("changes", {})
    if isinstance(changes, dict) and "removal_sentinel" in changes:
        sentinel = changes["removal_sentinel"]
        if isinstance(sentinel, bool) or not isinstance(sentinel, int):
            errors.append("changes.removal_sentinel must be an integer")

    log_level = str(cfg.get("log_level", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        errors.append(f"log_level must be one of {list(LOG_LEVELS)}")

    return errors
