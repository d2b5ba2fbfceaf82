from __future__ import annotations

from typing import Dict, Type

from routesim.protocols.base import RoutingSolver
from routesim.protocols.distance_vector import DistanceVectorSolver
from routesim.protocols.link_state import LinkStateSolver

_REGISTRY: Dict[str, Type[RoutingSolver]] = {
    "distvec": DistanceVectorSolver,
    "linkstate": LinkStateSolver,
}

_ALIASES: Dict[str, str] = {
    "dv": "distvec",
    "distance_vector": "distvec",
    "ls": "linkstate",
    "link_state": "linkstate",
}


def register_solver(name: str, solver_cls: Type[RoutingSolver]) -> None:
    _REGISTRY[name] = solver_cls


def load_solver(name: str) -> Type[RoutingSolver]:
    key = name.lower()
    key = _ALIASES.get(key, key)
    if key not in _REGISTRY:
        raise KeyError(f"Unknown protocol: {name}. Available: {sorted(_REGISTRY.keys())}")
    return _REGISTRY[key]


def available_solvers() -> list[str]:
    return sorted(_REGISTRY.keys())
