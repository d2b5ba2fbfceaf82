from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from routesim.model import RoutingState
from routesim.topology import Topology


class NegativeCostError(ValueError):
    pass


class RoutingSolver(ABC):
    """Computes a complete routing state from a topology.

    Solvers only read the topology and always rebuild every table from
    scratch; nothing from a previous run is reused.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger(f"routesim.protocols.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def solve(self, topology: Topology) -> RoutingState:
        raise NotImplementedError
