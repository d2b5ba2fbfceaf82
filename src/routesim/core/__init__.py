"""Path resolution, change application and the simulation driver."""

from routesim.core.changes import ChangeApplicator
from routesim.core.convergence import hash_routes
from routesim.core.resolver import PathResolver, PathResult, PathStatus, QueryResult
from routesim.core.simulation import Simulation, SimulationRound

__all__ = [
    "ChangeApplicator",
    "PathResolver",
    "PathResult",
    "PathStatus",
    "QueryResult",
    "Simulation",
    "SimulationRound",
    "hash_routes",
]
