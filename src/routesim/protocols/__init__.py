"""Route computation engines."""

from routesim.protocols.base import NegativeCostError, RoutingSolver
from routesim.protocols.distance_vector import DistanceVectorSolver
from routesim.protocols.link_state import LinkStateSolver
from routesim.protocols.registry import available_solvers, load_solver, register_solver

__all__ = [
    "DistanceVectorSolver",
    "LinkStateSolver",
    "NegativeCostError",
    "RoutingSolver",
    "available_solvers",
    "load_solver",
    "register_solver",
]
