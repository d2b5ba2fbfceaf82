"""Topology store shared by all solvers."""

from routesim.topology.topology import Cost, Edge, NodeId, Topology

__all__ = [
    "Cost",
    "Edge",
    "NodeId",
    "Topology",
]
