"""Routing state and input record models."""

from routesim.model.records import REMOVE_EDGE, ChangeRecord, MessageQuery
from routesim.model.routing import INFINITY, RouteEntry, RoutingState, RoutingTable

__all__ = [
    "ChangeRecord",
    "INFINITY",
    "MessageQuery",
    "REMOVE_EDGE",
    "RouteEntry",
    "RoutingState",
    "RoutingTable",
]
