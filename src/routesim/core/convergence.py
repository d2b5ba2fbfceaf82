from __future__ import annotations

import hashlib
import json

from routesim.model import RoutingState


def hash_routes(state: RoutingState) -> str:
    normalized: dict[str, dict[str, list[int]]] = {}
    for node, routes in sorted(state.route_map().items()):
        normalized[str(node)] = {str(dst): [int(v) for v in entry] for dst, entry in sorted(routes.items())}
    payload = json.dumps(normalized, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
