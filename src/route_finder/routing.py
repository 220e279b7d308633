"""Dijkstra shortest paths over a ``GraphModel``."""

from __future__ import annotations

import heapq
import logging
import math

from .graph import GraphModel
from .models import CostPolicy, PathResult

logger = logging.getLogger(__name__)

DEFAULT_POLICY = CostPolicy()


def shortest_path(
    model: GraphModel,
    start: str,
    goal: str,
    policy: CostPolicy = DEFAULT_POLICY,
) -> PathResult:
    """Find the cheapest path from ``start`` to ``goal``.

    Unpaved edges cost ``weight * policy.unpaved_multiplier``. The search
    stops as soon as ``goal`` is settled. Queue entries are ordered by
    ``(distance, node index)``, so equal-cost ties resolve in node order.

    Raises:
        UnknownNode: if ``start`` or ``goal`` is not in ``model``.
    """
    source = model.index_of(start)
    target = model.index_of(goal)

    dist = [math.inf] * len(model)
    prev = [-1] * len(model)
    visited = [False] * len(model)
    dist[source] = 0.0
    queue = [(0.0, source)]
    explored = 0

    while queue:
        d, u = heapq.heappop(queue)
        if visited[u]:
            continue
        visited[u] = True
        explored += 1
        if u == target:
            break

        for edge in model.adjacency_at(u):
            v = model.index_of(edge.target)
            if visited[v]:
                continue
            alt = d + policy.edge_cost(edge)
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(queue, (alt, v))

    logger.debug("Explored %d of %d nodes routing %s -> %s", explored, len(model), start, goal)

    if not visited[target]:
        return PathResult(total_cost=math.inf, path=(), explored_count=explored)

    nodes = model.nodes
    path = []
    i = target
    while i != -1:
        path.append(nodes[i].id)
        i = prev[i]
    path.reverse()
    return PathResult(total_cost=dist[target], path=tuple(path), explored_count=explored)
