"""Per-hop description of a computed route."""

from .errors import InvalidGraph
from .graph import GraphModel
from .models import CostPolicy, Edge, RouteLeg


def compute_route_legs(
    model: GraphModel,
    path: tuple[str, ...] | list[str],
    policy: CostPolicy = CostPolicy(),
) -> list[RouteLeg]:
    """Compute legs between consecutive path nodes with lengths, costs and cumulative distance."""
    legs: list[RouteLeg] = []
    cumulative_m = 0.0

    for i in range(1, len(path)):
        a, b = model.node(path[i - 1]), model.node(path[i])
        edge = _cheapest_edge(model, a.id, b.id, policy)

        leg = RouteLeg(
            leg=f"{a.id} -> {b.id}",
            source=a.id,
            target=b.id,
            source_lat=a.coordinate.lat,
            source_lon=a.coordinate.lon,
            target_lat=b.coordinate.lat,
            target_lon=b.coordinate.lon,
            surface=edge.surface,
            length_m=edge.weight,
            cost=policy.edge_cost(edge),
            cumulative_m_start=cumulative_m,
            cumulative_m_end=cumulative_m + edge.weight,
        )
        legs.append(leg)
        cumulative_m += edge.weight

    return legs


def _cheapest_edge(model: GraphModel, source: str, target: str, policy: CostPolicy) -> Edge:
    """Pick the edge a shortest path would have used between two adjacent nodes."""
    candidates = [e for e in model.adjacency(source) if e.target == target]
    if not candidates:
        raise InvalidGraph(f"No edge connects {source!r} to {target!r}")
    return min(candidates, key=policy.edge_cost)
