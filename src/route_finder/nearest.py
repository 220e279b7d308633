"""Snap arbitrary coordinates to the closest graph node."""

from .errors import EmptyGraph
from .geo import haversine_distance
from .graph import GraphModel
from .models import Coordinate


def nearest_node(point: Coordinate, model: GraphModel) -> str:
    """Return the id of the node closest to ``point``.

    Linear scan over all nodes. Nodes at exactly the same distance are
    resolved to the lowest node id, so the answer does not depend on node
    order.
    """
    if not len(model):
        raise EmptyGraph("Cannot snap a point to a graph without nodes")

    best_key: tuple[float, str] | None = None
    for node in model.nodes:
        key = (haversine_distance(point, node.coordinate), node.id)
        if best_key is None or key < best_key:
            best_key = key
    return best_key[1]
