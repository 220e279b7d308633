"""Immutable node/edge graph shared by every graph source."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .errors import InvalidGraph, UnknownNode
from .models import BoundingBox, Edge, Node


class GraphModel:
    """A finished, read-only routing graph.

    Nodes are kept in the order they were given and each receives a compact
    integer index; adjacency is the grouping of ``edges`` by ``source`` in
    input edge order. Instances are never mutated after construction, so
    concurrent readers need no locking.
    """

    __slots__ = ("_nodes", "_edges", "_index", "_adjacency")

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]):
        nodes = tuple(nodes)
        edges = tuple(edges)

        index: dict[str, int] = {}
        for i, node in enumerate(nodes):
            if node.id in index:
                raise InvalidGraph(f"Duplicate node id: {node.id!r}")
            index[node.id] = i

        adjacency: list[list[Edge]] = [[] for _ in nodes]
        for edge in edges:
            if edge.source not in index or edge.target not in index:
                raise InvalidGraph(f"Edge {edge.source!r} -> {edge.target!r} references an unknown node")
            if math.isnan(edge.weight) or edge.weight < 0:
                raise InvalidGraph(f"Edge {edge.source!r} -> {edge.target!r} has invalid weight {edge.weight}")
            adjacency[index[edge.source]].append(edge)

        self._nodes = nodes
        self._edges = edges
        self._index = index
        self._adjacency = tuple(tuple(out) for out in adjacency)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __repr__(self) -> str:
        return f"GraphModel(nodes={len(self._nodes)}, edges={len(self._edges)})"

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def index_of(self, node_id: str) -> int:
        try:
            return self._index[node_id]
        except KeyError:
            raise UnknownNode(node_id) from None

    def node(self, node_id: str) -> Node:
        return self._nodes[self.index_of(node_id)]

    def adjacency(self, node_id: str) -> tuple[Edge, ...]:
        """Outgoing edges of ``node_id``, empty for a node without any."""
        return self._adjacency[self.index_of(node_id)]

    def adjacency_at(self, index: int) -> tuple[Edge, ...]:
        return self._adjacency[index]

    def bounds(self) -> BoundingBox | None:
        if not self._nodes:
            return None
        lats = [n.coordinate.lat for n in self._nodes]
        lons = [n.coordinate.lon for n in self._nodes]
        return BoundingBox(south=min(lats), west=min(lons), north=max(lats), east=max(lons))
