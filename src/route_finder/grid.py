"""Synthetic lattice graph builder."""

from __future__ import annotations

import logging

from .geo import haversine_distance
from .graph import GraphModel
from .models import Coordinate, Edge, Node, Surface

logger = logging.getLogger(__name__)


def grid_node_id(row: int, col: int) -> str:
    """Id of the lattice node at ``(row, col)``; row 0 is the southern edge."""
    return f"r{row}c{col}"


def build_grid_graph(
    center: Coordinate,
    rows: int,
    cols: int,
    spacing_degrees: float,
) -> GraphModel:
    """Build a ``rows x cols`` 4-connected lattice centered on ``center``.

    Spacing is uniform in degrees along both axes, so east-west distances
    shrink with latitude. Every lattice neighbour pair is joined by two
    opposing paved edges weighted by great-circle distance. Longitudes past
    the antimeridian wrap around.

    Raises:
        ValueError: for empty dimensions, non-positive spacing, or a lattice
            whose latitude span leaves [-90, 90].
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid needs at least one row and column, got {rows}x{cols}")
    if not spacing_degrees > 0:
        raise ValueError(f"Grid spacing must be positive, got {spacing_degrees}")

    start_lat = center.lat - (rows - 1) * spacing_degrees / 2
    start_lon = center.lon - (cols - 1) * spacing_degrees / 2
    end_lat = start_lat + (rows - 1) * spacing_degrees
    if start_lat < -90 or end_lat > 90:
        raise ValueError(f"Grid latitudes {start_lat:.6f}..{end_lat:.6f} fall outside [-90, 90]")

    nodes: list[Node] = []
    for r in range(rows):
        for c in range(cols):
            coord = Coordinate(lat=start_lat + r * spacing_degrees, lon=_wrap_lon(start_lon + c * spacing_degrees))
            nodes.append(Node(id=grid_node_id(r, c), coordinate=coord))

    def at(r: int, c: int) -> Node:
        return nodes[r * cols + c]

    edges: list[Edge] = []
    for r in range(rows):
        for c in range(cols):
            a = at(r, c)
            # east and north neighbours only, so each pair is visited once
            neighbours = []
            if c < cols - 1:
                neighbours.append(at(r, c + 1))
            if r < rows - 1:
                neighbours.append(at(r + 1, c))
            for b in neighbours:
                weight = haversine_distance(a.coordinate, b.coordinate)
                edges.append(Edge(source=a.id, target=b.id, weight=weight, surface=Surface.PAVED))
                edges.append(Edge(source=b.id, target=a.id, weight=weight, surface=Surface.PAVED))

    logger.info("Built %dx%d grid graph: %d nodes, %d edges", rows, cols, len(nodes), len(edges))
    return GraphModel(nodes, edges)


def _wrap_lon(lon: float) -> float:
    if -180 <= lon <= 180:
        return lon
    return (lon + 180) % 360 - 180
