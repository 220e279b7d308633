"""Shortest-path routing over synthetic grids and road networks."""

from .errors import AreaTooLarge, EmptyGraph, InvalidGraph, RoutingError, UnknownNode
from .geo import EARTH_RADIUS_M, haversine_distance
from .graph import GraphModel
from .grid import build_grid_graph, grid_node_id
from .legs import compute_route_legs
from .models import (
    BoundingBox,
    Coordinate,
    CostPolicy,
    Edge,
    Node,
    PathResult,
    RawElement,
    RawNode,
    RawWay,
    RouteLeg,
    Surface,
)
from .nearest import nearest_node
from .overpass import DEFAULT_HIGHWAY_FILTER, build_overpass_query, parse_overpass
from .roads import UNPAVED_RULES, build_road_graph, check_area, classify_surface
from .routing import shortest_path

__all__ = [
    "AreaTooLarge",
    "BoundingBox",
    "Coordinate",
    "CostPolicy",
    "DEFAULT_HIGHWAY_FILTER",
    "EARTH_RADIUS_M",
    "Edge",
    "EmptyGraph",
    "GraphModel",
    "InvalidGraph",
    "Node",
    "PathResult",
    "RawElement",
    "RawNode",
    "RawWay",
    "RouteLeg",
    "RoutingError",
    "Surface",
    "UNPAVED_RULES",
    "UnknownNode",
    "build_grid_graph",
    "build_overpass_query",
    "build_road_graph",
    "check_area",
    "classify_surface",
    "compute_route_legs",
    "grid_node_id",
    "haversine_distance",
    "nearest_node",
    "parse_overpass",
    "shortest_path",
]
