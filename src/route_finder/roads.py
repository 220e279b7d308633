"""Road network graph builder over raw node/way elements."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .errors import AreaTooLarge
from .geo import haversine_distance
from .graph import GraphModel
from .models import BoundingBox, Coordinate, Edge, Node, RawElement, RawNode, RawWay, Surface

logger = logging.getLogger(__name__)

DEFAULT_MAX_AREA_DEG2 = 0.0025

# A way is unpaved when any of its tags takes one of the listed values.
UNPAVED_RULES: Mapping[str, frozenset[str]] = {
    "surface": frozenset(
        {
            "unpaved",
            "gravel",
            "dirt",
            "ground",
            "earth",
            "grass",
            "mud",
            "sand",
            "pebblestone",
            "fine_gravel",
        }
    ),
    "tracktype": frozenset({"grade2", "grade3", "grade4", "grade5"}),
    "highway": frozenset({"track"}),
}


def classify_surface(
    tags: Mapping[str, str],
    rules: Mapping[str, frozenset[str]] = UNPAVED_RULES,
) -> Surface:
    """Classify a way as paved or unpaved from its tags (case-insensitive)."""
    for key, values in rules.items():
        value = tags.get(key)
        if value is not None and str(value).lower() in values:
            return Surface.UNPAVED
    return Surface.PAVED


def check_area(bounds: BoundingBox, max_area_deg2: float) -> None:
    """Raise ``AreaTooLarge`` when ``bounds`` covers more than ``max_area_deg2``."""
    area = bounds.area_deg2
    if area > max_area_deg2:
        logger.warning("Rejecting road graph over %.6f deg² (limit %.6f)", area, max_area_deg2)
        raise AreaTooLarge(area, max_area_deg2)


def build_road_graph(
    elements: Iterable[RawElement],
    bounds: BoundingBox,
    max_area_deg2: float = DEFAULT_MAX_AREA_DEG2,
) -> GraphModel:
    """Build a bidirectional road graph from raw nodes and ways.

    The area check runs before any element is read. One-way tagging is
    ignored. Way segments whose endpoints are missing from the raw nodes are
    skipped rather than failing the build.
    """
    check_area(bounds, max_area_deg2)

    coords: dict[str, Coordinate] = {}
    ways: list[RawWay] = []
    for element in elements:
        if isinstance(element, RawNode):
            coords[str(element.id)] = element.coordinate
        elif isinstance(element, RawWay) and len(element.nodes) >= 2:
            ways.append(element)

    nodes = [Node(id=node_id, coordinate=coord) for node_id, coord in coords.items()]

    edges: list[Edge] = []
    skipped = 0
    for way in ways:
        surface = classify_surface(way.tags)
        surface_tag = way.tags.get("surface")
        if surface_tag is not None:
            surface_tag = surface_tag.lower()
        for a_raw, b_raw in zip(way.nodes, way.nodes[1:]):
            a_id, b_id = str(a_raw), str(b_raw)
            a, b = coords.get(a_id), coords.get(b_id)
            if a is None or b is None:
                skipped += 1
                continue
            weight = haversine_distance(a, b)
            edges.append(Edge(source=a_id, target=b_id, weight=weight, surface=surface, surface_tag=surface_tag))
            edges.append(Edge(source=b_id, target=a_id, weight=weight, surface=surface, surface_tag=surface_tag))

    if skipped:
        logger.debug("Skipped %d way segments with unknown endpoints", skipped)
    logger.info("Built road graph from %d ways: %d nodes, %d edges", len(ways), len(nodes), len(edges))
    return GraphModel(nodes, edges)
