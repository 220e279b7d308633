"""Overpass API query text and response parsing.

The transport itself belongs to the caller; this module only knows the shape
of the query and of the ``out:json`` response (``{"elements": [...]}`` with
``node`` elements carrying ``lat``/``lon`` and ``way`` elements carrying
``nodes`` and ``tags``).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, BinaryIO

from .models import BoundingBox, Coordinate, RawElement, RawNode, RawWay

logger = logging.getLogger(__name__)

DEFAULT_HIGHWAY_FILTER = (
    "motorway",
    "trunk",
    "primary",
    "secondary",
    "tertiary",
    "unclassified",
    "residential",
    "service",
    "living_street",
)


def build_overpass_query(
    bounds: BoundingBox,
    highway_filter: Iterable[str] = DEFAULT_HIGHWAY_FILTER,
    timeout_s: int = 25,
) -> str:
    """Return an Overpass QL query for highway ways (and their nodes) inside ``bounds``."""
    bbox = f"{bounds.south},{bounds.west},{bounds.north},{bounds.east}"
    clauses = "\n".join(f'  way["highway"="{kind}"]({bbox});' for kind in highway_filter)
    return f"[out:json][timeout:{timeout_s}];\n(\n{clauses}\n);\n(._;>;);\nout body;\n"


def parse_overpass(payload: Mapping[str, Any] | str | bytes | Path | BinaryIO) -> list[RawElement]:
    """Parse an Overpass JSON response into raw nodes and ways.

    Elements that are not objects, nodes without an id or coordinates, and
    ways with malformed node lists or tags are skipped.

    Args:
        payload: A decoded response dict, JSON text or bytes, a path to a JSON
            file, or a binary file object.
    """
    data = _load(payload)
    if not isinstance(data, Mapping):
        raise ValueError("Overpass response must be a JSON object")
    raw_elements = data.get("elements") or []
    if not isinstance(raw_elements, list):
        raise ValueError("Overpass 'elements' must be a list")

    elements: list[RawElement] = []
    skipped = 0
    for el in raw_elements:
        if not isinstance(el, Mapping):
            skipped += 1
            continue
        kind = el.get("type")
        if kind == "node":
            if el.get("id") is None or el.get("lat") is None or el.get("lon") is None:
                skipped += 1
                continue
            elements.append(RawNode(id=el["id"], coordinate=Coordinate(lat=el["lat"], lon=el["lon"])))
        elif kind == "way":
            nodes = el.get("nodes") or ()
            tags = el.get("tags") or {}
            if not isinstance(nodes, (list, tuple)) or not isinstance(tags, Mapping):
                skipped += 1
                continue
            tags = {str(k): str(v) for k, v in tags.items()}
            elements.append(RawWay(id=el.get("id"), nodes=tuple(nodes), tags=tags))

    if skipped:
        logger.debug("Skipped %d malformed Overpass elements", skipped)
    logger.debug("Parsed %d Overpass elements", len(elements))
    return elements


def _load(payload: Mapping[str, Any] | str | bytes | Path | BinaryIO) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if isinstance(payload, Path):
        return json.loads(payload.read_bytes())
    if isinstance(payload, (str, bytes)):
        return json.loads(payload)
    return json.loads(payload.read())
