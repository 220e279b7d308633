"""FastAPI server exposing graph building and routing."""

from __future__ import annotations

import csv
import io
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field, model_validator

from .config import load_settings
from .errors import RoutingError
from .graph import GraphModel
from .grid import build_grid_graph
from .legs import compute_route_legs
from .models import BoundingBox, Coordinate, CostPolicy, Edge, Node, RouteLeg
from .nearest import nearest_node
from .overpass import build_overpass_query, parse_overpass
from .roads import build_road_graph, check_area
from .routing import shortest_path

logger = logging.getLogger(__name__)

settings = load_settings()

app = FastAPI(title="Route Finder", version="0.1.0")


class GridRequest(BaseModel):
    center: Coordinate
    rows: int = Field(default=settings.grid_rows, ge=1)
    cols: int = Field(default=settings.grid_cols, ge=1)
    spacing_degrees: float = Field(default=settings.grid_spacing_degrees, gt=0)


class RoadRequest(BaseModel):
    bounds: BoundingBox
    payload: dict[str, Any]


class RouteRequest(BaseModel):
    grid: GridRequest | None = None
    roads: RoadRequest | None = None
    start: Coordinate
    end: Coordinate
    avoid_unpaved: bool = False
    unpaved_multiplier: float = Field(default=settings.unpaved_multiplier, ge=1.0)

    @model_validator(mode="after")
    def _one_source(self) -> RouteRequest:
        if (self.grid is None) == (self.roads is None):
            raise ValueError("Provide exactly one of 'grid' or 'roads'")
        return self


class GraphPayload(BaseModel):
    nodes: list[Node]
    edges: list[Edge]


class RouteResponse(BaseModel):
    start_node: str
    end_node: str
    reachable: bool
    distance_m: float | None
    explored_count: int
    path: list[Node]
    legs: list[RouteLeg]


@app.post("/graph/grid")
async def grid_graph(
    request: GridRequest,
    format: str = Query("json", pattern="^(json|geojson)$"),
):
    """Build a synthetic lattice around ``center``."""
    model = _run(lambda: _build_grid(request))
    return _graph_response(model, format)


@app.post("/graph/roads")
async def road_graph(
    request: RoadRequest,
    format: str = Query("json", pattern="^(json|geojson)$"),
):
    """Build a road graph from a raw Overpass JSON response."""
    model = _run(lambda: _build_roads(request))
    return _graph_response(model, format)


@app.get("/overpass/query")
async def overpass_query(
    south: float,
    west: float,
    north: float,
    east: float,
):
    """Return the Overpass QL query that fetches the road network inside the given bounds.

    The area limit is checked first so that callers never issue an oversized query.
    """
    return _run(lambda: _overpass_query(south, west, north, east))


@app.post("/route")
async def route(
    request: RouteRequest,
    format: str = Query("json", pattern="^(json|csv)$"),
):
    """Snap both points to the graph and return the cheapest route between them.

    Accepts either a ``grid`` or a ``roads`` graph source. With
    ``avoid_unpaved`` set, unpaved edges cost ``unpaved_multiplier`` times
    their length.
    """
    return _run(lambda: _route(request, format))


def _run(fn):
    try:
        return fn()
    except RoutingError as exc:
        logger.info("Rejected request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid input: {exc}") from exc


def _overpass_query(south: float, west: float, north: float, east: float) -> dict[str, Any]:
    bounds = BoundingBox(south=south, west=west, north=north, east=east)
    check_area(bounds, settings.max_area_deg2)
    query = build_overpass_query(bounds, settings.highway_filter, settings.overpass_timeout_s)
    return {"bounds": bounds.model_dump(), "query": query}


def _build_grid(request: GridRequest) -> GraphModel:
    return build_grid_graph(request.center, request.rows, request.cols, request.spacing_degrees)


def _build_roads(request: RoadRequest) -> GraphModel:
    elements = parse_overpass(request.payload)
    return build_road_graph(elements, request.bounds, settings.max_area_deg2)


def _route(request: RouteRequest, format: str):
    model = _build_grid(request.grid) if request.grid is not None else _build_roads(request.roads)
    policy = CostPolicy.avoid_unpaved(request.unpaved_multiplier) if request.avoid_unpaved else CostPolicy()

    start = nearest_node(request.start, model)
    end = nearest_node(request.end, model)
    result = shortest_path(model, start, end, policy)
    legs = compute_route_legs(model, result.path, policy)

    if format == "csv":
        return _legs_to_csv_response(legs)

    return RouteResponse(
        start_node=start,
        end_node=end,
        reachable=result.reachable,
        distance_m=result.total_cost if result.reachable else None,
        explored_count=result.explored_count,
        path=[model.node(node_id) for node_id in result.path],
        legs=legs,
    )


def _graph_response(model: GraphModel, format: str):
    if format == "geojson":
        return _graph_to_geojson(model)
    return GraphPayload(nodes=list(model.nodes), edges=list(model.edges))


def _graph_to_geojson(model: GraphModel) -> dict[str, Any]:
    """Render edges as LineStrings tagged with surface, followed by nodes as Points."""
    features: list[dict[str, Any]] = []
    for edge in model.edges:
        a = model.node(edge.source).coordinate
        b = model.node(edge.target).coordinate
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "LineString", "coordinates": [[a.lon, a.lat], [b.lon, b.lat]]},
                "properties": {
                    "source": edge.source,
                    "target": edge.target,
                    "weight": edge.weight,
                    "surface": edge.surface.value,
                    "surface_tag": edge.surface_tag,
                },
            }
        )
    for node in model.nodes:
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [node.coordinate.lon, node.coordinate.lat]},
                "properties": {"id": node.id},
            }
        )
    return {"type": "FeatureCollection", "features": features}


def _legs_to_csv_response(legs: list[RouteLeg]) -> StreamingResponse:
    """Convert route legs to a streaming CSV response."""
    fieldnames = list(RouteLeg.model_fields)

    def generate():
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=fieldnames)
        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for leg in legs:
            writer.writerow(leg.model_dump(mode="json"))
            yield buf.getvalue()
            buf.seek(0)
            buf.truncate(0)

    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=route_legs.csv"},
    )
