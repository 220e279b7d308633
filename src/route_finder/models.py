"""Pydantic data models for the route finder."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coordinate(BaseModel):
    """A geographic position in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class BoundingBox(BaseModel):
    """An axis-aligned latitude/longitude box."""

    model_config = ConfigDict(frozen=True)

    south: float = Field(ge=-90, le=90)
    west: float = Field(ge=-180, le=180)
    north: float = Field(ge=-90, le=90)
    east: float = Field(ge=-180, le=180)

    @model_validator(mode="after")
    def _not_inverted(self) -> BoundingBox:
        if self.south > self.north or self.west > self.east:
            raise ValueError("Bounding box must have south <= north and west <= east")
        return self

    @property
    def area_deg2(self) -> float:
        return (self.north - self.south) * (self.east - self.west)

    @property
    def center(self) -> Coordinate:
        return Coordinate(lat=(self.south + self.north) / 2, lon=(self.west + self.east) / 2)

    def contains(self, point: Coordinate) -> bool:
        return self.south <= point.lat <= self.north and self.west <= point.lon <= self.east

    @classmethod
    def from_nominatim(cls, bbox: list[str] | list[float] | None) -> BoundingBox | None:
        """Build a box from a place-search ``[south, north, west, east]`` list.

        Returns None when the list is missing or malformed in length.
        """
        if not bbox or len(bbox) != 4:
            return None
        south, north, west, east = (float(v) for v in bbox)
        return cls(south=south, west=west, north=north, east=east)


class Surface(str, Enum):
    PAVED = "paved"
    UNPAVED = "unpaved"


class Node(BaseModel):
    """A routable point of a graph."""

    model_config = ConfigDict(frozen=True)

    id: str
    coordinate: Coordinate


class Edge(BaseModel):
    """A directed, weighted connection between two nodes.

    ``weight`` is in meters. Its sign is checked by ``GraphModel``.
    ``surface_tag`` keeps the raw road surface value when the source had one.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    weight: float
    surface: Surface = Surface.PAVED
    surface_tag: str | None = None


class CostPolicy(BaseModel):
    """Multiplier applied to unpaved edge weights during routing."""

    model_config = ConfigDict(frozen=True)

    unpaved_multiplier: float = Field(default=1.0, ge=1.0)

    @classmethod
    def avoid_unpaved(cls, factor: float = 3.0) -> CostPolicy:
        return cls(unpaved_multiplier=factor)

    def edge_cost(self, edge: Edge) -> float:
        if edge.surface is Surface.UNPAVED:
            return edge.weight * self.unpaved_multiplier
        return edge.weight


class PathResult(BaseModel):
    """Outcome of a single shortest-path query."""

    model_config = ConfigDict(frozen=True)

    total_cost: float
    path: tuple[str, ...] = ()
    explored_count: int = 0

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.total_cost)


class RawNode(BaseModel):
    """A node as supplied by an external geographic data source."""

    model_config = ConfigDict(frozen=True)

    id: int | str
    coordinate: Coordinate


class RawWay(BaseModel):
    """A way (polyline of raw node ids) with its tags."""

    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    nodes: tuple[int | str, ...]
    tags: dict[str, str] = Field(default_factory=dict)


RawElement = RawNode | RawWay


class RouteLeg(BaseModel):
    """One hop of a computed route."""

    leg: str
    source: str
    target: str
    source_lat: float
    source_lon: float
    target_lat: float
    target_lon: float
    surface: Surface
    length_m: float
    cost: float
    cumulative_m_start: float
    cumulative_m_end: float
