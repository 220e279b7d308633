import pytest

from route_finder import Coordinate, Edge, GraphModel, Node, Surface, build_grid_graph


def _node(node_id: str, lat: float, lon: float) -> Node:
    return Node(id=node_id, coordinate=Coordinate(lat=lat, lon=lon))


@pytest.fixture
def grid3():
    return build_grid_graph(Coordinate(lat=0.0, lon=0.0), rows=3, cols=3, spacing_degrees=0.001)


@pytest.fixture
def detour_graph():
    """S-G directly over 100 m of gravel, or S-P-G over 250 m of asphalt."""
    nodes = [_node("S", 0.0, 0.0), _node("P", 0.001, 0.0005), _node("G", 0.0, 0.001)]
    edges = [
        Edge(source="S", target="G", weight=100.0, surface=Surface.UNPAVED),
        Edge(source="S", target="P", weight=125.0),
        Edge(source="P", target="G", weight=125.0),
    ]
    return GraphModel(nodes, edges)


@pytest.fixture
def overpass_payload():
    """Gravel way 1-2-3, paved way 3-4, a way through a missing node and some noise."""
    return {
        "version": 0.6,
        "elements": [
            {"type": "node", "id": 1, "lat": 30.700, "lon": 76.800},
            {"type": "node", "id": 2, "lat": 30.701, "lon": 76.800},
            {"type": "node", "id": 3, "lat": 30.702, "lon": 76.800},
            {"type": "node", "id": 4, "lat": 30.702, "lon": 76.801},
            {"type": "node", "id": 5, "lat": 30.703, "lon": 76.801},
            {"type": "way", "id": 100, "nodes": [1, 2, 3], "tags": {"highway": "residential", "surface": "gravel"}},
            {"type": "way", "id": 101, "nodes": [3, 4], "tags": {"highway": "residential", "oneway": "yes"}},
            {"type": "way", "id": 102, "nodes": [4, 99, 5], "tags": {"highway": "service"}},
            {"type": "way", "id": 103, "nodes": [5], "tags": {"highway": "service"}},
            {"type": "relation", "id": 200, "members": []},
        ],
    }


@pytest.fixture
def detour_payload():
    """Overpass payload with a short gravel road S-G and a longer paved detour S-P-G."""
    return {
        "elements": [
            {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
            {"type": "node", "id": 2, "lat": 0.0011, "lon": 0.00045},
            {"type": "node", "id": 3, "lat": 0.0, "lon": 0.0009},
            {"type": "way", "id": 10, "nodes": [1, 3], "tags": {"highway": "track"}},
            {"type": "way", "id": 11, "nodes": [1, 2, 3], "tags": {"highway": "residential", "surface": "asphalt"}},
        ],
    }
