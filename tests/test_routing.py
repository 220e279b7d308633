"""Tests for the Dijkstra shortest-path engine."""

import math

import pytest

from route_finder import (
    BoundingBox,
    Coordinate,
    CostPolicy,
    Edge,
    GraphModel,
    Node,
    UnknownNode,
    build_grid_graph,
    build_road_graph,
    grid_node_id,
    nearest_node,
    parse_overpass,
    shortest_path,
)


def _node(node_id, lat=0.0, lon=0.0):
    return Node(id=node_id, coordinate=Coordinate(lat=lat, lon=lon))


def _path_weight(model, path):
    total = 0.0
    for a, b in zip(path, path[1:]):
        (edge,) = [e for e in model.adjacency(a) if e.target == b]
        total += edge.weight
    return total


class TestGridRoutes:
    def test_corner_to_corner(self, grid3):
        result = shortest_path(grid3, grid_node_id(0, 0), grid_node_id(2, 2))
        assert result.reachable
        assert len(result.path) == 5
        assert result.path[0] == grid_node_id(0, 0)
        assert result.path[-1] == grid_node_id(2, 2)
        monotone = [grid_node_id(0, 0), grid_node_id(0, 1), grid_node_id(0, 2), grid_node_id(1, 2), grid_node_id(2, 2)]
        assert result.total_cost == pytest.approx(_path_weight(grid3, monotone), rel=1e-6)
        assert result.total_cost == pytest.approx(_path_weight(grid3, result.path))

    def test_start_equals_goal(self, grid3):
        result = shortest_path(grid3, grid_node_id(1, 1), grid_node_id(1, 1))
        assert result.path == (grid_node_id(1, 1),)
        assert result.total_cost == 0
        assert result.explored_count == 1

    def test_stops_at_goal(self):
        line = build_grid_graph(Coordinate(lat=0, lon=0), 1, 10, 0.001)
        result = shortest_path(line, grid_node_id(0, 0), grid_node_id(0, 1))
        assert result.path == (grid_node_id(0, 0), grid_node_id(0, 1))
        assert result.explored_count == 2

    def test_far_corner_explores_whole_grid(self, grid3):
        result = shortest_path(grid3, grid_node_id(0, 0), grid_node_id(2, 2))
        assert result.explored_count == len(grid3)

    def test_unknown_nodes(self, grid3):
        with pytest.raises(UnknownNode):
            shortest_path(grid3, "nope", grid_node_id(0, 0))
        with pytest.raises(UnknownNode):
            shortest_path(grid3, grid_node_id(0, 0), "nope")

    def test_repeated_queries_are_independent(self, grid3):
        first = shortest_path(grid3, grid_node_id(0, 0), grid_node_id(2, 1))
        shortest_path(grid3, grid_node_id(2, 2), grid_node_id(0, 0))
        assert shortest_path(grid3, grid_node_id(0, 0), grid_node_id(2, 1)) == first


class TestUnreachable:
    def test_isolated_goal(self):
        g = GraphModel([_node("a"), _node("b"), _node("c")], [Edge(source="a", target="b", weight=5.0)])
        result = shortest_path(g, "a", "c")
        assert not result.reachable
        assert math.isinf(result.total_cost)
        assert result.path == ()
        assert result.explored_count == 2

    def test_edges_are_directed(self):
        g = GraphModel([_node("a"), _node("b")], [Edge(source="a", target="b", weight=5.0)])
        assert shortest_path(g, "a", "b").total_cost == 5.0
        assert not shortest_path(g, "b", "a").reachable


class TestUnpavedPenalty:
    def test_penalty_prefers_paved_detour(self, detour_graph):
        result = shortest_path(detour_graph, "S", "G", CostPolicy(unpaved_multiplier=3))
        assert result.path == ("S", "P", "G")
        assert result.total_cost == 250.0

    def test_no_penalty_takes_gravel(self, detour_graph):
        result = shortest_path(detour_graph, "S", "G", CostPolicy(unpaved_multiplier=1))
        assert result.path == ("S", "G")
        assert result.total_cost == 100.0

    def test_default_policy_is_neutral(self, detour_graph):
        assert shortest_path(detour_graph, "S", "G").path == ("S", "G")

    def test_road_graph_end_to_end(self, detour_payload):
        bounds = BoundingBox(south=-0.01, west=-0.01, north=0.01, east=0.01)
        g = build_road_graph(parse_overpass(detour_payload), bounds)
        start = nearest_node(Coordinate(lat=0.00001, lon=-0.00001), g)
        goal = nearest_node(Coordinate(lat=0.0, lon=0.00091), g)
        assert (start, goal) == ("1", "3")
        assert shortest_path(g, start, goal).path == ("1", "3")
        assert shortest_path(g, start, goal, CostPolicy.avoid_unpaved()).path == ("1", "2", "3")
