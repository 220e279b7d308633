"""Tests for snapping coordinates to graph nodes."""

import pytest

from route_finder import Coordinate, EmptyGraph, GraphModel, Node, grid_node_id, nearest_node


def _node(node_id, lat, lon):
    return Node(id=node_id, coordinate=Coordinate(lat=lat, lon=lon))


class TestNearestNode:
    def test_exact_node(self, grid3):
        for node in grid3.nodes:
            assert nearest_node(node.coordinate, grid3) == node.id

    def test_offset_click(self, grid3):
        click = Coordinate(lat=0.0009, lon=-0.0007)
        assert nearest_node(click, grid3) == grid_node_id(2, 0)

    def test_far_away_point_snaps_to_closest_corner(self, grid3):
        assert nearest_node(Coordinate(lat=10.0, lon=10.0), grid3) == grid_node_id(2, 2)

    def test_empty_graph(self):
        with pytest.raises(EmptyGraph):
            nearest_node(Coordinate(lat=0, lon=0), GraphModel([], []))

    def test_tie_breaks_on_lowest_id_regardless_of_order(self):
        west = _node("b", 0.0, -0.001)
        east = _node("a", 0.0, 0.001)
        point = Coordinate(lat=0.0, lon=0.0)
        assert nearest_node(point, GraphModel([west, east], [])) == "a"
        assert nearest_node(point, GraphModel([east, west], [])) == "a"
