"""Errors raised by the route finder core."""


class RoutingError(ValueError):
    """Base class for all route finder failures."""


class InvalidGraph(RoutingError):
    """A graph was assembled from malformed nodes or edges."""


class UnknownNode(RoutingError, KeyError):
    """A node id is not present in the graph."""

    def __init__(self, node_id: str):
        super().__init__(f"Unknown node: {node_id!r}")
        self.node_id = node_id

    def __str__(self) -> str:
        return self.args[0]


class EmptyGraph(RoutingError):
    """A query needed at least one node but the graph has none."""


class AreaTooLarge(RoutingError):
    """A road graph was requested over a bounding box above the allowed area."""

    def __init__(self, area_deg2: float, max_area_deg2: float):
        super().__init__(
            f"Selected area of {area_deg2:.6f} deg² exceeds the limit of {max_area_deg2:.6f} deg². "
            "Please zoom in."
        )
        self.area_deg2 = area_deg2
        self.max_area_deg2 = max_area_deg2
