# quadindex/abstractions/types/spatial_types.py
"""Spatial index type definitions."""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Optional, Tuple

UNKNOWN_OCCUPANCY = -1
MAX_OCCUPANCY = 100


class Quadrant(Enum):
    """Child slots of a subdivided partition, in routing order."""
    TOP_LEFT = "nw"
    TOP_RIGHT = "ne"
    BOTTOM_LEFT = "sw"
    BOTTOM_RIGHT = "se"


class SearchFailure(Enum):
    """Reason a search did not return a node."""
    OUT_OF_REGION = "out_of_region"
    NOT_FOUND = "not_found"


# Exception classes for spatial index operations
class SpatialIndexError(Exception):
    """Base exception for spatial index operations."""
    pass


class OutOfRegionError(SpatialIndexError):
    """Raised when a point lies outside the indexed region."""
    def __init__(self, position: Optional['Point'] = None,
                 message: str = "Supplied point out of tree bounds"):
        if position is not None:
            message = f"{message}: {position}"
        super().__init__(message)
        self.position = position


class NodeNotFoundError(SpatialIndexError):
    """Raised when no node is stored at an in-region position."""
    def __init__(self, position: Optional['Point'] = None,
                 message: str = "No node stored at point"):
        if position is not None:
            message = f"{message}: {position}"
        super().__init__(message)
        self.position = position


class MalformedRegionError(SpatialIndexError, ValueError):
    """Raised when a region's top-left corner does not precede its bottom-right."""
    pass


class InvalidNodeError(SpatialIndexError, ValueError):
    """Raised when a node is built with an out-of-range occupancy value."""
    pass


@dataclass(frozen=True)
class Point:
    """2D coordinate pair. Equality is exact on both components."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def midpoint(self, other: 'Point') -> 'Point':
        """Point halfway between this point and another."""
        # Halve before adding so corners near the float maximum stay finite
        return Point(self.x / 2 + other.x / 2, self.y / 2 + other.y / 2)


@dataclass(frozen=True)
class Node:
    """Point-located occupancy sample.

    Attributes:
        position: Location of the sample
        occupied_confidence: Percent confidence (0-100) that an obstacle
            occupies ``position``, or -1 when unknown
        visited: Whether a search over the map has already expanded this node
    """
    position: Point
    occupied_confidence: int
    visited: bool = False

    def __post_init__(self):
        if not isinstance(self.position, Point):
            raise InvalidNodeError(
                f"Node position must be a Point, got {type(self.position).__name__}"
            )
        confidence = self.occupied_confidence
        if isinstance(confidence, bool) or not isinstance(confidence, Integral):
            raise InvalidNodeError(
                f"Occupancy confidence must be an integer, got {confidence!r}"
            )
        if not UNKNOWN_OCCUPANCY <= confidence <= MAX_OCCUPANCY:
            raise InvalidNodeError(
                f"Occupancy confidence {confidence} outside "
                f"[{UNKNOWN_OCCUPANCY}, {MAX_OCCUPANCY}]"
            )
        object.__setattr__(self, 'occupied_confidence', int(confidence))
        object.__setattr__(self, 'visited', bool(self.visited))

    @property
    def is_unknown(self) -> bool:
        """True when the occupancy of this position has not been observed."""
        return self.occupied_confidence == UNKNOWN_OCCUPANCY


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a point search: either a node or a failure reason."""
    node: Optional[Node] = None
    failure: Optional[SearchFailure] = None
    position: Optional[Point] = None

    @property
    def found(self) -> bool:
        return self.node is not None

    def unwrap(self) -> Node:
        """Return the node, raising the typed error matching the failure."""
        if self.node is not None:
            return self.node
        if self.failure is SearchFailure.OUT_OF_REGION:
            raise OutOfRegionError(self.position)
        raise NodeNotFoundError(self.position)

    @classmethod
    def hit(cls, node: Node) -> 'SearchResult':
        return cls(node=node, position=node.position)

    @classmethod
    def out_of_region(cls, position: Point) -> 'SearchResult':
        return cls(failure=SearchFailure.OUT_OF_REGION, position=position)

    @classmethod
    def not_found(cls, position: Point) -> 'SearchResult':
        return cls(failure=SearchFailure.NOT_FOUND, position=position)
