"""Foundation layer - pure types with no quadindex dependencies."""

from .types import (
    Point, Node, Quadrant, SearchFailure, SearchResult,
    SpatialIndexError, OutOfRegionError, NodeNotFoundError,
    MalformedRegionError, InvalidNodeError
)

__all__ = [
    'Point',
    'Node',
    'Quadrant',
    'SearchFailure',
    'SearchResult',
    'SpatialIndexError',
    'OutOfRegionError',
    'NodeNotFoundError',
    'MalformedRegionError',
    'InvalidNodeError',
]
