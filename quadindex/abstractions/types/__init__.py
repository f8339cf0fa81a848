# quadindex/abstractions/types/__init__.py
"""Type definitions for the abstractions layer."""

from .spatial_types import (
    Point, Node, Quadrant, SearchFailure, SearchResult,
    UNKNOWN_OCCUPANCY, MAX_OCCUPANCY,
    SpatialIndexError, OutOfRegionError, NodeNotFoundError,
    MalformedRegionError, InvalidNodeError
)

__all__ = [
    'Point',
    'Node',
    'Quadrant',
    'SearchFailure',
    'SearchResult',
    'UNKNOWN_OCCUPANCY',
    'MAX_OCCUPANCY',
    'SpatialIndexError',
    'OutOfRegionError',
    'NodeNotFoundError',
    'MalformedRegionError',
    'InvalidNodeError',
]
