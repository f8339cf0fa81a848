"""
Quadtree spatial index for point-located occupancy data.

This package provides the region geometry, node model and quadtree used
to store and look up occupancy samples for spatial reasoning such as
occupancy-grid queries and path-planning state.
"""

__version__ = "1.0.0"
__description__ = "Quadtree spatial index for occupancy data"

from .abstractions.types import (
    Point, Node, Quadrant, SearchFailure, SearchResult,
    SpatialIndexError, OutOfRegionError, NodeNotFoundError,
    MalformedRegionError, InvalidNodeError
)
from .grid_systems import BoundingBox
from .spatial_index import Quadtree

__all__ = [
    '__version__',
    '__description__',
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
    'BoundingBox',
    'Quadtree',
]
