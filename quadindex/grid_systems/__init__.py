# quadindex/grid_systems/__init__.py
"""Region geometry used by the spatial index."""

from .bounding_box import BoundingBox

__all__ = [
    'BoundingBox'
]
