"""Spatial index implementations."""

from .quadtree import Quadtree

__all__ = [
    'Quadtree'
]
