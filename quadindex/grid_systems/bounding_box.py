"""Axis-aligned bounding regions for spatial partitioning."""

from typing import Dict, Tuple, Union
from dataclasses import dataclass
from shapely.geometry import Polygon, box

from ..abstractions.types import Point, Node, Quadrant, MalformedRegionError


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle spanned by a top-left and bottom-right corner.

    The y axis grows downward, so ``top_left`` holds the minimum coordinate
    on both axes. All containment tests are inclusive on every edge.
    """
    top_left: Point
    bottom_right: Point

    def __post_init__(self):
        tl, br = self.top_left, self.bottom_right
        if not (isinstance(tl, Point) and isinstance(br, Point)):
            raise MalformedRegionError("Region corners must be Point instances")
        # Written as negated <= so NaN coordinates are rejected as well
        if not (tl.x <= br.x and tl.y <= br.y):
            raise MalformedRegionError(
                f"Top-left corner {tl} does not precede bottom-right corner {br}"
            )

    @classmethod
    def from_bounds(cls, minx: float, miny: float, maxx: float, maxy: float) -> 'BoundingBox':
        """Build a box from a (minx, miny, maxx, maxy) tuple."""
        return cls(Point(minx, miny), Point(maxx, maxy))

    @property
    def bounds(self) -> Tuple[Point, Point]:
        """Top-left and bottom-right corners."""
        return (self.top_left, self.bottom_right)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Bounds as minx, miny, maxx, maxy."""
        return (self.top_left.x, self.top_left.y,
                self.bottom_right.x, self.bottom_right.y)

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    @property
    def center(self) -> Point:
        """True midpoint of the region."""
        return self.top_left.midpoint(self.bottom_right)

    @property
    def polygon(self) -> Polygon:
        """Get bounds as polygon."""
        return box(*self.as_tuple())

    def contains(self, item: Union[Point, Node]) -> bool:
        """Check if a point, or a node's position, is within the box."""
        point = item.position if isinstance(item, Node) else item
        return (self.top_left.x <= point.x <= self.bottom_right.x and
                self.top_left.y <= point.y <= self.bottom_right.y)

    def contains_box(self, other: 'BoundingBox') -> bool:
        """
        Check if both corners of another box lie within this box.

        This is a containment test, not an overlap test: boxes that only
        partially overlap return False, and the result is not symmetric.

        Args:
            other: Box to test

        Returns:
            True if ``other`` is enclosed by this box
        """
        return self.contains(other.top_left) and self.contains(other.bottom_right)

    def quadrants(self) -> Dict[Quadrant, 'BoundingBox']:
        """
        Split the box at its midpoint into four child regions.

        The children tile this box exactly; edges through the midpoint are
        shared and therefore contained by both neighbours.

        Returns:
            Mapping of quadrant to child box, in routing order
        """
        tl, br = self.top_left, self.bottom_right
        mid = self.center

        return {
            Quadrant.TOP_LEFT: BoundingBox(tl, mid),
            Quadrant.TOP_RIGHT: BoundingBox(Point(mid.x, tl.y), Point(br.x, mid.y)),
            Quadrant.BOTTOM_LEFT: BoundingBox(Point(tl.x, mid.y), Point(mid.x, br.y)),
            Quadrant.BOTTOM_RIGHT: BoundingBox(mid, br),
        }
