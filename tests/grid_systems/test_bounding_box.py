"""Tests for bounding box geometry."""

import pytest
from shapely.ops import unary_union

from quadindex import BoundingBox, MalformedRegionError, Node, Point, Quadrant


class TestBoundingBoxCreation:
    """Test BoundingBox construction."""

    def test_box_creation(self):
        """Test creating a box from two corners."""
        region = BoundingBox(Point(0, 0), Point(10, 20))

        assert region.top_left == Point(0, 0)
        assert region.bottom_right == Point(10, 20)
        assert region.width == 10
        assert region.height == 20

    def test_from_bounds(self):
        """Test building a box from a minx, miny, maxx, maxy tuple."""
        region = BoundingBox.from_bounds(-5, 2, 5, 8)

        assert region.bounds == (Point(-5, 2), Point(5, 8))
        assert region.as_tuple() == (-5, 2, 5, 8)

    def test_degenerate_box_allowed(self):
        """A zero-area box is well formed."""
        region = BoundingBox(Point(3, 3), Point(3, 3))

        assert region.contains(Point(3, 3))
        assert not region.contains(Point(3, 3.5))

    @pytest.mark.parametrize("top_left,bottom_right", [
        (Point(10, 0), Point(0, 10)),     # x reversed
        (Point(0, 10), Point(10, 0)),     # y reversed
        (Point(10, 10), Point(0, 0)),     # both reversed
        (Point(float('nan'), 0), Point(10, 10)),
    ])
    def test_malformed_region_rejected(self, top_left, bottom_right):
        """Test that corners out of order fail fast."""
        with pytest.raises(MalformedRegionError):
            BoundingBox(top_left, bottom_right)

    def test_malformed_region_is_value_error(self):
        """Callers catching ValueError also see malformed regions."""
        with pytest.raises(ValueError) as exc_info:
            BoundingBox.from_bounds(5, 5, 0, 0)

        assert "does not precede" in str(exc_info.value)

    def test_box_is_hashable_value(self):
        """Boxes with equal corners compare and hash equal."""
        a = BoundingBox.from_bounds(0, 0, 1, 1)
        b = BoundingBox(Point(0.0, 0.0), Point(1.0, 1.0))

        assert a == b
        assert len({a, b}) == 1


class TestContainment:
    """Test point, node and box containment."""

    def test_contains_point(self):
        """Test point containment is inclusive on every edge."""
        region = BoundingBox.from_bounds(0, 0, 10, 10)

        assert region.contains(Point(5, 5))      # Inside
        assert region.contains(Point(0, 0))      # Corner
        assert region.contains(Point(10, 10))    # Opposite corner
        assert region.contains(Point(0, 7))      # Left edge
        assert region.contains(Point(10, 7))     # Right edge
        assert region.contains(Point(4, 0))      # Top edge
        assert region.contains(Point(4, 10))     # Bottom edge
        assert not region.contains(Point(-1, 5))
        assert not region.contains(Point(5, 11))
        assert not region.contains(Point(10.000001, 5))

    def test_contains_node_uses_position(self):
        """Test node containment delegates to the node position."""
        region = BoundingBox.from_bounds(0, 0, 10, 10)

        assert region.contains(Node(Point(2, 3), 50))
        assert not region.contains(Node(Point(20, 3), 50))

    def test_contains_matches_shapely_closed_box(self):
        """Inclusive containment agrees with shapely's covers on the box polygon."""
        from shapely.geometry import Point as ShapelyPoint

        region = BoundingBox.from_bounds(-3, 1, 7, 4)
        samples = [(-3, 1), (7, 4), (0, 2.5), (-3.1, 2), (7, 4.01), (2, 0.99)]

        for x, y in samples:
            assert region.contains(Point(x, y)) == region.polygon.covers(ShapelyPoint(x, y))

    def test_contains_box(self):
        """Test box-in-box containment checks both corners."""
        outer = BoundingBox.from_bounds(0, 0, 10, 10)

        assert outer.contains_box(BoundingBox.from_bounds(2, 2, 8, 8))
        assert outer.contains_box(outer)
        assert not outer.contains_box(BoundingBox.from_bounds(5, 5, 15, 15))
        assert not outer.contains_box(BoundingBox.from_bounds(20, 20, 30, 30))

    def test_contains_box_is_not_overlap(self):
        """Partial overlap is not reported and the test is asymmetric."""
        small = BoundingBox.from_bounds(2, 2, 4, 4)
        large = BoundingBox.from_bounds(0, 0, 10, 10)
        straddling = BoundingBox.from_bounds(8, 8, 12, 12)

        assert large.contains_box(small)
        assert not small.contains_box(large)
        assert large.polygon.intersects(straddling.polygon)
        assert not large.contains_box(straddling)


class TestQuadrants:
    """Test midpoint subdivision geometry."""

    def test_quadrants_of_origin_box(self):
        """Test the four 50x50 quadrants of a 100x100 box."""
        quadrants = BoundingBox.from_bounds(0, 0, 100, 100).quadrants()

        assert list(quadrants) == list(Quadrant)
        assert quadrants[Quadrant.TOP_LEFT].as_tuple() == (0, 0, 50, 50)
        assert quadrants[Quadrant.TOP_RIGHT].as_tuple() == (50, 0, 100, 50)
        assert quadrants[Quadrant.BOTTOM_LEFT].as_tuple() == (0, 50, 50, 100)
        assert quadrants[Quadrant.BOTTOM_RIGHT].as_tuple() == (50, 50, 100, 100)

    def test_quadrants_use_region_midpoint(self):
        """Test an off-origin box splits at its own midpoint."""
        region = BoundingBox.from_bounds(10, 20, 30, 60)
        quadrants = region.quadrants()

        assert region.center == Point(20, 40)
        assert quadrants[Quadrant.TOP_LEFT].as_tuple() == (10, 20, 20, 40)
        assert quadrants[Quadrant.TOP_RIGHT].as_tuple() == (20, 20, 30, 40)
        assert quadrants[Quadrant.BOTTOM_LEFT].as_tuple() == (10, 40, 20, 60)
        assert quadrants[Quadrant.BOTTOM_RIGHT].as_tuple() == (20, 40, 30, 60)

    @pytest.mark.parametrize("bounds", [
        (0, 0, 100, 100),
        (10, 20, 30, 60),
        (-50, -10, -20, 70),
        (0.5, 0.25, 0.75, 3.125),
    ])
    def test_quadrants_tile_parent(self, bounds):
        """Children cover the parent exactly and stay inside it."""
        parent = BoundingBox.from_bounds(*bounds)
        children = list(parent.quadrants().values())

        union = unary_union([child.polygon for child in children])

        assert union.equals(parent.polygon)
        assert sum(child.polygon.area for child in children) == pytest.approx(parent.polygon.area)
        for child in children:
            assert parent.contains_box(child)

    def test_shared_midpoint_contained_by_all_children(self):
        """The midpoint lies on every child's boundary."""
        parent = BoundingBox.from_bounds(0, 0, 8, 8)

        for child in parent.quadrants().values():
            assert child.contains(parent.center)
