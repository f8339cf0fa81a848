"""Point quadtree over an axis-aligned region."""

import time
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..abstractions.types import Point, Node, Quadrant, SearchResult
from ..grid_systems import BoundingBox
from ..config import config, is_positive_int, is_depth_limit
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)

Boundary = Union[BoundingBox, Tuple[Point, Point]]


class Quadtree:
    """
    Recursive 4-ary partition of a bounding region.

    A partition is a leaf holding up to ``node_capacity`` nodes directly, or
    an internal node owning exactly four children, one per quadrant. Nodes
    held when a leaf splits stay where they are; only later inserts are
    routed into the children. Children are created once and never removed.

    Not thread-safe: callers sharing a tree across threads must serialize
    inserts themselves.
    """

    def __init__(self,
                 boundary: Boundary,
                 node_capacity: Optional[int] = None,
                 max_depth: Optional[int] = None,
                 depth: int = 0):
        """
        Initialize an empty partition.

        Args:
            boundary: Region covered, as a BoundingBox or (top_left, bottom_right)
            node_capacity: Nodes held before subdividing (``quadtree.node_capacity``
                from config if None)
            max_depth: Depth at which leaves stop subdividing and grow past
                capacity instead (``quadtree.max_depth`` from config if None;
                unbounded if that is null too)
            depth: Depth of this partition below the root
        """
        if not isinstance(boundary, BoundingBox):
            top_left, bottom_right = boundary
            boundary = BoundingBox(top_left, bottom_right)

        if node_capacity is None:
            node_capacity = config.get('quadtree.node_capacity', 4)
        if not is_positive_int(node_capacity):
            raise ValueError(f"node_capacity must be a positive integer, got {node_capacity!r}")

        if max_depth is None:
            max_depth = config.get('quadtree.max_depth')
        if max_depth is not None and not is_depth_limit(max_depth):
            raise ValueError(f"max_depth must be None or a non-negative integer, got {max_depth!r}")

        self._boundary = boundary
        self._capacity = node_capacity
        self._max_depth = max_depth
        self._depth = depth
        self._nodes: List[Node] = []
        self._children: Optional[Dict[Quadrant, 'Quadtree']] = None

    @property
    def bounding_box(self) -> BoundingBox:
        return self._boundary

    @property
    def node_capacity(self) -> int:
        return self._capacity

    @property
    def max_depth(self) -> Optional[int]:
        return self._max_depth

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Nodes held directly by this partition."""
        return tuple(self._nodes)

    @property
    def is_leaf(self) -> bool:
        return self._children is None

    @property
    def children(self) -> Dict[Quadrant, 'Quadtree']:
        """Child partitions by quadrant; empty for a leaf."""
        return dict(self._children) if self._children else {}

    def child(self, quadrant: Quadrant) -> Optional['Quadtree']:
        if self._children is None:
            return None
        return self._children[quadrant]

    def _at_depth_limit(self) -> bool:
        return self._max_depth is not None and self._depth >= self._max_depth

    def _subdivide(self):
        """Create the four children, split at the region's own midpoint."""
        self._children = {
            quadrant: Quadtree(region, self._capacity, self._max_depth, self._depth + 1)
            for quadrant, region in self._boundary.quadrants().items()
        }
        logger.debug(
            f"Subdivided partition at depth {self._depth}",
            extra={'context': {
                'depth': self._depth,
                'region': self._boundary.as_tuple(),
                'midpoint': self._boundary.center.as_tuple()
            }}
        )

    def insert(self, node: Node) -> bool:
        """
        Insert a node into the partition that covers its position.

        Args:
            node: Node to insert

        Returns:
            True if the node was stored, False if its position lies outside
            this tree's region
        """
        if not self._boundary.contains(node):
            if self._depth == 0:
                logger.debug(
                    f"Rejected node at {node.position}: outside {self._boundary.as_tuple()}"
                )
            return False

        if self._children is None:
            if len(self._nodes) < self._capacity or self._at_depth_limit():
                self._nodes.append(node)
                return True
            self._subdivide()

        for quadrant in Quadrant:
            if self._children[quadrant].insert(node):
                return True

        return False

    def insert_many(self, nodes: Iterable[Node]) -> int:
        """
        Insert several nodes, logging throughput.

        Returns:
            Number of nodes accepted
        """
        start_time = time.perf_counter()
        processed = inserted = 0

        for node in nodes:
            processed += 1
            if self.insert(node):
                inserted += 1

        if processed != inserted:
            logger.warning(f"{processed - inserted} of {processed} nodes fell outside the tree region")

        logger.log_performance(
            'quadtree_insert_many',
            time.perf_counter() - start_time,
            items_processed=processed,
            nodes_inserted=inserted,
            nodes_rejected=processed - inserted
        )
        return inserted

    def search(self, position: Union[Point, Tuple[float, float]]) -> SearchResult:
        """
        Find the node stored at exactly ``position``.

        Args:
            position: Point (or x, y pair) to look up

        Returns:
            SearchResult holding the node, or failing with OUT_OF_REGION when
            the point is outside this tree and NOT_FOUND when nothing is
            stored there
        """
        if not isinstance(position, Point):
            position = Point(*position)

        if not self._boundary.contains(position):
            return SearchResult.out_of_region(position)

        for node in self._nodes:
            if node.position == position:
                return SearchResult.hit(node)

        if self._children is None:
            return SearchResult.not_found(position)

        for quadrant in Quadrant:
            child = self._children[quadrant]
            if child.bounding_box.contains(position):
                return child.search(position)

        return SearchResult.not_found(position)

    def get(self, position: Union[Point, Tuple[float, float]],
            default: Optional[Node] = None) -> Optional[Node]:
        """Node stored at ``position``, or ``default``."""
        result = self.search(position)
        return result.node if result.found else default

    def height(self) -> int:
        """Number of levels in this subtree (1 for a leaf)."""
        if self._children is None:
            return 1
        return 1 + max(child.height() for child in self._children.values())

    def __len__(self) -> int:
        total = len(self._nodes)
        if self._children:
            total += sum(len(child) for child in self._children.values())
        return total

    def __iter__(self) -> Iterator[Node]:
        yield from self._nodes
        if self._children:
            for quadrant in Quadrant:
                yield from self._children[quadrant]

    def __contains__(self, position) -> bool:
        return self.search(position).found

    def __repr__(self) -> str:
        kind = "Leaf" if self.is_leaf else "Internal"
        return (f"Quadtree({kind}, region={self._boundary.as_tuple()}, "
                f"depth={self._depth}, nodes={len(self._nodes)})")
