"""Quadtree region: a rectangle of the pixel buffer plus four optional children."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(eq=False)
class Region:
    """Axis-aligned rectangle [x, x+width) x [y, y+height).

    x is the column of the top-left pixel, y its row. A region is either a
    leaf or owns exactly four children that tile it.
    """

    x: int
    y: int
    height: int
    width: int
    nw: Optional['Region'] = None
    ne: Optional['Region'] = None
    sw: Optional['Region'] = None
    se: Optional['Region'] = None

    @property
    def is_leaf(self) -> bool:
        return self.nw is None and self.ne is None and self.sw is None and self.se is None

    @property
    def is_unit(self) -> bool:
        """Single pixel; never subdivided."""
        return self.height == 1 and self.width == 1

    @property
    def area(self) -> int:
        return self.height * self.width

    @property
    def children(self) -> Tuple['Region', ...]:
        """Children in NW, NE, SW, SE order; empty for a leaf."""
        if self.is_leaf:
            return ()
        return (self.nw, self.ne, self.sw, self.se)

    @property
    def bounds(self) -> Tuple[slice, slice]:
        """(rows, cols) slices for indexing an (H, W, 3) buffer."""
        return slice(self.y, self.y + self.height), slice(self.x, self.x + self.width)

    def split(self) -> Tuple['Region', 'Region', 'Region', 'Region']:
        """Attach and return four children; odd remainders go east and south."""
        half_h = self.height // 2
        half_w = self.width // 2
        self.nw = Region(self.x, self.y, half_h, half_w)
        self.ne = Region(self.x + half_w, self.y, half_h, self.width - half_w)
        self.sw = Region(self.x, self.y + half_h, self.height - half_h, half_w)
        self.se = Region(self.x + half_w, self.y + half_h, self.height - half_h, self.width - half_w)
        return self.children

    def __repr__(self):
        kind = 'leaf' if self.is_leaf else 'node'
        return f"Region({kind} at ({self.x},{self.y}) {self.height}x{self.width})"
