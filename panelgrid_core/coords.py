from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterator, List, Mapping, NamedTuple, Optional, Union


class Coordinate(NamedTuple):
    """1-based grid position: x is the column, y is the row."""
    x: int
    y: int


@dataclass(frozen=True)
class RectangleDef:
    """Axis-aligned block of cells: top-left (x, y) plus width dx and height dy."""
    x: int = 1
    y: int = 1
    dx: int = 1
    dy: int = 1

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> 'RectangleDef':
        """Builds a rectangle from a panel-like mapping; missing fields default to 1."""
        return cls(
            x=int(fields.get('x', 1)),
            y=int(fields.get('y', 1)),
            dx=int(fields.get('dx', 1)),
            dy=int(fields.get('dy', 1)),
        )


RectangleLike = Union[RectangleDef, Mapping[str, Any]]


@dataclass(frozen=True)
class CoordinateMapper:
    """Converts between cell indices, coordinates and occupancy arrays.

    The row stride is `rows` (not `columns`) in both directions, so the two
    mappings are only exact inverses on square grids.
    """
    rows: int
    columns: int

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def index_from_coordinate(self, x: int, y: int) -> int:
        return (y - 1) * self.rows + (x - 1)

    def coordinate_from_index(self, index: int) -> Coordinate:
        return Coordinate(x=index % self.columns + 1, y=index // self.rows + 1)

    def coordinates(self) -> Iterator[Coordinate]:
        """Iterates over the coordinate of every cell in index order."""
        for i in range(self.size):
            yield self.coordinate_from_index(i)

    def occupancy_from_rectangle(self, rect: Optional[RectangleLike] = None, **fields: int) -> List[int]:
        """Returns the 0/1 occupancy array of a rectangle.

        `rect` may be a RectangleDef or any mapping carrying some of x, y, dx, dy
        (a panel record works); keyword fields override it. No bounds checks: a
        rectangle partly outside the grid is clipped, a non-positive size gives
        an empty array.
        """
        if rect is None:
            rect = RectangleDef(**fields)
        else:
            if not isinstance(rect, RectangleDef):
                rect = RectangleDef.from_mapping(rect)
            if fields:
                rect = replace(rect, **fields)
        values: List[int] = []
        for i in range(self.size):
            r = i // self.rows + 1
            c = i % self.columns + 1
            inside = rect.y <= r < rect.y + rect.dy and rect.x <= c < rect.x + rect.dx
            values.append(1 if inside else 0)
        return values
