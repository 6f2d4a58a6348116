from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Tuple

from .coords import Coordinate, CoordinateMapper
from .errors import DimensionMismatchError


@dataclass(frozen=True)
class Area:
    """An immutable set of grid cells, stored as a row-major 0/1 occupancy tuple.

    Every operation returns a new Area over the same (rows, columns).
    """
    rows: int
    columns: int
    values: Tuple[int, ...]
    _mapper: CoordinateMapper = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'values', tuple(self.values))
        mapper = CoordinateMapper(self.rows, self.columns)
        if len(self.values) != mapper.size:
            raise DimensionMismatchError(
                f"Expected {mapper.size} cells for a {self.rows}x{self.columns} grid, got {len(self.values)}"
            )
        object.__setattr__(self, '_mapper', mapper)

    @property
    def length(self) -> int:
        """Number of occupied cells."""
        return sum(1 for v in self.values if v == 1)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Coordinate]:
        for i, v in enumerate(self.values):
            if v == 1:
                yield self._mapper.coordinate_from_index(i)

    def _with(self, values: Iterable[int]) -> 'Area':
        return Area(self.rows, self.columns, tuple(values))

    def _check(self, other: 'Area') -> None:
        if (other.rows, other.columns) != (self.rows, self.columns):
            raise DimensionMismatchError(
                f"Cannot combine a {self.rows}x{self.columns} area with a {other.rows}x{other.columns} area"
            )

    def intersection(self, other: 'Area') -> 'Area':
        self._check(other)
        return self._with(a * b for a, b in zip(self.values, other.values))

    def union(self, other: 'Area') -> 'Area':
        self._check(other)
        return self._with(1 if a + b > 0 else 0 for a, b in zip(self.values, other.values))

    def complement(self) -> 'Area':
        return self._with(1 - v for v in self.values)

    def includes(self, other: 'Area') -> bool:
        """True when every occupied cell of `other` is occupied here."""
        return self.intersection(other).length == other.length

    def is_included(self, other: 'Area') -> bool:
        return other.includes(self)

    def pretty(self) -> str:
        """Renders the area one grid row per line: '#' occupied, '.' free."""
        lines: List[str] = []
        for y in range(1, self.rows + 1):
            row: List[str] = []
            for x in range(1, self.columns + 1):
                i = self._mapper.index_from_coordinate(x, y)
                if i >= len(self.values):
                    row.append('?')
                else:
                    row.append('#' if self.values[i] == 1 else '.')
            lines.append(' '.join(row))
        return '\n'.join(lines)


AreaFactory = Callable[[Iterable[int]], Area]


def make_area(rows: int, columns: int) -> AreaFactory:
    """Returns a factory building Areas over a fixed (rows, columns) grid.

    The occupancy array is copied, so callers may keep mutating their list.
    """
    def factory(values: Iterable[int]) -> Area:
        return Area(rows, columns, tuple(int(v) for v in values))

    return factory
