from __future__ import annotations

import logging
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Union

from .area import Area, make_area
from .config import DEFAULT_COLUMNS, DEFAULT_ROWS, GridConfig, PanelRecord
from .coords import CoordinateMapper, RectangleDef
from .errors import PanelNotFoundError

logger = logging.getLogger(__name__)


def default_panels(mapper: CoordinateMapper) -> List[PanelRecord]:
    """One 1x1 panel per cell, in index order."""
    panels: List[PanelRecord] = []
    for coord in mapper.coordinates():
        panels.append({'x': coord.x, 'y': coord.y, 'dx': 1, 'dy': 1, 'adorner_status': 0, 'data': {}})
    return panels


class Grid:
    """Mutable registry of panel records laid out on a fixed grid.

    A panel is identified by its (x, y) coordinate. Records are plain dicts
    carrying at least x and y, optionally dx/dy, plus any caller data.
    """

    def __init__(
        self,
        panels_data: Optional[Sequence[PanelRecord]] = None,
        rows: int = DEFAULT_ROWS,
        columns: int = DEFAULT_COLUMNS,
    ) -> None:
        self.rows = rows
        self.columns = columns
        self.mapper = CoordinateMapper(rows, columns)
        self._area = make_area(rows, columns)
        panels_data = list(panels_data or [])
        if len(panels_data) != self.mapper.size:
            if panels_data:
                logger.debug(
                    "Discarding %d panel records (grid %dx%d needs %d)",
                    len(panels_data), rows, columns, self.mapper.size,
                )
            panels_data = default_panels(self.mapper)
        self._panels: List[PanelRecord] = panels_data

    @classmethod
    def from_config(cls, config: Union[GridConfig, Mapping[str, Any], None] = None) -> 'Grid':
        if config is None:
            config = GridConfig()
        elif isinstance(config, Mapping):
            config = GridConfig.from_mapping(config)
        elif not isinstance(config, GridConfig):
            raise TypeError(f"Expected a GridConfig or a mapping, got {type(config).__name__}")
        return cls(panels_data=config.panels_data, rows=config.rows, columns=config.columns)

    def __iter__(self) -> Iterator[PanelRecord]:
        for p in self._panels:
            yield dict(p)

    def __len__(self) -> int:
        return len(self._panels)

    def find(self, x: int, y: int) -> Optional[PanelRecord]:
        """Returns the stored record at (x, y), or None."""
        for p in self._panels:
            if p.get('x') == x and p.get('y') == y:
                return p
        return None

    def _require(self, x: int, y: int) -> PanelRecord:
        p = self.find(x, y)
        if p is None:
            raise PanelNotFoundError(x, y)
        return p

    def update_at(self, x: int, y: int, patch: Optional[Mapping[str, Any]] = None, **fields: Any) -> PanelRecord:
        """Merges `patch` (and keyword fields) into the panel at (x, y) in place."""
        p = self._require(x, y)
        if patch:
            p.update(patch)
        if fields:
            p.update(fields)
        logger.debug("Updated panel (%d, %d): %r", x, y, p)
        return p

    def get_data(self, x: int, y: int) -> PanelRecord:
        """Shallow copy of the panel at (x, y); empty dict when there is none."""
        return dict(self.find(x, y) or {})

    def panel(self, x: int, y: int) -> Area:
        """Area covered by the panel at (x, y), using its recorded size."""
        return self._area(self.mapper.occupancy_from_rectangle(self._require(x, y)))

    def area(self, x: int, y: int, dx: int = 1, dy: int = 1) -> Area:
        """Area of an arbitrary rectangle, independent of the stored panels."""
        return self._area(self.mapper.occupancy_from_rectangle(RectangleDef(x=x, y=y, dx=dx, dy=dy)))

    def empty_area(self) -> Area:
        return self.area(1, 1, 0, 0)
