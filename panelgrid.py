from __future__ import annotations

# Facade module that re-exports the panelgrid core API.
# Single-responsibility modules live under panelgrid_core/*.

from typing import Any, Mapping

from panelgrid_core.coords import Coordinate, CoordinateMapper, RectangleDef
from panelgrid_core.area import Area, make_area
from panelgrid_core.config import GridConfig
from panelgrid_core.errors import DimensionMismatchError, PanelGridError, PanelNotFoundError
from panelgrid_core.grid import Grid, default_panels
from panelgrid_core.actions import (
    drag_over,
    end_move,
    end_resize,
    reset_panel,
    resize_over,
    start_move,
    start_resize,
    update_panel_data,
)
from panelgrid_core.layout import initial_state, make_layout_reducer
from panelgrid_core.codec import area_to_json, grid_from_json, grid_to_json, state_to_json


def create(config: GridConfig | Mapping[str, Any] | None = None, **options: Any) -> Grid:
    """Creates a Grid from a GridConfig, an options mapping or rows/columns/panels_data keywords."""
    if config is None:
        config = GridConfig.from_mapping(options)
    return Grid.from_config(config)


def main() -> None:
    # CLI driver delegated to panelgrid_core.cli
    from panelgrid_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
