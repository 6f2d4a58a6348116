from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .area import Area
from .config import PanelRecord
from .grid import Grid


def panel_to_json(p: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(p)
    out['x'] = int(p['x'])
    out['y'] = int(p['y'])
    out['dx'] = int(p.get('dx', 1))
    out['dy'] = int(p.get('dy', 1))
    return out


def grid_to_json(grid: Grid) -> Dict[str, Any]:
    return {
        "rows": int(grid.rows),
        "columns": int(grid.columns),
        "panels": [panel_to_json(p) for p in grid],
    }


def grid_from_json(obj: Mapping[str, Any]) -> Grid:
    panels: List[PanelRecord] = [dict(p) for p in obj.get("panels", [])]
    for p in panels:
        p["x"] = int(p["x"])
        p["y"] = int(p["y"])
    return Grid(panels_data=panels, rows=int(obj.get("rows", 4)), columns=int(obj.get("columns", 4)))


def area_to_json(area: Area) -> Dict[str, Any]:
    return {
        "rows": int(area.rows),
        "columns": int(area.columns),
        "values": list(area.values),
        "cells": [[x, y] for x, y in area],
    }


def state_to_json(state: Mapping[str, Any]) -> Dict[str, Any]:
    active: Optional[Mapping[str, Any]] = state.get("active")
    return {
        "active": dict(active) if active else None,
        "panels": [panel_to_json(p) for p in state.get("panels", [])],
    }
