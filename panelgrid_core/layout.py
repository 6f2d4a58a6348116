from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .actions import (
    DRAG_OVER,
    END_MOVE,
    END_RESIZE,
    RESET_PANEL,
    RESIZE_OVER,
    START_MOVE,
    START_RESIZE,
    UPDATE_PANEL_DATA,
)
from .area import Area
from .grid import Grid

logger = logging.getLogger(__name__)

LayoutState = Dict[str, Any]
Reducer = Callable[[Optional[LayoutState], Mapping[str, Any]], LayoutState]

NEUTRAL = 0
ACTIVE = 1
INVALID = -1


def initial_state(grid: Grid) -> LayoutState:
    return {'active': None, 'panels': list(grid)}


def _mark(grid: Grid, area: Area, status: int) -> None:
    for x, y in area:
        grid.update_at(x, y, adorner_status=status)


def _blocking_cells(grid: Grid, candidates: Area, target: Area) -> Area:
    """Union of the panels found at `candidates` that overlap `target` without fitting inside it."""
    blocked = grid.empty_area()
    for x, y in candidates:
        p = grid.panel(x, y)
        if p.intersection(target).length > 0 and not target.includes(p):
            blocked = blocked.union(p)
    return blocked


def _preview(grid: Grid, state: LayoutState, active_area: Area, invalid: Area) -> LayoutState:
    _mark(grid, active_area.complement(), NEUTRAL)
    _mark(grid, active_area, ACTIVE)
    _mark(grid, invalid, INVALID)
    active = dict(state['active'], valid=invalid.length == 0)
    logger.debug("Preview %r: %d active, %d invalid cells", active, active_area.length, invalid.length)
    return dict(state, active=active, panels=list(grid))


def _resize_over(grid: Grid, state: LayoutState, x: int, y: int) -> LayoutState:
    active = state['active']
    start_x, start_y = active['x'], active['y']
    if x < start_x or y < start_y:
        return dict(state, active=dict(active, valid=False))
    active_area = grid.area(start_x, start_y, x - start_x + 1, y - start_y + 1)
    all_but_start = grid.area(start_x, start_y).complement()
    invalid = _blocking_cells(grid, all_but_start, active_area)
    return _preview(grid, state, active_area, invalid)


def _move_over(grid: Grid, state: LayoutState, x: int, y: int) -> LayoutState:
    active = state['active']
    start = grid.get_data(active['x'], active['y'])
    original = grid.panel(active['x'], active['y'])
    expected = grid.area(x, y, start.get('dx', 1), start.get('dy', 1))
    active_area = original.union(expected)
    if expected.length < original.length:
        # target rectangle is clipped by the grid edge
        invalid = active_area
    else:
        invalid = _blocking_cells(grid, original.complement(), expected)
    return _preview(grid, state, active_area, invalid)


def _reset_adorners(grid: Grid) -> None:
    for p in list(grid):
        grid.update_at(p['x'], p['y'], adorner_status=NEUTRAL)


def _start_of(state: LayoutState, action: Mapping[str, Any]):
    active = state.get('active') or {}
    return action.get('start_x', active.get('x')), action.get('start_y', active.get('y'))


def _end_resize(grid: Grid, state: LayoutState, action: Mapping[str, Any]) -> LayoutState:
    active = state.get('active') or {}
    start_x, start_y = _start_of(state, action)
    if active.get('valid') is True:
        dx = action['x'] - start_x + 1
        dy = action['y'] - start_y + 1
        cells = list(grid.area(start_x, start_y, dx, dy))
        grid.update_at(start_x, start_y, dx=dx, dy=dy)
        for x, y in cells[1:]:
            grid.update_at(x, y, dx=1, dy=1)
        logger.debug("Resized panel (%d, %d) to %dx%d", start_x, start_y, dx, dy)
    _reset_adorners(grid)
    return dict(state, active=None, panels=list(grid))


def _end_move(grid: Grid, state: LayoutState, action: Mapping[str, Any]) -> LayoutState:
    active = state.get('active') or {}
    start_x, start_y = _start_of(state, action)
    x, y = action['x'], action['y']
    if active.get('valid') is True:
        delta_x = start_x - x
        delta_y = start_y - y
        start = grid.get_data(start_x, start_y)
        claimed = grid.area(x, y, start.get('dx', 1), start.get('dy', 1))
        for cx, cy in claimed:
            new_x, new_y = cx + delta_x, cy + delta_y
            displaced = dict(grid.get_data(cx, cy), x=new_x, y=new_y)
            grid.update_at(new_x, new_y, displaced)
        grid.update_at(x, y, dict(start, x=x, y=y))
        logger.debug("Moved panel (%d, %d) to (%d, %d)", start_x, start_y, x, y)
    _reset_adorners(grid)
    return dict(state, active=None, panels=list(grid))


def make_layout_reducer(grid: Optional[Grid] = None) -> Reducer:
    """Returns a reducer driving resize/move previews over `grid`.

    The grid is the mutable store; each returned state holds a fresh copy of
    its panels. Unknown action types leave the state unchanged.
    """
    grid = grid if grid is not None else Grid()

    def reduce(state: Optional[LayoutState], action: Mapping[str, Any]) -> LayoutState:
        if state is None:
            state = initial_state(grid)
        kind = action.get('type')
        if kind == START_RESIZE:
            return dict(state, active={'x': action['x'], 'y': action['y'], 'operation': 'resize'})
        if kind == START_MOVE:
            return dict(state, active={'x': action['x'], 'y': action['y'], 'operation': 'move'})
        if kind == RESIZE_OVER:
            if not state.get('active'):
                return state
            return _resize_over(grid, state, action['x'], action['y'])
        if kind == DRAG_OVER:
            operation = (state.get('active') or {}).get('operation')
            if operation == 'move':
                return _move_over(grid, state, action['x'], action['y'])
            if operation == 'resize':
                return _resize_over(grid, state, action['x'], action['y'])
            return state
        if kind == END_RESIZE:
            return _end_resize(grid, state, action)
        if kind == END_MOVE:
            return _end_move(grid, state, action)
        if kind == UPDATE_PANEL_DATA:
            grid.update_at(action['x'], action['y'], data=action.get('data'))
            return dict(state, panels=list(grid))
        if kind == RESET_PANEL:
            grid.update_at(action['x'], action['y'], data={})
            return dict(state, panels=list(grid))
        return state

    return reduce
