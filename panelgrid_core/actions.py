from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

Action = Dict[str, Any]

START_RESIZE = 'START_RESIZE'
RESIZE_OVER = 'RESIZE_OVER'
END_RESIZE = 'END_RESIZE'
START_MOVE = 'START_MOVE'
DRAG_OVER = 'DRAG_OVER'
END_MOVE = 'END_MOVE'
UPDATE_PANEL_DATA = 'UPDATE_PANEL_DATA'
RESET_PANEL = 'RESET_PANEL'


def _positional(action_type: str) -> Callable[..., Action]:
    def create(opts: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Action:
        fields = dict(opts or {})
        fields.update(kwargs)
        return {'type': action_type, 'x': fields.get('x'), 'y': fields.get('y')}

    create.__name__ = action_type.lower()
    create.__doc__ = f"Builds a {action_type} record from x and y; other fields are dropped."
    return create


start_resize = _positional(START_RESIZE)
resize_over = _positional(RESIZE_OVER)
end_resize = _positional(END_RESIZE)
start_move = _positional(START_MOVE)
drag_over = _positional(DRAG_OVER)
end_move = _positional(END_MOVE)


def update_panel_data(x: int, y: int, data: Any) -> Action:
    return {'type': UPDATE_PANEL_DATA, 'x': x, 'y': y, 'data': data}


def reset_panel(x: int, y: int) -> Action:
    return {'type': RESET_PANEL, 'x': x, 'y': y}
