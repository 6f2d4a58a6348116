from __future__ import annotations

import argparse
import json
import logging
import string
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from .actions import end_resize, resize_over, start_resize
from .codec import state_to_json
from .config import GridConfig, debug_enabled
from .errors import PanelGridError
from .grid import Grid
from .layout import initial_state, make_layout_reducer


def layout_pretty(grid: Grid) -> str:
    """Draws each cell with the letter of the panel covering it (larger panels win)."""
    panels = sorted(grid, key=lambda p: -(p.get('dx', 1) * p.get('dy', 1)))
    owner: Dict[Tuple[int, int], str] = {}
    labels = {}
    for n, p in enumerate(grid):
        labels[(p['x'], p['y'])] = string.ascii_uppercase[n % 26]
    for p in panels:
        for cell in grid.panel(p['x'], p['y']):
            owner.setdefault((cell.x, cell.y), labels[(p['x'], p['y'])])
    lines: List[str] = []
    for y in range(1, grid.rows + 1):
        lines.append(' '.join(owner.get((x, y), '.') for x in range(1, grid.columns + 1)))
    return '\n'.join(lines)


def _load_panels(path: Optional[str]):
    if not path:
        return None
    with open(path, 'r', encoding='utf-8') as fh:
        data = json.load(fh)
    if isinstance(data, dict):
        data = data.get('panels', [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of panel records")
    panels = []
    for n, p in enumerate(data):
        try:
            panels.append(dict(p, x=int(p['x']), y=int(p['y'])))
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"{path}: panel record {n} needs integer x and y") from None
    return panels


def main(argv: Optional[Sequence[str]] = None) -> int:
    defaults = GridConfig.from_env()
    parser = argparse.ArgumentParser(description='Panel grid layout tool')
    parser.add_argument('--rows', type=int, default=defaults.rows, help='Grid rows (env PANELGRID_ROWS)')
    parser.add_argument('--columns', type=int, default=defaults.columns, help='Grid columns (env PANELGRID_COLUMNS)')
    parser.add_argument('--panels', default=None, help='JSON file holding a list of panel records')
    parser.add_argument('--resize', nargs=4, type=int, action='append', default=[],
                        metavar=('X', 'Y', 'X2', 'Y2'), help='Resize the panel at X,Y so it spans to X2,Y2')
    parser.add_argument('--json', action='store_true', help='Print the final layout as JSON')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if debug_enabled() else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        config = GridConfig(rows=args.rows, columns=args.columns, panels_data=_load_panels(args.panels) or ())
        grid = Grid.from_config(config)
        reduce = make_layout_reducer(grid)
        state = initial_state(grid)
        for x, y, x2, y2 in args.resize:
            state = reduce(state, start_resize(x=x, y=y))
            state = reduce(state, resize_over(x=x2, y=y2))
            ok = bool(state['active'].get('valid'))
            state = reduce(state, end_resize(x=x2, y=y2))
            if not ok:
                print(f"Resize of ({x}, {y}) to ({x2}, {y2}) rejected: overlaps another panel", file=sys.stderr)
    except (PanelGridError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(state_to_json(state), indent=2))
    else:
        print(layout_pretty(grid))
    return 0
