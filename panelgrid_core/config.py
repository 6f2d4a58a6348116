from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

DEFAULT_ROWS = 4
DEFAULT_COLUMNS = 4

PanelRecord = Dict[str, Any]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def debug_enabled() -> bool:
    return os.getenv('PANELGRID_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class GridConfig:
    """Options accepted when creating a Grid."""
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    panels_data: Sequence[PanelRecord] = ()

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'GridConfig':
        """Builds a config from a plain options mapping; `panelsData` is accepted for `panels_data`."""
        fields = dict(options)
        if 'panelsData' in fields:
            fields['panels_data'] = fields.pop('panelsData')
        unknown = set(fields) - {'rows', 'columns', 'panels_data'}
        if unknown:
            raise TypeError(f"Unknown grid options: {', '.join(sorted(unknown))}")
        return cls(**fields)

    @classmethod
    def from_env(cls, panels_data: Optional[Sequence[PanelRecord]] = None) -> 'GridConfig':
        """Reads PANELGRID_ROWS / PANELGRID_COLUMNS, falling back to 4x4."""
        return cls(
            rows=_env_int('PANELGRID_ROWS', DEFAULT_ROWS),
            columns=_env_int('PANELGRID_COLUMNS', DEFAULT_COLUMNS),
            panels_data=tuple(panels_data or ()),
        )
