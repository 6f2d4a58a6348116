"""
panelgrid core Python package.

Grid region algebra and the panel registry built on top of it.
Modules:
- coords.py: Coordinate, RectangleDef, CoordinateMapper
- area.py: Area, make_area
- grid.py: Grid (panel registry)
- actions.py / layout.py: resize and move workflow
- codec.py: plain-data conversion
"""
