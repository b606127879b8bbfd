"""Grid auto-layout engine for dashboard widgets.

``place`` positions one new widget against an existing layout and
``rebuild`` lays out an ordered list of widgets from scratch.  Both are pure:
inputs are never modified and the same input always yields the same output.
"""

from .builder import SavedPlacement, rebuild, reconcile
from .collision import LayoutProblem, audit, find_collisions, fits
from .exceptions import DashgridError, InvalidItemSpec
from .gaps import Gap, common_gaps, find_gaps
from .grid import (
    DEFAULT_COLUMNS,
    GridItem,
    ItemKind,
    PlacementRequest,
    get_columns,
    in_bounds,
    max_bottom,
    overlaps,
)
from .placement import place, validate_request
from .sizes import ChartSize, default_size, request_for_chart

__all__ = [
    "DEFAULT_COLUMNS",
    "ChartSize",
    "DashgridError",
    "Gap",
    "GridItem",
    "InvalidItemSpec",
    "ItemKind",
    "LayoutProblem",
    "PlacementRequest",
    "SavedPlacement",
    "audit",
    "common_gaps",
    "default_size",
    "find_collisions",
    "find_gaps",
    "fits",
    "get_columns",
    "in_bounds",
    "max_bottom",
    "overlaps",
    "place",
    "rebuild",
    "reconcile",
    "request_for_chart",
    "validate_request",
]
