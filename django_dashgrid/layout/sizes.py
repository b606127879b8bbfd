"""Default widget shapes per chart type.

Sizes are in grid cells.  Tables are full-width and always get a row of
their own; every other chart type is a normal item.  Projects can adjust or
add entries through ``DASHGRID_CHART_SIZES``::

    DASHGRID_CHART_SIZES = {
        "bar": {"w": 4, "h": 3},
        "heatmap": {"w": 12, "h": 5, "kind": "full-width"},
    }
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from django_dashgrid.conf import settings

from .grid import ItemKind, PlacementRequest, get_columns

__all__ = [
    "ChartSize",
    "DEFAULT_CHART_SIZES",
    "FALLBACK_CHART_SIZE",
    "default_size",
    "parse_chart_size",
    "request_for_chart",
]


@dataclass(frozen=True)
class ChartSize:
    w: int
    h: int
    kind: ItemKind = ItemKind.NORMAL
    min_w: int = 4
    min_h: int = 2


FALLBACK_CHART_SIZE = ChartSize(w=6, h=3)

DEFAULT_CHART_SIZES: Dict[str, ChartSize] = {
    "scorecard": ChartSize(w=3, h=2, min_w=2, min_h=1),
    "table": ChartSize(w=12, h=6, kind=ItemKind.FULL_WIDTH, min_w=8, min_h=2),
    "pie": ChartSize(w=4, h=3),
    "bar": ChartSize(w=6, h=3),
    "line": ChartSize(w=6, h=3),
    "area": ChartSize(w=6, h=3),
    # Wider for axis labels
    "scatter": ChartSize(w=7, h=3),
}

_SIZE_KEYS = ("w", "h", "min_w", "min_h")


def parse_chart_size(raw: Mapping[str, Any], base: ChartSize = FALLBACK_CHART_SIZE) -> ChartSize:
    """Apply the overrides in ``raw`` on top of ``base``.

    Raises ``ValueError`` for unknown keys, non-positive sizes or an unknown
    kind.
    """

    if not isinstance(raw, Mapping):
        raise ValueError(f"expected a mapping, got {type(raw).__name__}")
    unknown = set(raw) - set(_SIZE_KEYS) - {"kind"}
    if unknown:
        raise ValueError(f"unknown keys: {', '.join(sorted(unknown))}")

    changes: Dict[str, Any] = {}
    for key in _SIZE_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ValueError(f"{key} must be a positive integer, got {value!r}")
        changes[key] = value
    if "kind" in raw:
        changes["kind"] = ItemKind(raw["kind"])
    return replace(base, **changes)


def default_size(chart_type: Optional[str]) -> ChartSize:
    """Return the configured shape for ``chart_type``."""

    base = DEFAULT_CHART_SIZES.get(chart_type or "", FALLBACK_CHART_SIZE)
    overrides = settings.DASHGRID_CHART_SIZES or {}
    if chart_type in overrides:
        return parse_chart_size(overrides[chart_type], base)
    return base


def request_for_chart(
    chart_type: Optional[str],
    id: Optional[str] = None,
    w: Optional[int] = None,
    h: Optional[int] = None,
    cols: Optional[int] = None,
) -> PlacementRequest:
    """Build a placement request for a chart widget.

    An explicit ``w``/``h`` wins over the defaults but is raised to the chart
    type's minimum and the width is capped at the grid width.
    """

    cols = get_columns(cols)
    size = default_size(chart_type)
    width = max(w if w is not None else size.w, size.min_w)
    height = max(h if h is not None else size.h, size.min_h)
    if size.kind is ItemKind.FULL_WIDTH:
        width = cols
    return PlacementRequest(w=min(width, cols), h=height, kind=size.kind, id=id)
