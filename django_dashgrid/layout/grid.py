"""Grid coordinate space and item rectangles.

The dashboard grid has a fixed number of columns and no upper bound on rows.
Positions are integer cells: ``x`` counts columns from the left edge and ``y``
counts rows from the top.  An item covers the half-open rectangle
``[x, x + w) × [y, y + h)``.

The column count defaults to :data:`DEFAULT_COLUMNS` and may be changed through
the ``DASHGRID_COLUMNS`` setting.  Every public function accepts an explicit
``cols`` argument which takes precedence over the setting.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Iterable, Optional

from django_dashgrid.conf import settings

from .exceptions import InvalidItemSpec

__all__ = [
    "DEFAULT_COLUMNS",
    "ItemKind",
    "GridItem",
    "PlacementRequest",
    "get_columns",
    "in_bounds",
    "max_bottom",
    "overlaps",
]

DEFAULT_COLUMNS = 12


class ItemKind(str, Enum):
    NORMAL = "normal"
    # Occupies an entire row on its own (data tables).
    FULL_WIDTH = "full-width"


def get_columns(cols: Optional[int] = None) -> int:
    """Return ``cols`` when given, otherwise the configured column count."""

    if cols is None:
        cols = settings.DASHGRID_COLUMNS
    if not isinstance(cols, int) or isinstance(cols, bool) or cols <= 0:
        raise ValueError(f"column count must be a positive integer, got {cols!r}")
    return cols


@dataclass(frozen=True)
class GridItem:
    """A widget rectangle that has been assigned a position."""

    id: Optional[str]
    x: int
    y: int
    w: int
    h: int
    kind: ItemKind = ItemKind.NORMAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ItemKind(self.kind))

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def is_full_width(self) -> bool:
        return self.kind is ItemKind.FULL_WIDTH

    def moved_to(self, x: int, y: int) -> "GridItem":
        return replace(self, x=x, y=y)

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


@dataclass(frozen=True)
class PlacementRequest:
    """Shape of a widget waiting for a position.

    ``w`` may be left out for full-width requests; those always span every
    column of the grid.
    """

    w: Optional[int] = None
    h: int = 1
    kind: ItemKind = ItemKind.NORMAL
    id: Optional[str] = None

    def __post_init__(self) -> None:
        try:
            kind = ItemKind(self.kind)
        except ValueError:
            raise InvalidItemSpec(self, f"unknown kind {self.kind!r}") from None
        object.__setattr__(self, "kind", kind)

    @property
    def is_full_width(self) -> bool:
        return self.kind is ItemKind.FULL_WIDTH

    def width_for(self, cols: Optional[int] = None) -> Optional[int]:
        """Width the placed item will have on a grid of ``cols`` columns."""

        if self.is_full_width:
            return get_columns(cols)
        return self.w

    def at(self, x: int, y: int, cols: Optional[int] = None) -> GridItem:
        return GridItem(
            id=self.id,
            x=x,
            y=y,
            w=self.width_for(cols),
            h=self.h,
            kind=self.kind,
        )


def in_bounds(item: GridItem, cols: Optional[int] = None) -> bool:
    """Return whether ``item`` lies inside the horizontal extent of the grid."""

    return item.x >= 0 and item.y >= 0 and item.x + item.w <= get_columns(cols)


def max_bottom(items: Iterable[GridItem]) -> int:
    """Return the first row below every item, ``0`` for an empty layout."""

    return max((item.y + item.h for item in items), default=0)


def overlaps(a: GridItem, b: GridItem) -> bool:
    """Separating-axis test for two axis-aligned rectangles."""

    return not (
        a.x + a.w <= b.x
        or b.x + b.w <= a.x
        or a.y + a.h <= b.y
        or b.y + b.h <= a.y
    )
