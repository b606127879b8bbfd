"""Whole-layout reconstruction from an ordered list of widgets."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .collision import fits
from .grid import GridItem, PlacementRequest, get_columns
from .placement import place, validate_request

logger = logging.getLogger(__name__)

__all__ = ["SavedPlacement", "rebuild", "reconcile"]


def rebuild(
    specs: Iterable[PlacementRequest], cols: Optional[int] = None
) -> List[GridItem]:
    """Lay out ``specs`` from scratch, in the order given.

    Every placed item becomes an obstacle for the ones after it.  Full-width
    items keep their position in the sequence and take the next fresh row when
    their turn comes.  The same input always produces the same layout.

    All specs are validated up front, so an invalid one rejects the batch
    before anything is placed.
    """

    cols = get_columns(cols)
    specs = list(specs)
    for spec in specs:
        validate_request(spec, cols)

    placed: List[GridItem] = []
    for spec in specs:
        placed.append(place(spec, placed, cols))
    logger.debug("Rebuilt layout of %s items", len(placed))
    return placed


@dataclass(frozen=True)
class SavedPlacement:
    """A widget together with the position it had when last persisted."""

    request: PlacementRequest
    x: Optional[int] = None
    y: Optional[int] = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None


def reconcile(
    entries: Iterable[SavedPlacement], cols: Optional[int] = None
) -> List[GridItem]:
    """Restore a persisted layout, re-placing entries whose position is stale.

    Entries are handled in order.  A saved position is kept when it is inside
    the grid, keeps full-width items at column 0 and does not collide with an
    entry accepted before it.  Anything else (including entries that were never
    positioned) goes through :func:`place` against the items accepted so far.
    """

    cols = get_columns(cols)
    entries = list(entries)
    for entry in entries:
        validate_request(entry.request, cols)

    accepted: List[GridItem] = []
    for entry in entries:
        spec = entry.request
        if entry.has_position:
            candidate = spec.at(entry.x, entry.y, cols)
            if (not spec.is_full_width or candidate.x == 0) and fits(candidate, accepted, cols):
                accepted.append(candidate)
                continue
            item = place(spec, accepted, cols)
            logger.info(
                "Saved position of %r at x=%s, y=%s is no longer valid; moved to x=%s, y=%s",
                spec.id, entry.x, entry.y, item.x, item.y,
            )
        else:
            item = place(spec, accepted, cols)
        accepted.append(item)
    return accepted
