"""First-fit, horizontal-first placement of a single widget."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from .collision import fits
from .exceptions import InvalidItemSpec
from .gaps import common_gaps
from .grid import GridItem, PlacementRequest, get_columns, max_bottom

logger = logging.getLogger(__name__)

__all__ = ["place", "validate_request"]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_request(spec: PlacementRequest, cols: Optional[int] = None) -> None:
    """Raise :class:`InvalidItemSpec` unless ``spec`` can be placed."""

    cols = get_columns(cols)
    if not _is_int(spec.h) or spec.h <= 0:
        raise InvalidItemSpec(spec, f"height must be a positive integer, got {spec.h!r}")
    if spec.is_full_width and spec.w is None:
        return
    if not _is_int(spec.w) or spec.w <= 0:
        raise InvalidItemSpec(spec, f"width must be a positive integer, got {spec.w!r}")
    if spec.w > cols:
        raise InvalidItemSpec(spec, f"width {spec.w} exceeds the {cols}-column grid")


def place(
    spec: PlacementRequest,
    existing: Iterable[GridItem],
    cols: Optional[int] = None,
) -> GridItem:
    """Return ``spec`` positioned at the first free cell of the layout.

    Full-width items always open a fresh row directly below everything in
    ``existing``.  Other items are scanned row-major: rows from the top, and
    within a row the columns left to right, so a row is filled before the
    layout grows downwards.  ``existing`` is left untouched.
    """

    cols = get_columns(cols)
    validate_request(spec, cols)
    existing = tuple(existing)
    bottom = max_bottom(existing)

    if spec.is_full_width:
        item = spec.at(0, bottom, cols)
        logger.debug("Full-width item %r opens row %s", spec.id, bottom)
        return item

    w, h = spec.w, spec.h
    # Row ``bottom`` is always free, so the scan cannot run past it.
    for y in range(bottom + max(h, 1)):
        for gap in common_gaps(range(y, y + h), existing, cols):
            if not gap.fits(w):
                continue
            for x in range(gap.start, gap.end - w + 1):
                candidate = spec.at(x, y, cols)
                if fits(candidate, existing, cols):
                    logger.debug("Placed %r (%sx%s) at x=%s, y=%s", spec.id, w, h, x, y)
                    return candidate

    logger.warning(
        "No free cell found for %r (%sx%s); appending below row %s", spec.id, w, h, bottom
    )
    return spec.at(0, bottom, cols)
