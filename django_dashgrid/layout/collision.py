from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .grid import GridItem, get_columns, in_bounds, overlaps

logger = logging.getLogger(__name__)

__all__ = ["LayoutProblem", "fits", "find_collisions", "audit"]


def fits(
    candidate: GridItem, existing: Iterable[GridItem], cols: Optional[int] = None
) -> bool:
    """Return whether ``candidate`` is in bounds and overlaps nothing.

    Stops at the first collision; the placement scan calls this for every
    candidate cell.
    """

    if not in_bounds(candidate, cols):
        return False
    for item in existing:
        if overlaps(candidate, item):
            return False
    return True


def find_collisions(items: Sequence[GridItem]) -> List[Tuple[Optional[str], Optional[str]]]:
    """Return the ids of every overlapping pair, in input order."""

    pairs = []
    for index, first in enumerate(items):
        for second in items[index + 1:]:
            if overlaps(first, second):
                pairs.append((first.id, second.id))
    return pairs


@dataclass(frozen=True)
class LayoutProblem:
    code: str
    item_ids: Tuple[Optional[str], ...]
    message: str


def audit(items: Sequence[GridItem], cols: Optional[int] = None) -> List[LayoutProblem]:
    """Report every broken layout invariant in ``items``.

    Checks bounds, the full-width rule and overlaps.  An empty result means the
    layout is safe to hand to the renderer as is.
    """

    cols = get_columns(cols)
    problems: List[LayoutProblem] = []

    for item in items:
        if not in_bounds(item, cols):
            problems.append(
                LayoutProblem(
                    "out_of_bounds",
                    (item.id,),
                    f"{item.id!r} at x={item.x}, y={item.y}, w={item.w} leaves the {cols}-column grid",
                )
            )
        if item.is_full_width:
            if item.x != 0 or item.w != cols:
                problems.append(
                    LayoutProblem(
                        "full_width_span",
                        (item.id,),
                        f"full-width item {item.id!r} spans x={item.x}..{item.x + item.w} instead of 0..{cols}",
                    )
                )
            sharing = [
                other.id
                for other in items
                if other is not item
                and other.y < item.y + item.h
                and item.y < other.y + other.h
            ]
            if sharing:
                problems.append(
                    LayoutProblem(
                        "full_width_shared",
                        (item.id, *sharing),
                        f"full-width item {item.id!r} shares rows with {sharing!r}",
                    )
                )

    for first_id, second_id in find_collisions(items):
        problems.append(
            LayoutProblem(
                "overlap",
                (first_id, second_id),
                f"{first_id!r} overlaps {second_id!r}",
            )
        )

    for problem in problems:
        logger.warning("Layout problem [%s]: %s", problem.code, problem.message)
    return problems
