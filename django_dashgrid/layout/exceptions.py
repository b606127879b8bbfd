from __future__ import annotations

from typing import Any


class DashgridError(Exception):
    """Base class for errors raised by the layout engine."""


class InvalidItemSpec(DashgridError, ValueError):
    """A placement request that can never describe a valid grid item.

    Raised before any placement work is done.  This always points at a bug in
    the caller (for example a widget wider than the grid), never at a lack of
    space: the grid has no row limit.
    """

    def __init__(self, spec: Any, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid item spec {spec!r}: {reason}")
