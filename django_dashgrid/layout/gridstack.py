"""Helpers for translating Gridstack payloads to and from layout items."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from .builder import SavedPlacement
from .exceptions import InvalidItemSpec
from .grid import GridItem, ItemKind, PlacementRequest

__all__ = [
    "request_from_node",
    "requests_from_nodes",
    "saved_from_nodes",
    "item_to_node",
    "items_to_nodes",
]


def _first(node: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = node.get(key)
        if value not in (None, ""):
            return value
    return None


def _coerce_int(node: Mapping[str, Any], *keys: str) -> Optional[int]:
    """Return the first present value of ``keys`` as an ``int``, or ``None``."""

    value = _first(node, *keys)
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidItemSpec(node, f"{keys[0]} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidItemSpec(node, f"{keys[0]} must be a whole number, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidItemSpec(node, f"{keys[0]} must be an integer, got {value!r}") from None


def _node_id(node: Mapping[str, Any]) -> Optional[str]:
    value = _first(node, "id", "slug")
    return None if value is None else str(value)


def request_from_node(node: Mapping[str, Any]) -> PlacementRequest:
    """Build a :class:`PlacementRequest` from a Gridstack node dict."""

    if not isinstance(node, Mapping):
        raise InvalidItemSpec(node, "Gridstack node must be a mapping")
    kind = node.get("kind") or ItemKind.NORMAL
    height = _coerce_int(node, "h", "height")
    return PlacementRequest(
        w=_coerce_int(node, "w", "width"),
        h=height if height is not None else 0,
        kind=kind,
        id=_node_id(node),
    )


def requests_from_nodes(nodes: Iterable[Mapping[str, Any]]) -> List[PlacementRequest]:
    return [request_from_node(node) for node in nodes]


def saved_from_nodes(nodes: Iterable[Mapping[str, Any]]) -> List[SavedPlacement]:
    """Pair every node with its stored ``x``/``y`` for :func:`reconcile`."""

    saved = []
    for node in nodes:
        request = request_from_node(node)
        saved.append(
            SavedPlacement(
                request=request,
                x=_coerce_int(node, "x", "column"),
                y=_coerce_int(node, "y", "row"),
            )
        )
    return saved


def item_to_node(item: GridItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "x": item.x,
        "y": item.y,
        "w": item.w,
        "h": item.h,
        "kind": item.kind.value,
    }


def items_to_nodes(items: Iterable[GridItem]) -> List[dict[str, Any]]:
    return [item_to_node(item) for item in items]
