"""Runtime access to dashboard grid configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings

__all__ = ["settings", "DashgridSettings"]


@dataclass
class DashgridSettings:
    """Proxy object exposing Django settings with sensible fallbacks."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = DashgridSettings(
    defaults={
        "DASHGRID_COLUMNS": 12,
        "DASHGRID_CHART_SIZES": {},
    }
)
