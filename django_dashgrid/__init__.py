"""Dashboard grid auto-layout reusable application."""

from .apps import DashgridConfig
from .conf import settings

__all__ = ["settings", "DashgridConfig"]
