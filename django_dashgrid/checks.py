"""System checks for the dashboard grid settings."""

from django.core.checks import Error

from django_dashgrid.conf import settings
from django_dashgrid.layout.grid import ItemKind
from django_dashgrid.layout.sizes import DEFAULT_CHART_SIZES, FALLBACK_CHART_SIZE, parse_chart_size


def check_columns(app_configs=None, **kwargs):
    cols = settings.DASHGRID_COLUMNS
    if not isinstance(cols, int) or isinstance(cols, bool) or cols <= 0:
        return [
            Error(
                f"DASHGRID_COLUMNS must be a positive integer, got {cols!r}.",
                hint="Most dashboards use 12 columns.",
                id="dashgrid.E001",
            )
        ]
    return []


def check_chart_sizes(app_configs=None, **kwargs):
    overrides = settings.DASHGRID_CHART_SIZES
    if not isinstance(overrides, dict):
        return [
            Error(
                "DASHGRID_CHART_SIZES must be a dict of chart type to size overrides.",
                id="dashgrid.E002",
            )
        ]

    errors = []
    for chart_type, raw in overrides.items():
        base = DEFAULT_CHART_SIZES.get(chart_type, FALLBACK_CHART_SIZE)
        try:
            size = parse_chart_size(raw, base)
        except ValueError as exc:
            errors.append(
                Error(
                    f"DASHGRID_CHART_SIZES[{chart_type!r}] is invalid: {exc}",
                    id="dashgrid.E003",
                )
            )
            continue
        cols = settings.DASHGRID_COLUMNS
        if size.kind is ItemKind.NORMAL and isinstance(cols, int) and size.w > cols:
            errors.append(
                Error(
                    f"DASHGRID_CHART_SIZES[{chart_type!r}] is {size.w} columns wide but the grid has {cols}.",
                    id="dashgrid.E004",
                )
            )
    return errors
