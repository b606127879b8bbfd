from django.apps import AppConfig
from django.core import checks


class DashgridConfig(AppConfig):
    name = "django_dashgrid"
    verbose_name = "Dashboard Grid"

    def ready(self):
        from .checks import check_chart_sizes, check_columns

        checks.register(check_columns, "dashgrid")
        checks.register(check_chart_sizes, "dashgrid")
