from django.apps import apps
from django.core.checks import registry
from django.test import SimpleTestCase, override_settings

from django_dashgrid.checks import check_chart_sizes, check_columns
from django_dashgrid.conf import settings


class DashgridSettingsTests(SimpleTestCase):
    def test_defaults(self):
        self.assertEqual(settings.DASHGRID_COLUMNS, 12)
        self.assertEqual(settings.DASHGRID_CHART_SIZES, {})

    @override_settings(DASHGRID_COLUMNS=24)
    def test_project_setting_wins(self):
        self.assertEqual(settings.DASHGRID_COLUMNS, 24)


class DashgridConfigTests(SimpleTestCase):
    def test_app_is_installed(self):
        self.assertEqual(apps.get_app_config("django_dashgrid").verbose_name, "Dashboard Grid")

    def test_ready_registers_checks(self):
        registered = registry.registry.get_checks()
        self.assertIn(check_columns, registered)
        self.assertIn(check_chart_sizes, registered)

    def test_checks_are_tagged(self):
        self.assertIn("dashgrid", registry.registry.tags_available())
        self.assertIn(check_columns, registry.registry.get_checks())
        self.assertEqual(set(check_columns.tags), {"dashgrid"})
        self.assertEqual(set(check_chart_sizes.tags), {"dashgrid"})


class CheckTests(SimpleTestCase):
    def test_valid_settings_pass(self):
        self.assertEqual(check_columns(), [])
        self.assertEqual(check_chart_sizes(), [])

    def test_columns_must_be_positive_integer(self):
        for value in (0, -4, "12", True):
            with self.subTest(value=value), override_settings(DASHGRID_COLUMNS=value):
                self.assertEqual([e.id for e in check_columns()], ["dashgrid.E001"])

    @override_settings(DASHGRID_CHART_SIZES=[("bar", {"w": 4})])
    def test_chart_sizes_must_be_dict(self):
        self.assertEqual([e.id for e in check_chart_sizes()], ["dashgrid.E002"])

    @override_settings(DASHGRID_CHART_SIZES={"bar": {"w": 0}, "pie": {"depth": 1}, "line": {"h": 4}})
    def test_malformed_chart_sizes(self):
        errors = check_chart_sizes()
        self.assertEqual([e.id for e in errors], ["dashgrid.E003", "dashgrid.E003"])
        self.assertIn("'bar'", errors[0].msg)

    @override_settings(DASHGRID_COLUMNS=8, DASHGRID_CHART_SIZES={"bar": {"w": 10}, "table": {"h": 4}})
    def test_chart_wider_than_grid(self):
        self.assertEqual([e.id for e in check_chart_sizes()], ["dashgrid.E004"])
