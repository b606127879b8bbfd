from django.test import SimpleTestCase, override_settings

from django_dashgrid.layout.exceptions import InvalidItemSpec
from django_dashgrid.layout.placement import place
from django_dashgrid.layout.grid import (
    DEFAULT_COLUMNS,
    GridItem,
    ItemKind,
    PlacementRequest,
    get_columns,
    in_bounds,
    max_bottom,
    overlaps,
)


class GetColumnsTests(SimpleTestCase):
    def test_defaults_to_twelve_columns(self):
        self.assertEqual(DEFAULT_COLUMNS, 12)
        self.assertEqual(get_columns(), 12)

    @override_settings(DASHGRID_COLUMNS=8)
    def test_reads_setting(self):
        self.assertEqual(get_columns(), 8)

    def test_rejects_non_positive_column_count(self):
        for value in (0, -3, True, "12"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    get_columns(value)

    def test_place_rejects_empty_grid(self):
        with self.assertRaises(ValueError):
            place(PlacementRequest(h=1, kind=ItemKind.FULL_WIDTH), [], cols=0)

    @override_settings(DASHGRID_COLUMNS=8)
    def test_explicit_value_wins(self):
        self.assertEqual(get_columns(24), 24)


class GridItemTests(SimpleTestCase):
    def test_kind_accepts_plain_string(self):
        item = GridItem(id="t", x=0, y=0, w=12, h=2, kind="full-width")
        self.assertIs(item.kind, ItemKind.FULL_WIDTH)
        self.assertTrue(item.is_full_width)

    def test_edges_and_move(self):
        item = GridItem(id="a", x=2, y=3, w=4, h=5)
        self.assertEqual((item.right, item.bottom), (6, 8))
        moved = item.moved_to(0, 1)
        self.assertEqual((moved.x, moved.y, moved.w, moved.h), (0, 1, 4, 5))
        self.assertEqual((item.x, item.y), (2, 3))

    def test_as_dict(self):
        item = GridItem(id="a", x=1, y=2, w=3, h=4)
        self.assertEqual(
            item.as_dict(),
            {"id": "a", "x": 1, "y": 2, "w": 3, "h": 4, "kind": "normal"},
        )


class PlacementRequestTests(SimpleTestCase):
    def test_unknown_kind_is_rejected(self):
        with self.assertRaises(InvalidItemSpec):
            PlacementRequest(w=4, h=2, kind="sidebar")

    def test_full_width_request_spans_grid(self):
        request = PlacementRequest(w=5, h=2, kind=ItemKind.FULL_WIDTH, id="table")
        item = request.at(0, 4)
        self.assertEqual((item.x, item.y, item.w, item.h), (0, 4, 12, 2))
        self.assertEqual(request.width_for(cols=10), 10)


class GeometryTests(SimpleTestCase):
    def test_in_bounds(self):
        self.assertTrue(in_bounds(GridItem(id="a", x=0, y=0, w=12, h=1)))
        self.assertTrue(in_bounds(GridItem(id="a", x=6, y=9, w=6, h=1)))
        self.assertFalse(in_bounds(GridItem(id="a", x=7, y=0, w=6, h=1)))
        self.assertFalse(in_bounds(GridItem(id="a", x=-1, y=0, w=2, h=1)))
        self.assertFalse(in_bounds(GridItem(id="a", x=0, y=-1, w=2, h=1)))
        self.assertTrue(in_bounds(GridItem(id="a", x=2, y=0, w=6, h=1), cols=8))
        self.assertFalse(in_bounds(GridItem(id="a", x=3, y=0, w=6, h=1), cols=8))

    def test_max_bottom(self):
        self.assertEqual(max_bottom([]), 0)
        items = [
            GridItem(id="a", x=0, y=0, w=6, h=3),
            GridItem(id="b", x=6, y=1, w=6, h=4),
        ]
        self.assertEqual(max_bottom(items), 5)

    def test_touching_rectangles_do_not_overlap(self):
        a = GridItem(id="a", x=0, y=0, w=6, h=3)
        self.assertFalse(overlaps(a, GridItem(id="b", x=6, y=0, w=6, h=3)))
        self.assertFalse(overlaps(a, GridItem(id="c", x=0, y=3, w=6, h=3)))

    def test_intersecting_rectangles_overlap(self):
        a = GridItem(id="a", x=0, y=0, w=6, h=3)
        self.assertTrue(overlaps(a, GridItem(id="b", x=5, y=2, w=2, h=2)))
        self.assertTrue(overlaps(a, GridItem(id="c", x=1, y=1, w=1, h=1)))
