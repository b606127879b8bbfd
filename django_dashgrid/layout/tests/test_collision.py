from django.test import SimpleTestCase

from django_dashgrid.layout.collision import audit, find_collisions, fits
from django_dashgrid.layout.grid import GridItem, ItemKind


def _item(id, x, y, w, h, kind=ItemKind.NORMAL):
    return GridItem(id=id, x=x, y=y, w=w, h=h, kind=kind)


class FitsTests(SimpleTestCase):
    def test_free_cell_fits(self):
        existing = [_item("a", 0, 0, 6, 3)]
        self.assertTrue(fits(_item("b", 6, 0, 6, 3), existing))
        self.assertTrue(fits(_item("b", 0, 3, 6, 3), existing))

    def test_overlap_is_rejected(self):
        existing = [_item("a", 0, 0, 6, 3)]
        self.assertFalse(fits(_item("b", 5, 2, 6, 3), existing))

    def test_out_of_bounds_is_rejected(self):
        self.assertFalse(fits(_item("b", 7, 0, 6, 1), []))
        self.assertFalse(fits(_item("b", 0, -1, 6, 1), []))

    def test_stops_at_first_collision(self):
        def existing():
            yield _item("a", 0, 0, 6, 3)
            raise AssertionError("scanned past the first collision")

        self.assertFalse(fits(_item("b", 0, 0, 2, 2), existing()))

    def test_bounds_checked_before_items(self):
        def existing():
            raise AssertionError("items scanned for an out-of-bounds candidate")
            yield  # pragma: no cover

        self.assertFalse(fits(_item("b", 10, 0, 4, 1), existing()))


class FindCollisionsTests(SimpleTestCase):
    def test_reports_pairs_in_order(self):
        items = [
            _item("a", 0, 0, 6, 3),
            _item("b", 3, 1, 6, 3),
            _item("c", 8, 0, 4, 2),
            _item("d", 0, 5, 2, 2),
        ]
        self.assertEqual(find_collisions(items), [("a", "b"), ("b", "c")])

    def test_clean_layout(self):
        items = [_item("a", 0, 0, 6, 3), _item("b", 6, 0, 6, 3)]
        self.assertEqual(find_collisions(items), [])


class AuditTests(SimpleTestCase):
    def test_clean_layout_has_no_problems(self):
        items = [
            _item("a", 0, 0, 6, 3),
            _item("b", 6, 0, 6, 3),
            _item("t", 0, 3, 12, 4, ItemKind.FULL_WIDTH),
        ]
        self.assertEqual(audit(items), [])

    def test_reports_each_broken_invariant(self):
        items = [
            _item("a", 8, 0, 6, 1),
            _item("t", 2, 2, 10, 2, ItemKind.FULL_WIDTH),
            _item("b", 0, 3, 2, 1),
        ]
        with self.assertLogs("django_dashgrid.layout.collision", level="WARNING") as logs:
            problems = audit(items)

        codes = [problem.code for problem in problems]
        self.assertEqual(codes, ["out_of_bounds", "full_width_span", "full_width_shared"])
        self.assertEqual(problems[2].item_ids, ("t", "b"))
        self.assertEqual(len(logs.records), 3)

    def test_reports_overlaps(self):
        items = [_item("a", 0, 0, 6, 3), _item("b", 4, 2, 4, 2)]
        with self.assertLogs("django_dashgrid.layout.collision", level="WARNING"):
            problems = audit(items)
        self.assertEqual([(p.code, p.item_ids) for p in problems], [("overlap", ("a", "b"))])
