import unittest

from kundali_chart.domain.chart.layout import (
    BIRTH_ROW_HEIGHT,
    DIVISIONAL_ROW_HEIGHT,
    birth_labels,
    divisional_labels,
    placeholder_label,
    round_half_away,
    row_offsets,
    symbol_for,
)
from kundali_chart.domain.chart.schemas import BoundingBox, CelestialBody, DivisionalBody


BOX = BoundingBox(x=250, y=100, width=300, height=300)


class TestLayoutHelpers(unittest.TestCase):
    def test_symbol_lookup_and_fallback(self):
        self.assertEqual(symbol_for("Jupiter"), "Ju")
        self.assertEqual(symbol_for("Ascendant"), "As")
        self.assertEqual(symbol_for("Chiron"), "Ch")

    def test_round_half_away_from_zero(self):
        self.assertEqual(round_half_away(15.4), 15)
        self.assertEqual(round_half_away(15.5), 16)
        self.assertEqual(round_half_away(2.5), 3)
        self.assertEqual(round_half_away(29.99), 30)
        self.assertEqual(round_half_away(-2.5), -3)

    def test_rows_are_symmetric_about_center(self):
        for count in range(1, 6):
            with self.subTest(count=count):
                ys = row_offsets(BOX, count, BIRTH_ROW_HEIGHT)
                self.assertEqual(len(ys), count)
                self.assertAlmostEqual(sum(ys) / count, 250)
                for a, b in zip(ys, ys[1:]):
                    self.assertAlmostEqual(b - a, BIRTH_ROW_HEIGHT)

    def test_single_row_sits_on_center(self):
        self.assertEqual(row_offsets(BOX, 1, DIVISIONAL_ROW_HEIGHT), [250])


class TestBirthLabels(unittest.TestCase):
    def test_sign_suffix_only_on_first_body_of_each_sign(self):
        occupants = [
            CelestialBody(name="Ascendant", sign=1, degree=10.2),
            CelestialBody(name="Sun", sign=1, degree=15.4),
            CelestialBody(name="Moon", sign=2, degree=2.5, retrograde=True),
        ]
        labels = birth_labels(1, BOX, occupants)

        self.assertEqual([l.text for l in labels], ["As 10° (1)", "Su 15°", "Mo 3° (2)"])
        self.assertEqual([l.y for l in labels], [228, 250, 272])
        self.assertTrue(all(l.x == 400 for l in labels))
        self.assertEqual([l.is_ascendant for l in labels], [True, False, False])
        self.assertEqual([l.is_retrograde for l in labels], [False, False, True])
        self.assertFalse(any(l.is_placeholder for l in labels))

    def test_first_listed_body_carries_suffix(self):
        occupants = [
            CelestialBody(name="Sun", sign=1, degree=15.4),
            CelestialBody(name="Ascendant", sign=1, degree=10.2),
        ]
        labels = birth_labels(1, BOX, occupants)
        self.assertEqual([l.text for l in labels], ["Su 15° (1)", "As 10°"])


class TestDivisionalLabels(unittest.TestCase):
    def test_symbol_only_with_narrow_rows(self):
        occupants = [
            DivisionalBody(name="Venus", house=3, retrograde=True),
            DivisionalBody(name="Eris", house=3),
        ]
        labels = divisional_labels(2, BOX, occupants)
        self.assertEqual([l.text for l in labels], ["Ve", "Er"])
        self.assertEqual([l.y for l in labels], [241, 259])
        self.assertEqual([l.house for l in labels], [2, 2])
        self.assertTrue(labels[0].is_retrograde)


class TestPlaceholder(unittest.TestCase):
    def test_placeholder_at_center(self):
        label = placeholder_label(7, BOX, "7")
        self.assertEqual((label.x, label.y, label.text), (400, 250, "7"))
        self.assertTrue(label.is_placeholder)
        self.assertFalse(label.is_ascendant)


if __name__ == "__main__":
    unittest.main()
