import unittest

from kundali_chart.domain.chart.errors import MissingAscendantError
from kundali_chart.domain.chart.renderer import (
    BirthChartRenderer,
    DivisionalChartRenderer,
    get_renderer,
    render_chart,
)
from kundali_chart.domain.chart.schemas import ChartKind


def planet(name, sign, degree=10.0, retro="false"):
    return {"name": name, "current_sign": sign, "normDegree": degree, "isRetro": retro}


def by_house(labels):
    houses = {}
    for label in labels:
        houses.setdefault(label.house, []).append(label)
    return houses


class TestBirthChartRenderer(unittest.TestCase):
    def test_empty_houses_show_rotated_sign(self):
        renderer = BirthChartRenderer()
        labels = renderer.render([planet("Ascendant", 5, 12.0)])

        houses = by_house(labels)
        self.assertEqual(sorted(houses), list(range(1, 13)))
        self.assertEqual(houses[1][0].text, "As 12° (5)")
        self.assertEqual(houses[2][0].text, "6")
        self.assertEqual(houses[8][0].text, "12")
        self.assertEqual(houses[12][0].text, "4")
        self.assertTrue(all(houses[h][0].is_placeholder for h in range(2, 13)))
        self.assertFalse(any("(" in houses[h][0].text for h in range(2, 13)))

    def test_ascendant_and_sun_share_house_one(self):
        labels = render_chart(
            [planet("Ascendant", 1, 3.2), planet("Sun", 1, 15.4)],
            ChartKind.BIRTH,
        ).labels

        house_one = by_house(labels)[1]
        self.assertEqual([l.text for l in house_one], ["As 3° (1)", "Su 15°"])
        self.assertEqual([l.y for l in house_one], [239, 261])
        self.assertTrue(house_one[0].is_ascendant)

    def test_non_numeric_sign_is_skipped(self):
        labels = BirthChartRenderer().render([
            planet("Ascendant", 1),
            planet("Mars", "unknown"),
        ])
        self.assertFalse(any(l.text.startswith("Ma") for l in labels))
        self.assertEqual(len(labels), 12)

    def test_retrograde_flag(self):
        labels = BirthChartRenderer().render([
            planet("Ascendant", 1),
            planet("Saturn", 10, 20.0, retro="true"),
        ])
        saturn = by_house(labels)[10][0]
        self.assertEqual(saturn.text, "Sa 20° (10)")
        self.assertTrue(saturn.is_retrograde)

    def test_missing_ascendant_clears_previous_labels(self):
        renderer = BirthChartRenderer()
        renderer.render([planet("Ascendant", 1)])
        self.assertEqual(len(renderer.labels), 12)

        with self.assertRaises(MissingAscendantError):
            renderer.render([planet("Sun", 1)])
        self.assertEqual(renderer.labels, [])

    def test_rerender_replaces_labels(self):
        renderer = BirthChartRenderer()
        first = renderer.render([planet("Ascendant", 1), planet("Sun", 1)])
        second = renderer.render([planet("Ascendant", 1), planet("Sun", 1)])
        self.assertEqual(first, second)
        self.assertEqual(renderer.labels, second)

        third = renderer.render([planet("Ascendant", 7)])
        self.assertEqual(renderer.labels, third)
        self.assertFalse(any(l.text.startswith("Su") for l in renderer.labels))

    def test_input_is_not_mutated(self):
        records = [planet("Ascendant", 2), planet("Moon", 2)]
        snapshot = [dict(r) for r in records]
        BirthChartRenderer().render(records)
        self.assertEqual(records, snapshot)


class TestDivisionalChartRenderer(unittest.TestCase):
    def test_house_one_moves_to_house_twelve(self):
        labels = DivisionalChartRenderer().render([
            {"name": "Sun", "house_number": 1, "isRetro": "false"},
        ])

        houses = by_house(labels)
        self.assertEqual(houses[12][0].text, "Su")
        self.assertFalse(houses[12][0].is_placeholder)
        self.assertEqual((houses[12][0].x, houses[12][0].y), (550, 175))
        self.assertEqual(houses[1][0].text, "1")
        self.assertTrue(houses[1][0].is_placeholder)

    def test_out_of_range_house_numbers_wrap_to_house_twelve(self):
        labels = DivisionalChartRenderer().render([
            {"name": "Sun", "house_number": 0},
            {"name": "Moon", "house_number": 13},
        ])

        house_twelve = by_house(labels)[12]
        self.assertEqual([l.text for l in house_twelve], ["Su", "Mo"])
        self.assertEqual([l.y for l in house_twelve], [166, 184])
        self.assertFalse(any(l.is_placeholder for l in house_twelve))

    def test_empty_houses_show_their_own_index(self):
        labels = DivisionalChartRenderer().render([])
        self.assertEqual([l.text for l in labels], [str(i) for i in range(1, 13)])
        self.assertTrue(all(l.is_placeholder for l in labels))

    def test_stacking_uses_divisional_row_height(self):
        labels = DivisionalChartRenderer().render([
            {"name": "Ascendant", "house_number": 2},
            {"name": "Ketu", "house_number": 2, "isRetro": "true"},
        ])
        house_one = by_house(labels)[1]
        self.assertEqual([l.text for l in house_one], ["As", "Ke"])
        self.assertEqual([l.y for l in house_one], [241, 259])
        self.assertTrue(house_one[0].is_ascendant)
        self.assertTrue(house_one[1].is_retrograde)


class TestGetRenderer(unittest.TestCase):
    def test_kind_selects_renderer(self):
        self.assertIsInstance(get_renderer(ChartKind.BIRTH), BirthChartRenderer)
        self.assertIsInstance(get_renderer("divisional"), DivisionalChartRenderer)


if __name__ == "__main__":
    unittest.main()
