import unittest

import httpx

from kundali_chart.domain.chart.errors import LocationLookupError
from kundali_chart.services.location_service import LocationService


class TestLocationService(unittest.IsolatedAsyncioTestCase):
    async def test_maps_nominatim_results(self):
        def handler(request):
            self.assertEqual(request.url.params["q"], "Pune")
            self.assertEqual(request.url.params["format"], "json")
            return httpx.Response(200, json=[
                {"display_name": "Pune, Maharashtra, India", "lat": "18.5214", "lon": "73.8545"},
                {"display_name": "Broken"},
            ])

        service = LocationService(transport=httpx.MockTransport(handler))
        results = await service.search(" Pune ")

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].display_name, "Pune, Maharashtra, India")
        self.assertAlmostEqual(results[0].latitude, 18.5214)
        self.assertAlmostEqual(results[0].longitude, 73.8545)

    async def test_short_query_skips_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        service = LocationService(transport=httpx.MockTransport(handler))
        self.assertEqual(await service.search("a"), [])

    async def test_upstream_failure_raises(self):
        service = LocationService(
            transport=httpx.MockTransport(lambda request: httpx.Response(503))
        )
        with self.assertRaises(LocationLookupError):
            await service.search("Delhi")


if __name__ == "__main__":
    unittest.main()
