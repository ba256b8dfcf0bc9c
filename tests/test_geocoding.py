import unittest

import requests

from mausam.geocoding import fetch_location


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


class FetchLocationTest(unittest.TestCase):
    def test_first_result_is_used(self):
        session = FakeSession(
            FakeResponse(
                {
                    "results": [
                        {"latitude": 26.91, "longitude": 75.79, "name": "जयपुर", "country": "भारत", "timezone": "Asia/Kolkata"},
                        {"latitude": 1.0, "longitude": 2.0, "name": "Other"},
                    ]
                }
            )
        )
        location, status = fetch_location("Jaipur", language="hi", session=session)
        self.assertEqual(status, "OK")
        self.assertEqual(
            location,
            {"latitude": 26.91, "longitude": 75.79, "name": "जयपुर", "country": "भारत", "timezone": "Asia/Kolkata"},
        )
        _, kwargs = session.calls[0]
        self.assertEqual(kwargs["params"], {"name": "Jaipur", "count": 1, "language": "hi", "format": "json"})

    def test_missing_fields_get_defaults(self):
        session = FakeSession(FakeResponse({"results": [{"latitude": 10.0, "longitude": 20.0}]}))
        location, _ = fetch_location("Nowhere", session=session)
        self.assertEqual(location["name"], "Nowhere")
        self.assertEqual(location["country"], "")
        self.assertEqual(location["timezone"], "UTC")

    def test_unknown_language_falls_back_to_hindi(self):
        session = FakeSession(FakeResponse({"results": [{"latitude": 10.0, "longitude": 20.0}]}))
        fetch_location("Pune", language="xx", session=session)
        self.assertEqual(session.calls[0][1]["params"]["language"], "hi")

    def test_city_not_found(self):
        for payload in ({}, {"results": []}, {"generationtime_ms": 0.5}):
            location, status = fetch_location("Atlantis", session=FakeSession(FakeResponse(payload)))
            self.assertIsNone(location)
            self.assertEqual(status, "City not found")

    def test_non_dict_result_is_not_found(self):
        for first in ("Jaipur", None, [26.9, 75.8]):
            location, status = fetch_location("Jaipur", session=FakeSession(FakeResponse({"results": [first]})))
            self.assertIsNone(location)
            self.assertEqual(status, "City not found")

    def test_result_without_coordinates(self):
        session = FakeSession(FakeResponse({"results": [{"name": "Ghost"}]}))
        location, _ = fetch_location("Ghost", session=session)
        self.assertIsNone(location)

    def test_request_failure(self):
        location, status = fetch_location("Delhi", session=FakeSession(FakeResponse({}, status_code=503)))
        self.assertIsNone(location)
        self.assertEqual(status, "Geocoding request failed")

        location, status = fetch_location("Delhi", session=FakeSession(requests.Timeout("slow")))
        self.assertIsNone(location)
        self.assertEqual(status, "Geocoding request failed")


if __name__ == "__main__":
    unittest.main()
