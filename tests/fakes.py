# -*- coding: utf-8 -*-
"""
Подставные клиенты для тестов: без сети, с записью вызовов.
"""

import threading
from types import SimpleNamespace


def place_result(name="Paris", latitude=48.85, longitude=2.35, country="France"):
    return {"name": name, "latitude": latitude, "longitude": longitude, "country": country}


def current_payload(temperature=21.5, windspeed=12.3, code=0, humidity=(65, 70), precipitation=(10, 20)):
    return {
        "current_weather": {"temperature": temperature, "windspeed": windspeed, "weathercode": code},
        "hourly": {
            "time": ["2024-05-06T00:00", "2024-05-06T01:00"],
            "relativehumidity_2m": list(humidity),
            "precipitation_probability": list(precipitation),
        },
    }


def daily_payload(dates=("2024-05-06", "2024-05-07", "2024-05-08")):
    n = len(dates)
    return {
        "daily": {
            "time": list(dates),
            "temperature_2m_max": [20.0 + i for i in range(n)],
            "temperature_2m_min": [10.0 + i for i in range(n)],
            "precipitation_sum": [0.5 * i for i in range(n)],
            "windspeed_10m_max": [15.0 + i for i in range(n)],
        }
    }


class FakeClient:
    """Повторяет интерфейс OpenMeteoClient."""

    def __init__(self, places=None, current=None, daily=None):
        self.places = places if places is not None else {"Paris": place_result()}
        # latitude -> payload; None: общий ответ для любых координат
        self.current = current if current is not None else {None: current_payload()}
        self.daily = daily if daily is not None else daily_payload()
        self.errors = {}
        self.gates = {}
        self.calls = []

    def _maybe_fail(self, method):
        if method in self.errors:
            raise self.errors[method]

    def search_place(self, name):
        self.calls.append(("search_place", name))
        gate = self.gates.get(name)
        if gate is not None:
            gate.wait(timeout=5)
        self._maybe_fail("search_place")
        if name in self.places:
            return {"results": [self.places[name]]}
        return {"generationtime_ms": 0.4}

    def get_current_weather(self, lat, lon):
        self.calls.append(("get_current_weather", lat, lon))
        self._maybe_fail("get_current_weather")
        return self.current.get(lat, self.current.get(None))

    def get_daily_weather(self, lat, lon, timezone="auto", start_date=None, end_date=None):
        self.calls.append(("get_daily_weather", lat, lon, timezone, start_date, end_date))
        self._maybe_fail("get_daily_weather")
        return self.daily

    def gate(self, name):
        event = threading.Event()
        self.gates[name] = event
        return event


class FakeModel:
    """Повторяет generate_content из google-generativeai."""

    def __init__(self, text="Go hiking\nVisit the museum\n", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate_content(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """Повторяет requests.Session.get."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else FakeResponse({})
        self.error = error
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        pass
