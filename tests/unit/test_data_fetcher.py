# -*- coding: utf-8 -*-
"""
Тесты для scripts/weather/_processes/data_fetcher.py
"""
from datetime import date

import pytest

from fakes import FakeClient, current_payload, daily_payload
from skycast.core.models.weather_response import DayRecord, Place, SkyCondition
from skycast.core.utils.error_handler import MalformedResponseError
from skycast.scripts.weather._processes.data_fetcher import (
    fetch_current,
    fetch_forecast,
    fetch_historical,
    parse_current_weather,
    parse_daily_records,
)

PARIS = Place(48.85, 2.35)


def test_parse_current_uses_first_hourly_sample():
    weather = parse_current_weather(current_payload(temperature=18.2, code=61, humidity=(80, 10), precipitation=(55, 0)))

    assert weather.temperature == 18.2
    assert weather.windspeed == 12.3
    assert weather.humidity == 80
    assert weather.precipitation == 55
    assert weather.weather_code == 61
    assert weather.sky_condition is SkyCondition.RAINY


def test_parse_current_keeps_missing_hourly_value_as_none():
    weather = parse_current_weather(current_payload(precipitation=(None, 5)))
    assert weather.precipitation is None


@pytest.mark.parametrize("mutate", [
    lambda d: d.pop("current_weather"),
    lambda d: d.pop("hourly"),
    lambda d: d["hourly"].pop("relativehumidity_2m"),
    lambda d: d["current_weather"].pop("weathercode"),
    lambda d: d["hourly"].update(precipitation_probability=[]),
])
def test_parse_current_rejects_incomplete_payload(mutate):
    data = current_payload()
    mutate(data)
    with pytest.raises(MalformedResponseError):
        parse_current_weather(data)


def test_parse_daily_aligns_arrays_by_index():
    data = daily_payload(["2024-05-06", "2024-05-07", "2024-05-08", "2024-05-09"])
    records = parse_daily_records(data)

    assert len(records) == len(data["daily"]["time"])
    for i, record in enumerate(records):
        assert record.date == data["daily"]["time"][i]
        assert record.max_temp == data["daily"]["temperature_2m_max"][i]
        assert record.min_temp == data["daily"]["temperature_2m_min"][i]
        assert record.windspeed == data["daily"]["windspeed_10m_max"][i]
        assert record.precipitation == data["daily"]["precipitation_sum"][i]


def test_parse_daily_empty_range():
    assert parse_daily_records(daily_payload([])) == []


def test_parse_daily_rejects_misaligned_arrays():
    data = daily_payload()
    data["daily"]["precipitation_sum"].pop()
    with pytest.raises(MalformedResponseError):
        parse_daily_records(data)


def test_parse_daily_rejects_missing_array():
    data = daily_payload()
    del data["daily"]["windspeed_10m_max"]
    with pytest.raises(MalformedResponseError):
        parse_daily_records(data)


def test_fetch_current():
    client = FakeClient()
    weather = fetch_current(PARIS, client)

    assert weather.sky_condition is SkyCondition.CLEAR_SKY
    assert client.calls == [("get_current_weather", 48.85, 2.35)]


def test_fetch_forecast_uses_auto_timezone():
    client = FakeClient()
    records = fetch_forecast(PARIS, client)

    assert records[0] == DayRecord("2024-05-06", 20.0, 10.0, 15.0, 0.0)
    assert client.calls == [("get_daily_weather", 48.85, 2.35, "auto", None, None)]


def test_fetch_historical_requests_past_days_only():
    client = FakeClient()
    fetch_historical(PARIS, client, days=7, today=date(2024, 5, 6))

    assert client.calls == [("get_daily_weather", 48.85, 2.35, "auto", "2024-04-29", "2024-05-05")]


def test_fetch_historical_rejects_non_positive_depth():
    with pytest.raises(ValueError):
        fetch_historical(PARIS, FakeClient(), days=0)
