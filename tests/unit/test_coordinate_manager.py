# tests/unit/test_coordinate_manager.py
import pytest

from fakes import FakeClient, place_result
from skycast.core.models.weather_response import Place
from skycast.core.utils.coordinate_manager import resolve_place, validate_coordinates
from skycast.core.utils.error_handler import MalformedResponseError, NotFoundError


def test_validate_coordinates():
    assert validate_coordinates(55.75, 37.62) == True
    assert validate_coordinates("55.75", "37.62") == True
    assert validate_coordinates(99.0, 37.62) == False
    assert validate_coordinates(0, 181) == False
    assert validate_coordinates("invalid", 0) == False


def test_resolve_place_uses_first_result():
    client = FakeClient()
    place = resolve_place("Paris", client)

    assert place == Place(latitude=48.85, longitude=2.35, name="Paris", country="France")
    assert client.calls == [("search_place", "Paris")]


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_not_found_without_request(name):
    client = FakeClient()
    with pytest.raises(NotFoundError):
        resolve_place(name, client)
    assert client.calls == []


def test_zero_results_is_not_found():
    client = FakeClient()
    with pytest.raises(NotFoundError):
        resolve_place("Atlantis", client)


def test_empty_results_list_is_not_found():
    client = FakeClient()
    client.search_place = lambda name: {"results": []}
    with pytest.raises(NotFoundError):
        resolve_place("Atlantis", client)


def test_result_without_coordinates_is_malformed():
    client = FakeClient(places={"Nowhere": {"name": "Nowhere"}})
    with pytest.raises(MalformedResponseError):
        resolve_place("Nowhere", client)


def test_result_with_out_of_range_coordinates_is_malformed():
    client = FakeClient(places={"Mars": place_result("Mars", 123.0, 0.0)})
    with pytest.raises(MalformedResponseError):
        resolve_place("Mars", client)
