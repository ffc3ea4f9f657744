"""Tests for the trip information update request body."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from tripfriend.models.trip_information import Transportation, TripInformationUpdateRequest


def test_default_request_is_empty():
    request = TripInformationUpdateRequest()

    assert request.cost == 0
    assert request.trip_information_id is None
    assert request.place_id is None
    assert request.visit_time is None
    assert request.duration is None
    assert request.transportation is None
    assert request.notes is None
    assert request.changes() == {}


def test_parses_camel_case_body():
    request = TripInformationUpdateRequest.model_validate(
        {
            "tripInformationId": 7,
            "placeId": 42,
            "visitTime": "2024-06-01T10:30:00",
            "duration": 60,
            "transportation": "SUBWAY",
            "cost": 1500,
            "notes": "Lunch nearby",
        }
    )

    assert request.trip_information_id == 7
    assert request.place_id == 42
    assert request.visit_time == datetime(2024, 6, 1, 10, 30)
    assert request.transportation is Transportation.SUBWAY
    assert request.cost == 1500


def test_accepts_snake_case_names():
    request = TripInformationUpdateRequest(trip_information_id=7, place_id=3)

    assert request.trip_information_id == 7
    assert request.changes() == {"place_id": 3}


def test_changes_only_contains_supplied_fields():
    request = TripInformationUpdateRequest.model_validate(
        {"tripInformationId": 7, "cost": 15000, "transportation": "CAR"}
    )

    assert request.changes() == {"cost": 15000, "transportation": Transportation.CAR}


def test_explicit_null_is_a_change():
    request = TripInformationUpdateRequest.model_validate(
        {"tripInformationId": 7, "notes": None, "visitTime": None}
    )

    assert request.changes() == {"notes": None, "visit_time": None}


def test_trip_information_id_is_never_a_change():
    request = TripInformationUpdateRequest.model_validate({"tripInformationId": 7})

    assert "trip_information_id" not in request.changes()


def test_unknown_transportation_rejected():
    with pytest.raises(ValidationError):
        TripInformationUpdateRequest.model_validate({"tripInformationId": 7, "transportation": "ROCKET"})


def test_null_cost_reaches_changes():
    request = TripInformationUpdateRequest.model_validate({"tripInformationId": 7, "cost": None})

    assert request.changes() == {"cost": None}


@pytest.mark.parametrize(
    "visit_time", ["2024-06-03T05:00:00Z", "2024-06-03T14:00:00+09:00", "2024-06-03T05:00:00"]
)
def test_visit_time_normalised_to_naive_utc(visit_time):
    request = TripInformationUpdateRequest.model_validate(
        {"tripInformationId": 7, "visitTime": visit_time}
    )

    assert request.visit_time == datetime(2024, 6, 3, 5, 0)
    assert request.visit_time.tzinfo is None


def test_wire_round_trip_keeps_fields():
    original = TripInformationUpdateRequest.model_validate(
        {
            "tripInformationId": 7,
            "placeId": 42,
            "visitTime": "2024-06-01T10:30:00",
            "duration": 45,
            "transportation": "TRAIN",
            "cost": 32000,
            "notes": "Window seat",
        }
    )

    wire = original.to_wire()
    restored = TripInformationUpdateRequest.model_validate(wire)

    assert wire["visitTime"] == "2024-06-01T10:30:00"
    assert wire["transportation"] == "TRAIN"
    assert restored.model_dump() == original.model_dump()
    assert restored.changes() == original.changes()


def test_wire_round_trip_keeps_sparseness():
    original = TripInformationUpdateRequest.model_validate({"tripInformationId": 7, "notes": None})

    wire = original.to_wire()
    restored = TripInformationUpdateRequest.model_validate(wire)

    assert wire == {"tripInformationId": 7, "notes": None}
    assert restored.changes() == {"notes": None}
