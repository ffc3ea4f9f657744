"""Shared fixtures for TripFriend tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from tripfriend.models.trip_information import TripInformation


@pytest.fixture
def google_claims() -> dict[str, Any]:
    """Claims as returned by Google's OpenID Connect userinfo endpoint."""
    return {
        "sub": "1234",
        "email": "a@b.com",
        "name": "Ada",
        "given_name": "Ada",
        "picture": "https://example.com/ada.jpg",
        "email_verified": True,
    }


@pytest.fixture
def stored_trip_information_doc() -> dict[str, Any]:
    """A trip information document as motor returns it."""
    return {
        "_id": "665f1c2ab3c4d5e6f7a8b9c0",
        "trip_information_id": 7,
        "trip_schedule_id": 3,
        "place_id": 42,
        "visit_time": datetime(2024, 6, 1, 10, 0),
        "duration": 90,
        "transportation": "WALK",
        "cost": 5000,
        "notes": "Buy tickets online",
        "priority": 1,
        "is_visited": False,
        "created_at": datetime(2024, 5, 1, 9, 0),
        "updated_at": datetime(2024, 5, 1, 9, 0),
    }


@pytest.fixture
def stored_trip_information(stored_trip_information_doc) -> TripInformation:
    doc = dict(stored_trip_information_doc)
    doc.pop("_id")
    return TripInformation(**doc)


@pytest.fixture
def mock_trip_informations_collection(stored_trip_information_doc) -> MagicMock:
    """Mock motor collection holding the stored trip information."""
    col = MagicMock()
    col.find_one = AsyncMock(return_value=dict(stored_trip_information_doc))
    col.update_one = AsyncMock()
    return col


@pytest.fixture
def mock_places_collection() -> MagicMock:
    """Mock motor collection where every looked-up place exists."""
    col = MagicMock()
    col.find_one = AsyncMock(return_value={"place_id": 99, "name": "Gyeongbokgung Palace"})
    return col
