"""
Models package for database schemas and request bodies
"""

from tripfriend.models.common import APIResponse
from tripfriend.models.trip_information import (
    Transportation,
    TripInformation,
    TripInformationUpdateRequest,
)
from tripfriend.models.user import User

__all__ = [
    "APIResponse",
    "Transportation",
    "TripInformation",
    "TripInformationUpdateRequest",
    "User",
]
