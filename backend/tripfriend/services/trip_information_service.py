"""
Trip Information Service
Validates and applies sparse update requests to stored trip information
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from tripfriend.core.exceptions import TripInformationNotFoundError, TripInformationValidationError
from tripfriend.db.database import get_places_collection, get_trip_informations_collection
from tripfriend.models.trip_information import TripInformation, TripInformationUpdateRequest

logger = logging.getLogger(__name__)

# Stored fields that must always hold a value
NON_NULLABLE_FIELDS = ("place_id", "cost")


def _wire_name(field: str) -> str:
    info = TripInformationUpdateRequest.model_fields[field]
    return info.alias or field


def validate_update(request: TripInformationUpdateRequest) -> None:
    """
    Check the domain constraints of an update request.

    Raises:
        TripInformationValidationError: the first violated constraint
    """
    if request.trip_information_id is None:
        raise TripInformationValidationError(_wire_name("trip_information_id"), "is required")

    changes = request.changes()
    for field in NON_NULLABLE_FIELDS:
        if field in changes and changes[field] is None:
            raise TripInformationValidationError(_wire_name(field), "cannot be cleared")

    if changes.get("cost") is not None and changes["cost"] < 0:
        raise TripInformationValidationError("cost", "must not be negative")
    if changes.get("duration") is not None and changes["duration"] <= 0:
        raise TripInformationValidationError("duration", "must be a positive number of minutes")


def _changed_fields(entity: TripInformation, request: TripInformationUpdateRequest) -> dict[str, Any]:
    return {
        field: value
        for field, value in request.changes().items()
        if getattr(entity, field) != value
    }


def apply_update_to(
    entity: TripInformation,
    request: TripInformationUpdateRequest,
    now: datetime | None = None,
) -> TripInformation:
    """
    Merge the supplied fields of a request onto a copy of the entity.

    Fields the request omits keep their stored value. updated_at moves only
    when some field actually changes, so applying the same request twice
    gives the same result as applying it once.
    """
    return _merge(entity, _changed_fields(entity, request), now or datetime.utcnow())


def _merge(entity: TripInformation, diff: dict[str, Any], now: datetime) -> TripInformation:
    if not diff:
        return entity.model_copy()
    return entity.model_copy(update={**diff, "updated_at": now})


def _to_document_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _build_update_document(diff: dict[str, Any]) -> dict[str, dict[str, Any]]:
    to_set = {field: _to_document_value(value) for field, value in diff.items() if value is not None}
    to_unset = {field: "" for field, value in diff.items() if value is None}

    update: dict[str, dict[str, Any]] = {}
    if to_set:
        update["$set"] = to_set
    if to_unset:
        update["$unset"] = to_unset
    return update


async def get_trip_information(trip_information_id: int) -> TripInformation:
    """
    Load one trip information record.

    Raises:
        TripInformationNotFoundError: no record has this ID
    """
    col = get_trip_informations_collection()
    doc = await col.find_one({"trip_information_id": trip_information_id})
    if not doc:
        raise TripInformationNotFoundError(trip_information_id)

    doc.pop("_id", None)
    return TripInformation(**doc)


async def apply_update(request: TripInformationUpdateRequest) -> TripInformation:
    """
    Validate an update request and persist it.

    Nothing is written unless every check passes. Only fields whose value
    changes are written: values are $set and explicit nulls are $unset.

    Raises:
        TripInformationValidationError: a field violates a domain constraint
            or placeId references a place that does not exist
        TripInformationNotFoundError: tripInformationId matches no record
    """
    validate_update(request)
    entity = await get_trip_information(request.trip_information_id)

    changes = request.changes()
    if "place_id" in changes:
        place = await get_places_collection().find_one({"place_id": changes["place_id"]})
        if not place:
            raise TripInformationValidationError(
                "placeId", f"place {changes['place_id']} does not exist"
            )

    now = datetime.utcnow()
    diff = _changed_fields(entity, request)
    updated = _merge(entity, diff, now)
    if not diff:
        logger.debug("Trip information %s unchanged", entity.trip_information_id)
        return updated

    await get_trip_informations_collection().update_one(
        {"trip_information_id": entity.trip_information_id},
        _build_update_document({**diff, "updated_at": now}),
    )
    logger.info(
        "Updated trip information %s fields=%s", entity.trip_information_id, sorted(diff)
    )
    return updated
