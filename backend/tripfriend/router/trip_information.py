"""
Trip Information Router
Reads and patches the places planned within a trip schedule
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from tripfriend.core.exceptions import TripInformationNotFoundError, TripInformationValidationError
from tripfriend.core.security import AuthenticatedUser, get_current_user
from tripfriend.models.common import APIResponse
from tripfriend.models.trip_information import TripInformationUpdateRequest
from tripfriend.services.trip_information_service import apply_update, get_trip_information

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trip-informations", tags=["Trip Information"])


@router.get("/{trip_information_id}", response_model=APIResponse)
async def read_trip_information(
    trip_information_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        trip_information = await get_trip_information(trip_information_id)
        return APIResponse(code=0, msg="ok", data=trip_information.model_dump(mode="json"))
    except TripInformationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to read trip information %s", trip_information_id)
        raise HTTPException(status_code=500, detail=f"Failed to read trip information: {e}")


@router.patch("", response_model=APIResponse)
async def update_trip_information(
    update_request: TripInformationUpdateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    """
    Apply a sparse update to one trip information record.

    Omitted fields are left unchanged; nullable fields sent as null are cleared.
    """
    try:
        updated = await apply_update(update_request)
        return APIResponse(code=0, msg="ok", data=updated.model_dump(mode="json"))
    except TripInformationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TripInformationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(
            "Failed to update trip information %s by %s",
            update_request.trip_information_id,
            current_user.username,
        )
        raise HTTPException(status_code=500, detail=f"Failed to update trip information: {e}")
