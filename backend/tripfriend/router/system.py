from fastapi import APIRouter

from tripfriend.core.config import APP_VERSION
from tripfriend.models.common import APIResponse

router = APIRouter(tags=["System"])


@router.get("/", response_model=APIResponse)
def root():
    return APIResponse(
        code=0, msg="ok", data={"msg": "TripFriend API. Sign in via /auth/google."}
    )


@router.get("/health", response_model=APIResponse)
def health_check():
    return APIResponse(
        code=0,
        msg="ok",
        data={"status": "healthy", "service": "tripfriend-server", "version": APP_VERSION},
    )
