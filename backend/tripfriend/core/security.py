"""
Application access tokens
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from tripfriend.core.config import JWT_ALGORITHM, JWT_EXPIRATION_HOURS, JWT_SECRET
from tripfriend.core.exceptions import InvalidTokenError
from tripfriend.models.user import User

security = HTTPBearer()


class AuthenticatedUser(BaseModel):
    """Caller identity recovered from a verified access token"""

    username: str
    email: str
    name: str
    authority: str
    verified: bool


def create_access_token(user: User, expires_in: timedelta | None = None) -> str:
    """Sign an access token whose subject is the user's provider-scoped username."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user.username,
        "email": user.email,
        "name": user.name,
        "authority": user.authority,
        "verified": user.verified,
        "iat": now,
        "exp": now + (expires_in or timedelta(hours=JWT_EXPIRATION_HOURS)),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        InvalidTokenError: the token is malformed, forged or expired
    """
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthenticatedUser:
    """FastAPI dependency resolving the Bearer token to the caller."""
    try:
        payload = decode_access_token(credentials.credentials)
        return AuthenticatedUser(
            username=payload["sub"],
            email=payload["email"],
            name=payload["name"],
            authority=payload.get("authority", "USER"),
            verified=payload.get("verified", False),
        )
    except InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=f"Invalid authentication token: {e}")
    except KeyError as e:
        raise HTTPException(status_code=401, detail=f"Token is missing claim {e}")
