"""
Auth Router
Google sign-in and access token introspection
"""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from tripfriend.core.config import (
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    GOOGLE_REDIRECT_URI,
    GOOGLE_SCOPES,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
)
from tripfriend.core.exceptions import MalformedClaimsError
from tripfriend.core.security import AuthenticatedUser, create_access_token, get_current_user
from tripfriend.oauth.user_info import get_oauth2_user_info
from tripfriend.services.user_service import provision_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


# Request/Response Models
class GoogleTokenRequest(BaseModel):
    code: str


class UserSummary(BaseModel):
    username: str
    provider: str
    provider_id: str
    email: str
    name: str


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSummary


async def fetch_google_claims(code: str) -> dict:
    """
    Exchange an authorization code for an access token and fetch the userinfo claims
    """
    async with httpx.AsyncClient() as client:
        token_response = await client.post(
            GOOGLE_TOKEN_URL,
            data={
                "code": code,
                "client_id": GOOGLE_CLIENT_ID,
                "client_secret": GOOGLE_CLIENT_SECRET,
                "redirect_uri": GOOGLE_REDIRECT_URI,
                "grant_type": "authorization_code",
            },
        )
        if token_response.status_code != 200:
            logger.warning("Google code exchange failed: %s", token_response.text)
            raise HTTPException(status_code=400, detail="Failed to exchange authorization code")

        access_token = token_response.json().get("access_token")

        userinfo_response = await client.get(
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if userinfo_response.status_code != 200:
            logger.warning("Google userinfo request failed: %s", userinfo_response.status_code)
            raise HTTPException(status_code=400, detail="Failed to fetch user info from Google")

        return userinfo_response.json()


@router.post("/google", response_model=AuthResponse)
async def google_auth(token_request: GoogleTokenRequest):
    """
    Sign in with a Google authorization code

    Flow:
    1. Exchange the authorization code with Google
    2. Fetch the OpenID Connect userinfo claims
    3. Adapt the claims to the provider-neutral user info
    4. Create or refresh the local account
    5. Issue an application access token
    """
    try:
        claims = await fetch_google_claims(token_request.code)
        user_info = get_oauth2_user_info("google", claims)
        user = await provision_user(user_info)
        access_token = create_access_token(user)

        return AuthResponse(
            access_token=access_token,
            user=UserSummary(
                username=user.username,
                provider=user.provider,
                provider_id=user.provider_id,
                email=user.email,
                name=user.name,
            ),
        )

    except MalformedClaimsError as e:
        # The end user only sees a generic failure; operators get the key
        logger.warning("Rejected %s login: claim '%s' %s", e.provider, e.key, e.reason)
        raise HTTPException(status_code=401, detail="Authentication failed")
    except HTTPException:
        raise
    except httpx.HTTPError as e:
        logger.error("Google OAuth request error: %s", e)
        raise HTTPException(status_code=400, detail="Failed to reach Google")
    except Exception:
        logger.exception("Google sign-in failed")
        raise HTTPException(status_code=500, detail="Authentication failed")


@router.get("/me", response_model=AuthenticatedUser)
async def read_current_user(current_user: AuthenticatedUser = Depends(get_current_user)):
    """
    Return the caller described by the Bearer token
    """
    return current_user


@router.get("/config")
async def get_auth_config():
    """
    Get public OAuth configuration for the frontend
    """
    if not GOOGLE_CLIENT_ID:
        raise HTTPException(status_code=500, detail="Google OAuth client ID not configured")
    if not GOOGLE_REDIRECT_URI:
        raise HTTPException(status_code=500, detail="Google OAuth redirect URI not configured")

    return {
        "google_client_id": GOOGLE_CLIENT_ID,
        "redirect_uri": GOOGLE_REDIRECT_URI,
        "scopes": GOOGLE_SCOPES,
    }
