"""Tests for provisioning local accounts from OAuth identities."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo import ReturnDocument

from tripfriend.models.user import User
from tripfriend.oauth.user_info import GoogleUserInfo
from tripfriend.services.user_service import provision_user


@pytest.fixture
def mock_users_collection() -> MagicMock:
    col = MagicMock()
    col.find_one_and_update = AsyncMock(
        return_value={
            "_id": "665f1c2ab3c4d5e6f7a8b9c1",
            "provider": "google",
            "provider_id": "1234",
            "email": "a@b.com",
            "name": "Ada",
            "authority": "USER",
            "verified": True,
            "created_at": datetime(2024, 1, 1),
            "updated_at": datetime(2024, 6, 1),
            "last_login": datetime(2024, 6, 1),
        }
    )
    with patch(
        "tripfriend.services.user_service.get_users_collection", return_value=col
    ):
        yield col


@pytest.mark.asyncio
async def test_provision_user_upserts_on_provider_and_subject(mock_users_collection, google_claims):
    user = await provision_user(GoogleUserInfo(google_claims))

    assert isinstance(user, User)
    assert user.username == "google:1234"
    assert user.created_at == datetime(2024, 1, 1)

    call = mock_users_collection.find_one_and_update.call_args
    query, update = call.args
    assert query == {"provider": "google", "provider_id": "1234"}
    assert update["$set"]["email"] == "a@b.com"
    assert update["$set"]["name"] == "Ada"
    assert "created_at" in update["$setOnInsert"]
    assert "created_at" not in update["$set"]
    assert call.kwargs["upsert"] is True
    assert call.kwargs["return_document"] == ReturnDocument.AFTER


@pytest.mark.asyncio
async def test_provision_user_refreshes_profile_claims(mock_users_collection, google_claims):
    google_claims["email"] = "ada@newmail.com"
    google_claims["name"] = "Ada Lovelace"

    await provision_user(GoogleUserInfo(google_claims))

    _, update = mock_users_collection.find_one_and_update.call_args.args
    assert update["$set"]["email"] == "ada@newmail.com"
    assert update["$set"]["name"] == "Ada Lovelace"
    assert update["$set"]["last_login"] == update["$set"]["updated_at"]
