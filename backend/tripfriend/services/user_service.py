"""
User Service
Creates or refreshes local accounts from OAuth identities
"""

import logging
from datetime import datetime

from pymongo import ReturnDocument

from tripfriend.db.database import get_users_collection
from tripfriend.models.user import User
from tripfriend.oauth.user_info import OAuth2UserInfo

logger = logging.getLogger(__name__)


async def provision_user(user_info: OAuth2UserInfo) -> User:
    """
    Fetch the account for an identity, creating it on first login.

    Accounts are keyed on (provider, provider_id). An existing account gets
    its email, name and login timestamps refreshed; created_at is only
    written on insert. The upsert is a single atomic operation so two
    concurrent first logins end up with one account.
    """
    users_collection = get_users_collection()
    current_time = datetime.utcnow()

    account_key = {"provider": user_info.provider, "provider_id": user_info.provider_id}
    doc = await users_collection.find_one_and_update(
        account_key,
        {
            "$set": {
                "email": user_info.email,
                "name": user_info.name,
                "updated_at": current_time,
                "last_login": current_time,
            },
            "$setOnInsert": {
                "authority": "USER",
                "verified": True,
                "created_at": current_time,
            },
        },
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )

    doc.pop("_id", None)
    user = User(**doc)
    logger.info("Provisioned user %s", user.username)
    return user
