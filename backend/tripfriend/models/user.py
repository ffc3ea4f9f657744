"""
Database Models for MongoDB Collections
"""

from datetime import datetime

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User model for MongoDB storage
    Local account provisioned from an OAuth identity, keyed on (provider, provider_id)
    """

    provider: str = Field(..., description="Identity provider tag, e.g. google")
    provider_id: str = Field(..., description="Subject identifier issued by the provider")
    email: str = Field(..., description="User email address")
    name: str = Field(..., description="User display name")
    authority: str = Field(default="USER", description="Granted role")
    verified: bool = Field(default=True, description="Whether the account is verified")

    # Timestamps
    created_at: datetime = Field(
        default_factory=datetime.utcnow, description="Account creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=datetime.utcnow, description="Last update timestamp"
    )
    last_login: datetime = Field(
        default_factory=datetime.utcnow, description="Last login timestamp"
    )

    @property
    def username(self) -> str:
        """Stable application-wide account name."""
        return f"{self.provider}:{self.provider_id}"

    class Config:
        json_schema_extra = {
            "example": {
                "provider": "google",
                "provider_id": "109876543210987654321",
                "email": "user@example.com",
                "name": "John Doe",
                "authority": "USER",
                "verified": True,
                "created_at": "2024-01-01T00:00:00",
                "updated_at": "2024-01-01T00:00:00",
                "last_login": "2024-01-01T00:00:00",
            }
        }
