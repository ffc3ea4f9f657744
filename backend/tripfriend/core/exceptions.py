"""
Domain exceptions raised by services and translated to HTTP responses by routers
"""


class TripFriendError(Exception):
    """Base class for all TripFriend domain errors."""


class TripInformationValidationError(TripFriendError):
    """An update request violates a domain constraint."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid value for '{field}': {message}")


class TripInformationNotFoundError(TripFriendError):
    """The requested trip information does not exist."""

    def __init__(self, trip_information_id: int):
        self.trip_information_id = trip_information_id
        super().__init__(f"Trip information {trip_information_id} not found")


class MalformedClaimsError(TripFriendError):
    """
    A required identity claim from an OAuth provider is missing or mistyped.

    The message names the offending key; it is meant for operator logs and
    must not be shown to end users.
    """

    def __init__(self, provider: str, key: str, reason: str):
        self.provider = provider
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed {provider} identity claims: '{key}' {reason}")


class UnsupportedProviderError(TripFriendError):
    """No user info adapter is registered for the OAuth provider."""

    def __init__(self, registration_id: str):
        self.registration_id = registration_id
        super().__init__(f"Unsupported OAuth provider: {registration_id}")


class InvalidTokenError(TripFriendError):
    """An application access token failed verification."""
