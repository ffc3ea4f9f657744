"""
Normalized user identity extracted from an OAuth provider's claim set

Each provider returns its userinfo claims under its own key layout. A
variant of OAuth2UserInfo adapts one layout to the four fields the user
provisioning step needs, so nothing downstream touches raw claim keys.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from tripfriend.core.exceptions import MalformedClaimsError, UnsupportedProviderError


class OAuth2UserInfo(ABC):
    """Identity capability shared by every OAuth provider variant"""

    # Constant tag of the issuing provider, set by each variant
    provider: ClassVar[str]

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Stable subject identifier issued by the provider"""

    @property
    @abstractmethod
    def email(self) -> str:
        """Email claim as asserted by the provider"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name claim as asserted by the provider"""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(provider={self.provider!r}, "
            f"provider_id={self.provider_id!r}, email={self.email!r})"
        )


def _require_string_claims(
    provider: str, attributes: Mapping[str, Any], keys: tuple[str, ...]
) -> None:
    for key in keys:
        if key not in attributes:
            raise MalformedClaimsError(provider, key, "is missing")
        value = attributes[key]
        if not isinstance(value, str):
            raise MalformedClaimsError(
                provider, key, f"must be a string, got {type(value).__name__}"
            )
        if not value.strip():
            raise MalformedClaimsError(provider, key, "is empty")


class GoogleUserInfo(OAuth2UserInfo):
    """
    Google OpenID Connect claims adapter

    Required claims are checked when the adapter is built, so a malformed
    claim set fails once with the offending key instead of at first read.
    The adapter keeps a read-only view of the caller's mapping.
    """

    provider = "google"
    REQUIRED_CLAIMS = ("sub", "email", "name")

    def __init__(self, attributes: Mapping[str, Any]):
        _require_string_claims(self.provider, attributes, self.REQUIRED_CLAIMS)
        self._attributes = MappingProxyType(attributes)

    @property
    def attributes(self) -> Mapping[str, Any]:
        return self._attributes

    @property
    def provider_id(self) -> str:
        return self._attributes["sub"]

    @property
    def email(self) -> str:
        return self._attributes["email"]

    @property
    def name(self) -> str:
        return self._attributes["name"]


_USER_INFO_VARIANTS: dict[str, type[OAuth2UserInfo]] = {
    GoogleUserInfo.provider: GoogleUserInfo,
}


def get_oauth2_user_info(registration_id: str, attributes: Mapping[str, Any]) -> OAuth2UserInfo:
    """
    Build the user info variant registered for an OAuth client registration id

    Raises:
        UnsupportedProviderError: no variant is registered for the id
        MalformedClaimsError: the claims do not fit the variant
    """
    variant = _USER_INFO_VARIANTS.get(registration_id.strip().lower())
    if variant is None:
        raise UnsupportedProviderError(registration_id)
    return variant(attributes)
