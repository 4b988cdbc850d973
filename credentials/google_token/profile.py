"""
Canonical user profile and its construction from a Google userinfo response.

The userinfo endpoint (``/oauth2/v3/userinfo``) returns OpenID Connect
standard claims. Only ``sub`` is guaranteed; everything else depends on the
scopes the token was granted:

* **sub** -- stable Google account id. Required; without it there is no profile.
* **name** -- full display name (``profile`` scope).
* **given_name** / **family_name** -- name parts (``profile`` scope).
* **email** -- primary address (``email`` scope).
* **picture** -- avatar URL (``profile`` scope).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class ProfileName:
    given_name: str | None = None
    family_name: str | None = None
    middle_name: str | None = None


@dataclass(frozen=True)
class UserProfile:
    """Identity resolved from a provider; never mutated once built."""

    id: str
    """Provider-scoped unique identifier."""

    display_name: str
    provider: str
    name: ProfileName | None = None
    emails: tuple[str, ...] = ()
    photos: tuple[str, ...] = ()
    extended_properties: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "provider": self.provider,
            "name": None
            if self.name is None
            else {
                "given_name": self.name.given_name,
                "family_name": self.name.family_name,
                "middle_name": self.name.middle_name,
            },
            "emails": list(self.emails),
            "photos": list(self.photos),
            "extended_properties": dict(self.extended_properties),
        }


def _str_or_none(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def build_user_profile(payload: Any, provider: str) -> UserProfile | None:
    """
    Map a userinfo payload to a ``UserProfile``.

    Returns None when the payload is not a JSON object or has no ``sub``.
    """
    if not isinstance(payload, dict):
        return None

    user_id = payload.get("sub")
    if isinstance(user_id, bool):
        return None
    if isinstance(user_id, int):
        user_id = str(user_id)
    elif isinstance(user_id, float):
        # Only whole, finite numbers name an account; 1.9 must not become "1".
        if not (math.isfinite(user_id) and user_id.is_integer()):
            return None
        user_id = str(int(user_id))
    if not isinstance(user_id, str) or not user_id:
        return None

    given = _str_or_none(payload.get("given_name"))
    family = _str_or_none(payload.get("family_name"))
    middle = _str_or_none(payload.get("middle_name"))
    name = ProfileName(given, family, middle) if (given or family or middle) else None

    email = _str_or_none(payload.get("email"))
    picture = _str_or_none(payload.get("picture"))

    return UserProfile(
        id=user_id,
        display_name=_str_or_none(payload.get("name")) or "",
        provider=provider,
        name=name,
        emails=(email,) if email else (),
        photos=(picture,) if picture else (),
    )
