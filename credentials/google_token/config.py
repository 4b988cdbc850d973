"""Option set shared by construction-time and per-call configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from .profile import UserProfile


@runtime_checkable
class UserProfileDelegate(Protocol):
    """
    Hook for enriching a freshly resolved profile.

    ``update`` receives the profile built from the userinfo response together
    with the raw payload, and returns the profile that should be cached and
    handed to the caller. Profiles are immutable, so an implementation that
    wants to add data returns a copy (``dataclasses.replace``). Returning
    None keeps the profile as built; raising rejects the token.
    """

    def update(self, profile: UserProfile, payload: Mapping[str, Any]) -> UserProfile | None:
        ...


@dataclass(frozen=True)
class AuthOptions:
    """
    Read-only options for ``GoogleTokenAuthenticator``.

    user_profile_delegate: optional ``UserProfileDelegate``.
    token_time_to_live: seconds a cached profile is trusted; None means
        cached profiles are used until the cache evicts them.
    """

    user_profile_delegate: UserProfileDelegate | None = None
    token_time_to_live: float | None = None
