"""
Authenticate requests carrying a Google OAuth access token.

Background for newcomers:
    Clients using this strategy send two headers::

        X-token-type: GoogleToken
        access_token: <opaque Google access token>

    The token is not a JWT, so it cannot be checked locally. We ask Google's
    userinfo endpoint who the token belongs to and cache the answer, so a
    client presenting the same token again does not cost another round trip
    until the configured time-to-live runs out.

    Each call ends in exactly one outcome:

    * ``Abstain`` -- the request is not using this scheme (no or another
      ``X-token-type``); the host may try its next strategy.
    * ``Reject`` -- the scheme was selected but the token is missing or
      Google would not vouch for it.
    * ``Accept`` -- the token is valid; carries the ``UserProfile``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING, Any, Callable

import httpx

from .cache import ProfileCache
from .config import AuthOptions, UserProfileDelegate
from .outcome import Abstain, Accept, Outcome, Reject
from .profile import UserProfile, build_user_profile
from .verifier import RemoteVerifier, TransportFailure

if TYPE_CHECKING:
    from credentials.settings import Settings

logger = logging.getLogger(__name__)

TOKEN_TYPE_HEADER = "X-token-type"
ACCESS_TOKEN_HEADER = "access_token"


class GoogleTokenAuthenticator:
    """
    Token authentication strategy backed by Google's userinfo endpoint.

    Safe to share between concurrent requests. Concurrent calls for the same
    uncached token are not coalesced: each one verifies independently and the
    last to finish wins the cache slot.
    """

    def __init__(
        self,
        options: AuthOptions | None = None,
        token_time_to_live: float | None = None,
        *,
        cache: ProfileCache | None = None,
        verifier: RemoteVerifier | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        options = options or AuthOptions()
        self._delegate = options.user_profile_delegate
        self._ttl = token_time_to_live if token_time_to_live is not None else options.token_time_to_live
        self._clock = clock
        self._cache = cache if cache is not None else ProfileCache(clock=clock)
        self._verifier = verifier or RemoteVerifier()

    @property
    def name(self) -> str:
        return "GoogleToken"

    @property
    def redirecting(self) -> bool:
        return False

    @property
    def token_time_to_live(self) -> float | None:
        return self._ttl

    @property
    def user_profile_delegate(self) -> UserProfileDelegate | None:
        return self._delegate

    @property
    def cache(self) -> ProfileCache:
        return self._cache

    @property
    def verifier(self) -> RemoteVerifier:
        return self._verifier

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        client: httpx.AsyncClient | None = None,
        delegate: UserProfileDelegate | None = None,
    ) -> GoogleTokenAuthenticator:
        return cls(
            AuthOptions(
                user_profile_delegate=delegate,
                token_time_to_live=settings.google_token_ttl_seconds,
            ),
            cache=ProfileCache(max_entries=settings.google_cache_max_entries),
            verifier=RemoteVerifier(client=client, userinfo_url=settings.google_userinfo_url),
        )

    async def authenticate(self, request: Any, options: AuthOptions | None = None) -> Outcome:
        """
        Authenticate ``request`` (anything with a case-insensitive ``headers`` mapping).

        ``options`` are per-call; values given at construction take precedence.
        """
        token_type = request.headers.get(TOKEN_TYPE_HEADER)
        if token_type != self.name:
            logger.info("Google: No token type")
            return Abstain()

        token = request.headers.get(ACCESS_TOKEN_HEADER)
        # An empty header is still a credential; Google decides on it.
        if token is None:
            logger.error("Google: No access_token")
            return Reject()

        ttl = self._resolve_ttl(options)
        cached = self._cache.get(token)
        if cached is not None:
            if ttl is None or self._clock() < cached.created_at + ttl:
                return Accept(cached.profile)
            # Stale: fall through to Google. The entry stays until a
            # successful verification replaces it.

        # Shielded so an issued verification runs to completion even if the
        # caller goes away; its result still lands in the cache.
        profile = await asyncio.shield(self._verify_and_cache(token, self._resolve_delegate(options)))
        if profile is None:
            return Reject()
        return Accept(profile)

    def _resolve_delegate(self, options: AuthOptions | None) -> UserProfileDelegate | None:
        if self._delegate is not None:
            return self._delegate
        return options.user_profile_delegate if options is not None else None

    def _resolve_ttl(self, options: AuthOptions | None) -> float | None:
        if self._ttl is not None:
            return self._ttl
        return options.token_time_to_live if options is not None else None

    async def _verify_and_cache(self, token: str, delegate: UserProfileDelegate | None) -> UserProfile | None:
        result = await self._verifier.verify(token)
        if isinstance(result, TransportFailure):
            logger.error("Google response: none; transport failure=%s", result.reason)
            return None

        if result.status_code != httpx.codes.OK:
            logger.error("Google response: statusCode=%s", result.status_code)
            return None

        try:
            payload = json.loads(result.body)
        except ValueError:
            logger.error("Failed to read Google response; statusCode=%s", result.status_code)
            return None

        profile = build_user_profile(payload, self.name)
        if profile is None:
            logger.error("Google response has no usable profile; statusCode=%s", result.status_code)
            return None

        if delegate is not None:
            try:
                updated = delegate.update(profile, payload)
            except Exception:
                logger.exception("User profile delegate failed; rejecting token")
                return None
            # None means the delegate had nothing to change.
            if updated is not None:
                if not isinstance(updated, UserProfile):
                    logger.error("User profile delegate returned %s, not a UserProfile", type(updated).__name__)
                    return None
                profile = updated

        self._cache.put(token, profile, created_at=self._clock())
        return profile
