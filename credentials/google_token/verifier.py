"""
Remote token verification against Google's userinfo endpoint.

Google access tokens are opaque: the only way to learn whether one is valid
(and whose it is) is to present it to Google. A 200 from
``/oauth2/v3/userinfo`` means the token is live; anything else means it is
expired, revoked, or was never valid.

One call to ``verify`` sends exactly one request. Nothing here retries or
caches; that policy lives in the authenticator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import httpx

logger = logging.getLogger(__name__)

GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


@dataclass(frozen=True)
class VerifierSuccess:
    """Google answered; ``status_code`` may still be an error status."""

    status_code: int
    body: bytes


@dataclass(frozen=True)
class TransportFailure:
    """No response was received (DNS, connect, TLS, timeout...)."""

    reason: str


VerifierResult = Union[VerifierSuccess, TransportFailure]


class RemoteVerifier:
    """
    Async client for the userinfo endpoint.

    Pass ``client`` to share an ``httpx.AsyncClient`` (and its connection
    pool) owned by the host; otherwise one is created on first use and closed
    by ``aclose``. Timeouts are whatever the client is configured with.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        userinfo_url: str = GOOGLE_USERINFO_URL,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._url = userinfo_url

    @property
    def userinfo_url(self) -> str:
        return self._url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def verify(self, token: str) -> VerifierResult:
        try:
            response = await self._get_client().get(
                self._url,
                params={"access_token": token},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.debug("userinfo request failed: %s", type(e).__name__)
            return TransportFailure(reason=type(e).__name__)
        return VerifierSuccess(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
