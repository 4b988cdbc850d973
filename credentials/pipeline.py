from __future__ import annotations

import logging
from typing import Protocol, Sequence

from fastapi import HTTPException, Request, status

from credentials.google_token import Abstain, Accept, Outcome, Reject, UserProfile

logger = logging.getLogger(__name__)


class AuthStrategy(Protocol):
    @property
    def name(self) -> str: ...

    async def authenticate(self, request: Request) -> Outcome: ...


class CredentialsPipeline:
    """
    Run authentication strategies in order until one of them decides.

    - Accept: the profile is attached to ``request.state.user_profile``.
    - Reject: the request fails with the strategy's status (default 401).
    - Abstain: the next strategy gets a go; if all abstain the request is 401.
    """

    def __init__(self, strategies: Sequence[AuthStrategy]):
        self.strategies = list(strategies)

    async def authenticate(self, request: Request) -> UserProfile:
        abstain_headers: dict[str, str] = {}
        abstain_status: int | None = None

        for strategy in self.strategies:
            outcome = await strategy.authenticate(request)

            if isinstance(outcome, Accept):
                request.state.user_profile = outcome.profile
                return outcome.profile

            if isinstance(outcome, Reject):
                logger.info("Authentication rejected strategy=%s path=%s", strategy.name, request.url.path)
                raise HTTPException(
                    status_code=outcome.status or status.HTTP_401_UNAUTHORIZED,
                    detail="Authentication failed",
                    headers=dict(outcome.headers) if outcome.headers else None,
                )

            if isinstance(outcome, Abstain):
                if outcome.headers:
                    abstain_headers.update(outcome.headers)
                if outcome.status:
                    abstain_status = outcome.status

        logger.info("No strategy accepted the request path=%s method=%s", request.url.path, request.method)
        raise HTTPException(
            status_code=abstain_status or status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers=abstain_headers or None,
        )


def get_credentials_pipeline(request: Request) -> CredentialsPipeline:
    pipeline = getattr(request.app.state, "credentials", None)
    if pipeline is None:
        raise RuntimeError("Credentials pipeline not configured. Did app startup run?")
    return pipeline


async def require_user_profile(request: Request) -> UserProfile:
    """FastAPI dependency: authenticate the request or fail it."""
    return await get_credentials_pipeline(request).authenticate(request)
