from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from credentials.google_token import GoogleTokenAuthenticator, UserProfile
from credentials.logging_config import configure_app_logging
from credentials.pipeline import CredentialsPipeline, require_user_profile
from credentials.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    authenticator: GoogleTokenAuthenticator | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    authenticator = authenticator or GoogleTokenAuthenticator.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_app_logging(settings.log_level)
        app.state.credentials = CredentialsPipeline([authenticator])
        logger.info(
            "Credentials pipeline ready strategies=%s ttl=%s",
            [s.name for s in app.state.credentials.strategies],
            authenticator.token_time_to_live,
        )

        yield

        await authenticator.verifier.aclose()

    app = FastAPI(lifespan=lifespan)

    @app.get("/profile")
    async def read_profile(profile: UserProfile = Depends(require_user_profile)):
        return profile.to_dict()

    return app


app = create_app()
