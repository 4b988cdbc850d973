from __future__ import annotations

import logging

# httpx logs every request URL at INFO, and the userinfo URL carries the
# access token as a query parameter.
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def configure_app_logging(level: str = "INFO") -> None:
    """
    Set log levels for the credentials package and its HTTP transport.

    - `CREDENTIALS_LOG_LEVEL=DEBUG` (or INFO/WARNING/ERROR) controls our loggers.
    - Transport loggers are held at WARNING whatever the level, so bearer
      tokens sent to Google never reach host log output.
    """

    logging.getLogger("credentials").setLevel(level.upper())
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
