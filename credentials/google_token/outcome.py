"""Result of one authentication attempt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Union

from .profile import UserProfile


@dataclass(frozen=True)
class Accept:
    """The token is valid; ``profile`` is who it belongs to."""

    profile: UserProfile


@dataclass(frozen=True)
class Reject:
    """The request used this scheme but the credential is missing or invalid."""

    status: int | None = None
    headers: Mapping[str, str] | None = None


@dataclass(frozen=True)
class Abstain:
    """The request does not use this scheme; another strategy may handle it."""

    status: int | None = None
    headers: Mapping[str, str] | None = None


Outcome = Union[Accept, Reject, Abstain]
