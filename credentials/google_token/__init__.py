"""
Standalone Google access-token authentication strategy.

This package has no dependency on other credentials packages (pipeline,
settings, etc.) apart from the optional ``from_settings`` helper. Build a
``GoogleTokenAuthenticator`` and await ``authenticate(request)`` to get an
``Accept``, ``Reject`` or ``Abstain`` outcome.
"""

from .authenticator import GoogleTokenAuthenticator
from .cache import CacheEntry, ProfileCache
from .config import AuthOptions, UserProfileDelegate
from .outcome import Abstain, Accept, Outcome, Reject
from .profile import ProfileName, UserProfile, build_user_profile
from .verifier import RemoteVerifier, TransportFailure, VerifierSuccess

__all__ = [
    "Abstain",
    "Accept",
    "AuthOptions",
    "CacheEntry",
    "GoogleTokenAuthenticator",
    "Outcome",
    "ProfileCache",
    "ProfileName",
    "Reject",
    "RemoteVerifier",
    "TransportFailure",
    "UserProfile",
    "UserProfileDelegate",
    "VerifierSuccess",
    "build_user_profile",
]
