"""
Media enumerations.
Values match the strings the examples backend uses in paths and form fields.
"""

import enum


class ImageType(str, enum.Enum):
    """Side of a before/after example pair."""
    BEFORE = "before"
    AFTER = "after"


class MediaKind(str, enum.Enum):
    """What a category stores, which drives upload limits and accepted types."""
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


class SpeakerMode(str, enum.Enum):
    SINGLE = "single-speaker"
    MULTI = "multi-speaker"


class Language(str, enum.Enum):
    ENGLISH = "english"
    HINDI = "hindi"


class AuthState(str, enum.Enum):
    """
    Auth gate states.

    unauthenticated -> authenticating -> authenticated, and back to
    unauthenticated on logout or on any backend 401.
    """
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
