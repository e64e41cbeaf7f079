"""Domain enumerations shared by schemas, services and routes."""

from examples_admin.models.media import AuthState, ImageType, Language, MediaKind, SpeakerMode

__all__ = [
    "AuthState",
    "ImageType",
    "Language",
    "MediaKind",
    "SpeakerMode",
]
