"""
Pre-flight checks for files the operator drops into the console.
"""

from examples_admin.config import Settings
from examples_admin.core.exceptions import PayloadTooLargeException, ValidationException
from examples_admin.models.media import MediaKind

GENERIC_CONTENT_TYPES = {"", "application/octet-stream"}


def max_upload_size(media_kind: MediaKind, settings: Settings) -> int:
    if media_kind == MediaKind.VIDEO:
        return settings.MAX_VIDEO_UPLOAD_SIZE
    if media_kind == MediaKind.AUDIO:
        return settings.MAX_AUDIO_UPLOAD_SIZE
    return settings.MAX_IMAGE_UPLOAD_SIZE


def validate_upload(
    content: bytes,
    filename: str | None,
    content_type: str | None,
    media_kind: MediaKind,
    settings: Settings,
) -> None:
    """
    Reject uploads the backend would store under the wrong media kind.

    A generic or missing content type is accepted; the backend has the final
    say on what it stores.

    Raises:
        ValidationException: Missing filename, empty file or mismatched type
        PayloadTooLargeException: File exceeds the media kind's limit
    """
    if not filename:
        raise ValidationException("Uploaded file has no filename")
    if not content:
        raise ValidationException(f"Uploaded file '{filename}' is empty")

    limit = max_upload_size(media_kind, settings)
    if len(content) > limit:
        raise PayloadTooLargeException(limit, media_kind.value)

    mime = (content_type or "").split(";", 1)[0].strip().lower()
    if mime in GENERIC_CONTENT_TYPES:
        return
    if mime.split("/", 1)[0] != media_kind.value:
        raise ValidationException(
            f"Expected {media_kind.value} file, got '{mime}'",
            details={"filename": filename, "content_type": mime},
        )
