"""
Tests for upload pre-flight checks.
"""

import pytest

from examples_admin.config import Settings
from examples_admin.core.exceptions import PayloadTooLargeException, ValidationException
from examples_admin.models.media import MediaKind
from examples_admin.services.uploads import max_upload_size, validate_upload


@pytest.fixture
def settings() -> Settings:
    return Settings(MAX_IMAGE_UPLOAD_SIZE=10, MAX_VIDEO_UPLOAD_SIZE=20, MAX_AUDIO_UPLOAD_SIZE=15)


def test_limits_per_media_kind(settings):
    assert max_upload_size(MediaKind.IMAGE, settings) == 10
    assert max_upload_size(MediaKind.VIDEO, settings) == 20
    assert max_upload_size(MediaKind.AUDIO, settings) == 15


def test_accepts_matching_type(settings):
    validate_upload(b"png", "a.png", "image/png", MediaKind.IMAGE, settings)
    validate_upload(b"mp4", "a.mp4", "video/mp4", MediaKind.VIDEO, settings)
    validate_upload(b"mp3", "a.mp3", "audio/mpeg; charset=binary", MediaKind.AUDIO, settings)


@pytest.mark.parametrize("content_type", [None, "", "application/octet-stream"])
def test_accepts_generic_type(settings, content_type):
    validate_upload(b"data", "a.bin", content_type, MediaKind.IMAGE, settings)


def test_rejects_mismatched_type(settings):
    with pytest.raises(ValidationException) as exc_info:
        validate_upload(b"mp3", "a.mp3", "audio/mpeg", MediaKind.IMAGE, settings)

    assert exc_info.value.details["content_type"] == "audio/mpeg"


def test_rejects_empty_file(settings):
    with pytest.raises(ValidationException):
        validate_upload(b"", "a.png", "image/png", MediaKind.IMAGE, settings)


def test_rejects_missing_filename(settings):
    with pytest.raises(ValidationException):
        validate_upload(b"png", None, "image/png", MediaKind.IMAGE, settings)


def test_rejects_oversized_file(settings):
    with pytest.raises(PayloadTooLargeException) as exc_info:
        validate_upload(b"x" * 11, "a.png", "image/png", MediaKind.IMAGE, settings)

    assert exc_info.value.status_code == 413
    # Same bytes fit the video limit
    validate_upload(b"x" * 11, "a.mp4", "video/mp4", MediaKind.VIDEO, settings)
