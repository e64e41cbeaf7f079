"""
Client layer for the examples backend API.
"""

from examples_admin.backend.client import (
    BackendClient,
    build_audio_delete_path,
    build_delete_path,
    error_detail,
)

__all__ = [
    "BackendClient",
    "build_audio_delete_path",
    "build_delete_path",
    "error_detail",
]
