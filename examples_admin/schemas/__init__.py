"""
Pydantic schemas for request/response validation.
"""

from examples_admin.schemas.example import (
    AssetPair,
    Category,
    CategoryListResponse,
    CategoryResponse,
    ExampleAsset,
    ExampleListing,
)
from examples_admin.schemas.audio import AudioAsset, AudioCatalog, AudioGroup, AudioSlot
from examples_admin.schemas.session import LoginRequest, SessionResponse
from examples_admin.schemas.error import ErrorResponse

__all__ = [
    # Example schemas
    "AssetPair",
    "Category",
    "CategoryListResponse",
    "CategoryResponse",
    "ExampleAsset",
    "ExampleListing",
    # Audio schemas
    "AudioAsset",
    "AudioCatalog",
    "AudioGroup",
    "AudioSlot",
    # Session schemas
    "LoginRequest",
    "SessionResponse",
    # Error schemas
    "ErrorResponse",
]
