"""
Business logic services for the Examples Admin Console.
Services handle reconciliation and backend round trips separate from API endpoints.
"""

from examples_admin.services.audio_service import AudioService
from examples_admin.services.category_service import CategoryService
from examples_admin.services.example_service import ExampleService
from examples_admin.services.pairing import reconcile_pairs
from examples_admin.services.ordinals import extract_ordinal

__all__ = [
    "AudioService",
    "CategoryService",
    "ExampleService",
    "reconcile_pairs",
    "extract_ordinal",
]
