"""
Category directory.
Fetches categories from the backend and adds the console's layout knowledge.
"""

from examples_admin.backend.client import BackendClient
from examples_admin.config import Settings
from examples_admin.core.exceptions import ValidationException
from examples_admin.models.media import MediaKind
from examples_admin.schemas.example import Category, CategoryResponse


def media_kind_for(category_id: str, settings: Settings) -> MediaKind:
    if category_id == settings.AUDIO_CATEGORY:
        return MediaKind.AUDIO
    if category_id in settings.VIDEO_CATEGORIES:
        return MediaKind.VIDEO
    return MediaKind.IMAGE


def subcategories_for(category_id: str, settings: Settings) -> list[str]:
    return list(settings.SUBCATEGORIES.get(category_id, []))


def resolve_subcategory(category_id: str, subcategory: str | None, settings: Settings) -> str | None:
    """
    Subcategory to use for *category_id*.

    Categories with subcategory tabs default to the first tab. A subcategory
    the console does not know for a tabbed category is rejected; flat
    categories pass whatever was given through unchanged.

    Raises:
        ValidationException: Unknown subcategory for a tabbed category
    """
    known = subcategories_for(category_id, settings)
    if not known:
        return subcategory or None
    if not subcategory:
        return known[0]
    if subcategory not in known:
        raise ValidationException(
            f"Unknown subcategory '{subcategory}' for category '{category_id}'",
            details={"allowed": known},
        )
    return subcategory


def enrich_category(category: Category, settings: Settings) -> CategoryResponse:
    return CategoryResponse(
        **category.model_dump(),
        subcategories=subcategories_for(category.id, settings),
        media_kind=media_kind_for(category.id, settings),
    )


class CategoryService:
    """Service class for the category directory."""

    def __init__(self, backend: BackendClient, settings: Settings):
        self.backend = backend
        self.settings = settings

    async def list_categories(self) -> list[CategoryResponse]:
        categories = await self.backend.list_categories()
        return [enrich_category(category, self.settings) for category in categories]
