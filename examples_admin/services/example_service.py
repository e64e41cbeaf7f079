"""
Example service - before/after listing, upload and delete.

Mutations are "fire, wait, then refresh": nothing is changed locally until
the backend has answered and the listing has been fetched again.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from examples_admin.backend.client import BackendClient
from examples_admin.config import Settings
from examples_admin.core.exceptions import ConfirmationRequiredException
from examples_admin.models.media import ImageType
from examples_admin.schemas.example import ExampleAsset, ExampleListing
from examples_admin.services.category_service import (
    media_kind_for,
    resolve_subcategory,
    subcategories_for,
)
from examples_admin.services.pairing import find_unnumbered, next_ordinal, reconcile_pairs
from examples_admin.services.uploads import validate_upload
from examples_admin.services.views import ListingView

logger = logging.getLogger(__name__)


def cache_busted(url: str, fetched_at: datetime) -> str:
    """Append a version parameter so re-uploads under one number show up."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}v={int(fetched_at.timestamp() * 1000)}"


def build_listing(
    assets: Iterable[ExampleAsset],
    category: str,
    subcategory: str | None,
    settings: Settings,
    fetched_at: datetime | None = None,
) -> ExampleListing:
    """
    Reconcile the backend's flat listing for one category selection.

    Args:
        assets: Every asset the backend returned, any category
        category: Selected category id
        subcategory: Selected subcategory, or None for flat categories
        settings: Console settings (subcategory layout, media kinds)
        fetched_at: Listing fetch time, used for cache busting

    Returns:
        Pairs, unnumbered assets and the next ordinal per side
    """
    fetched_at = fetched_at or datetime.now(timezone.utc)
    selected = [
        asset.model_copy(update={"display_url": cache_busted(asset.url, fetched_at)})
        for asset in assets
        if asset.category == category
        and (subcategory is None or asset.subcategory == subcategory)
    ]

    return ExampleListing(
        category=category,
        subcategory=subcategory,
        subcategories=subcategories_for(category, settings),
        media_kind=media_kind_for(category, settings),
        pairs=reconcile_pairs(selected),
        unnumbered=find_unnumbered(selected),
        next_ordinal={image_type: next_ordinal(selected, image_type) for image_type in ImageType},
        total=len(selected),
        fetched_at=fetched_at,
    )


class ExampleService:
    """Service class for before/after example operations."""

    def __init__(
        self,
        backend: BackendClient,
        view: ListingView[ExampleListing],
        settings: Settings,
    ):
        self.backend = backend
        self.view = view
        self.settings = settings

    async def refresh(self, category: str, subcategory: str | None = None) -> ExampleListing:
        """
        Fetch and reconcile the listing for a selection.

        The result is committed to the session view only if no newer
        selection was made while the request was in flight. The caller
        always receives the listing it asked for, marked ``current=False``
        when it was superseded.
        """
        subcategory = resolve_subcategory(category, subcategory, self.settings)
        generation = self.view.select(category, subcategory)

        assets = await self.backend.list_examples()
        listing = build_listing(assets, category, subcategory, self.settings)
        listing.generation = generation
        listing.current = self.view.commit(generation, listing)
        return listing

    async def upload(
        self,
        *,
        category: str,
        image_type: ImageType,
        filename: str | None,
        content: bytes,
        content_type: str | None = None,
        subcategory: str | None = None,
    ) -> ExampleListing:
        """Upload one file; the backend numbers it. Returns the refreshed listing."""
        subcategory = resolve_subcategory(category, subcategory, self.settings)
        validate_upload(
            content,
            filename,
            content_type,
            media_kind_for(category, self.settings),
            self.settings,
        )

        await self.backend.upload_example(
            category=category,
            image_type=image_type,
            filename=filename,
            content=content,
            content_type=content_type,
            subcategory=subcategory,
        )
        return await self.refresh(category, subcategory)

    async def delete(
        self,
        *,
        category: str,
        image_type: ImageType,
        filename: str,
        subcategory: str | None = None,
        confirm: bool = False,
    ) -> ExampleListing:
        """
        Delete one asset after operator confirmation.

        Raises:
            ConfirmationRequiredException: *confirm* was not given; nothing is sent
        """
        if not confirm:
            raise ConfirmationRequiredException(filename)
        if subcategory:
            resolve_subcategory(category, subcategory, self.settings)

        await self.backend.delete_example(
            category=category,
            subcategory=subcategory,
            image_type=image_type,
            filename=filename,
        )
        logger.info(f"Refreshing {category}/{subcategory or '-'} after delete of {filename}")
        return await self.refresh(category, subcategory)
