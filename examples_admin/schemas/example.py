"""
Pydantic schemas for categories and before/after example assets.

Backend listings use camelCase (``lastModified``); both spellings are
accepted on input and the console always answers in snake_case.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field

from examples_admin.models.media import ImageType, MediaKind


# ===================
# Categories
# ===================

class Category(BaseModel):
    """Category as returned by the backend."""

    id: str
    name: str
    description: str = ""


class CategoryResponse(Category):
    """Category enriched with the console's layout knowledge."""

    subcategories: list[str] = Field(
        default_factory=list,
        description="Subcategory tabs, empty when the category is flat",
    )
    media_kind: MediaKind = Field(
        default=MediaKind.IMAGE,
        description="What the category stores",
    )


class CategoryListResponse(BaseModel):
    """Response schema for category listing."""

    categories: list[CategoryResponse]
    total: int


# ===================
# Assets
# ===================

class ExampleAsset(BaseModel):
    """One stored before/after image or video clip. Identity is the storage key."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    url: str
    size: int = 0
    last_modified: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("lastModified", "last_modified"),
    )
    category: str
    subcategory: str | None = None
    type: ImageType
    filename: str
    display_url: str | None = Field(
        default=None,
        description="Cache-busted URL, stamped with the listing fetch time",
    )


class AssetPair(BaseModel):
    """Before/after assets sharing one ordinal. Derived, never persisted."""

    ordinal: int
    before: ExampleAsset | None = None
    after: ExampleAsset | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def complete(self) -> bool:
        return self.before is not None and self.after is not None


class ExampleListing(BaseModel):
    """Reconciled listing for one category/subcategory selection."""

    category: str
    subcategory: str | None = None
    subcategories: list[str] = Field(default_factory=list)
    media_kind: MediaKind = MediaKind.IMAGE
    pairs: list[AssetPair] = Field(default_factory=list)
    unnumbered: list[ExampleAsset] = Field(
        default_factory=list,
        description="Assets whose filename carries no usable ordinal",
    )
    next_ordinal: dict[ImageType, int] = Field(default_factory=dict)
    total: int = 0
    fetched_at: datetime
    generation: int = Field(default=0, description="View generation the listing answers")
    current: bool = Field(
        default=True,
        description="False when a newer selection was made while this listing was fetched",
    )
