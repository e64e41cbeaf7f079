"""
Pairing reconciler.
Groups a flat before/after listing into ordered pairs keyed by ordinal.
"""

from collections.abc import Iterable

from examples_admin.models.media import ImageType
from examples_admin.schemas.example import AssetPair, ExampleAsset
from examples_admin.services.ordinals import recency_key, usable_ordinal


def index_by_ordinal(
    assets: Iterable[ExampleAsset],
    image_type: ImageType,
) -> dict[int, ExampleAsset]:
    """
    Map ordinal to asset for one side of the pairing.

    Assets without a usable ordinal are skipped. When two assets share an
    ordinal the most recently modified one is kept.
    """
    indexed: dict[int, ExampleAsset] = {}
    for asset in assets:
        if asset.type != image_type:
            continue
        ordinal = usable_ordinal(asset.filename)
        if ordinal is None:
            continue
        current = indexed.get(ordinal)
        if current is None or recency_key(asset.last_modified, asset.key) > recency_key(
            current.last_modified, current.key
        ):
            indexed[ordinal] = asset
    return indexed


def reconcile_pairs(assets: Iterable[ExampleAsset]) -> list[AssetPair]:
    """
    Reconcile before/after assets into pairs sorted by ordinal.

    Every ordinal seen on either side yields exactly one pair; a side with no
    match is left empty and the pair reports itself incomplete.

    Args:
        assets: Assets of one category (optionally one subcategory), any order

    Returns:
        Pairs in ascending ordinal order
    """
    assets = list(assets)
    before = index_by_ordinal(assets, ImageType.BEFORE)
    after = index_by_ordinal(assets, ImageType.AFTER)

    return [
        AssetPair(ordinal=ordinal, before=before.get(ordinal), after=after.get(ordinal))
        for ordinal in sorted(set(before) | set(after))
    ]


def find_unnumbered(assets: Iterable[ExampleAsset]) -> list[ExampleAsset]:
    """Assets that cannot take part in pairing, sorted by key."""
    return sorted(
        (asset for asset in assets if usable_ordinal(asset.filename) is None),
        key=lambda asset: asset.key,
    )


def next_ordinal(assets: Iterable[ExampleAsset], image_type: ImageType) -> int:
    """Ordinal the backend will give the next upload of *image_type*."""
    highest = 0
    for asset in assets:
        if asset.type != image_type:
            continue
        ordinal = usable_ordinal(asset.filename)
        if ordinal is not None and ordinal > highest:
            highest = ordinal
    return highest + 1
