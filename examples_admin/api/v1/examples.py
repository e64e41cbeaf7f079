"""
Before/after example endpoints.
Every mutation answers with the listing fetched again after the backend accepted it.
"""

from fastapi import APIRouter, File, Form, Query, UploadFile

from examples_admin.dependencies import Examples
from examples_admin.models.media import ImageType
from examples_admin.schemas.example import ExampleListing

router = APIRouter()


@router.get("", response_model=ExampleListing)
async def list_examples(
    service: Examples,
    category: str = Query(..., min_length=1, description="Category id"),
    subcategory: str | None = Query(default=None, description="Subcategory tab, defaults to the first"),
):
    """
    List examples of one category as ordered before/after pairs.

    Pairs missing one side are reported as incomplete; files without a
    leading number are listed under ``unnumbered``.
    """
    return await service.refresh(category, subcategory)


@router.post("", response_model=ExampleListing, status_code=201)
async def upload_example(
    service: Examples,
    file: UploadFile = File(..., description="Image or video file"),
    category: str = Form(..., min_length=1),
    image_type: ImageType = Form(...),
    subcategory: str | None = Form(default=None),
):
    """
    Upload one before or after file.

    The backend numbers the file (``1.jpg``, ``2.jpg``, ...); before and
    after files with the same number form a pair.
    """
    content = await file.read()
    return await service.upload(
        category=category,
        image_type=image_type,
        filename=file.filename,
        content=content,
        content_type=file.content_type,
        subcategory=subcategory or None,
    )


@router.delete("/{category}/{image_type}/{filename}", response_model=ExampleListing)
async def delete_flat_example(
    category: str,
    image_type: ImageType,
    filename: str,
    service: Examples,
    confirm: bool = Query(default=False, description="Operator confirmed the deletion"),
):
    """Delete an example from a category without subcategories."""
    return await service.delete(
        category=category,
        image_type=image_type,
        filename=filename,
        confirm=confirm,
    )


@router.delete("/{category}/{subcategory}/{image_type}/{filename}", response_model=ExampleListing)
async def delete_example(
    category: str,
    subcategory: str,
    image_type: ImageType,
    filename: str,
    service: Examples,
    confirm: bool = Query(default=False, description="Operator confirmed the deletion"),
):
    """Delete an example from one subcategory tab."""
    return await service.delete(
        category=category,
        subcategory=subcategory,
        image_type=image_type,
        filename=filename,
        confirm=confirm,
    )
