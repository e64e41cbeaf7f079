"""
Category endpoints.
"""

from fastapi import APIRouter

from examples_admin.auth.dependencies import AuthenticatedSession
from examples_admin.dependencies import Categories
from examples_admin.schemas.example import CategoryListResponse

router = APIRouter()


@router.get("", response_model=CategoryListResponse)
async def list_categories(session: AuthenticatedSession, service: Categories):
    """
    List example categories known to the backend.

    Each category carries its subcategory tabs and the media kind it stores.
    """
    categories = await service.list_categories()
    session.categories = categories
    return CategoryListResponse(categories=categories, total=len(categories))
