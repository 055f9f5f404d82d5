"""
API routes for damage categories
"""
from typing import List

from fastapi import APIRouter, Depends

from ecodamage.api.dependencies import get_category_service
from ecodamage.api.schemas import CategoryResponse
from ecodamage.domain.category import CategoryService

router = APIRouter(prefix="/damage-categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    include_inactive: bool = False,
    service: CategoryService = Depends(get_category_service),
):
    """List damage categories, active ones only unless asked otherwise"""
    categories = service.list_categories(include_inactive=include_inactive)
    return [CategoryResponse.model_validate(cat) for cat in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    """Get damage category by ID"""
    return CategoryResponse.model_validate(service.require_category(category_id))
