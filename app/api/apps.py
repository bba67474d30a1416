from fastapi import APIRouter, HTTPException
from typing import List

from app.schemas.catalog import (
    ALL_CATEGORIES,
    AppDetailResponse,
    AppListResponse,
    Category,
    StaticParam,
)
from app.services.catalog import (
    get_all_apps,
    get_app_by_id,
    get_categories,
    get_related_apps,
    get_static_params,
)
from app.services.catalog_filter import filter_apps

router = APIRouter(tags=["Catalog"])


@router.get("/apps", response_model=AppListResponse)
async def list_apps(q: str = "", category: str = ALL_CATEGORIES):
    """
    List catalog apps.

    - q: case-insensitive substring matched against name, description, tags and author
    - category: category id, or "all" for no restriction
    """
    apps = filter_apps(get_all_apps(), q, category)
    return AppListResponse(total=len(apps), query=q, category=category, apps=apps)


@router.get("/apps/static-params", response_model=List[StaticParam])
async def list_static_params():
    """Ids of every app, for pre-rendering detail pages"""
    return get_static_params()


@router.get("/apps/{app_id}", response_model=AppDetailResponse)
async def get_app(app_id: str):
    """Get details of a catalog app along with related apps"""
    app = get_app_by_id(app_id)
    if not app:
        raise HTTPException(status_code=404, detail=f"App '{app_id}' not found in catalog")
    return AppDetailResponse(
        app=app,
        gradient=app.display_gradient(),
        status_label=app.status_label(),
        related=get_related_apps(app),
    )


@router.get("/categories", response_model=List[Category])
async def list_categories():
    """List all catalog categories"""
    return get_categories()
