from typing import List, Optional, Dict, Any
from pathlib import Path
import json
import logging

from pydantic import ValidationError

from app.core.config import settings, BUNDLED_CATALOG_PATH
from app.schemas.catalog import AppRegistry, CatalogEntry, Category

logger = logging.getLogger(__name__)


_registry_cache: Optional[AppRegistry] = None


def load_registry(path) -> AppRegistry:
    """Parse a catalog file of the form ``{"apps": [...], "categories": [...]}``.

    Entries that fail validation or repeat an earlier id are skipped.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Catalog file {path} must contain a JSON object")

    apps: List[CatalogEntry] = []
    seen_ids = set()
    for item in data.get("apps") or []:
        if not isinstance(item, dict):
            continue
        try:
            entry = CatalogEntry.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping invalid catalog entry {item.get('id')!r}: {e.error_count()} error(s)")
            continue
        if entry.id in seen_ids:
            logger.warning(f"Skipping duplicate catalog entry {entry.id!r}")
            continue
        seen_ids.add(entry.id)
        apps.append(entry)

    categories: List[Category] = []
    for item in data.get("categories") or []:
        if not isinstance(item, dict):
            continue
        try:
            categories.append(Category.model_validate(item))
        except ValidationError:
            logger.warning(f"Skipping invalid category {item.get('id')!r}")
            continue

    return AppRegistry(apps=apps, categories=categories)


def get_registry() -> AppRegistry:
    global _registry_cache
    if _registry_cache is not None:
        return _registry_cache

    path = settings.CATALOG_PATH
    registry: Optional[AppRegistry] = None
    if path:
        try:
            registry = load_registry(Path(path))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load catalog from {path}: {e}; using bundled catalog")
    if registry is None:
        registry = load_registry(BUNDLED_CATALOG_PATH)

    logger.info(f"Loaded {len(registry.apps)} apps in {len(registry.categories)} categories")
    _registry_cache = registry
    return _registry_cache


def reload_catalog() -> AppRegistry:
    """Drop the cached catalog and read it again."""
    global _registry_cache
    _registry_cache = None
    return get_registry()


def get_all_apps() -> List[CatalogEntry]:
    """Get all apps in catalog order"""
    return list(get_registry().apps)


def get_categories() -> List[Category]:
    return list(get_registry().categories)


def get_app_by_id(app_id: str) -> Optional[CatalogEntry]:
    """Get a specific app by ID, or None when it is not in the catalog"""
    for app in get_registry().apps:
        if app.id == app_id:
            return app
    return None


def get_related_apps(app: CatalogEntry, limit: int = 3) -> List[CatalogEntry]:
    """Other apps in the same category, in catalog order"""
    related = [a for a in get_registry().apps if a.category == app.category and a.id != app.id]
    return related[:limit]


def get_static_params() -> List[Dict[str, Any]]:
    return [{"id": app.id} for app in get_registry().apps]
