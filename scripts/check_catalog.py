#!/usr/bin/env python3
"""Validate a catalog file before it is shipped.

Usage: python scripts/check_catalog.py [path/to/apps.json]
"""

import json
import sys

from app.core.config import BUNDLED_CATALOG_PATH
from app.services.catalog import load_registry


def check_catalog(path) -> int:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    registry = load_registry(path)
    problems = []

    raw_count = len(raw.get("apps") or [])
    if raw_count != len(registry.apps):
        problems.append(f"{raw_count - len(registry.apps)} app(s) invalid or duplicated")

    category_ids = {c.id for c in registry.categories}
    if "all" in category_ids:
        problems.append("'all' is reserved and cannot be a category id")
    for category in registry.categories:
        if category.id != category.id.lower():
            problems.append(f"Category id '{category.id}' must be lowercase")
    for app in registry.apps:
        if app.category.lower() not in category_ids:
            problems.append(f"App '{app.id}' has unknown category '{app.category}'")

    for problem in problems:
        print(f"Error: {problem}")
    print(f"Checked {path}: {len(registry.apps)} apps, {len(registry.categories)} categories")
    return 1 if problems else 0


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else BUNDLED_CATALOG_PATH
    sys.exit(check_catalog(target))
