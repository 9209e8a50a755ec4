from __future__ import annotations

import html
from typing import Optional
from urllib.parse import quote

from .catalog import Catalog

BADGE_URL = "https://img.shields.io/github/stars/{upstream}"
BADGE_PARAMS = "style=flat&logo=github&color=818cf8&labelColor=1a1d27"


def escape_text(value: Optional[str]) -> str:
    return html.escape(value or "", quote=True)


def escape_path(value: Optional[str]) -> str:
    # Only unreserved characters survive; "/" is encoded too.
    return quote(value or "", safe="")


def repo_path(name: str) -> str:
    return f"/{escape_path(name)}/"


def pill_class_of(pill_class: Optional[str]) -> str:
    if not pill_class:
        return "pill"
    return f"pill {pill_class}"


def badge_url(upstream: Optional[str]) -> str:
    if not upstream:
        return ""
    return f"{BADGE_URL.format(upstream=upstream)}?{BADGE_PARAMS}"


def total_repo_count(catalog: Catalog) -> int:
    return sum(len(category.repos) for category in catalog.categories)


def category_counts(catalog: Catalog) -> list[tuple[str, int]]:
    return [(category.name, len(category.repos)) for category in catalog.categories]
