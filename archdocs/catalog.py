from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

import yaml

from .errors import CatalogParseError, CatalogReadError, DuplicateEntryError

CATALOG_FILE = "repos.yaml"


class CatalogLoader(yaml.SafeLoader):
    """Safe loader that keeps every plain scalar as text, except null."""

    yaml_implicit_resolvers: dict = {}


CatalogLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)


@dataclass(frozen=True)
class Repository:
    name: str
    description: str = ""
    pill: str = ""
    upstream: Optional[str] = None
    pill_class: Optional[str] = None


@dataclass(frozen=True)
class Category:
    name: str
    slug: str
    repos: tuple[Repository, ...] = ()


@dataclass(frozen=True)
class Catalog:
    categories: tuple[Category, ...] = ()

    def iter_repos(self) -> Iterator[Repository]:
        for category in self.categories:
            yield from category.repos


def _field(data: dict, key: str, where: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise CatalogParseError(f"{where}: field '{key}' must be a string, got {type(value).__name__}")


def _sequence(data: dict, key: str, where: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogParseError(f"{where}: '{key}' must be a list, got {type(value).__name__}")
    return value


def parse_repository(data: object, where: str) -> Repository:
    if not isinstance(data, dict):
        raise CatalogParseError(f"{where}: repository entry must be a mapping")
    return Repository(
        name=_field(data, "name", where) or "",
        description=_field(data, "description", where) or "",
        pill=_field(data, "pill", where) or "",
        upstream=_field(data, "upstream", where),
        pill_class=_field(data, "pill_class", where),
    )


def parse_category(data: object, where: str) -> Category:
    if not isinstance(data, dict):
        raise CatalogParseError(f"{where}: category entry must be a mapping")
    repos = tuple(
        parse_repository(item, f"{where}.repos[{i}]")
        for i, item in enumerate(_sequence(data, "repos", where))
    )
    return Category(
        name=_field(data, "name", where) or "",
        slug=_field(data, "slug", where) or "",
        repos=repos,
    )


def parse_catalog(text: str, source: str = CATALOG_FILE) -> Catalog:
    try:
        data = yaml.load(text, Loader=CatalogLoader)
    except yaml.YAMLError as exc:
        raise CatalogParseError(f"invalid YAML in {source}: {exc}") from exc
    if data is None:
        return Catalog()
    if not isinstance(data, dict):
        raise CatalogParseError(f"{source} must be a mapping with a 'categories' list")
    categories = tuple(
        parse_category(item, f"categories[{i}]")
        for i, item in enumerate(_sequence(data, "categories", source))
    )
    return Catalog(categories=categories)


def validate_catalog(catalog: Catalog) -> None:
    """Reject duplicate category slugs and repository names.

    Both renderers key output paths on these values, so a duplicate would
    silently overwrite a section anchor or a sitemap entry.
    """
    slugs = Counter(category.slug for category in catalog.categories)
    names = Counter(repo.name for repo in catalog.iter_repos())
    problems = []
    dup_slugs = [slug for slug, count in slugs.items() if count > 1]
    dup_names = [name for name, count in names.items() if count > 1]
    if dup_slugs:
        problems.append("duplicate category slug(s): " + ", ".join(repr(s) for s in dup_slugs))
    if dup_names:
        problems.append("duplicate repository name(s): " + ", ".join(repr(n) for n in dup_names))
    if problems:
        raise DuplicateEntryError("; ".join(problems))


def load_catalog(path: Path, allow_duplicates: bool = False) -> Catalog:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogReadError(f"cannot read {path}: {exc}") from exc
    catalog = parse_catalog(text, str(path))
    if not allow_duplicates:
        validate_catalog(catalog)
    return catalog
