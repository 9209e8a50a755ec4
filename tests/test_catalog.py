import pytest

from archdocs.catalog import Catalog, load_catalog, parse_catalog, validate_catalog
from archdocs.errors import CatalogParseError, CatalogReadError, DuplicateEntryError
from archdocs.pages import build_sitemap


def test_parse_preserves_order(catalog):
    assert [c.slug for c in catalog.categories] == ["frontend", "meta", "backend"]
    assert [r.name for r in catalog.iter_repos()] == ["react", "vue", "svelte-kit", "flask"]


def test_optional_fields_absent_vs_blank(catalog):
    react, vue = catalog.categories[0].repos
    kit = catalog.categories[1].repos[0]
    assert react.pill_class == "pill-green"
    assert vue.pill_class is None
    assert kit.upstream == ""
    assert react.upstream == "facebook/react"


def test_missing_keys_default():
    catalog = parse_catalog("categories:\n  - slug: x\n    repos:\n      - name: only\n")
    category = catalog.categories[0]
    assert category.name == ""
    repo = category.repos[0]
    assert repo.description == ""
    assert repo.pill == ""
    assert repo.upstream is None
    assert repo.pill_class is None


def test_empty_document_is_empty_catalog():
    assert parse_catalog("") == Catalog()
    assert parse_catalog("categories: []\n").categories == ()


def test_plain_scalars_keep_source_text():
    catalog = parse_catalog(
        "categories:\n"
        "  - slug: 2024\n"
        "    repos:\n"
        "      - name: yes\n"
        "        pill: true\n"
        "      - name: 1.10\n"
        "        description: 2024-01-01\n"
        "      - name: 012\n"
        "        pill_class: off\n"
    )
    category = catalog.categories[0]
    assert category.slug == "2024"
    assert [r.name for r in category.repos] == ["yes", "1.10", "012"]
    assert category.repos[0].pill == "true"
    assert category.repos[1].description == "2024-01-01"
    assert category.repos[2].pill_class == "off"


def test_null_values_are_absent():
    catalog = parse_catalog(
        "categories:\n"
        "  - slug: s\n"
        "    repos:\n"
        "      - name: a\n"
        "        upstream: null\n"
        "        pill_class: ~\n"
        "        description:\n"
        "      - name: \"null\"\n"
    )
    first, second = catalog.categories[0].repos
    assert first.upstream is None
    assert first.pill_class is None
    assert first.description == ""
    assert second.name == "null"


def test_plain_scalar_names_in_sitemap():
    catalog = parse_catalog("categories:\n  - slug: s\n    repos:\n      - name: yes\n      - name: 1.10\n")
    sitemap = build_sitemap(catalog)
    assert "<loc>https://repos.supermodeltools.com/yes/sitemap.xml</loc>" in sitemap
    assert "<loc>https://repos.supermodeltools.com/1.10/sitemap.xml</loc>" in sitemap


@pytest.mark.parametrize(
    "text",
    [
        "categories: [unclosed",
        "- just\n- a list\n",
        "categories: nope\n",
        "categories:\n  - just-a-string\n",
        "categories:\n  - slug: a\n    repos: {name: x}\n",
        "categories:\n  - slug: a\n    repos:\n      - name: [1, 2]\n",
    ],
)
def test_malformed_input_raises(text):
    with pytest.raises(CatalogParseError):
        parse_catalog(text)


def test_duplicate_slug_rejected():
    catalog = parse_catalog("categories:\n  - slug: a\n  - slug: a\n")
    with pytest.raises(DuplicateEntryError, match="slug"):
        validate_catalog(catalog)


def test_duplicate_name_across_categories_rejected():
    catalog = parse_catalog(
        "categories:\n"
        "  - slug: a\n    repos:\n      - name: dup\n"
        "  - slug: b\n    repos:\n      - name: dup\n"
    )
    with pytest.raises(DuplicateEntryError, match="'dup'"):
        validate_catalog(catalog)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogReadError):
        load_catalog(tmp_path / "repos.yaml")


def test_load_catalog_allow_duplicates(tmp_path):
    path = tmp_path / "repos.yaml"
    path.write_text("categories:\n  - slug: a\n  - slug: a\n", encoding="utf-8")
    with pytest.raises(DuplicateEntryError):
        load_catalog(path)
    catalog = load_catalog(path, allow_duplicates=True)
    assert len(catalog.categories) == 2
