from __future__ import annotations

import html
from xml.sax.saxutils import escape as xml_escape

from .catalog import Catalog, Category, Repository
from .derive import (
    badge_url,
    category_counts,
    escape_path,
    escape_text,
    pill_class_of,
    repo_path,
    total_repo_count,
)
from .render import render_template

BASE_URL = "https://repos.supermodeltools.com"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
LAYERS_ICON = (
    '<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M12 2L2 7l10 5 10-5-10-5z"/><path d="M2 17l10 5 10-5"/><path d="M2 12l10 5 10-5"/>'
    "</svg>"
)


def build_nav(args: object) -> str:
    links = [
        (getattr(args, "nav_website", ""), "Website"),
        (getattr(args, "nav_github", ""), "GitHub"),
        (getattr(args, "nav_x", ""), "X"),
    ]
    return "\n        ".join(
        f'<a href="{html.escape(url)}">{label}</a>' for url, label in links
    )


def build_hero_stats(catalog: Catalog) -> str:
    stats = [(str(total_repo_count(catalog)), "Repositories")]
    stats.extend((str(count), escape_text(name)) for name, count in category_counts(catalog))
    return "\n          ".join(
        '<div class="hero-stat">'
        f'<div class="num">{num}</div>'
        f'<div class="label">{label}</div>'
        "</div>"
        for num, label in stats
    )


def build_repo_card(repo: Repository) -> str:
    name = escape_text(repo.name)
    desc = escape_text(repo.description)
    badge = ""
    if repo.upstream:
        # The query-string "&" separators stay literal; only the upstream id is escaped.
        badge = (
            f'<img class="star-badge" src="{badge_url(escape_text(repo.upstream))}" '
            'alt="GitHub Stars" loading="lazy">'
        )
    return (
        f'<a href="{repo_path(repo.name)}" class="card" data-name="{name}" data-desc="{desc}">'
        f'<div class="card-title">{LAYERS_ICON}{name}</div>'
        f'<div class="card-desc">{desc}</div>'
        '<div class="card-meta">'
        f'<span class="{escape_text(pill_class_of(repo.pill_class))}">{escape_text(repo.pill)}</span>'
        f"{badge}"
        "</div>"
        "</a>"
    )


def build_section(category: Category) -> str:
    cards = "\n          ".join(build_repo_card(repo) for repo in category.repos)
    return (
        f'<div class="section" data-section="{escape_text(category.slug)}">\n'
        f'        <h2 class="section-title">{escape_text(category.name)}</h2>\n'
        '        <div class="card-grid">\n'
        f"          {cards}\n"
        "        </div>\n"
        "      </div>"
    )


def build_index(template: str, catalog: Catalog, args: object) -> str:
    site_name = getattr(args, "site_name", "")
    hero_title = getattr(args, "site_title", "")
    return render_template(
        template,
        title=html.escape(f"{site_name} — {hero_title}"),
        site_description=html.escape(getattr(args, "site_description", "")),
        site_name=html.escape(site_name),
        nav=build_nav(args),
        hero_title=html.escape(hero_title),
        intro=getattr(args, "intro_html", ""),
        hero_stats=build_hero_stats(catalog),
        sections="\n\n      ".join(build_section(category) for category in catalog.categories),
    )


def build_sitemap(catalog: Catalog, base_url: str = BASE_URL) -> str:
    base_url = base_url.rstrip("/")
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<sitemapindex xmlns="{SITEMAP_NS}">',
    ]
    for repo in catalog.iter_repos():
        loc = xml_escape(f"{base_url}/{escape_path(repo.name)}/sitemap.xml")
        lines.append(f"  <sitemap>\n    <loc>{loc}</loc>\n  </sitemap>")
    lines.append("</sitemapindex>")
    return "\n".join(lines) + "\n"
