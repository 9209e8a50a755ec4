from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .catalog import CATALOG_FILE, load_catalog
from .config import load_config, parse_bool, parse_names, resolve_intro_html
from .derive import total_repo_count
from .errors import RenderWriteError, SiteGenError
from .pages import BASE_URL, build_index, build_sitemap
from .render import copy_passthrough, load_index_template, write_text
from .utils import clean_output_dir, ensure_output_dir, write_nojekyll

PASSTHROUGH_FILES = ["CNAME", "google3f45b72e3ef79ea3.html"]


def build_site(args: argparse.Namespace) -> int:
    project_root = Path.cwd()
    output_dir = Path(args.output)

    template = load_index_template()
    catalog = load_catalog(Path(args.catalog), allow_duplicates=args.allow_duplicates)
    args.intro_html = resolve_intro_html(args)

    index_html = build_index(template, catalog, args)
    sitemap_xml = build_sitemap(catalog, args.base_url)

    if args.clean:
        clean_output_dir(output_dir, project_root)
    ensure_output_dir(output_dir)
    write_text(output_dir / "index.html", index_html)
    write_text(output_dir / "sitemap.xml", sitemap_xml)

    copy_passthrough(args.passthrough, project_root, output_dir)
    if args.write_nojekyll:
        try:
            write_nojekyll(output_dir)
        except OSError as exc:
            raise RenderWriteError(f"cannot write .nojekyll: {exc}") from exc
    return total_repo_count(catalog)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))

    def cfg_value(key: str, default: object) -> object:
        value = config.get(key)
        return default if value is None else value

    def cfg_str(key: str, default: str) -> str:
        return str(cfg_value(key, default))

    def cfg_bool(key: str, default: bool) -> bool:
        return parse_bool(cfg_value(key, default))

    parser = argparse.ArgumentParser(description="Render the repository catalog into a static docs portal.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--catalog", default=cfg_str("catalog", CATALOG_FILE), help="Path to the repository catalog.")
    parser.add_argument("--output", default=cfg_str("output", "site"), help="Output directory for the site.")
    parser.add_argument(
        "--base-url",
        default=cfg_str("base_url", BASE_URL),
        help="Public URL that hosts the per-repository sitemaps.",
    )
    parser.add_argument("--site-name", default=cfg_str("site_name", "Supermodel Tools"), help="Brand name in the header.")
    parser.add_argument("--site-title", default=cfg_str("site_title", "Architecture Docs"), help="Hero heading.")
    parser.add_argument(
        "--site-description",
        default=cfg_str(
            "site_description",
            "Architecture documentation for popular open source repositories. "
            "Browse code graphs, dependency diagrams, and codebase structure.",
        ),
        help="Meta description.",
    )
    parser.add_argument("--nav-website", default=cfg_str("nav_website", "https://supermodeltools.com"), help="Website link.")
    parser.add_argument(
        "--nav-github", default=cfg_str("nav_github", "https://github.com/supermodeltools"), help="GitHub link."
    )
    parser.add_argument("--nav-x", default=cfg_str("nav_x", "https://x.com/supermodeltools"), help="X link.")
    parser.add_argument("--intro-text", default=cfg_str("intro_text", ""), help="Hero paragraph text.")
    parser.add_argument(
        "--intro-file",
        default=cfg_str("intro_file", ""),
        help="Path to hero paragraph file (Markdown/HTML/text).",
    )
    parser.add_argument(
        "--passthrough",
        nargs="*",
        default=parse_names(cfg_value("passthrough", PASSTHROUGH_FILES)),
        help="Files copied verbatim into the output directory when present.",
    )
    parser.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("clean", False),
        help="Clean output directory before build.",
    )
    parser.add_argument(
        "--write-nojekyll",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("write_nojekyll", False),
        help="Write .nojekyll in the output directory.",
    )
    parser.add_argument(
        "--allow-duplicates",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("allow_duplicates", False),
        help="Accept duplicate category slugs and repository names.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        total = build_site(args)
    except SiteGenError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"Generated index.html and sitemap.xml ({total} repos)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
