from __future__ import annotations

import html
import json
import sys
from pathlib import Path

import markdown
import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

DEFAULT_INTRO = (
    "Browse architecture documentation, dependency graphs, and code structure "
    "for popular open source repositories."
)


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"JSON config must be an object: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def parse_names(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return []


def _paragraph(text: str) -> str:
    escaped = html.escape(text).replace("\n", "<br>")
    return f"<p>{escaped}</p>"


def resolve_intro_html(args: object) -> str:
    """Return the hero paragraph HTML.

    ``intro_file`` wins over ``intro_text``. Markdown files are rendered,
    HTML files are used verbatim and anything else is escaped. A relative
    path is resolved against the config file's directory.
    """
    file_value = (getattr(args, "intro_file", "") or "").strip()
    if file_value:
        path = Path(file_value)
        if not path.is_absolute():
            config_path = Path(getattr(args, "config", "site.toml")).resolve()
            path = config_path.parent / path
        text = None
        if not path.exists():
            print(f"Intro file not found: {path}", file=sys.stderr)
        else:
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Cannot read intro file {path}: {exc}", file=sys.stderr)
        if text is not None:
            suffix = path.suffix.lower()
            if suffix in {".html", ".htm"}:
                return text
            if suffix == ".md":
                md = markdown.Markdown(extensions=["extra"])
                return md.convert(text)
            return _paragraph(text)

    text_value = (getattr(args, "intro_text", "") or "").strip()
    if text_value:
        return _paragraph(text_value)
    return _paragraph(DEFAULT_INTRO)
