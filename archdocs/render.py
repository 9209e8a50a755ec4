from __future__ import annotations

import os
import re
import shutil
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from .errors import RenderWriteError, TemplateError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")
INDEX_KEYS = frozenset(
    {
        "title",
        "site_description",
        "site_name",
        "nav",
        "hero_title",
        "intro",
        "hero_stats",
        "sections",
    }
)


def render_template(template: str, **context: str) -> str:
    # Single pass, so placeholders inside substituted values are left alone.
    def repl(match: re.Match) -> str:
        key = match.group(1)
        if key not in context:
            return match.group(0)
        return context[key]

    return PLACEHOLDER_RE.sub(repl, template)


def check_template(template: str, keys: Iterable[str]) -> None:
    expected = set(keys)
    found = set(PLACEHOLDER_RE.findall(template))
    missing = sorted(expected - found)
    unknown = sorted(found - expected)
    if missing:
        raise TemplateError("missing placeholder(s): " + ", ".join(missing))
    if unknown:
        raise TemplateError("unknown placeholder(s): " + ", ".join(unknown))


def read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"cannot read {path}: {exc}") from exc


@lru_cache(maxsize=None)
def load_index_template() -> str:
    template = read_template(TEMPLATES_DIR / "index.html")
    check_template(template, INDEX_KEYS)
    return template


def write_text(path: Path, text: str) -> None:
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as exc:
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        raise RenderWriteError(f"cannot write {path}: {exc}") from exc


def copy_passthrough(names: Iterable[str], source_dir: Path, output_dir: Path) -> list[str]:
    copied = []
    for name in names:
        source = source_dir / name
        if not source.is_file():
            continue
        try:
            shutil.copyfile(source, output_dir / source.name)
        except OSError:
            continue
        copied.append(source.name)
    return copied
