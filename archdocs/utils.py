from __future__ import annotations

import shutil
from pathlib import Path

from .errors import OutputDirError


def ensure_output_dir(output_dir: Path) -> None:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirError(f"cannot create {output_dir}: {exc}") from exc


def write_nojekyll(output_dir: Path) -> None:
    output_dir.joinpath(".nojekyll").write_text("", encoding="utf-8")


def clean_output_dir(output_dir: Path, project_root: Path) -> None:
    if not output_dir.exists():
        return
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved:
        raise OutputDirError("refusing to clean project root")
    if not output_resolved.is_relative_to(root_resolved):
        raise OutputDirError("refusing to clean output directory outside project root")
    try:
        shutil.rmtree(output_dir)
    except OSError as exc:
        raise OutputDirError(f"cannot clean {output_dir}: {exc}") from exc
