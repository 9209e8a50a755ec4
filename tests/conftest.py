from pathlib import Path

import pytest

from archdocs.catalog import parse_catalog

SAMPLE_CATALOG = """\
categories:
  - name: Frontend Frameworks
    slug: frontend
    repos:
      - name: react
        upstream: facebook/react
        description: A JavaScript library for building user interfaces
        pill: Active
        pill_class: pill-green
      - name: vue
        upstream: vuejs/vue
        description: Progressive framework
        pill: Active
  - name: Meta Frameworks
    slug: meta
    repos:
      - name: svelte-kit
        upstream: ""
        description: Web development, streamlined
        pill: Beta
        pill_class: pill-orange
  - name: Backend
    slug: backend
    repos:
      - name: flask
        upstream: pallets/flask
        description: The Python micro framework
        pill: Stable
"""


@pytest.fixture
def catalog():
    return parse_catalog(SAMPLE_CATALOG)


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    tmp_path.joinpath("repos.yaml").write_text(SAMPLE_CATALOG, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
