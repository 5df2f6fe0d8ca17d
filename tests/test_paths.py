from __future__ import annotations

import importlib
from pathlib import Path
from types import ModuleType

import pytest

from app.modules import paths


@pytest.fixture
def reload_paths(monkeypatch):
    """Reload ``app.modules.paths`` after adjusting environment variables."""

    def _reload(**env: str) -> ModuleType:
        monkeypatch.delenv("GLASSUI_DOCS_DIR", raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(paths)

    yield _reload

    monkeypatch.delenv("GLASSUI_DOCS_DIR", raising=False)
    importlib.reload(paths)


def test_path_constants_align_with_repository_structure(reload_paths) -> None:
    module = reload_paths()
    repo_root = Path(__file__).resolve().parents[1]

    assert module.REPO_ROOT == repo_root.resolve()
    assert module.DOCS_DIR == module.REPO_ROOT / "docs"
    assert module.MARKDOWN_DOC.name == "design-system.md"
    assert module.JSON_DOC.parent == module.DOCS_DIR


def test_docs_dir_can_be_overridden(reload_paths, tmp_path) -> None:
    module = reload_paths(GLASSUI_DOCS_DIR=str(tmp_path / "out"))

    assert module.DOCS_DIR == (tmp_path / "out").resolve()
    assert module.MARKDOWN_DOC == module.DOCS_DIR / "design-system.md"


def test_blank_override_is_ignored(reload_paths) -> None:
    module = reload_paths(GLASSUI_DOCS_DIR="   ")

    assert module.DOCS_DIR == module.REPO_ROOT / "docs"
