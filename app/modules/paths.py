"""Centralized filesystem locations for generated documentation."""

from __future__ import annotations

import os
from pathlib import Path


_ENV_DOCS_DIR = "GLASSUI_DOCS_DIR"

_REPO_ROOT = Path(__file__).resolve().parents[2]


def _normalise_path(value: str | Path) -> Path:
    """Return an absolute ``Path`` while being forgiving with inputs."""

    candidate = Path(value).expanduser()
    try:
        return candidate.resolve()
    except RuntimeError:
        # ``resolve`` can raise on recursive symlinks; fall back to ``absolute``.
        return candidate.absolute()


def _path_from_env(var_name: str, default: Path) -> Path:
    """Load ``var_name`` from the environment, normalising it when available."""

    raw_value = os.environ.get(var_name)
    if raw_value is None:
        return default

    stripped = raw_value.strip()
    if not stripped:
        return default

    return _normalise_path(stripped)


REPO_ROOT = _normalise_path(_REPO_ROOT)
"""Repository root containing the ``app`` package."""

DOCS_DIR = _path_from_env(_ENV_DOCS_DIR, REPO_ROOT / "docs")
"""Directory receiving the generated design system documents."""

MARKDOWN_DOC = DOCS_DIR / "design-system.md"
JSON_DOC = DOCS_DIR / "design-system.json"


__all__ = ["DOCS_DIR", "JSON_DOC", "MARKDOWN_DOC", "REPO_ROOT"]
