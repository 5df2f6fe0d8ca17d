"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT_CANDIDATE = Path(__file__).resolve().parents[1]

try:
    from app.bootstrap import ensure_project_root
except ModuleNotFoundError:  # pragma: no cover - fallback when PYTHONPATH lacks repo
    if str(PROJECT_ROOT_CANDIDATE) not in sys.path:
        sys.path.insert(0, str(PROJECT_ROOT_CANDIDATE))
    from app.bootstrap import ensure_project_root

PROJECT_ROOT = ensure_project_root(PROJECT_ROOT_CANDIDATE)


@pytest.fixture
def small_tokens():
    """A compact token table covering every category once."""

    from app.modules.design_tokens import freeze_tokens

    return freeze_tokens(
        {
            "colors": {
                "primary": {"50": "#eff6ff", "500": "#3b82f6", "999": "#000000"},
                "glass": {
                    "light": {"elevated": "rgba(255,255,255,0.8)", "mist": "rgba(255,255,255,0.1)"},
                    "dark": {"primary": "rgba(15,23,42,0.7)"},
                },
                "border": {
                    "light": {"subtle": "rgba(255,255,255,0.1)"},
                    "dark": {"strong": "rgba(148,163,184,0.5)", "hairline": "#111"},
                },
            },
            "typography": {
                "fontSize": {
                    "xs": ("0.75rem", {"lineHeight": "1rem", "letterSpacing": "0.02em"}),
                    "base": "1rem",
                    "huge": ("12rem",),
                },
            },
            "spacing": {"0": "0px", "4": "16px", "7": "28px"},
            "shadows": {"glass": {"whisper": "0 1px 2px #0001", "glow": "0 0 8px #fff"}},
            "animation": {
                "duration": {"fast": "150ms"},
                "easing": {"spring": "cubic-bezier(0.34, 1.56, 0.64, 1)", "linear": "linear"},
            },
        }
    )
