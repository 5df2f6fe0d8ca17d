# app/modules/__init__.py
"""
Light exports for the style-guide app.

Notes:
- Importing the package does not build the documentation; the section list
  is computed when ``design_system_docs`` is first imported.
- Streamlit-bound modules (``style_guide``, ``ui_blocks``) are never imported
  here so scripts can use the generator without a Streamlit runtime.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .design_tokens import DESIGN_TOKENS, token_group

__all__ = [
    # Tokens
    "DESIGN_TOKENS",
    "token_group",
    # Documentation (lazy)
    "DESIGN_SYSTEM_DOCS",
    "DESIGN_SYSTEM_SECTIONS",
    "DesignSystemDocGenerator",
    # Rendering (lazy)
    "render_markdown",
    "docs_to_dict",
]


_LAZY_MODULES = {
    "design_system_docs": {
        "DESIGN_SYSTEM_DOCS",
        "DESIGN_SYSTEM_SECTIONS",
        "DesignSystemDocGenerator",
    },
    "docs_renderer": {
        "render_markdown",
        "docs_to_dict",
    },
}


def __getattr__(name: str) -> Any:
    for module_name, symbols in _LAZY_MODULES.items():
        if name in symbols:
            module = import_module(f".{module_name}", __name__)
            value = getattr(module, name)
            globals()[name] = value
            return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
