from __future__ import annotations

import hashlib
from functools import lru_cache
from html import escape
from pathlib import Path
from typing import Any, Iterable, Literal, Mapping

import streamlit as st

from app.modules.design_system_docs import ColorEntry

_PAGE_THEME: dict[str, str] = {
    "primaryColor": "#3b82f6",
    "backgroundColor": "#0f172a",
    "secondaryBackgroundColor": "#1e293b",
    "textColor": "#f8fafc",
    "font": "sans serif",
}
_THEME_HASH_KEY = "__glassui_theme_hash__"


def _static_path(filename: str | Path) -> Path:
    return Path(__file__).resolve().parents[1] / "static" / Path(filename)


def _base_css_path() -> Path:
    return _static_path(Path("styles") / "base.css")


@lru_cache(maxsize=1)
def _read_css_bundle() -> str:
    try:
        return _base_css_path().read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def configure_page(
    *,
    page_title: str,
    page_icon: str | None = None,
    layout: Literal["centered", "wide"] = "wide",
    initial_sidebar_state: Literal["auto", "expanded", "collapsed"] = "expanded",
    menu_items: Mapping[str, str] | None = None,
) -> None:
    """Apply shared Streamlit page configuration."""

    page_config: dict[str, Any] = {
        "page_title": page_title,
        "page_icon": page_icon,
        "layout": layout,
        "initial_sidebar_state": initial_sidebar_state,
        "menu_items": menu_items,
    }

    try:
        st.set_page_config(**page_config, theme=_PAGE_THEME)
    except TypeError:
        # Older Streamlit releases do not accept ``theme``; the stylesheet from
        # :func:`load_theme` still applies.
        st.set_page_config(**page_config)


def load_theme() -> None:
    """Inject the style-guide stylesheet once per session."""

    css = _read_css_bundle()
    if not css:
        return

    css_hash = hashlib.sha256(css.encode("utf-8")).hexdigest()
    if st.session_state.get(_THEME_HASH_KEY) == css_hash:
        return

    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
    st.session_state[_THEME_HASH_KEY] = css_hash


def color_swatch(color: ColorEntry) -> str:
    """Return the markup for a single colour swatch."""

    contrast = ""
    if color.contrast is not None:
        contrast = (
            "<span class='glass-swatch__contrast'>"
            f"Contrast {color.contrast.white:g} / {color.contrast.black:g}"
            "</span>"
        )
    return (
        "<div class='glass-swatch' data-token='{name}'>"
        "<div class='glass-swatch__visual' style='background: {value};'></div>"
        "<div class='glass-swatch__meta'>"
        "<strong>{name}</strong>"
        "<code>{value}</code>"
        "<span class='glass-swatch__usage'>{usage}</span>"
        "{contrast}"
        "</div></div>"
    ).format(
        name=escape(color.name),
        value=escape(color.value),
        usage=escape(color.usage),
        contrast=contrast,
    )


def swatch_grid(colors: Iterable[ColorEntry]) -> str:
    swatches = "".join(color_swatch(color) for color in colors)
    return f"<div class='glass-swatch-grid'>{swatches}</div>"


def section_anchor(section_id: str) -> str:
    return f"<a id='{escape(section_id)}' class='glass-anchor'></a>"


__all__ = [
    "color_swatch",
    "configure_page",
    "load_theme",
    "section_anchor",
    "swatch_grid",
]
