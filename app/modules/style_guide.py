"""Streamlit rendering of the design system documentation."""

from __future__ import annotations

import logging
from html import escape
from typing import Callable, Dict, Sequence

import streamlit as st

from app.modules import docs_renderer, ui_blocks
from app.modules.design_system_docs import (
    DESIGN_SYSTEM_DOCS,
    ContentBlock,
    DesignSystemDocs,
    DesignSystemExample,
    DesignSystemSection,
)

LOGGER = logging.getLogger(__name__)

ALL_SECTIONS = "All sections"


def _render_block_header(block: ContentBlock) -> None:
    if block.title:
        st.subheader(block.title)
    if block.description:
        st.caption(block.description)


def _render_text(block: ContentBlock) -> None:
    st.markdown(block.content)


def _render_code(block: ContentBlock) -> None:
    st.code(block.content, language=block.language)


def _render_table(block: ContentBlock) -> None:
    st.dataframe(docs_renderer.table_frame(block.content), hide_index=True)


def _render_palettes(block: ContentBlock) -> None:
    for palette in block.content:
        st.markdown(f"#### {palette.name}")
        st.caption(palette.description)
        st.markdown(ui_blocks.swatch_grid(palette.colors), unsafe_allow_html=True)


def _render_typography(block: ContentBlock) -> None:
    doc = block.content
    st.caption(doc.description)
    for scale in doc.scales:
        st.markdown(
            f"<p style='font-size:{escape(scale.size)}; line-height:{escape(scale.line_height)}; "
            f"letter-spacing:{escape(scale.letter_spacing)}; margin:0;'>"
            f"{escape(scale.name)}: {escape(scale.usage)}</p>",
            unsafe_allow_html=True,
        )
    st.dataframe(docs_renderer.typography_frame(doc), hide_index=True)


def _render_spacing(block: ContentBlock) -> None:
    doc = block.content
    st.caption(doc.description)
    st.dataframe(docs_renderer.spacing_frame(doc), hide_index=True)


_BLOCK_RENDERERS: Dict[str, Callable[[ContentBlock], None]] = {
    "text": _render_text,
    "code": _render_code,
    "table": _render_table,
    "color-palette": _render_palettes,
    "typography-scale": _render_typography,
    "spacing-scale": _render_spacing,
}


def render_block(block: ContentBlock) -> None:
    try:
        renderer = _BLOCK_RENDERERS[block.type]
    except KeyError:
        raise ValueError(f"Unsupported content type: {block.type!r}") from None
    _render_block_header(block)
    renderer(block)


def render_example(example: DesignSystemExample) -> None:
    with st.expander(f"Example: {example.name}"):
        st.caption(example.description)
        st.markdown(example.preview, unsafe_allow_html=True)
        st.code(example.code, language="css")
        if example.tokens:
            st.markdown("Tokens: " + ", ".join(f"`{token}`" for token in example.tokens))


def render_section(section: DesignSystemSection) -> None:
    st.markdown(ui_blocks.section_anchor(section.id), unsafe_allow_html=True)
    st.header(section.title)
    st.caption(section.description)
    for block in section.content:
        render_block(block)
    for example in section.examples:
        render_example(example)


def select_sections(
    sections: Sequence[DesignSystemSection], choice: str
) -> Sequence[DesignSystemSection]:
    """Return the sections matching the sidebar *choice* (a title or "All sections")."""

    if choice == ALL_SECTIONS:
        return sections
    return [section for section in sections if section.title == choice]


def render_style_guide(docs: DesignSystemDocs = DESIGN_SYSTEM_DOCS) -> None:
    """Render the style-guide page for *docs*."""

    ui_blocks.load_theme()
    st.title("Glass UI Design System")
    st.caption("Tokens, scales and usage guidelines generated from the design token source.")

    options = [ALL_SECTIONS] + [section.title for section in docs.sections]
    choice = st.sidebar.radio("Section", options, index=0)
    selected = select_sections(docs.sections, choice)
    LOGGER.debug("Rendering %d style guide sections", len(selected))

    for section in selected:
        render_section(section)


__all__ = [
    "ALL_SECTIONS",
    "render_block",
    "render_example",
    "render_section",
    "render_style_guide",
    "select_sections",
]
