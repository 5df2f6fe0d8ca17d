"""Render design system sections as Markdown, DataFrames or plain data.

The Markdown layout mirrors the token tables the style guide shows on screen
so the generated ``docs/design-system.md`` stays aligned with the page.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, Dict, Iterable, List, Sequence

import pandas as pd

from app.modules.design_system_docs import (
    ColorPaletteDoc,
    ContentBlock,
    DesignSystemExample,
    DesignSystemSection,
    SpacingDoc,
    TableData,
    TypographyDoc,
)

PALETTE_COLUMNS = ["Token", "Value", "Usage", "Contrast (white)", "Contrast (black)"]
TYPOGRAPHY_COLUMNS = ["Token", "Size", "Line height", "Letter spacing", "Usage"]
SPACING_COLUMNS = ["Token", "Value", "Pixels", "Usage"]


# DataFrames ---------------------------------------------------------------


def table_frame(table: TableData) -> pd.DataFrame:
    return pd.DataFrame([list(row) for row in table.rows], columns=list(table.headers))


def palette_frame(palette: ColorPaletteDoc) -> pd.DataFrame:
    """Return one row per colour; contrast columns are empty when not computed."""

    records = []
    for color in palette.colors:
        contrast = color.contrast
        records.append(
            [
                color.name,
                color.value,
                color.usage,
                contrast.white if contrast is not None else None,
                contrast.black if contrast is not None else None,
            ]
        )
    return pd.DataFrame(records, columns=PALETTE_COLUMNS)


def typography_frame(doc: TypographyDoc) -> pd.DataFrame:
    return pd.DataFrame(
        [
            [scale.name, scale.size, scale.line_height, scale.letter_spacing, scale.usage]
            for scale in doc.scales
        ],
        columns=TYPOGRAPHY_COLUMNS,
    )


def spacing_frame(doc: SpacingDoc) -> pd.DataFrame:
    return pd.DataFrame(
        [[step.name, step.value, step.pixels, step.usage] for step in doc.scale],
        columns=SPACING_COLUMNS,
    )


# Markdown -----------------------------------------------------------------


def _escape_cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value).replace("|", "\\|").replace("\n", " ")


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    body = [
        "| " + " | ".join(_escape_cell(header) for header in headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    for row in rows:
        body.append("| " + " | ".join(_escape_cell(cell) for cell in row) + " |")
    return "\n".join(body)


def _frame_markdown(frame: pd.DataFrame) -> str:
    rows = frame.astype(object).where(frame.notna(), None).values.tolist()
    return _markdown_table(list(frame.columns), rows)


def _block_heading(block: ContentBlock) -> List[str]:
    lines: List[str] = []
    if block.title:
        lines.extend([f"### {block.title}", ""])
    if block.description:
        lines.extend([block.description, ""])
    return lines


def _render_text(block: ContentBlock) -> List[str]:
    return [block.content, ""]


def _render_code(block: ContentBlock) -> List[str]:
    return [f"```{block.language}", block.content, "```", ""]


def _render_table(block: ContentBlock) -> List[str]:
    return [_markdown_table(block.content.headers, block.content.rows), ""]


def _render_palettes(block: ContentBlock) -> List[str]:
    lines: List[str] = []
    for palette in block.content:
        lines.extend([f"#### {palette.name}", "", palette.description, ""])
        lines.extend([_frame_markdown(palette_frame(palette)), ""])
    return lines


def _render_typography(block: ContentBlock) -> List[str]:
    doc = block.content
    return [doc.description, "", _frame_markdown(typography_frame(doc)), ""]


def _render_spacing(block: ContentBlock) -> List[str]:
    doc = block.content
    return [doc.description, "", _frame_markdown(spacing_frame(doc)), ""]


_MARKDOWN_RENDERERS: Dict[str, Callable[[ContentBlock], List[str]]] = {
    "text": _render_text,
    "code": _render_code,
    "table": _render_table,
    "color-palette": _render_palettes,
    "typography-scale": _render_typography,
    "spacing-scale": _render_spacing,
}


def render_block_markdown(block: ContentBlock) -> str:
    try:
        renderer = _MARKDOWN_RENDERERS[block.type]
    except KeyError:
        raise ValueError(f"Unsupported content type: {block.type!r}") from None
    return "\n".join(_block_heading(block) + renderer(block)).strip()


def _render_example(example: DesignSystemExample) -> List[str]:
    lines = [f"### Example: {example.name}", "", example.description, ""]
    if example.tokens:
        lines.extend(["Tokens: " + ", ".join(f"`{token}`" for token in example.tokens), ""])
    lines.extend(["```css", example.code, "```", ""])
    return lines


def render_section_markdown(section: DesignSystemSection) -> str:
    lines = [f"## {section.title}", "", section.description, ""]
    for block in section.content:
        lines.extend([render_block_markdown(block), ""])
    for example in section.examples:
        lines.extend(_render_example(example))
    return "\n".join(lines).strip()


def render_markdown(
    sections: Sequence[DesignSystemSection],
    *,
    title: str = "Glass UI Design System",
) -> str:
    """Render every section as one Markdown document with a table of contents."""

    lines = [
        f"# {title}",
        "",
        "This document is generated by `scripts/build_docs.py` from",
        "`app/modules/design_tokens.py`. Update the tokens and run the script",
        "again to refresh the tables.",
        "",
    ]
    lines.extend(f"- [{section.title}](#{section.id})" for section in sections)
    lines.append("")
    for section in sections:
        lines.extend([f'<a id="{section.id}"></a>', "", render_section_markdown(section), ""])
    return "\n".join(lines).strip() + "\n"


# Plain data ---------------------------------------------------------------


JSON_KEYS: Dict[str, str] = {
    "line_height": "lineHeight",
    "letter_spacing": "letterSpacing",
}


def docs_to_dict(sections: Sequence[DesignSystemSection]) -> List[Dict[str, Any]]:
    """Return JSON-ready dictionaries for *sections*.

    Tuples become lists and field names follow the camelCase keys of the
    token source (``lineHeight``, ``letterSpacing``).
    """

    return [_listify(asdict(section)) for section in sections]


def _listify(value: Any) -> Any:
    if isinstance(value, dict):
        return {JSON_KEYS.get(key, key): _listify(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_listify(item) for item in value]
    return value


__all__ = [
    "JSON_KEYS",
    "PALETTE_COLUMNS",
    "SPACING_COLUMNS",
    "TYPOGRAPHY_COLUMNS",
    "docs_to_dict",
    "palette_frame",
    "render_block_markdown",
    "render_markdown",
    "render_section_markdown",
    "spacing_frame",
    "table_frame",
    "typography_frame",
]
