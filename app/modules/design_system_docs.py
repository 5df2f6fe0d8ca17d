"""Design system documentation for the Glass UI style guide.

The module turns the nested token table from :mod:`app.modules.design_tokens`
into flat documentation records (colour palettes, the type scale, the spacing
scale and token tables for shadows and motion) and assembles them into the
ordered list of sections displayed by the style-guide page.

Everything here is a pure function of the token table. The section list is
built once at import time and exposed through :data:`DESIGN_SYSTEM_DOCS`;
callers treat it as read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Mapping, Sequence, Union

from app.modules import token_usage
from app.modules.design_tokens import DESIGN_TOKENS, token_group

LOGGER = logging.getLogger(__name__)

DEFAULT_LINE_HEIGHT = "1.5"
DEFAULT_LETTER_SPACING = "0"
TOKEN_TABLE_HEADERS: tuple[str, ...] = ("Token", "Value", "Usage")


# Documentation records ------------------------------------------------------


@dataclass(frozen=True)
class ContrastPair:
    """Contrast ratios of a colour against white and black text."""

    white: float
    black: float


@dataclass(frozen=True)
class ColorEntry:
    name: str
    value: str
    usage: str
    contrast: ContrastPair | None = None


@dataclass(frozen=True)
class ColorPaletteDoc:
    name: str
    description: str
    colors: tuple[ColorEntry, ...]


@dataclass(frozen=True)
class TypographyEntry:
    name: str
    size: str
    line_height: str
    letter_spacing: str
    usage: str


@dataclass(frozen=True)
class TypographyDoc:
    name: str
    description: str
    scales: tuple[TypographyEntry, ...]


@dataclass(frozen=True)
class SpacingEntry:
    name: str
    value: str
    pixels: str
    usage: str


@dataclass(frozen=True)
class SpacingDoc:
    name: str
    description: str
    scale: tuple[SpacingEntry, ...]


@dataclass(frozen=True)
class TableData:
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


# Content blocks -------------------------------------------------------------
#
# One dataclass per content type. ``type`` is the tag renderers dispatch on.


@dataclass(frozen=True)
class TextContent:
    content: str
    title: str | None = None
    description: str | None = None
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class CodeContent:
    content: str
    language: str = "css"
    title: str | None = None
    description: str | None = None
    type: Literal["code"] = "code"


@dataclass(frozen=True)
class TableContent:
    content: TableData
    title: str | None = None
    description: str | None = None
    type: Literal["table"] = "table"


@dataclass(frozen=True)
class ColorPaletteContent:
    content: tuple[ColorPaletteDoc, ...]
    title: str | None = None
    description: str | None = None
    type: Literal["color-palette"] = "color-palette"


@dataclass(frozen=True)
class TypographyScaleContent:
    content: TypographyDoc
    title: str | None = None
    description: str | None = None
    type: Literal["typography-scale"] = "typography-scale"


@dataclass(frozen=True)
class SpacingScaleContent:
    content: SpacingDoc
    title: str | None = None
    description: str | None = None
    type: Literal["spacing-scale"] = "spacing-scale"


ContentBlock = Union[
    TextContent,
    CodeContent,
    TableContent,
    ColorPaletteContent,
    TypographyScaleContent,
    SpacingScaleContent,
]

CONTENT_TYPES: tuple[str, ...] = (
    "text",
    "code",
    "table",
    "color-palette",
    "typography-scale",
    "spacing-scale",
)


@dataclass(frozen=True)
class DesignSystemExample:
    """A usage example: source snippet plus an HTML preview of the result."""

    name: str
    description: str
    code: str
    preview: str
    tokens: tuple[str, ...] = ()


@dataclass(frozen=True)
class DesignSystemSection:
    id: str
    title: str
    description: str
    content: tuple[ContentBlock, ...]
    examples: tuple[DesignSystemExample, ...] = ()


# Generator ------------------------------------------------------------------


def _split_font_size(value: Any) -> tuple[str, Mapping[str, Any] | None]:
    """Return ``(size, config)`` for a bare size string or a size/config pair."""

    if isinstance(value, str):
        return value, None
    if isinstance(value, Sequence) and value:
        config = value[1] if len(value) > 1 else None
        return str(value[0]), config if isinstance(config, Mapping) else None
    return str(value), None


class DesignSystemDocGenerator:
    """Build documentation records from a design token table.

    Each ``generate_*`` method reads the table and returns freshly built,
    immutable records. Missing categories produce empty record lists.
    """

    def __init__(self, tokens: Mapping[str, Any] | None = None) -> None:
        self._tokens = DESIGN_TOKENS if tokens is None else tokens

    @property
    def tokens(self) -> Mapping[str, Any]:
        return self._tokens

    def generate_color_palette(self) -> tuple[ColorPaletteDoc, ...]:
        primary = token_group(self._tokens, "colors", "primary")
        glass_light = token_group(self._tokens, "colors", "glass", "light")
        glass_dark = token_group(self._tokens, "colors", "glass", "dark")
        border_light = token_group(self._tokens, "colors", "border", "light")
        border_dark = token_group(self._tokens, "colors", "border", "dark")

        palettes = (
            ColorPaletteDoc(
                name="Primary Colors",
                description="Main brand colors used throughout the interface",
                colors=tuple(
                    ColorEntry(
                        name=f"primary-{name}",
                        value=value,
                        usage=token_usage.color_usage("primary", name),
                        contrast=self.calculate_contrast(value),
                    )
                    for name, value in primary.items()
                ),
            ),
            ColorPaletteDoc(
                name="Glass Colors - Light Theme",
                description="Translucent colors for glass morphism effects in light theme",
                colors=tuple(
                    ColorEntry(
                        name=f"glass-light-{name}",
                        value=value,
                        usage=token_usage.glass_color_usage("light", name),
                    )
                    for name, value in glass_light.items()
                ),
            ),
            ColorPaletteDoc(
                name="Glass Colors - Dark Theme",
                description="Translucent colors for glass morphism effects in dark theme",
                colors=tuple(
                    ColorEntry(
                        name=f"glass-dark-{name}",
                        value=value,
                        usage=token_usage.glass_color_usage("dark", name),
                    )
                    for name, value in glass_dark.items()
                ),
            ),
            ColorPaletteDoc(
                name="Border Colors",
                description="Subtle border colors for glass components",
                colors=tuple(
                    ColorEntry(
                        name=f"border-{theme}-{name}",
                        value=value,
                        usage=token_usage.border_color_usage(theme, name),
                    )
                    for theme, table in (("light", border_light), ("dark", border_dark))
                    for name, value in table.items()
                ),
            ),
        )
        LOGGER.debug(
            "Generated colour palettes: %s",
            {palette.name: len(palette.colors) for palette in palettes},
        )
        return palettes

    def generate_typography_scale(self) -> TypographyDoc:
        scales: list[TypographyEntry] = []
        for name, value in token_group(self._tokens, "typography", "fontSize").items():
            size, config = _split_font_size(value)
            config = config or {}
            scales.append(
                TypographyEntry(
                    name=name,
                    size=size,
                    line_height=str(config.get("lineHeight", DEFAULT_LINE_HEIGHT)),
                    letter_spacing=str(config.get("letterSpacing", DEFAULT_LETTER_SPACING)),
                    usage=token_usage.typography_usage(name),
                )
            )
        LOGGER.debug("Generated type scale with %d steps", len(scales))
        return TypographyDoc(
            name="Typography Scale",
            description="Harmonious type scale with optimized line heights and letter spacing",
            scales=tuple(scales),
        )

    def generate_spacing_scale(self) -> SpacingDoc:
        scale = tuple(
            SpacingEntry(
                name=name,
                value=value,
                pixels=value,
                usage=token_usage.spacing_usage(name),
            )
            for name, value in token_group(self._tokens, "spacing").items()
        )
        LOGGER.debug("Generated spacing scale with %d steps", len(scale))
        return SpacingDoc(
            name="Spacing Scale",
            description="Consistent spacing system based on 4px grid",
            scale=scale,
        )

    def calculate_contrast(self, color: str) -> ContrastPair:
        # Placeholder ratios; no WCAG computation is performed.
        del color
        return ContrastPair(white=4.5, black=4.5)


# Section assembly -----------------------------------------------------------


def _token_table(
    tokens: Mapping[str, Any],
    path: tuple[str, ...],
    usage: Callable[[str], str],
) -> TableData:
    prefix = ".".join(path)
    return TableData(
        headers=TOKEN_TABLE_HEADERS,
        rows=tuple(
            (f"{prefix}.{name}", value, usage(name))
            for name, value in token_group(tokens, *path).items()
        ),
    )


def _glass_card_example(tokens: Mapping[str, Any]) -> DesignSystemExample:
    surface = token_group(tokens, "colors", "glass", "light").get("primary", "")
    border = token_group(tokens, "colors", "border", "light").get("light", "")
    shadow = token_group(tokens, "shadows", "glass").get("light", "")
    code = (
        ".glass-card {\n"
        "  background: var(--glass-light-primary);\n"
        "  border: 1px solid var(--border-light-light);\n"
        "  box-shadow: var(--shadow-glass-light);\n"
        "  backdrop-filter: blur(16px);\n"
        "}"
    )
    preview = (
        f'<div class="glass-example" style="background:{surface};'
        f"border:1px solid {border};box-shadow:{shadow};"
        'backdrop-filter:blur(16px);">Glass card</div>'
    )
    return DesignSystemExample(
        name="Glass card",
        description="Primary glass surface with a light border and soft shadow",
        code=code,
        preview=preview,
        tokens=("colors.glass.light.primary", "colors.border.light.light", "shadows.glass.light"),
    )


def build_design_system_sections(
    tokens: Mapping[str, Any] | None = None,
    generator: DesignSystemDocGenerator | None = None,
) -> tuple[DesignSystemSection, ...]:
    """Assemble the six style-guide sections in display order.

    When only *generator* is given, its token table feeds every section.
    """

    if tokens is None:
        tokens = generator.tokens if generator is not None else DESIGN_TOKENS
    generator = generator or DesignSystemDocGenerator(tokens)

    sections = (
        DesignSystemSection(
            id="overview",
            title="Design System Overview",
            description="Introduction to Glass UI design principles and philosophy",
            content=(
                TextContent(
                    title="Philosophy",
                    content=(
                        "Glass UI is built on the principles of clarity, depth, and accessibility. "
                        "Our design system emphasizes translucency and layering to create interfaces "
                        "that feel both modern and intuitive. Every component is designed with "
                        "accessibility in mind, ensuring that beautiful interfaces are also inclusive "
                        "interfaces."
                    ),
                ),
                TextContent(
                    title="Core Principles",
                    content="\n".join(
                        (
                            "- **Clarity**: Clean, uncluttered interfaces that prioritize content",
                            "- **Depth**: Layered visual hierarchy using glass morphism effects",
                            "- **Consistency**: Unified design language across all components",
                            "- **Accessibility**: WCAG 2.1 AA compliance as a baseline",
                            "- **Performance**: Optimized for smooth animations and interactions",
                        )
                    ),
                ),
            ),
        ),
        DesignSystemSection(
            id="colors",
            title="Color System",
            description="Comprehensive color palette with semantic meanings and usage guidelines",
            content=(
                TextContent(
                    title="Color Philosophy",
                    content=(
                        "Our color system is designed around the concept of translucency and depth. "
                        "We use carefully crafted alpha values to create glass-like effects while "
                        "maintaining excellent contrast ratios for accessibility."
                    ),
                ),
                ColorPaletteContent(
                    title="Color Palettes",
                    content=generator.generate_color_palette(),
                ),
            ),
            examples=(_glass_card_example(tokens),),
        ),
        DesignSystemSection(
            id="typography",
            title="Typography",
            description="Type scale, font families, and text styling guidelines",
            content=(
                TextContent(
                    title="Typography Philosophy",
                    content=(
                        "Typography in Glass UI prioritizes readability and hierarchy. We use a "
                        "modular scale to ensure consistent proportions and optimal line heights "
                        "for comfortable reading across all device sizes."
                    ),
                ),
                TypographyScaleContent(
                    title="Type Scale",
                    content=generator.generate_typography_scale(),
                ),
            ),
        ),
        DesignSystemSection(
            id="spacing",
            title="Spacing System",
            description="Consistent spacing scale based on 4px grid system",
            content=(
                TextContent(
                    title="Spacing Philosophy",
                    content=(
                        "Our spacing system is based on a 4px grid, providing consistent rhythm and "
                        "alignment throughout the interface. This creates visual harmony and makes "
                        "layouts feel more organized and professional."
                    ),
                ),
                SpacingScaleContent(
                    title="Spacing Scale",
                    content=generator.generate_spacing_scale(),
                ),
            ),
        ),
        DesignSystemSection(
            id="shadows",
            title="Shadow System",
            description="Elevation and depth through carefully crafted shadows",
            content=(
                TextContent(
                    title="Shadow Philosophy",
                    content=(
                        "Shadows in Glass UI create depth and hierarchy while maintaining the "
                        "translucent aesthetic. We use subtle, realistic shadows that enhance the "
                        "glass morphism effect without overwhelming the content."
                    ),
                ),
                TableContent(
                    title="Shadow Tokens",
                    content=_token_table(tokens, ("shadows", "glass"), token_usage.shadow_usage),
                ),
            ),
        ),
        DesignSystemSection(
            id="animation",
            title="Animation System",
            description="Motion design principles and animation tokens",
            content=(
                TextContent(
                    title="Animation Philosophy",
                    content=(
                        "Animations in Glass UI are subtle and purposeful, enhancing the user "
                        "experience without being distracting. We use easing curves that feel "
                        "natural and durations that respect user preferences."
                    ),
                ),
                TableContent(
                    title="Duration Tokens",
                    content=_token_table(
                        tokens, ("animation", "duration"), token_usage.duration_usage
                    ),
                ),
                TableContent(
                    title="Easing Tokens",
                    content=_token_table(
                        tokens, ("animation", "easing"), token_usage.easing_usage
                    ),
                ),
            ),
        ),
    )
    LOGGER.debug("Assembled %d design system sections", len(sections))
    return sections


@dataclass(frozen=True)
class DesignSystemDocs:
    """The exported documentation: ordered sections plus the generator."""

    sections: tuple[DesignSystemSection, ...]
    generator: DesignSystemDocGenerator = field(compare=False)

    @property
    def section_ids(self) -> tuple[str, ...]:
        return tuple(section.id for section in self.sections)

    def get_section(self, section_id: str) -> DesignSystemSection | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None


def build_design_system_docs(tokens: Mapping[str, Any] | None = None) -> DesignSystemDocs:
    generator = DesignSystemDocGenerator(tokens)
    return DesignSystemDocs(
        sections=build_design_system_sections(generator.tokens, generator),
        generator=generator,
    )


DESIGN_SYSTEM_DOCS = build_design_system_docs()
DESIGN_SYSTEM_SECTIONS = DESIGN_SYSTEM_DOCS.sections


__all__ = [
    "CONTENT_TYPES",
    "CodeContent",
    "ColorEntry",
    "ColorPaletteContent",
    "ColorPaletteDoc",
    "ContentBlock",
    "ContrastPair",
    "DESIGN_SYSTEM_DOCS",
    "DESIGN_SYSTEM_SECTIONS",
    "DesignSystemDocGenerator",
    "DesignSystemDocs",
    "DesignSystemExample",
    "DesignSystemSection",
    "SpacingDoc",
    "SpacingEntry",
    "SpacingScaleContent",
    "TableContent",
    "TableData",
    "TextContent",
    "TypographyDoc",
    "TypographyEntry",
    "TypographyScaleContent",
    "build_design_system_docs",
    "build_design_system_sections",
]
