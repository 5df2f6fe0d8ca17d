"""Static usage annotations for design tokens.

Every lookup is an exact string match against a fixed table with a single
fallback, so any token name resolves to a description.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_COLOR_USAGE = "General purpose color"
DEFAULT_GLASS_USAGE = "Glass morphism effect"
DEFAULT_BORDER_USAGE = "Border styling"
DEFAULT_TYPOGRAPHY_USAGE = "Text content"
DEFAULT_SPACING_USAGE = "General spacing"
DEFAULT_SHADOW_USAGE = "General shadow effect"
DEFAULT_DURATION_USAGE = "General animation duration"
DEFAULT_EASING_USAGE = "General easing function"

COLOR_USAGE: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "primary": MappingProxyType(
            {
                "50": "Very light backgrounds, subtle highlights",
                "100": "Light backgrounds, hover states",
                "200": "Disabled states, light borders",
                "300": "Subtle text, placeholder text",
                "400": "Secondary text, icons",
                "500": "Primary brand color, main actions",
                "600": "Hover states for primary actions",
                "700": "Active states, pressed buttons",
                "800": "High contrast text, important elements",
                "900": "Highest contrast, headings",
                "950": "Maximum contrast, critical elements",
            }
        ),
    }
)

GLASS_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "primary": "Main glass surfaces, cards, panels",
        "secondary": "Secondary surfaces, sidebars",
        "tertiary": "Subtle backgrounds, overlays",
        "elevated": "Elevated surfaces, modals, dropdowns",
        "floating": "Floating elements, tooltips, popovers",
        "overlay": "Modal backdrops, drawer overlays",
    }
)

BORDER_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "subtle": "Very light borders, dividers",
        "light": "Standard borders, card outlines",
        "medium": "Prominent borders, focus states",
        "strong": "High contrast borders, active states",
    }
)

TYPOGRAPHY_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "xs": "Captions, fine print, metadata",
        "sm": "Body text, descriptions, labels",
        "base": "Default body text, paragraphs",
        "lg": "Large body text, lead paragraphs",
        "xl": "Small headings, section titles",
        "2xl": "Medium headings, card titles",
        "3xl": "Large headings, page titles",
        "4xl": "Extra large headings",
        "5xl": "Display text, hero headings",
        "6xl": "Large display text",
        "7xl": "Extra large display text",
        "8xl": "Massive display text",
        "9xl": "Maximum display text",
    }
)

SPACING_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "0": "No spacing, reset margins/padding",
        "1": "Minimal spacing, tight layouts",
        "2": "Small spacing, compact elements",
        "3": "Medium-small spacing",
        "4": "Standard spacing, default gaps",
        "5": "Medium spacing",
        "6": "Large spacing, section gaps",
        "8": "Extra large spacing",
        "10": "Very large spacing",
        "12": "Huge spacing, major sections",
        "16": "Massive spacing, page sections",
        "20": "Extra massive spacing",
        "24": "Enormous spacing",
        "32": "Giant spacing, hero sections",
        "40": "Colossal spacing",
        "48": "Titanic spacing",
        "56": "Gargantuan spacing",
        "64": "Maximum spacing",
    }
)

SHADOW_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "whisper": "Minimal elevation, subtle depth",
        "subtle": "Light elevation, cards and panels",
        "light": "Medium elevation, floating elements",
        "medium": "High elevation, modals and overlays",
        "heavy": "Very high elevation, important dialogs",
        "intense": "Maximum elevation, critical alerts",
    }
)

DURATION_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "instant": "Immediate feedback, micro-interactions",
        "fast": "Quick transitions, hover effects",
        "normal": "Standard transitions, most animations",
        "smooth": "Smooth transitions, complex animations",
        "slow": "Deliberate transitions, important changes",
    }
)

EASING_USAGE: Mapping[str, str] = MappingProxyType(
    {
        "glass": "Standard glass UI easing, most transitions",
        "liquid": "Smooth, flowing animations",
        "spring": "Bouncy, playful interactions",
        "magnetic": "Magnetic attraction effects",
        "hover": "Hover state transitions",
    }
)


def _lookup(table: Mapping[str, str], key: str, default: str) -> str:
    # An empty annotation counts as missing.
    return table.get(key) or default


def color_usage(palette: str, shade: str) -> str:
    """Describe ``{palette}-{shade}``; only the primary scale is annotated."""

    return _lookup(COLOR_USAGE.get(palette, {}), shade, DEFAULT_COLOR_USAGE)


def glass_color_usage(theme: str, variant: str) -> str:
    """Describe a glass surface. Both themes share the same annotations."""

    del theme
    return _lookup(GLASS_USAGE, variant, DEFAULT_GLASS_USAGE)


def border_color_usage(theme: str, variant: str) -> str:
    del theme
    return _lookup(BORDER_USAGE, variant, DEFAULT_BORDER_USAGE)


def typography_usage(scale: str) -> str:
    return _lookup(TYPOGRAPHY_USAGE, scale, DEFAULT_TYPOGRAPHY_USAGE)


def spacing_usage(scale: str) -> str:
    """Describe a spacing step. Keys compare as strings: ``"04"`` is unknown."""

    return _lookup(SPACING_USAGE, scale, DEFAULT_SPACING_USAGE)


def shadow_usage(name: str) -> str:
    return _lookup(SHADOW_USAGE, name, DEFAULT_SHADOW_USAGE)


def duration_usage(name: str) -> str:
    return _lookup(DURATION_USAGE, name, DEFAULT_DURATION_USAGE)


def easing_usage(name: str) -> str:
    return _lookup(EASING_USAGE, name, DEFAULT_EASING_USAGE)


__all__ = [
    "BORDER_USAGE",
    "COLOR_USAGE",
    "DEFAULT_BORDER_USAGE",
    "DEFAULT_COLOR_USAGE",
    "DEFAULT_DURATION_USAGE",
    "DEFAULT_EASING_USAGE",
    "DEFAULT_GLASS_USAGE",
    "DEFAULT_SHADOW_USAGE",
    "DEFAULT_SPACING_USAGE",
    "DEFAULT_TYPOGRAPHY_USAGE",
    "DURATION_USAGE",
    "EASING_USAGE",
    "GLASS_USAGE",
    "SHADOW_USAGE",
    "SPACING_USAGE",
    "TYPOGRAPHY_USAGE",
    "border_color_usage",
    "color_usage",
    "duration_usage",
    "easing_usage",
    "glass_color_usage",
    "shadow_usage",
    "spacing_usage",
    "typography_usage",
]
