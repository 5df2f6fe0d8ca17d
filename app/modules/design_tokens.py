"""Glass UI design tokens.

This is the single source of truth for the style guide. Values are grouped by
category the same way the stylesheet consumes them: colour scales, glass
surfaces and borders per theme, the type scale, the 4px spacing grid, glass
shadows and motion.

Typography ``fontSize`` entries are ``(size, {"lineHeight", "letterSpacing"})``
pairs; a bare size string is also accepted by the documentation generator.

The table is frozen at import time. Iteration order is the declaration order
below and is what the documentation displays.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


def freeze_tokens(value: Any) -> Any:
    """Return a read-only deep copy of *value*.

    Mappings become :class:`types.MappingProxyType` and lists become tuples so
    nothing reachable from the token table can be mutated.
    """

    if isinstance(value, Mapping):
        return MappingProxyType({str(key): freeze_tokens(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_tokens(item) for item in value)
    return value


_RAW_TOKENS: dict[str, Any] = {
    "colors": {
        "primary": {
            "50": "#eff6ff",
            "100": "#dbeafe",
            "200": "#bfdbfe",
            "300": "#93c5fd",
            "400": "#60a5fa",
            "500": "#3b82f6",
            "600": "#2563eb",
            "700": "#1d4ed8",
            "800": "#1e40af",
            "900": "#1e3a8a",
            "950": "#172554",
        },
        "glass": {
            "light": {
                "primary": "rgba(255, 255, 255, 0.72)",
                "secondary": "rgba(255, 255, 255, 0.56)",
                "tertiary": "rgba(255, 255, 255, 0.38)",
                "elevated": "rgba(255, 255, 255, 0.84)",
                "floating": "rgba(255, 255, 255, 0.92)",
                "overlay": "rgba(15, 23, 42, 0.32)",
            },
            "dark": {
                "primary": "rgba(15, 23, 42, 0.72)",
                "secondary": "rgba(15, 23, 42, 0.56)",
                "tertiary": "rgba(15, 23, 42, 0.38)",
                "elevated": "rgba(30, 41, 59, 0.84)",
                "floating": "rgba(30, 41, 59, 0.92)",
                "overlay": "rgba(2, 6, 23, 0.64)",
            },
        },
        "border": {
            "light": {
                "subtle": "rgba(255, 255, 255, 0.12)",
                "light": "rgba(255, 255, 255, 0.2)",
                "medium": "rgba(255, 255, 255, 0.32)",
                "strong": "rgba(255, 255, 255, 0.48)",
            },
            "dark": {
                "subtle": "rgba(148, 163, 184, 0.12)",
                "light": "rgba(148, 163, 184, 0.2)",
                "medium": "rgba(148, 163, 184, 0.32)",
                "strong": "rgba(148, 163, 184, 0.48)",
            },
        },
    },
    "typography": {
        "fontFamily": {
            "sans": "'Inter', 'Segoe UI', system-ui, sans-serif",
            "mono": "'JetBrains Mono', 'SFMono-Regular', monospace",
        },
        "fontSize": {
            "xs": ("0.75rem", {"lineHeight": "1rem", "letterSpacing": "0.025em"}),
            "sm": ("0.875rem", {"lineHeight": "1.25rem", "letterSpacing": "0.01em"}),
            "base": ("1rem", {"lineHeight": "1.5rem", "letterSpacing": "0"}),
            "lg": ("1.125rem", {"lineHeight": "1.75rem", "letterSpacing": "-0.01em"}),
            "xl": ("1.25rem", {"lineHeight": "1.75rem", "letterSpacing": "-0.01em"}),
            "2xl": ("1.5rem", {"lineHeight": "2rem", "letterSpacing": "-0.02em"}),
            "3xl": ("1.875rem", {"lineHeight": "2.25rem", "letterSpacing": "-0.02em"}),
            "4xl": ("2.25rem", {"lineHeight": "2.5rem", "letterSpacing": "-0.025em"}),
            "5xl": ("3rem", {"lineHeight": "1", "letterSpacing": "-0.025em"}),
            "6xl": ("3.75rem", {"lineHeight": "1", "letterSpacing": "-0.03em"}),
            "7xl": ("4.5rem", {"lineHeight": "1", "letterSpacing": "-0.03em"}),
            "8xl": ("6rem", {"lineHeight": "1", "letterSpacing": "-0.04em"}),
            "9xl": ("8rem", {"lineHeight": "1", "letterSpacing": "-0.04em"}),
        },
    },
    "spacing": {
        "0": "0px",
        "1": "4px",
        "2": "8px",
        "3": "12px",
        "4": "16px",
        "5": "20px",
        "6": "24px",
        "8": "32px",
        "10": "40px",
        "12": "48px",
        "16": "64px",
        "20": "80px",
        "24": "96px",
        "32": "128px",
        "40": "160px",
        "48": "192px",
        "56": "224px",
        "64": "256px",
    },
    "shadows": {
        "glass": {
            "whisper": "0 1px 2px rgba(15, 23, 42, 0.04)",
            "subtle": "0 2px 8px rgba(15, 23, 42, 0.06), 0 1px 2px rgba(15, 23, 42, 0.04)",
            "light": "0 4px 16px rgba(15, 23, 42, 0.08), 0 2px 4px rgba(15, 23, 42, 0.04)",
            "medium": "0 8px 32px rgba(15, 23, 42, 0.12), 0 4px 8px rgba(15, 23, 42, 0.06)",
            "heavy": "0 16px 48px rgba(15, 23, 42, 0.16), 0 8px 16px rgba(15, 23, 42, 0.08)",
            "intense": "0 24px 64px rgba(15, 23, 42, 0.24), 0 12px 24px rgba(15, 23, 42, 0.12)",
        },
    },
    "animation": {
        "duration": {
            "instant": "50ms",
            "fast": "150ms",
            "normal": "250ms",
            "smooth": "350ms",
            "slow": "500ms",
        },
        "easing": {
            "glass": "cubic-bezier(0.4, 0, 0.2, 1)",
            "liquid": "cubic-bezier(0.23, 1, 0.32, 1)",
            "spring": "cubic-bezier(0.34, 1.56, 0.64, 1)",
            "magnetic": "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
            "hover": "cubic-bezier(0.25, 0.46, 0.45, 0.94)",
        },
    },
}

DESIGN_TOKENS: Mapping[str, Any] = freeze_tokens(_RAW_TOKENS)
"""Read-only token table consumed by the documentation generator."""


def token_group(tokens: Mapping[str, Any] | None, *path: str) -> Mapping[str, Any]:
    """Return the sub-table at *path*, or an empty mapping when it is absent.

    ``token_group(DESIGN_TOKENS, "colors", "glass", "light")`` yields the light
    glass surfaces. Missing categories degrade to ``{}`` so callers iterate
    nothing instead of failing.
    """

    node: Any = tokens
    for key in path:
        if not isinstance(node, Mapping):
            return MappingProxyType({})
        node = node.get(key)
    if not isinstance(node, Mapping):
        return MappingProxyType({})
    return node


__all__ = ["DESIGN_TOKENS", "freeze_tokens", "token_group"]
