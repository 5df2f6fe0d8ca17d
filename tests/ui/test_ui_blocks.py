from __future__ import annotations

from types import SimpleNamespace

from app.modules import ui_blocks
from app.modules.design_system_docs import ColorEntry, ContrastPair


def test_configure_page_applies_theme_defaults(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def fake_set_page_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setattr(ui_blocks, "st", SimpleNamespace(set_page_config=fake_set_page_config))

    ui_blocks.configure_page(page_title="Demo", page_icon="🪟")

    assert captured["page_title"] == "Demo"
    assert captured["page_icon"] == "🪟"
    assert captured["layout"] == "wide"
    assert captured["theme"] == ui_blocks._PAGE_THEME


def test_configure_page_falls_back_without_theme_support(monkeypatch) -> None:
    calls: list[dict[str, object]] = []

    def fake_set_page_config(*, page_title, page_icon, layout, initial_sidebar_state, menu_items):
        calls.append({"page_title": page_title, "layout": layout})

    monkeypatch.setattr(ui_blocks, "st", SimpleNamespace(set_page_config=fake_set_page_config))

    ui_blocks.configure_page(page_title="Demo")

    assert calls == [{"page_title": "Demo", "layout": "wide"}]


def test_load_theme_injects_stylesheet_once(monkeypatch) -> None:
    rendered: list[str] = []
    state: dict[str, str] = {}
    monkeypatch.setattr(
        ui_blocks,
        "st",
        SimpleNamespace(
            session_state=state,
            markdown=lambda body, unsafe_allow_html=False: rendered.append(body),
        ),
    )

    ui_blocks.load_theme()
    ui_blocks.load_theme()

    assert len(rendered) == 1
    assert rendered[0].startswith("<style>")
    assert ".glass-swatch" in rendered[0]
    assert ui_blocks._THEME_HASH_KEY in state


def test_color_swatch_escapes_and_reports_contrast() -> None:
    markup = ui_blocks.color_swatch(
        ColorEntry("primary-500", "#3b82f6", "Primary <brand>", ContrastPair(4.5, 4.5))
    )

    assert "data-token='primary-500'" in markup
    assert "background: #3b82f6;" in markup
    assert "Primary &lt;brand&gt;" in markup
    assert "Contrast 4.5 / 4.5" in markup


def test_swatch_grid_wraps_every_colour() -> None:
    colors = [ColorEntry("glass-light-primary", "rgba(0,0,0,0.1)", "Glass"), ColorEntry("b", "#fff", "B")]

    markup = ui_blocks.swatch_grid(colors)

    assert markup.startswith("<div class='glass-swatch-grid'>")
    assert markup.count("class='glass-swatch'") == 2
    assert "Contrast" not in markup
