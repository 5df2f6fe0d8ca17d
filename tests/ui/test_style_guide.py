from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path

import pytest

from app.modules import design_system_docs as docs
from app.modules import style_guide

HOME_PAGE = Path(__file__).resolve().parents[2] / "app" / "Home.py"


class _RecordingStreamlit:
    """Collects Streamlit calls made by the style-guide renderers."""

    def __init__(self, choice: str = style_guide.ALL_SECTIONS) -> None:
        self.calls: list[tuple[str, object]] = []
        self.sidebar = self
        self._choice = choice

    def __getattr__(self, name: str):
        def _record(*args, **kwargs):
            self.calls.append((name, args[0] if args else None))

        return _record

    def radio(self, label, options, index=0):
        self.calls.append(("radio", list(options)))
        return self._choice

    @contextmanager
    def expander(self, label):
        self.calls.append(("expander", label))
        yield self

    def names(self, kind: str) -> list[object]:
        return [payload for name, payload in self.calls if name == kind]


@pytest.fixture
def fake_st(monkeypatch):
    recorder = _RecordingStreamlit()
    monkeypatch.setattr(style_guide, "st", recorder)
    monkeypatch.setattr(style_guide.ui_blocks, "load_theme", lambda: None)
    return recorder


def test_render_style_guide_draws_every_section(fake_st) -> None:
    style_guide.render_style_guide()

    headers = fake_st.names("header")
    assert headers == [section.title for section in docs.DESIGN_SYSTEM_SECTIONS]
    assert fake_st.names("radio")[0][0] == style_guide.ALL_SECTIONS
    # shadows + duration + easing tables, typography and spacing scales
    assert len(fake_st.names("dataframe")) == 5
    assert fake_st.names("expander") == ["Example: Glass card"]


def test_render_style_guide_filters_selected_section(monkeypatch) -> None:
    recorder = _RecordingStreamlit(choice="Shadow System")
    monkeypatch.setattr(style_guide, "st", recorder)
    monkeypatch.setattr(style_guide.ui_blocks, "load_theme", lambda: None)

    style_guide.render_style_guide()

    assert recorder.names("header") == ["Shadow System"]
    assert recorder.names("subheader") == ["Shadow Philosophy", "Shadow Tokens"]


def test_render_block_renders_code(fake_st) -> None:
    style_guide.render_block(docs.CodeContent(content=".a {}", title="CSS"))

    assert fake_st.names("subheader") == ["CSS"]
    assert fake_st.names("code") == [".a {}"]


def test_render_block_rejects_unknown_types(fake_st) -> None:
    with pytest.raises(ValueError):
        style_guide.render_block(docs.TextContent(content="x", type="audio"))  # type: ignore[arg-type]


def test_select_sections() -> None:
    sections = docs.DESIGN_SYSTEM_SECTIONS

    assert style_guide.select_sections(sections, style_guide.ALL_SECTIONS) == sections
    assert [s.id for s in style_guide.select_sections(sections, "Typography")] == ["typography"]
    assert style_guide.select_sections(sections, "Unknown") == []


def test_home_page_renders_without_errors() -> None:
    from streamlit.testing.v1 import AppTest

    app = AppTest.from_file(str(HOME_PAGE), default_timeout=30)
    app.run()

    assert not app.exception
    assert app.title[0].value == "Glass UI Design System"
    assert [header.value for header in app.header] == [
        section.title for section in docs.DESIGN_SYSTEM_SECTIONS
    ]


def test_render_typography_escapes_scale_text(fake_st) -> None:
    block = docs.TypographyScaleContent(
        content=docs.TypographyDoc(
            name="Typography Scale",
            description="",
            scales=(docs.TypographyEntry("<b>", "1rem", "1.5", "0", "Body & <i>notes</i>"),),
        )
    )

    style_guide.render_block(block)

    markup = fake_st.names("markdown")[0]
    assert "&lt;b&gt;: Body &amp; &lt;i&gt;notes&lt;/i&gt;" in markup
    assert "<i>" not in markup
