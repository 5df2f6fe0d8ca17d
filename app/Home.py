from pathlib import Path
import sys

if __package__ in {None, ""}:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)

from app.bootstrap import ensure_project_root

_PROJECT_ROOT = ensure_project_root(__file__)

__doc__ = """Streamlit entrypoint for the Glass UI style guide."""

from app.modules import style_guide, ui_blocks


def render_page() -> None:
    """Render every design system section."""

    ui_blocks.configure_page(page_title="Glass UI Design System", page_icon="🎨")
    style_guide.render_style_guide()


if __name__ == "__main__":  # pragma: no cover - Streamlit entrypoint
    render_page()
