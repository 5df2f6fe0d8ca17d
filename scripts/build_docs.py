"""Generate the design system documentation from the token source of truth."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence


def _ensure_project_root() -> Path:
    """Ensure the repository root is available on ``sys.path`` when run as a script."""

    module_path = Path(__file__).resolve()
    root = module_path.parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)
    return root


_ensure_project_root()

from app.modules import paths
from app.modules.design_system_docs import DesignSystemSection, build_design_system_sections
from app.modules.docs_renderer import docs_to_dict, render_markdown

LOGGER = logging.getLogger("scripts.build_docs")

FORMATS = ("markdown", "json")


def render(sections: Sequence[DesignSystemSection], output_format: str) -> str:
    if output_format == "json":
        return json.dumps(docs_to_dict(sections), indent=2) + "\n"
    return render_markdown(sections)


def default_output(output_format: str) -> Path:
    return paths.JSON_DOC if output_format == "json" else paths.MARKDOWN_DOC


def write_docs(content: str, output: Path) -> Path:
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Could not write documentation to {output}: {exc}") from exc
    return output


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="markdown",
        help="Output format (default: markdown).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination file. Defaults to docs/design-system.md (or .json).",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the documentation instead of writing a file.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sections = build_design_system_sections()
    content = render(sections, args.format)
    if args.stdout:
        sys.stdout.write(content)
        return 0

    output = write_docs(content, args.output or default_output(args.format))
    LOGGER.info("Wrote %d sections to %s", len(sections), output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
