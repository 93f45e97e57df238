"""Render bundled Jinja2 templates."""

from pathlib import Path

import jinja2

_TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_string(source: str, **kwargs) -> str:
    """Render Jinja2 template source, keeping its trailing newline."""
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)


def render_template(template_name: str, **kwargs) -> str:
    """Load a template from src/wyside/templates/ and render it.

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    template_path = _TEMPLATES_DIR / template_name
    if not template_path.is_file():
        raise FileNotFoundError(f"Template not found: {template_path}")
    return render_string(template_path.read_text(encoding="utf-8"), **kwargs)
