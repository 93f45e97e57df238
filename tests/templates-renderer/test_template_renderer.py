"""Tests for the Jinja2 template renderer."""

import pytest

from wyside.template_renderer import render_string, render_template


@pytest.mark.unit
class TestRenderString:

    def test_substitutes_variables(self):
        assert render_string("Hello {{ name }}", name="world") == "Hello world"

    def test_keeps_trailing_newline(self):
        assert render_string("x\n") == "x\n"


@pytest.mark.unit
class TestRenderTemplate:

    def test_next_steps_mentions_title(self):
        text = render_template("next-steps.j2", title="My Project", ui_framework=None, ui_framework_label=None)
        assert "My Project" in text
        assert "npm run deploy" in text
        assert "UI dependencies" not in text

    def test_next_steps_reminds_ui_install(self):
        text = render_template(
            "next-steps.j2", title="x", ui_framework="svelte", ui_framework_label="Svelte",
        )
        assert "install all the Svelte UI dependencies" in text

    def test_missing_template_raises(self):
        with pytest.raises(FileNotFoundError):
            render_template("nope.j2")
