"""Unit tests for TemplateRenderer."""

from __future__ import annotations

import pytest

from flowsmith.exceptions import SnippetRenderError
from flowsmith.models import WorkflowActivity
from flowsmith.snippets import TemplateRenderer


class TestIsTemplate:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("send.json.j2", True),
            ("send.json.J2", True),
            ("send.jinja", True),
            ("send.json", False),
            ("send", False),
        ],
    )
    def test_default_extensions(self, path: str, expected: bool) -> None:
        assert TemplateRenderer().is_template(path) is expected

    def test_custom_extensions(self) -> None:
        renderer = TemplateRenderer([".LIQUID"])

        assert renderer.is_template("send.liquid")
        assert not renderer.is_template("send.json.j2")


class TestRender:
    def test_renders_workflow_object_attributes(self) -> None:
        activity = WorkflowActivity(name="Send", type="Send", properties={"UniqueId": 3})

        text = TemplateRenderer().render(
            '{"{{ workflow_object.name }}_{{ workflow_object.properties.UniqueId }}": {}}',
            {"workflow_object": activity},
        )

        assert text == '{"Send_3": {}}'

    def test_no_html_escaping(self) -> None:
        text = TemplateRenderer().render('"{{ value }}"', {"value": "<a & b>"})

        assert text == '"<a & b>"'

    def test_keeps_trailing_newline(self) -> None:
        assert TemplateRenderer().render("{}\n", {}) == "{}\n"

    def test_syntax_error_raises_snippet_render_error(self) -> None:
        with pytest.raises(SnippetRenderError) as exc_info:
            TemplateRenderer().render("{{ unclosed", {}, template_file="bad.json.j2")

        assert exc_info.value.template_file == "bad.json.j2"

    def test_runtime_error_raises_snippet_render_error(self) -> None:
        with pytest.raises(SnippetRenderError):
            TemplateRenderer().render("{{ missing.attr.deeper }}", {})
