from __future__ import annotations

import pytest

from altfile.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_with_filters(renderer: TemplateRenderer):
    template = "defmodule {{ app|pascal }}Web.{{ name }} -> {{ name|snake }}_html"
    context = {"app": "my_app", "name": "UserProfile"}
    rendered = renderer.render_string(template, context)
    assert rendered == "defmodule MyAppWeb.UserProfile -> user_profile_html"


def test_filters_chain_left_to_right(renderer: TemplateRenderer):
    assert renderer.render_string("{{ name|snake|pascal }}", {"name": "DataImporter"}) == "DataImporter"


def test_missing_keys_render_empty(renderer: TemplateRenderer):
    assert renderer.render_string("Hello {{ missing|pascal }}!", {}) == "Hello !"


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|unknown }}", {"name": "demo"})


def test_custom_filters_replace_defaults():
    renderer = TemplateRenderer(filters={"shout": lambda value: f"{value}!"})
    assert renderer.render_string("{{ word|shout }}", {"word": "hey"}) == "hey!"
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ word|snake }}", {"word": "hey"})
