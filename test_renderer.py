"""
Tests for solution highlighting
"""
import pytest

import renderer
from config import Settings
from errors import RenderError
from renderer import SolutionRenderer, get_renderer


@pytest.fixture(autouse=True)
def reset_renderer(monkeypatch):
    monkeypatch.setattr(renderer, "_renderer", None)


def test_render_cpp_to_markup():
    markup = SolutionRenderer("cpp", "monokai").render("int main(){}")
    assert "<pre" in markup
    assert "main" in markup
    assert "style=" in markup


def test_render_escapes_html():
    markup = SolutionRenderer("cpp", "monokai").render('std::cout << "<b>";')
    assert "<b>" not in markup
    assert "&lt;" in markup


def test_unknown_language_is_render_error():
    with pytest.raises(RenderError):
        SolutionRenderer("no-such-language", "monokai")


def test_unknown_style_is_render_error():
    with pytest.raises(RenderError):
        SolutionRenderer("cpp", "no-such-style")


def test_renderer_is_shared():
    settings = Settings()
    assert get_renderer(settings) is get_renderer(settings)


def test_renderer_rebuilt_when_language_changes():
    first = get_renderer(Settings(highlight_language="cpp"))
    second = get_renderer(Settings(highlight_language="python"))
    assert first is not second
    assert second.language == "python"
