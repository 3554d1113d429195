"""Tests for the Jinja-backed template registry."""

from __future__ import annotations

import typing as typ

import pytest

from static_pages.errors import (
    RenderFailedError,
    TemplateNotFoundError,
    TemplateParseError,
)
from static_pages.generator import TemplateRegistry

if typ.TYPE_CHECKING:
    from pathlib import Path


def _template(tmp_path: Path, name: str, body: str) -> None:
    (tmp_path / f"{name}.template").write_text(body, encoding="utf-8")


def test_discovers_templates_by_stem(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _template(tmp_path, "special", "{{ name }}")
    _template(tmp_path, "default", "{{ content }}")
    (tmp_path / "hello.page").write_text("not a template", encoding="utf-8")

    registry = TemplateRegistry.from_directory(tmp_path)

    assert registry.names == ("default", "special")
    assert "default" in registry
    assert "hello" not in registry
    assert len(registry) == 2
    assert capsys.readouterr().out == "Reading templates:\n    default\n    special\n"


def test_renders_content_without_escaping(tmp_path: Path) -> None:
    _template(tmp_path, "default", "<main>{{ content }}</main>\n")
    registry = TemplateRegistry.from_directory(tmp_path)

    html = registry.render("default", {"content": "<p>Hi & bye</p>"})

    assert html == "<main><p>Hi & bye</p></main>\n"


def test_iterates_lists_and_mappings(tmp_path: Path) -> None:
    _template(
        tmp_path,
        "default",
        "{% for tag in tags %}[{{ tag }}]{% endfor %}"
        "{% for key, href in links|dictsort %}<{{ key }}={{ href }}>{% endfor %}"
        "{% if subtitle is defined %}{{ subtitle }}{% endif %}",
    )
    registry = TemplateRegistry.from_directory(tmp_path)

    html = registry.render(
        "default", {"tags": ["a", "b"], "links": {"home": "/", "about": "/about"}}
    )

    assert html == "[a][b]<about=/about><home=/>"


def test_syntax_error_raises_parse_error(tmp_path: Path) -> None:
    _template(tmp_path, "broken", "{% if title %}unterminated")
    with pytest.raises(TemplateParseError, match="broken.template"):
        TemplateRegistry.from_directory(tmp_path)


def test_missing_key_raises_render_failed(tmp_path: Path) -> None:
    _template(tmp_path, "default", "{{ title }}")
    registry = TemplateRegistry.from_directory(tmp_path)
    with pytest.raises(RenderFailedError, match="title"):
        registry.render("default", {})


def test_unknown_template_raises_not_found(tmp_path: Path) -> None:
    registry = TemplateRegistry.from_directory(tmp_path)
    with pytest.raises(TemplateNotFoundError, match="Template special not found."):
        registry.render("special", {})
