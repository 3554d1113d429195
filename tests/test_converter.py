"""Tests for the markdown converters.

``ExternalMarkdownConverter`` is exercised both with ``subprocess.run`` stubbed
out and against a throwaway shell script standing in for ``markdown``, so no
real markdown tool needs to be installed.
"""

from __future__ import annotations

import os
import subprocess
import typing as typ
from types import SimpleNamespace

import pytest

from static_pages.errors import ConversionFailedError, MissingConverterError
from static_pages.generator import converter as converter_module
from static_pages.generator import ExternalMarkdownConverter, PythonMarkdownConverter

if typ.TYPE_CHECKING:
    from pathlib import Path

posix_only = pytest.mark.skipif(os.name != "posix", reason="needs /bin/sh")


def _script(tmp_path: Path, name: str, body: str) -> Path:
    """Write an executable shell script and return its path."""
    path = tmp_path / name
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(0o755)
    return path


def test_check_reports_missing_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(converter_module.shutil, "which", lambda _name: None)
    converter = ExternalMarkdownConverter("markdown")
    with pytest.raises(MissingConverterError, match="'markdown' not found"):
        converter.check()


def test_check_caches_resolved_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    lookups: list[str] = []

    def fake_which(name: str) -> str:
        lookups.append(name)
        return f"/usr/bin/{name}"

    monkeypatch.setattr(converter_module.shutil, "which", fake_which)
    converter = ExternalMarkdownConverter("markdown")
    assert converter.check() == "/usr/bin/markdown"
    assert converter.check() == "/usr/bin/markdown"
    assert lookups == ["markdown"]


def test_convert_pipes_body_through_command(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, typ.Any]] = []

    def fake_run(args: list[str], **kwargs: typ.Any) -> SimpleNamespace:
        calls.append({"args": args, **kwargs})
        return SimpleNamespace(stdout="<p>Body</p>\n", returncode=0)

    monkeypatch.setattr(converter_module.shutil, "which", lambda name: f"/bin/{name}")
    monkeypatch.setattr(converter_module.subprocess, "run", fake_run)

    html = ExternalMarkdownConverter(timeout=5).convert("Body\n")

    assert html == "<p>Body</p>\n"
    assert calls[0]["args"] == ["/bin/markdown"]
    assert calls[0]["input"] == "Body\n"
    assert calls[0]["timeout"] == 5
    assert calls[0]["check"] is True


@pytest.mark.parametrize(
    "error",
    [
        subprocess.CalledProcessError(2, ["markdown"], stderr="boom"),
        subprocess.TimeoutExpired(["markdown"], 5),
        OSError("exec format error"),
    ],
)
def test_convert_wraps_process_failures(
    monkeypatch: pytest.MonkeyPatch, error: Exception
) -> None:
    def fake_run(*_args: object, **_kwargs: object) -> None:
        raise error

    monkeypatch.setattr(converter_module.shutil, "which", lambda name: f"/bin/{name}")
    monkeypatch.setattr(converter_module.subprocess, "run", fake_run)

    with pytest.raises(ConversionFailedError) as excinfo:
        ExternalMarkdownConverter().convert("Body\n")
    assert excinfo.value.__cause__ is error


@posix_only
def test_convert_runs_real_process(tmp_path: Path) -> None:
    script = _script(tmp_path, "fake-markdown", "printf '<p>'; cat; printf '</p>'")
    converter = ExternalMarkdownConverter(str(script))
    assert converter.convert("Body **text**") == "<p>Body **text**</p>"


@posix_only
def test_convert_reports_non_zero_exit(tmp_path: Path) -> None:
    script = _script(tmp_path, "broken-markdown", "echo 'bad input' >&2; exit 3")
    converter = ExternalMarkdownConverter(str(script))
    with pytest.raises(ConversionFailedError, match="bad input"):
        converter.convert("Body\n")


def test_python_converter_renders_markdown() -> None:
    html = PythonMarkdownConverter().convert("Body **text**\n")
    assert html == "<p>Body <strong>text</strong></p>\n"


def test_python_converter_highlights_fenced_code() -> None:
    html = PythonMarkdownConverter().convert("```python\nprint('hi')\n```\n")
    assert 'class="codehilite"' in html


def test_python_converter_returns_empty_for_blank_body() -> None:
    assert PythonMarkdownConverter().convert("  \n\n") == ""
