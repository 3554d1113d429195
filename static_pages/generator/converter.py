"""Markup converters that turn page bodies into HTML.

Two implementations share the :class:`MarkupConverter` protocol:

* :class:`ExternalMarkdownConverter` pipes each body through a ``markdown``
  executable found on ``PATH``, one isolated process per page.
* :class:`PythonMarkdownConverter` renders in-process with Python-Markdown and
  Pygments code highlighting.

The page processor only ever calls ``convert``; the site builder calls
``check`` on external converters before any output is touched.
"""

from __future__ import annotations

import shutil
import subprocess
import typing as typ

from markdown import Markdown

from static_pages._constants import MARKDOWN_COMMAND
from static_pages.errors import ConversionFailedError, MissingConverterError


class MarkupConverter(typ.Protocol):
    """Transform a page body into HTML."""

    def convert(self, text: str) -> str:
        """Return the HTML rendering of ``text``."""
        ...


class ExternalMarkdownConverter:
    """Run an external markdown command over stdin/stdout."""

    def __init__(
        self, command: str = MARKDOWN_COMMAND, *, timeout: float | None = None
    ) -> None:
        """Initialize the converter.

        Parameters
        ----------
        command : str, optional
            Executable name or path; resolved against ``PATH`` by :meth:`check`.
        timeout : float or None, optional
            Seconds to wait for each conversion; ``None`` waits indefinitely.
        """
        self.command = command
        self.timeout = timeout
        self._executable: str | None = None

    def check(self) -> str:
        """Resolve the command on ``PATH`` and return its location.

        Raises
        ------
        MissingConverterError
            If the command cannot be found.
        """
        if self._executable is None:
            found = shutil.which(self.command)
            if not found:
                msg = f"Markdown command '{self.command}' not found on PATH."
                raise MissingConverterError(msg)
            self._executable = found
        return self._executable

    def convert(self, text: str) -> str:
        """Pipe ``text`` through the command and return its standard output.

        Raises
        ------
        MissingConverterError
            If the command cannot be found.
        ConversionFailedError
            If the process cannot start, exits non-zero, or times out.
        """
        executable = self.check()
        try:
            result = subprocess.run(  # noqa: S603
                [executable],
                input=text,
                capture_output=True,
                check=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            msg = f"Markdown command '{self.command}' failed: {detail}"
            raise ConversionFailedError(msg) from exc
        except subprocess.TimeoutExpired as exc:
            msg = f"Markdown command '{self.command}' timed out after {exc.timeout}s"
            raise ConversionFailedError(msg) from exc
        except OSError as exc:
            msg = f"Unable to run markdown command '{self.command}': {exc}"
            raise ConversionFailedError(msg) from exc
        return result.stdout


class PythonMarkdownConverter:
    """Render markdown in-process with consistent code highlighting."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style

    def convert(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text) + "\n"


__all__ = [
    "ExternalMarkdownConverter",
    "MarkupConverter",
    "PythonMarkdownConverter",
]
