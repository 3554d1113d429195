"""Cyclopts CLI entrypoint for building a static site.

The ``static`` console script defined here regenerates the output directory
from a source directory of ``*.page`` files, ``*.template`` files, and a
``config.json`` document. Page bodies are converted by the ``markdown``
command, which must be on ``PATH``. Both directories can also be supplied
through the ``INPUT_SRC`` and ``INPUT_DST`` environment variables.

Examples
--------
Build ``src`` into ``dst``:

>>> from static_pages.cli import main
>>> main()  # doctest: +SKIP

Build a different tree:

>>> main(["--src", "site", "--dst", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteSettings
from .errors import StaticSiteError
from .site import SiteBuilder

DEFAULT_SOURCE_DIR = Path("src")
DEFAULT_OUTPUT_DIR = Path("dst")

app = App(name="static", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build(
    *,
    src: typ.Annotated[
        Path, Parameter(help="directory where to find the source files")
    ] = DEFAULT_SOURCE_DIR,
    dst: typ.Annotated[
        Path, Parameter(help="directory to write the output to")
    ] = DEFAULT_OUTPUT_DIR,
) -> None:
    """Regenerate ``dst`` from the pages, templates, and assets in ``src``.

    Parameters
    ----------
    src : Path, optional
        Source directory; defaults to ``src``.
    dst : Path, optional
        Output directory; its top-level contents are removed before the
        build. Defaults to ``dst``.

    Raises
    ------
    StaticSiteError
        If any stage of the build fails.
    """
    builder = SiteBuilder(SiteSettings(source_dir=src, output_dir=dst))
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``static`` command.

    Parameters
    ----------
    tokens : list[str] or None, optional
        Command-line arguments; ``None`` reads ``sys.argv``.

    Raises
    ------
    SystemExit
        With status 1 after reporting a build error on stderr.
    """
    try:
        app(tokens)
    except StaticSiteError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
