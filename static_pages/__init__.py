"""A minimal static site generator.

Pages (``*.page``) are Markdown with optional directive lines that adjust a
per-page copy of ``config.json`` or select a template; each page is converted
to HTML, rendered through a named ``*.template``, and written to the output
directory next to verbatim copies of every other top-level source file.

Exports
-------
- ``app``: Cyclopts application behind the ``static`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SiteBuilder``: Programmatic entry point for a full build.

Examples
--------
>>> from static_pages import main
>>> main(["--src", "src", "--dst", "dst"])  # doctest: +SKIP
>>> from static_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main
from .site import SiteBuilder

__all__ = ["SiteBuilder", "app", "main"]
