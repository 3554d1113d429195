"""Per-page orchestration: clone, scan, convert, render, write.

:class:`PageProcessor` holds the read-only state shared by every page of a
build (the base store, the template registry, and the markup converter) and
turns one ``.page`` file into one HTML file. Each call works on its own clone of
the base store, so pages never observe each other's directives.

Example
-------
>>> from pathlib import Path
>>> from static_pages.config import load_site_config
>>> from static_pages.generator import (
...     ExternalMarkdownConverter,
...     PageProcessor,
...     TemplateRegistry,
... )
>>> processor = PageProcessor(
...     load_site_config(Path("src")),
...     TemplateRegistry.from_directory(Path("src")),
...     ExternalMarkdownConverter(),
... )  # doctest: +SKIP
>>> processor.process("hello", Path("src/hello.page"), Path("dst/hello.html"))  # doctest: +SKIP
PosixPath('dst/hello.html')
"""

from __future__ import annotations

import typing as typ

from static_pages._constants import CONTENT_KEY, DEFAULT_TEMPLATE, NAME_KEY
from static_pages.config import clone_config
from static_pages.errors import (
    DestinationWriteError,
    SourceReadError,
    TemplateNotFoundError,
)
from static_pages.generator.directives import ScanResult, SetTemplate, scan_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from static_pages.generator.converter import MarkupConverter
    from static_pages.generator.renderer import TemplateRenderer


class PageProcessor:
    """Render individual pages against shared configuration and templates."""

    def __init__(
        self,
        base_store: typ.Mapping[str, object],
        templates: TemplateRenderer,
        converter: MarkupConverter,
        *,
        default_template: str = DEFAULT_TEMPLATE,
    ) -> None:
        """Initialize the processor.

        Parameters
        ----------
        base_store : Mapping[str, object]
            Site-wide configuration; cloned, never mutated.
        templates : TemplateRenderer
            Registry of named templates.
        converter : MarkupConverter
            Transform applied to each page body.
        default_template : str, optional
            Template used by pages without a ``---settemplate`` directive.
        """
        self.base_store = base_store
        self.templates = templates
        self.converter = converter
        self.default_template = default_template

    def process(self, name: str, source: Path, destination: Path) -> Path:
        """Render the page at ``source`` into ``destination``.

        Parameters
        ----------
        name : str
            Page identity, exposed to templates as ``name``.
        source : Path
            Page file to read.
        destination : Path
            HTML file to create or replace.

        Returns
        -------
        Path
            The written ``destination``.

        Raises
        ------
        TypeMismatchError
            If the base store holds an unsupported value shape.
        SourceReadError
            If ``source`` cannot be read.
        ConversionFailedError
            If the converter fails on the page body.
        TemplateNotFoundError
            If the selected template is not registered; nothing is written.
        RenderFailedError
            If the template fails to render.
        DestinationWriteError
            If ``destination`` cannot be written.
        """
        scanned = self.scan(source)
        content = self.converter.convert(scanned.body)
        if scanned.template not in self.templates:
            raise TemplateNotFoundError(scanned.template)

        context = scanned.store
        context[NAME_KEY] = name
        context[CONTENT_KEY] = content
        html = self.templates.render(scanned.template, context)

        try:
            destination.write_text(html, encoding="utf-8")
        except OSError as exc:
            msg = f"Unable to write '{destination}': {exc}"
            raise DestinationWriteError(msg) from exc
        return destination

    def scan(self, source: Path) -> ScanResult:
        r"""Read ``source`` and apply its directives to a fresh page store.

        Lines are split on ``\n`` only and keep their original terminators.
        """
        store = clone_config(self.base_store)
        try:
            with source.open(encoding="utf-8", newline="\n") as handle:
                scanned = scan_page(
                    handle, store, default_template=self.default_template
                )
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read page '{source}': {exc}"
            raise SourceReadError(msg) from exc

        for directive in scanned.directives:
            if isinstance(directive, SetTemplate):
                print(f"Setting template: {directive.name}")
        return scanned


__all__ = ["PageProcessor"]
