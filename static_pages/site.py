"""Whole-site build pipeline.

:class:`SiteBuilder` performs one full regeneration of the output directory:
it verifies the markdown converter, loads ``config.json`` and the templates,
clears previous output, renders every ``*.page`` file through
:class:`~static_pages.generator.PageProcessor`, and copies the remaining
top-level files verbatim. The first error aborts the build; output already
written is left in place.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from static_pages.config import SiteSettings
>>> builder = SiteBuilder(SiteSettings(Path("src"), Path("dst")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('dst/hello.html'), PosixPath('dst/style.css')]
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path

from ._constants import CONFIG_FILENAME, OUTPUT_SUFFIX, PAGE_SUFFIX, TEMPLATE_SUFFIX
from .config import SiteSettings, load_site_config
from .errors import DestinationWriteError, SourceReadError
from .generator import ExternalMarkdownConverter, PageProcessor, TemplateRegistry

if typ.TYPE_CHECKING:
    from .generator import MarkupConverter


class SiteBuilder:
    """Render a source directory into a static site."""

    def __init__(
        self,
        settings: SiteSettings | None = None,
        *,
        converter: MarkupConverter | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        settings : SiteSettings, optional
            Source/output locations and converter options. Defaults to
            ``src`` and ``dst`` in the working directory.
        converter : MarkupConverter, optional
            Converter for page bodies. Defaults to an
            :class:`~static_pages.generator.ExternalMarkdownConverter` running
            ``settings.markdown_command``.
        """
        self.settings = settings or SiteSettings()
        self.converter = converter or ExternalMarkdownConverter(
            self.settings.markdown_command, timeout=self.settings.converter_timeout
        )

    @property
    def source_dir(self) -> Path:
        return self.settings.source_dir

    @property
    def output_dir(self) -> Path:
        return self.settings.output_dir

    def run(self) -> list[Path]:
        """Build the site and return every written path.

        Returns
        -------
        list[Path]
            Rendered pages in page-name order, followed by copied static files.

        Raises
        ------
        StaticSiteError
            Any subclass, raised by the first failing stage.
        """
        print("Running static...")
        if isinstance(self.converter, ExternalMarkdownConverter):
            self.converter.check()
        base_store = load_site_config(self.source_dir)
        templates = TemplateRegistry.from_directory(self.source_dir)
        self.clear_output()

        processor = PageProcessor(base_store, templates, self.converter)
        written = self.process_pages(processor)
        written.extend(self.copy_statics())
        return written

    def process_pages(self, processor: PageProcessor) -> list[Path]:
        """Render each ``*.page`` file into ``<output_dir>/<name>.html``."""
        print("Processing pages:")
        written: list[Path] = []
        for path in self._page_paths():
            name = path.name.removesuffix(PAGE_SUFFIX)
            print(f"    {name}")
            destination = self.output_dir / f"{name}{OUTPUT_SUFFIX}"
            written.append(processor.process(name, path, destination))
        return written

    def clear_output(self) -> None:
        """Remove every top-level entry of the output directory.

        The directory is created when missing. Refuses to clear a directory
        that is, or contains, the source directory.
        """
        print("Removing any previous output.")
        output_dir = self.output_dir
        if self.source_dir.resolve().is_relative_to(output_dir.resolve()):
            msg = (
                f"Output directory '{output_dir}' contains the source directory "
                f"'{self.source_dir}'."
            )
            raise DestinationWriteError(msg)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for entry in sorted(output_dir.iterdir()):
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
        except OSError as exc:
            msg = f"Unable to clear output directory '{output_dir}': {exc}"
            raise DestinationWriteError(msg) from exc

    def copy_statics(self) -> list[Path]:
        """Copy top-level files that are not pages, templates, or the config."""
        written: list[Path] = []
        for path in self._static_paths():
            destination = self.output_dir / path.name
            if destination.exists() and destination.resolve() == path.resolve():
                continue
            try:
                data = path.read_bytes()
            except OSError as exc:
                msg = f"Unable to read static file '{path}': {exc}"
                raise SourceReadError(msg) from exc
            try:
                destination.write_bytes(data)
            except OSError as exc:
                msg = f"Unable to write '{destination}': {exc}"
                raise DestinationWriteError(msg) from exc
            written.append(destination)
        return written

    def _page_paths(self) -> list[Path]:
        return sorted(
            path
            for path in self.source_dir.glob(f"*{PAGE_SUFFIX}")
            if path.is_file()
        )

    def _static_paths(self) -> list[Path]:
        return sorted(
            path
            for path in self.source_dir.iterdir()
            if path.is_file() and not _is_site_input(path)
        )


def _is_site_input(path: Path) -> bool:
    """Return whether ``path`` is a page, a template, or the config document."""
    return (
        path.name.endswith((PAGE_SUFFIX, TEMPLATE_SUFFIX))
        or path.name == CONFIG_FILENAME
    )


__all__ = ["SiteBuilder"]
