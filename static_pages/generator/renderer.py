"""Template discovery and rendering for page output.

Templates are the ``*.template`` files at the top of the source directory; the
filename stem is the name pages select with ``---settemplate``. They use Jinja2
syntax and are rendered with ``StrictUndefined`` so a reference to a key the
page never defined fails the build instead of producing blank output.
"""

from __future__ import annotations

import typing as typ

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateSyntaxError,
    select_autoescape,
)

from static_pages._constants import TEMPLATE_SUFFIX
from static_pages.errors import (
    RenderFailedError,
    TemplateNotFoundError,
    TemplateParseError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class TemplateRenderer(typ.Protocol):
    """Render a named template against a context mapping."""

    def __contains__(self, name: object) -> bool:
        """Return whether a template called ``name`` is registered."""
        ...

    def render(self, name: str, context: cabc.Mapping[str, typ.Any]) -> str:
        """Return the rendered output of template ``name``."""
        ...


class TemplateRegistry:
    """Read-only mapping from template name to parsed Jinja template."""

    def __init__(self, templates: cabc.Mapping[str, Template]) -> None:
        self._templates = dict(templates)

    @classmethod
    def from_directory(cls, source_dir: Path) -> TemplateRegistry:
        """Parse every ``*.template`` file directly inside ``source_dir``.

        Parameters
        ----------
        source_dir : Path
            Site source directory.

        Returns
        -------
        TemplateRegistry
            Registry keyed by template filename stem.

        Raises
        ------
        TemplateParseError
            If a template has a syntax error or cannot be read.
        """
        print("Reading templates:")
        env = Environment(
            loader=FileSystemLoader(str(source_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        templates: dict[str, Template] = {}
        for path in sorted(source_dir.glob(f"*{TEMPLATE_SUFFIX}")):
            if not path.is_file():
                continue
            name = path.name.removesuffix(TEMPLATE_SUFFIX)
            print(f"    {name}")
            try:
                templates[name] = env.get_template(path.name)
            except TemplateSyntaxError as exc:
                msg = f"Template '{path}' line {exc.lineno}: {exc.message}"
                raise TemplateParseError(msg) from exc
            except (TemplateError, OSError, UnicodeDecodeError) as exc:
                msg = f"Unable to load template '{path}': {exc}"
                raise TemplateParseError(msg) from exc
        return cls(templates)

    @property
    def names(self) -> tuple[str, ...]:
        """Return the registered template names in sorted order."""
        return tuple(sorted(self._templates))

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def render(self, name: str, context: cabc.Mapping[str, typ.Any]) -> str:
        """Render template ``name`` with ``context``.

        Raises
        ------
        TemplateNotFoundError
            If no template called ``name`` is registered.
        RenderFailedError
            If template execution fails, e.g. on an undefined key.
        """
        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFoundError(name)
        try:
            return template.render(context)
        except (TemplateError, TypeError, ValueError) as exc:
            msg = f"Rendering template '{name}' failed: {exc}"
            raise RenderFailedError(msg) from exc


__all__ = ["TemplateRegistry", "TemplateRenderer"]
