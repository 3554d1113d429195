"""Typed structures describing site configuration and build settings."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from static_pages._constants import MARKDOWN_COMMAND

ConfigValue: typ.TypeAlias = str | dict[str, str] | list[str]
"""A scalar, a string-to-string mapping, or an ordered list of strings."""

ConfigStore: typ.TypeAlias = typ.Mapping[str, ConfigValue]
"""Read-only mapping from config key to value, as shared across pages."""

PageStore: typ.TypeAlias = dict[str, ConfigValue]
"""Mutable per-page working copy of the configuration."""


@dc.dataclass(slots=True, frozen=True)
class SiteSettings:
    """Describe where a build reads from, writes to, and how it converts markup.

    Attributes
    ----------
    source_dir : Path
        Directory holding ``config.json``, ``*.template``, ``*.page`` and
        static assets.
    output_dir : Path
        Directory that receives the rendered site. Its top-level contents are
        removed before each build.
    markdown_command : str
        Executable used to convert page bodies into HTML.
    converter_timeout : float or None
        Seconds to wait for the markdown command per page; ``None`` waits
        indefinitely.
    """

    source_dir: Path = Path("src")
    output_dir: Path = Path("dst")
    markdown_command: str = MARKDOWN_COMMAND
    converter_timeout: float | None = None


__all__ = ["ConfigStore", "ConfigValue", "PageStore", "SiteSettings"]
