"""Load the site-wide ``config.json`` document into the base store."""

from __future__ import annotations

import types
import typing as typ

import msgspec
import msgspec.json as msgspec_json

from static_pages._constants import CONFIG_FILENAME
from static_pages.errors import ConfigLoadError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(source_dir: Path) -> typ.Mapping[str, object]:
    """Read ``config.json`` from ``source_dir`` and return the base store.

    Parameters
    ----------
    source_dir : Path
        Site source directory containing the configuration document.

    Returns
    -------
    Mapping[str, object]
        Read-only view over the decoded top-level JSON object. Values are
        returned as decoded; shape validation happens when each page clones the
        store.

    Raises
    ------
    ConfigLoadError
        If the file is missing or unreadable, is not valid JSON, or its top
        level is not an object.

    Examples
    --------
    >>> from pathlib import Path
    >>> base = load_site_config(Path("src"))  # doctest: +SKIP
    Reading config.
    >>> base["title"]  # doctest: +SKIP
    'Site'
    """
    print("Reading config.")
    path = source_dir / CONFIG_FILENAME
    try:
        payload = path.read_bytes()
    except OSError as exc:
        msg = f"Unable to read configuration file '{path}': {exc}"
        raise ConfigLoadError(msg) from exc

    try:
        loaded = msgspec_json.decode(payload)
    except msgspec.DecodeError as exc:
        msg = f"Configuration file '{path}' is not valid JSON: {exc}"
        raise ConfigLoadError(msg) from exc

    if not isinstance(loaded, dict):
        msg = f"Configuration file '{path}' must contain a JSON object."
        raise ConfigLoadError(msg)
    return types.MappingProxyType(loaded)


__all__ = ["load_site_config"]
