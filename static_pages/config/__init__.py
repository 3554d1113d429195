"""Load the site configuration document and clone it per page.

The base store is decoded once from ``config.json`` by :func:`load_site_config`
and stays read-only for the rest of the build. Each page works on its own copy
produced by :func:`clone_config`, which also enforces that every value is a
string, an object of strings, or an array of strings.

Examples
--------
>>> from pathlib import Path
>>> from static_pages.config import clone_config, load_site_config
>>> base = load_site_config(Path("src"))  # doctest: +SKIP
>>> page_store = clone_config(base)  # doctest: +SKIP
"""

from .loader import load_site_config
from .models import ConfigStore, ConfigValue, PageStore, SiteSettings
from .store import clone_config

__all__ = [
    "ConfigStore",
    "ConfigValue",
    "PageStore",
    "SiteSettings",
    "clone_config",
    "load_site_config",
]
