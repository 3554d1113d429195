"""Common literal values used across static_pages.

These constants keep source filenames, directive markers and reserved context
keys centralized so the scanner, the site builder, and tests can import the
same values without drifting. Intended for internal use within the
static_pages package.

Examples
--------
>>> from static_pages import _constants
>>> f"hello{_constants.PAGE_SUFFIX}"
'hello.page'
>>> _constants.DEFAULT_TEMPLATE
'default'
"""

CONFIG_FILENAME = "config.json"
PAGE_SUFFIX = ".page"
TEMPLATE_SUFFIX = ".template"
OUTPUT_SUFFIX = ".html"

DEFAULT_TEMPLATE = "default"
MARKDOWN_COMMAND = "markdown"

END_BLOCK_MARKER = "---endblock"

NAME_KEY = "name"
CONTENT_KEY = "content"
