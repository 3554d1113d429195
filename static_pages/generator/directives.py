r"""Scan page files for embedded directives.

A page is plain Markdown interleaved with line-anchored control lines that
adjust the page's configuration before it is rendered:

``---set <key> <value>``
    Assign ``value`` (the rest of the line) to ``key``.
``---setblock <key>`` ... ``---endblock``
    Assign every line between the markers, verbatim, to ``key``.
``---settemplate <name>``
    Render the page with template ``name`` instead of the default.

Keys and template names are lowercase ASCII letters only; a marker line with
any other key is ordinary body text. Directive lines never reach the body.

Example
-------
>>> result = scan_page(["---set title Hello\n", "Body\n"], {})
>>> result.store, result.body, result.template
({'title': 'Hello'}, 'Body\n', 'default')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

from static_pages._constants import DEFAULT_TEMPLATE, END_BLOCK_MARKER

if typ.TYPE_CHECKING:
    from static_pages.config import PageStore

SET_PATTERN = re.compile(r"---set ([a-z]+) (.*[^\r\n])\r?\n?")
SET_BLOCK_PATTERN = re.compile(r"---setblock ([a-z]+)\r?\n?")
SET_TEMPLATE_PATTERN = re.compile(r"---settemplate ([a-z]+)\r?\n?")


@dc.dataclass(frozen=True, slots=True)
class SetScalar:
    """``---set`` directive assigning a single-line value."""

    key: str
    value: str


@dc.dataclass(frozen=True, slots=True)
class SetBlock:
    """``---setblock`` directive assigning the collected block text."""

    key: str
    value: str


@dc.dataclass(frozen=True, slots=True)
class SetTemplate:
    """``---settemplate`` directive selecting the page template."""

    name: str


Directive: typ.TypeAlias = SetScalar | SetBlock | SetTemplate


@dc.dataclass(slots=True)
class ScanResult:
    """Outcome of scanning a single page.

    Attributes
    ----------
    body : str
        Every non-directive line in original order, terminators preserved.
    template : str
        Template selected by the last ``---settemplate`` directive, or the
        default template name.
    store : PageStore
        The page store passed to :func:`scan_page`, with directive values
        applied.
    directives : list[Directive]
        Directives encountered, in the order they were applied.
    """

    body: str
    template: str
    store: PageStore
    directives: list[Directive] = dc.field(default_factory=list)


def scan_page(
    lines: cabc.Iterable[str],
    store: PageStore,
    *,
    default_template: str = DEFAULT_TEMPLATE,
) -> ScanResult:
    """Apply directives found in ``lines`` to ``store`` and collect the body.

    Parameters
    ----------
    lines : Iterable[str]
        Page content split into lines with terminators kept, e.g. from
        iterating an ``io.StringIO`` or an open text file.
    store : PageStore
        Per-page configuration copy; mutated in place.
    default_template : str, optional
        Template name used when the page does not select one.

    Returns
    -------
    ScanResult
        Stripped body, chosen template, mutated store, and applied directives.
    """
    body: list[str] = []
    directives: list[Directive] = []
    template = default_template
    remaining = iter(lines)
    for line in remaining:
        directive = _match_directive(line, remaining)
        if directive is None:
            body.append(line)
            continue
        match directive:
            case SetScalar(key=key, value=value) | SetBlock(key=key, value=value):
                store[key] = value
            case SetTemplate(name=name):
                template = name
        directives.append(directive)
    return ScanResult(
        body="".join(body), template=template, store=store, directives=directives
    )


def parse_directive(line: str) -> Directive | None:
    r"""Classify a single line without consuming any block content.

    A ``---setblock`` opener comes back as a :class:`SetBlock` with an empty
    value; :func:`scan_page` fills it from the following lines. Body text
    yields ``None``.

    Examples
    --------
    >>> parse_directive("---set color blue\n")
    SetScalar(key='color', value='blue')
    >>> parse_directive("---setblock note\n")
    SetBlock(key='note', value='')
    >>> parse_directive("---set Color blue\n") is None
    True
    """
    if match := SET_PATTERN.fullmatch(line):
        return SetScalar(key=match.group(1), value=match.group(2))
    if match := SET_BLOCK_PATTERN.fullmatch(line):
        return SetBlock(key=match.group(1), value="")
    if match := SET_TEMPLATE_PATTERN.fullmatch(line):
        return SetTemplate(name=match.group(1))
    return None


def _match_directive(line: str, remaining: cabc.Iterator[str]) -> Directive | None:
    """Return the directive on ``line``, reading a block body from ``remaining``."""
    parsed = parse_directive(line)
    if isinstance(parsed, SetBlock):
        return dc.replace(parsed, value=_collect_block(remaining))
    return parsed


def _collect_block(remaining: cabc.Iterator[str]) -> str:
    """Consume lines up to the end marker; end of input closes the block."""
    collected: list[str] = []
    for line in remaining:
        if line.removesuffix("\n").removesuffix("\r") == END_BLOCK_MARKER:
            break
        collected.append(line)
    return "".join(collected)


__all__ = [
    "Directive",
    "ScanResult",
    "SetBlock",
    "SetScalar",
    "SetTemplate",
    "parse_directive",
    "scan_page",
]
