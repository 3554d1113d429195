"""Utilities for scanning, converting, and rendering static site pages."""

from .converter import ExternalMarkdownConverter, MarkupConverter, PythonMarkdownConverter
from .directives import (
    Directive,
    ScanResult,
    SetBlock,
    SetScalar,
    SetTemplate,
    parse_directive,
    scan_page,
)
from .page_generator import PageProcessor
from .renderer import TemplateRegistry, TemplateRenderer

__all__ = [
    "Directive",
    "ExternalMarkdownConverter",
    "MarkupConverter",
    "PageProcessor",
    "PythonMarkdownConverter",
    "ScanResult",
    "SetBlock",
    "SetScalar",
    "SetTemplate",
    "TemplateRegistry",
    "TemplateRenderer",
    "parse_directive",
    "scan_page",
]
