"""Utilities for rendering course pages and writing the static site."""

from .link_rewriter import CourseLinkExtension
from .models import PageModel
from .page_generator import CourseSiteGenerator, index_href, stylesheet_hrefs
from .renderer import HtmlContentRenderer

__all__ = [
    "CourseLinkExtension",
    "CourseSiteGenerator",
    "HtmlContentRenderer",
    "PageModel",
    "index_href",
    "stylesheet_hrefs",
]
