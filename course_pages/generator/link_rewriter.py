"""Helpers for rewriting relative links between course sources."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from course_pages.frontmatter import Page
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    Page = typ.Any


def _build_link_rewriter(
    page: Page, link_map: cabc.Mapping[str, str]
) -> Extension | None:
    """Return a CourseLinkExtension resolving links relative to ``page``."""
    if not link_map:
        return None
    base_dir = posixpath.dirname(page.identifier)
    return CourseLinkExtension(link_map, base_dir)


class CourseLinkExtension(Extension):
    """Rewrite links to other course sources into generated page URLs.

    Lecture notebooks and exercise pages refer to each other by source path
    (``../exercises/exercise_9_debugging.jl``). Once rendered, those links
    must point at the generated HTML under the site root instead. Links that
    do not name a known source are left as written.
    """

    def __init__(self, link_map: cabc.Mapping[str, str], base_dir: str) -> None:
        self.link_map = dict(link_map)
        self.base_dir = base_dir

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the course-link treeprocessor on the Markdown instance."""
        processor = CourseLinkTreeprocessor(md, self.link_map, self.base_dir)
        md.treeprocessors.register(processor, "course_links", 15)


class CourseLinkTreeprocessor(Treeprocessor):
    """Point relative anchors at the generated pages they refer to."""

    def __init__(
        self, md: Markdown, link_map: cabc.Mapping[str, str], base_dir: str
    ) -> None:
        super().__init__(md)
        self.link_map = link_map
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter():
            if element.tag == "a":
                rewritten = self._rewrite(element.get("href"))
                if rewritten:
                    element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the generated URL for ``target`` or None to leave it alone."""
        if not target or target.startswith(("#", "/")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path:
            return None
        joined = posixpath.normpath(posixpath.join(self.base_dir, parsed.path))
        href = self.link_map.get(joined)
        if href is None:
            return None
        if parsed.fragment:
            href = f"{href}#{parsed.fragment}"
        return href


__all__ = [
    "CourseLinkExtension",
    "CourseLinkTreeprocessor",
    "_build_link_rewriter",
]
