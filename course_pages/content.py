"""Discover course pages and group them into sidebar sections.

Pages are loaded from the configured content directory and assigned to the
sections declared in :class:`~course_pages.config.CourseConfig`. A section
either lists its pages explicitly (that list is the order) or claims every
page tagged with its id, ordered by the ``order`` front-matter field.
"""

from __future__ import annotations

import re
import typing as typ

from ._constants import ASSETS_DIRNAME, CONTENT_SUFFIXES
from .config import CourseConfigError
from .frontmatter import Page, load_page

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import SectionConfig

ORDER_SEGMENT_PATTERN = re.compile(r"\d+|\D+")


def discover_pages(content_dir: Path) -> list[Page]:
    """Load every notebook and markdown page under ``content_dir``.

    Hidden files and directories and the ``assets`` tree are skipped. Pages
    are returned in sorted path order so builds are reproducible.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)
    pages: list[Page] = []
    for path in sorted(content_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in CONTENT_SUFFIXES:
            continue
        relative = path.relative_to(content_dir)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if relative.parts[0] == ASSETS_DIRNAME:
            continue
        pages.append(load_page(path, content_dir))
    return pages


def order_key(page: Page) -> tuple[tuple[tuple[int, int | str], ...], str]:
    """Return a sort key ordering pages by dotted ``order`` then identifier.

    Numeric runs compare as integers, so ``"3.2" < "3.10" < "4"``. Pages
    without a usable ``order`` (missing, or only dots) sort after those
    with one.
    """
    unordered = ((2, ""),), page.identifier
    if not page.order:
        return unordered
    segments: list[tuple[int, int | str]] = []
    for token in ORDER_SEGMENT_PATTERN.findall(page.order):
        if token.isdigit():
            segments.append((0, int(token)))
        elif token.strip(". "):
            segments.append((1, token.strip(". ")))
    if not segments:
        return unordered
    return tuple(segments), page.identifier


def collect_sections(
    sections: cabc.Sequence[SectionConfig], pages: cabc.Iterable[Page]
) -> dict[str, list[Page]]:
    """Assign pages to sections and return the ordered ``page_lookup``.

    Parameters
    ----------
    sections : Sequence[SectionConfig]
        Sections in course order. Explicit ``pages`` lists are honoured as
        given; otherwise a section claims pages tagged with its id.
    pages : Iterable[Page]
        Every page in the build.

    Returns
    -------
    dict[str, list[Page]]
        Mapping of section id to its ordered pages. Every declared section is
        present, possibly with an empty list. A page appears in at most one
        section: the first declared section that claims it.

    Raises
    ------
    CourseConfigError
        If a section's explicit page list names an unknown page.
    """
    by_id = {page.identifier: page for page in pages}
    claimed: set[str] = set()
    lookup: dict[str, list[Page]] = {section.id: [] for section in sections}

    for section in sections:
        for identifier in section.pages:
            page = by_id.get(identifier)
            if page is None:
                msg = f"Section '{section.id}' lists unknown page '{identifier}'."
                raise CourseConfigError(msg)
            if identifier not in claimed:
                lookup[section.id].append(page)
                claimed.add(identifier)

    for section in sections:
        if section.pages:
            continue
        tagged = [
            page
            for page in by_id.values()
            if section.id in page.tags and page.identifier not in claimed
        ]
        tagged.sort(key=order_key)
        lookup[section.id].extend(tagged)
        claimed.update(page.identifier for page in tagged)
    return lookup


__all__ = ["collect_sections", "discover_pages", "order_key"]
