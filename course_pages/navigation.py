"""Build the grouped sidebar navigation for a single page render.

The sidebar is a read-only projection over the course's sections and their
pages. :func:`build_sidebar` walks the sections in course order, classifies
each page (lecture, exercise, or in-depth supplement), derives its display
label and CSS tag classes, and marks the page being rendered as active. It is
recomputed for every page, takes all of its inputs explicitly, and never
raises for missing optional front-matter.

Example
-------
>>> from course_pages.frontmatter import Page
>>> from course_pages.navigation import build_sidebar
>>> page = Page(identifier="p1", title="Debugging", exercise_number="3")
>>> sidebar = build_sidebar([("mod1", "Module 1")], {"mod1": [page]}, "p1")
>>> entry = sidebar[0].entries[0]
>>> entry.category, entry.display_label, entry.active
('exercise', 'Exercise 3:', True)
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import TAG_CLASS_TEMPLATE
from .frontmatter import Page

if typ.TYPE_CHECKING:
    import collections.abc as cabc

Category = typ.Literal["lecture", "exercise", "indepth"]

CATEGORY_LABELS: dict[str, str] = {
    "exercise": "Exercise",
    "indepth": "In-depth",
}


@dc.dataclass(slots=True, frozen=True)
class SidebarEntry:
    """Render record for one page link in the sidebar."""

    identifier: str
    href: str
    title: str
    description: str | None
    category: Category
    active: bool
    tag_classes: tuple[str, ...]
    display_label: str
    display_number: str | None


@dc.dataclass(slots=True, frozen=True)
class SidebarSection:
    """A named sidebar group and its ordered entries."""

    id: str
    name: str
    entries: tuple[SidebarEntry, ...]

    @property
    def has_active(self) -> bool:
        """Return True when the current page lives in this section."""
        return any(entry.active for entry in self.entries)


def page_category(page: Page) -> Category:
    """Classify ``page``; an exercise number wins over an in-depth number."""
    if page.exercise_number:
        return "exercise"
    if page.indepth_number:
        return "indepth"
    return "lecture"


def display_number(page: Page) -> str | None:
    """Return the number shown next to the page title, if any."""
    category = page_category(page)
    if category == "exercise":
        return page.exercise_number
    if category == "indepth":
        return page.indepth_number
    if page.chapter and page.section:
        return f"{page.chapter}.{page.section}"
    return None


def display_label(page: Page) -> str:
    """Return the prefix label (``"Exercise 3:"``, ``"1.2"``) or ``""``."""
    number = display_number(page)
    if number is None:
        return ""
    prefix = CATEGORY_LABELS.get(page_category(page))
    if prefix:
        return f"{prefix} {number}:"
    return number


def tag_class(tag: str) -> str:
    """Return the CSS class token for ``tag`` (spaces become underscores)."""
    return TAG_CLASS_TEMPLATE.format(tag=tag.replace(" ", "_"))


def page_href(page: Page, root_url: str = "") -> str:
    """Return the link to ``page`` under ``root_url``."""
    return f"{root_url.rstrip('/')}/{page.output_path}"


def page_title(page: Page) -> str:
    """Return the front-matter title or the filename without extension."""
    return page.title or page.stem


def build_entry(page: Page, current_id: str | None, root_url: str = "") -> SidebarEntry:
    """Project one page into its sidebar render record."""
    return SidebarEntry(
        identifier=page.identifier,
        href=page_href(page, root_url),
        title=page_title(page),
        description=page.description,
        category=page_category(page),
        active=current_id is not None and page.identifier == current_id,
        tag_classes=tuple(tag_class(tag) for tag in page.tags),
        display_label=display_label(page),
        display_number=display_number(page),
    )


def build_sidebar(
    sections: cabc.Iterable[tuple[str, str]],
    page_lookup: cabc.Mapping[str, cabc.Sequence[Page]],
    current_page: Page | str | None,
    *,
    root_url: str = "",
) -> list[SidebarSection]:
    """Build the ordered, grouped navigation for one page render.

    Parameters
    ----------
    sections : Iterable[tuple[str, str]]
        ``(id, display_name)`` pairs in course order.
    page_lookup : Mapping[str, Sequence[Page]]
        Ordered pages per section id. Sections missing from the mapping
        render with no entries.
    current_page : Page | str | None
        The page being rendered, or its identifier. ``None`` marks nothing
        active (used for the course index).
    root_url : str, optional
        Prefix for generated links.

    Returns
    -------
    list[SidebarSection]
        One group per section, in the order given.
    """
    current_id = (
        current_page.identifier if isinstance(current_page, Page) else current_page
    )
    sidebar: list[SidebarSection] = []
    for section_id, section_name in sections:
        pages = page_lookup.get(section_id, ())
        entries = tuple(build_entry(page, current_id, root_url) for page in pages)
        sidebar.append(
            SidebarSection(id=section_id, name=section_name, entries=entries)
        )
    return sidebar


__all__ = [
    "CATEGORY_LABELS",
    "Category",
    "SidebarEntry",
    "SidebarSection",
    "build_entry",
    "build_sidebar",
    "display_label",
    "display_number",
    "page_category",
    "page_href",
    "page_title",
    "tag_class",
]
