"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from course_pages.config import AuthorConfig
    from course_pages.navigation import SidebarSection


@dc.dataclass(slots=True)
class PageModel:
    """Structured data passed to the page template.

    Attributes
    ----------
    identifier : str
        Source identifier of the page being rendered.
    title : str
        Display title (front-matter title or filename stem).
    html_title : str
        Contents of the document ``<title>`` element.
    description : str | None
        Meta description; omitted from the head when ``None``.
    display_label : str
        Numbering prefix shown in the page header (``"Exercise 3:"``).
    category : str
        ``"lecture"``, ``"exercise"`` or ``"indepth"``.
    date : str | None
        Lecture date shown beneath the title.
    authors : list[AuthorConfig]
        Page authors, falling back to the course authors.
    youtube_id : str | None
        Recorded lecture to embed above the body.
    body_html : str
        Rendered page body.
    sidebar : list[SidebarSection]
        Navigation for this render with the page marked active.
    """

    identifier: str
    title: str
    html_title: str
    description: str | None
    display_label: str
    category: str
    date: str | None
    authors: list[AuthorConfig]
    youtube_id: str | None
    body_html: str
    sidebar: list[SidebarSection]


__all__ = ["PageModel"]
