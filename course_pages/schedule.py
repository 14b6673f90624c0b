"""Course schedule and track listings shown on the index page."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .navigation import page_href, page_title, tag_class

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import TrackConfig
    from .frontmatter import Page


@dc.dataclass(slots=True, frozen=True)
class ScheduleEntry:
    """A dated page link."""

    href: str
    title: str
    description: str | None
    date: str | None
    tag_classes: tuple[str, ...]


@dc.dataclass(slots=True, frozen=True)
class ScheduleGroup:
    """Entries grouped under a section or track heading."""

    id: str
    name: str
    entries: tuple[ScheduleEntry, ...]


def _schedule_entry(page: Page, root_url: str) -> ScheduleEntry:
    return ScheduleEntry(
        href=page_href(page, root_url),
        title=page_title(page),
        description=page.description,
        date=page.date,
        tag_classes=tuple(tag_class(tag) for tag in page.tags),
    )


def build_schedule(
    sections: cabc.Iterable[tuple[str, str]],
    page_lookup: cabc.Mapping[str, cabc.Sequence[Page]],
    *,
    root_url: str = "",
) -> list[ScheduleGroup]:
    """Return dated pages per section, keeping section and page order.

    Undated pages (exercises, in-depth material) are left out, and so are
    sections with no dated page. An empty list means there is nothing to
    schedule.
    """
    groups: list[ScheduleGroup] = []
    for section_id, section_name in sections:
        entries = tuple(
            _schedule_entry(page, root_url)
            for page in page_lookup.get(section_id, ())
            if page.date
        )
        if entries:
            groups.append(ScheduleGroup(section_id, section_name, entries))
    return groups


def build_tracks(
    tracks: cabc.Iterable[TrackConfig],
    pages: cabc.Iterable[Page],
    *,
    root_url: str = "",
) -> list[ScheduleGroup]:
    """Return the pages tagged with each track id, in the order given."""
    page_list = list(pages)
    return [
        ScheduleGroup(
            track.id,
            track.name,
            tuple(
                _schedule_entry(page, root_url)
                for page in page_list
                if track.id in page.tags
            ),
        )
        for track in tracks
    ]


__all__ = ["ScheduleEntry", "ScheduleGroup", "build_schedule", "build_tracks"]
