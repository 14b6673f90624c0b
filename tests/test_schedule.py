"""Tests for the index page schedule and track listings."""

from __future__ import annotations

from course_pages.config import TrackConfig
from course_pages.frontmatter import Page
from course_pages.schedule import build_schedule, build_tracks

LECTURE = Page(
    identifier="mod1/intro.jl",
    title="Introduction",
    date="2025-04-23",
    tags=("mod1", "track_gpu"),
)
EXERCISE = Page(identifier="exercises/ex1.md", exercise_number="1", tags=("mod1",))
LATER = Page(identifier="mod2/threads.jl", date="2025-04-30", tags=("track_gpu",))


def test_schedule_lists_dated_pages_per_section() -> None:
    """Only dated pages appear, grouped under their section."""
    lookup = {"mod1": [LECTURE, EXERCISE], "mod2": [LATER], "mod3": [EXERCISE]}
    schedule = build_schedule(
        [("mod1", "Module 1"), ("mod2", "Module 2"), ("mod3", "Module 3")],
        lookup,
        root_url="/sc",
    )
    assert [group.id for group in schedule] == ["mod1", "mod2"], (
        "sections without dated pages are dropped"
    )
    first = schedule[0].entries
    assert len(first) == 1
    assert first[0].href == "/sc/mod1/intro.html"
    assert first[0].date == "2025-04-23"
    assert first[0].tag_classes == ("tag_mod1", "tag_track_gpu")
    assert schedule[1].entries[0].title == "threads"


def test_tracks_collect_tagged_pages_in_track_order() -> None:
    """Tracks list every page carrying the track id, empty tracks included."""
    tracks = [TrackConfig("track_gpu", "GPU"), TrackConfig("track_io", "I/O")]
    groups = build_tracks(tracks, [LECTURE, EXERCISE, LATER])
    assert [group.name for group in groups] == ["GPU", "I/O"]
    assert [entry.href for entry in groups[0].entries] == [
        "/mod1/intro.html",
        "/mod2/threads.html",
    ]
    assert groups[1].entries == ()
