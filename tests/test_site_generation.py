"""End-to-end tests for rendering course pages and the index.

These tests build the sample course from the ``course_tree`` fixture and
inspect the written HTML with BeautifulSoup: the per-page sidebar (one active
entry, tag classes, optional tooltips), cross-page link rewriting, stylesheet
assets, and the index page's schedule and tracks.

Usage
-----
Run ``pytest tests/test_site_generation.py -v``. Everything is written below
pytest's ``tmp_path``; no network access is needed.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from course_pages.config import load_course_config
from course_pages.generator import CourseSiteGenerator, index_href, stylesheet_hrefs
from course_pages.index_page import CourseIndexBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def built_site(course_tree: Path) -> Path:
    """Generate the sample course and return its output directory."""
    course = load_course_config(course_tree)
    generator = CourseSiteGenerator(course)
    generator.run()
    CourseIndexBuilder(course, generator.pages).run()
    return course.output_dir


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_run_writes_assets_then_pages(course_tree: Path) -> None:
    """Assets are written first, followed by one HTML file per page."""
    course = load_course_config(course_tree)
    written = CourseSiteGenerator(course).run()
    relative = [path.relative_to(course.output_dir).as_posix() for path in written]
    assert relative == [
        "assets/course.css",
        "assets/pygments.css",
        "exercises/debugging.html",
        "mod1/parallelism.html",
        "mod3/pinning.html",
        "notes.html",
    ]
    pygments_css = (course.output_dir / "assets" / "pygments.css").read_text(
        encoding="utf-8"
    )
    assert ".codehilite" in pygments_css


def test_page_sidebar_marks_only_current_page(built_site: Path) -> None:
    """Each page's sidebar has exactly one active entry: the page itself."""
    soup = _soup(built_site / "exercises" / "debugging.html")
    active = soup.select("li.sidebar-entry.active")
    assert len(active) == 1, "expected a single active sidebar entry"
    link = active[0].find("a")
    assert link["href"] == "/course/exercises/debugging.html"
    assert link["aria-current"] == "page"
    assert "exercise" in active[0]["class"]
    assert active[0].select_one(".entry-label").get_text(strip=True) == "Exercise 9:"


def test_sidebar_sections_entries_and_classes(built_site: Path) -> None:
    """Sections render in order with classified, tagged entries."""
    soup = _soup(built_site / "mod1" / "parallelism.html")
    sections = soup.select("nav.course-sidebar section.sidebar-section")
    assert [s.select_one("h2").get_text(strip=True) for s in sections] == [
        "Module 1",
        "Module 3",
    ]
    assert "has-active" in sections[0]["class"]
    assert "has-active" not in sections[1]["class"]

    lecture, exercise = sections[0].select("li.sidebar-entry")
    assert "lecture" in lecture["class"]
    assert lecture.select_one(".entry-label").get_text(strip=True) == "1.2"
    lecture_link = lecture.find("a")
    assert lecture_link["class"] == ["no-decoration", "tag_module1", "tag_track_parallel"]
    assert lecture_link["title"] == "Levels of parallelism"
    assert "tag_track_parallel" in exercise.find("a")["class"], (
        "tags with spaces become underscore classes"
    )

    (indepth,) = sections[1].select("li.sidebar-entry")
    assert "indepth" in indepth["class"]
    indepth_link = indepth.find("a")
    assert not indepth_link.has_attr("title"), "no tooltip without a description"
    assert indepth.select_one(".entry-title").get_text(strip=True) == "pinning"
    assert indepth.select_one(".entry-label").get_text(strip=True) == "In-depth 3:"


def test_unsectioned_page_is_rendered_but_not_listed(built_site: Path) -> None:
    """Pages no section claims still render, without a sidebar entry."""
    soup = _soup(built_site / "notes.html")
    hrefs = [a["href"] for a in soup.select("li.sidebar-entry a")]
    assert "/course/notes.html" not in hrefs
    assert not soup.select("li.sidebar-entry.active")
    assert soup.select_one("h1.page-title").get_text(strip=True) == "notes"


def test_links_between_sources_are_rewritten(built_site: Path) -> None:
    """Relative links to other sources point at the generated pages."""
    lecture = _soup(built_site / "mod1" / "parallelism.html")
    body_links = [a["href"] for a in lecture.select("article.page-body a")]
    assert "/course/exercises/debugging.html#task" in body_links

    exercise = _soup(built_site / "exercises" / "debugging.html")
    body_links = [a["href"] for a in exercise.select("article.page-body a")]
    assert body_links == ["/course/mod1/parallelism.html"]


def test_page_chrome(built_site: Path) -> None:
    """Titles, stylesheets, video and footer appear in the page chrome."""
    soup = _soup(built_site / "mod1" / "parallelism.html")
    assert soup.title.get_text() == "Parallelism | Scientific Computing"
    assert soup.body["class"] == ["course-page", "course-page--lecture"]
    stylesheets = [link["href"] for link in soup.select('link[rel="stylesheet"]')]
    assert stylesheets == ["/course/assets/course.css", "/course/assets/pygments.css"]
    iframe = soup.select_one("div.page-video iframe")
    assert iframe["src"].endswith("/embed/dQw4w9WgXcQ")
    assert soup.select_one(".page-meta__authors").get_text(strip=True) == (
        "Valentin Churavy"
    )
    assert soup.select_one(".page-footer__note").get_text(strip=True) == (
        "Licensed under MIT."
    )
    code = soup.select_one("article.page-body .codehilite")
    assert code["data-language"] == "julia"


def test_markdown_code_blocks_are_highlighted(built_site: Path) -> None:
    """Fenced code in markdown pages keeps its language label."""
    soup = _soup(built_site / "exercises" / "debugging.html")
    block = soup.select_one("article.page-body .codehilite")
    assert block is not None
    assert block["data-language"] == "julia"
    assert "push!" in block.get_text()


def test_index_page_lists_schedule_and_tracks(built_site: Path) -> None:
    """The index shows dated lectures, tracks and an inactive sidebar."""
    soup = _soup(built_site / "index.html")
    assert soup.select_one("h1.course-hero__title").get_text(strip=True) == (
        "Scientific Computing"
    )
    assert not soup.select("li.sidebar-entry.active")
    assert len(soup.select("li.sidebar-entry")) == 3

    subjects = soup.select("div.subjects div.subject")
    assert [s["data-section"] for s in subjects] == ["module1"]
    scheduled = subjects[0].select("a")
    assert [a["href"] for a in scheduled] == ["/course/mod1/parallelism.html"]
    assert "2025-04-23" in scheduled[0].get_text()

    track = soup.select_one("div.track#track_parallel")
    assert track is not None
    assert [a["href"] for a in track.select("a")] == ["/course/mod1/parallelism.html"]


def test_stylesheet_hrefs_prefix_extra_sheets(course_tree: Path) -> None:
    """Extra stylesheets are prefixed unless absolute or external."""
    course = load_course_config(course_tree)
    course.stylesheets = [
        "theme/extra.css",
        "./local.css",
        ".theme/dotted.css",
        "/shared.css",
        "https://cdn.test/x.css",
    ]
    assert stylesheet_hrefs(course)[2:] == [
        "/course/theme/extra.css",
        "/course/local.css",
        "/course/.theme/dotted.css",
        "/shared.css",
        "https://cdn.test/x.css",
    ]


def test_static_dirs_are_copied(course_tree: Path) -> None:
    """Configured static directories are copied into the output tree."""
    images = course_tree.parent / "images"
    images.mkdir()
    (images / "logo.svg").write_text("<svg/>", encoding="utf-8")
    course = load_course_config(course_tree)
    course.static_dirs = [images]
    CourseSiteGenerator(course).run()
    assert (course.output_dir / "images" / "logo.svg").is_file()


def test_missing_static_dir_raises(course_tree: Path) -> None:
    """A configured static directory that does not exist is reported."""
    course = load_course_config(course_tree)
    course.static_dirs = [course_tree.parent / "nowhere"]
    with pytest.raises(FileNotFoundError, match="nowhere"):
        CourseSiteGenerator(course).run()


def test_sidebar_home_link_follows_index_output(course_tree: Path) -> None:
    """The sidebar home link points at the configured index page."""
    course = load_course_config(course_tree)
    course.index_output = course.output_dir / "start" / "home.html"
    generator = CourseSiteGenerator(course)
    generator.run()
    CourseIndexBuilder(course, generator.pages).run()

    for path in (course.output_dir / "notes.html", course.index_output):
        home = _soup(path).select_one("nav.course-sidebar a.sidebar-home")
        assert home["href"] == "/course/start/home.html", path.name


def test_index_href_defaults_and_outside_output(course_tree: Path) -> None:
    """Index links are output-relative, or the bare filename when outside."""
    course = load_course_config(course_tree)
    assert index_href(course) == "/course/index.html"
    course.index_output = course_tree.parent / "public" / "home.html"
    assert index_href(course) == "/course/home.html"
