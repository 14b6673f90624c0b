"""Course index page rendering pipeline.

This module turns the course configuration and the loaded pages into the
site's landing page: course name and subtitle, authors and institution, the
full sidebar (with nothing marked active), the per-track page listings, and
the lecture schedule built from dated pages. The main entry point is
:class:`CourseIndexBuilder`.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from course_pages.config import load_course_config
>>> from course_pages.generator import CourseSiteGenerator
>>> course = load_course_config(Path("config/course.yaml"))  # doctest: +SKIP
>>> generator = CourseSiteGenerator(course)  # doctest: +SKIP
>>> builder = CourseIndexBuilder(course, generator.pages)  # doctest: +SKIP
>>> print(builder.run())  # doctest: +SKIP
_site/index.html

Side effects include reading template files and writing the rendered HTML to
``course.index_output``.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .content import collect_sections
from .generator.page_generator import (
    DEFAULT_TEMPLATES_DIR,
    index_href,
    stylesheet_hrefs,
)
from .navigation import build_sidebar
from .schedule import build_schedule, build_tracks

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import CourseConfig
    from .frontmatter import Page


class CourseIndexBuilder:
    """Render the course landing page from configuration and pages."""

    def __init__(
        self,
        course: CourseConfig,
        pages: cabc.Iterable[Page],
        *,
        templates_dir: Path | None = None,
        output: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        course : CourseConfig
            Course metadata: name, authors, tracks and ordered sections.
        pages : Iterable[Page]
            Every page in the build; grouped into sections here.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to the package
            ``templates`` directory.
        output : Path, optional
            Override for ``course.index_output``.
        """
        self.course = course
        self.pages = list(pages)
        self.output = output or course.index_output
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("index.jinja")

    def run(self) -> Path:
        """Render and write the index HTML, returning the output path."""
        root_url = self.course.root_url
        sections = self.course.section_pairs
        lookup = collect_sections(self.course.sections, self.pages)
        context = {
            "course": self.course,
            "sidebar": build_sidebar(sections, lookup, None, root_url=root_url),
            "schedule": build_schedule(sections, lookup, root_url=root_url),
            "tracks": build_tracks(self.course.tracks, self.pages, root_url=root_url),
            "stylesheets": stylesheet_hrefs(self.course),
            "index_href": index_href(self.course),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(html, encoding="utf-8")
        return self.output


__all__ = ["CourseIndexBuilder"]
