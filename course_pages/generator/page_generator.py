"""High-level orchestration for course page generation.

This module coordinates loading course pages, grouping them into sections,
rendering each page body, and writing themed HTML with the shared page
chrome. It exposes :class:`CourseSiteGenerator`, which consumes a
:class:`~course_pages.config.CourseConfig`, builds the sidebar afresh for
every page so exactly that page is marked active, and persists the HTML
files plus the stylesheet assets they link to.

Example
-------
>>> from pathlib import Path
>>> from course_pages.config import load_course_config
>>> from course_pages.generator import CourseSiteGenerator
>>> course = load_course_config(Path("config/course.yaml"))  # doctest: +SKIP
>>> generator = CourseSiteGenerator(course)  # doctest: +SKIP
>>> generator.run()  # doctest: +SKIP
[PosixPath('_site/assets/course.css'), ...]
"""

from __future__ import annotations

import datetime as dt
import shutil
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from course_pages._constants import (
    ASSETS_DIRNAME,
    COURSE_STYLESHEET,
    PYGMENTS_STYLESHEET,
)
from course_pages.content import collect_sections, discover_pages
from course_pages.generator.link_rewriter import _build_link_rewriter
from course_pages.generator.models import PageModel
from course_pages.generator.renderer import HtmlContentRenderer
from course_pages.navigation import (
    build_sidebar,
    display_label,
    page_category,
    page_href,
    page_title,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from course_pages.config import CourseConfig
    from course_pages.frontmatter import Page

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"
STATIC_DIR = PACKAGE_ROOT / "static"


def stylesheet_hrefs(course: CourseConfig) -> list[str]:
    """Return stylesheet links for the page head, bundled sheets first.

    Extra sheets from the configuration are prefixed with the root URL unless
    they are absolute (``/...``) or external (``https://...``).
    """
    root = course.root_url.rstrip("/")
    hrefs = [
        f"{root}/{ASSETS_DIRNAME}/{COURSE_STYLESHEET}",
        f"{root}/{ASSETS_DIRNAME}/{PYGMENTS_STYLESHEET}",
    ]
    for sheet in course.stylesheets:
        if sheet.startswith("/") or "://" in sheet:
            hrefs.append(sheet)
        else:
            hrefs.append(f"{root}/{sheet.removeprefix('./')}")
    return hrefs


def index_href(course: CourseConfig) -> str:
    """Return the link to the course index page.

    The index path is taken relative to the output directory; an index
    written outside it is linked by filename at the site root.
    """
    root = course.root_url.rstrip("/")
    try:
        relative = course.index_output.relative_to(course.output_dir).as_posix()
    except ValueError:
        relative = course.index_output.name
    return f"{root}/{relative}"


class CourseSiteGenerator:
    """Render every course page into themed HTML with a per-page sidebar."""

    def __init__(
        self,
        course: CourseConfig,
        *,
        pages: cabc.Iterable[Page] | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with course configuration and template context.

        Parameters
        ----------
        course : CourseConfig
            Course metadata and build settings.
        pages : Iterable[Page], optional
            Pre-loaded pages; when omitted they are discovered under
            ``course.content_dir``.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to ``course.output_dir``.
        """
        self.course = course
        self.output_dir = output_dir or course.output_dir
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self._pages = list(pages) if pages is not None else None
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    @property
    def pages(self) -> list[Page]:
        """Return the build's pages, discovering them on first access."""
        if self._pages is None:
            self._pages = discover_pages(self.course.content_dir)
        return self._pages

    def page_lookup(self) -> dict[str, list[Page]]:
        """Return the ordered pages per section for this build."""
        return collect_sections(self.course.sections, self.pages)

    def run(self) -> list[Path]:
        """Write assets and every rendered page to the output directory.

        Returns
        -------
        list[Path]
            Paths of the written files: stylesheet assets first, then one
            HTML file per page in page order.

        Notes
        -----
        Each page gets a freshly built sidebar; no render state is shared
        between pages beyond the read-only course configuration.
        """
        pages = self.pages
        lookup = self.page_lookup()
        root_url = self.course.root_url
        link_map = {page.identifier: page_href(page, root_url) for page in pages}
        generated_at = dt.datetime.now(dt.UTC)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written = self._write_assets()
        for page in pages:
            model = self._build_page_model(page, lookup, link_map)
            context = {
                "course": self.course,
                "page": model,
                "stylesheets": stylesheet_hrefs(self.course),
                "index_href": index_href(self.course),
                "generated_at": generated_at,
            }
            html = self.template.render(**context)
            if not html.endswith("\n"):
                html += "\n"
            output_path = self.output_dir / page.output_path
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def _build_page_model(
        self,
        page: Page,
        lookup: cabc.Mapping[str, cabc.Sequence[Page]],
        link_map: cabc.Mapping[str, str],
    ) -> PageModel:
        """Construct the template model for ``page`` with its own sidebar."""
        renderer = HtmlContentRenderer(
            self.course.pygments_style,
            link_extension=_build_link_rewriter(page, link_map),
        )
        title = page_title(page)
        return PageModel(
            identifier=page.identifier,
            title=title,
            html_title=self._format_page_title(title),
            description=page.description,
            display_label=display_label(page),
            category=page_category(page),
            date=page.date,
            authors=list(page.authors) or list(self.course.authors),
            youtube_id=page.youtube_id,
            body_html=renderer.render_page(page),
            sidebar=build_sidebar(
                self.course.section_pairs,
                lookup,
                page,
                root_url=self.course.root_url,
            ),
        )

    def _format_page_title(self, title: str) -> str:
        """Compose the HTML title from the page title and course name."""
        return f"{title} | {self.course.name}"

    def _write_assets(self) -> list[Path]:
        """Write the bundled and Pygments stylesheets and copy static dirs."""
        assets_dir = self.output_dir / ASSETS_DIRNAME
        assets_dir.mkdir(parents=True, exist_ok=True)
        course_css = assets_dir / COURSE_STYLESHEET
        shutil.copyfile(STATIC_DIR / COURSE_STYLESHEET, course_css)
        pygments_css = assets_dir / PYGMENTS_STYLESHEET
        stylesheet = HtmlContentRenderer(self.course.pygments_style).stylesheet
        pygments_css.write_text(stylesheet + "\n", encoding="utf-8")
        written = [course_css, pygments_css]
        for static_dir in self.course.static_dirs:
            if not static_dir.is_dir():
                msg = f"Static directory '{static_dir}' not found."
                raise FileNotFoundError(msg)
            target = self.output_dir / static_dir.name
            shutil.copytree(static_dir, target, dirs_exist_ok=True)
            written.append(target)
        return written


__all__ = ["CourseSiteGenerator", "index_href", "stylesheet_hrefs"]
