"""Load course configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_authors,
    _build_sections,
    _build_tracks,
    _mapping,
    _optional_str,
    _resolve_path,
    _string_list,
)
from .models import CourseConfig, CourseConfigError


def load_course_config(path: Path) -> CourseConfig:
    """Load the YAML configuration describing the course and its build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/course.yaml``). Relative paths inside the file resolve
        against the file's directory.

    Returns
    -------
    CourseConfig
        Parsed course metadata (name, authors, tracks, ordered sections) and
        build settings (root URL, content and output directories).

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    CourseConfigError
        If the top-level structure is not a mapping, the course has no name,
        no sections are declared, or a section id is duplicated.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from course_pages.config import load_course_config
    >>> course = load_course_config(Path("config/course.yaml"))  # doctest: +SKIP
    >>> course.section_pairs[0]  # doctest: +SKIP
    ('module1', 'Module 1: Introduction')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise CourseConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    course = _mapping(raw.get("course"), "course")
    build = _mapping(raw.get("build"), "build")
    base_dir = path.parent

    name = _optional_str(course.get("name"))
    if not name:
        msg = "Course configuration requires a 'name'."
        raise CourseConfigError(msg)

    sections = _build_sections(course.get("sections"))
    if not sections:
        msg = "No sections defined in course configuration."
        raise CourseConfigError(msg)

    output_dir = _resolve_path(build.get("output_dir"), base_dir, Path("_site"))
    index_output = (
        _resolve_path(build.get("index_output"), base_dir, Path("index.html"))
        if _optional_str(build.get("index_output"))
        else output_dir / "index.html"
    )

    return CourseConfig(
        name=name,
        sections=sections,
        subtitle=_optional_str(course.get("subtitle")),
        authors=_build_authors(course.get("authors") or course.get("author")),
        institution=_optional_str(course.get("institution")),
        tracks=_build_tracks(course.get("tracks")),
        root_url=(_optional_str(build.get("root_url")) or "").rstrip("/"),
        content_dir=_resolve_path(build.get("content_dir"), base_dir, Path("src")),
        output_dir=output_dir,
        index_output=index_output,
        pygments_style=_optional_str(build.get("pygments_style")) or "friendly",
        stylesheets=_string_list(build.get("stylesheets")),
        static_dirs=[
            _resolve_path(entry, base_dir, Path(entry))
            for entry in _string_list(build.get("static_dirs"))
        ],
        footer_note=_optional_str(build.get("footer_note")) or "",
        language=_optional_str(course.get("language")) or "en",
    )


__all__ = ["load_course_config"]
