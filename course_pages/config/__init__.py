"""Load and validate course configuration YAML for site builds.

This subpackage parses the project's ``course.yaml`` file and produces typed
dataclasses (:class:`CourseConfig`, :class:`SectionConfig`, etc.) that the
navigation builder and site generator consume. The primary entry point is
:func:`load_course_config`, which ensures required fields are present,
resolves paths relative to the config file, and returns a
:class:`CourseConfig` ready to be passed explicitly to every render.

Examples
--------
>>> from pathlib import Path
>>> from course_pages.config import load_course_config
>>> course = load_course_config(Path("config/course.yaml"))  # doctest: +SKIP
>>> course.name  # doctest: +SKIP
'Scientific Computing'
"""

from .loader import load_course_config
from .models import (
    AuthorConfig,
    CourseConfig,
    CourseConfigError,
    SectionConfig,
    TrackConfig,
)

__all__ = [
    "AuthorConfig",
    "CourseConfig",
    "CourseConfigError",
    "SectionConfig",
    "TrackConfig",
    "load_course_config",
]
