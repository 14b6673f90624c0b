"""Common literal values used across course_pages.

These constants keep filenames and front-matter markers centralized so
templates, generators, and tests can import the same values without drifting.
Intended for internal use within the course_pages package.

Examples
--------
>>> from course_pages import _constants
>>> _constants.TAG_CLASS_TEMPLATE.format(tag="track_parallel")
'tag_track_parallel'
>>> _constants.ASSETS_DIRNAME
'assets'
"""

DEFAULT_CONFIG_PATH = "config/course.yaml"
ASSETS_DIRNAME = "assets"
COURSE_STYLESHEET = "course.css"
PYGMENTS_STYLESHEET = "pygments.css"
TAG_CLASS_TEMPLATE = "tag_{tag}"
CONTENT_SUFFIXES = (".jl", ".md")
PLUTO_FRONTMATTER_PREFIX = "#>"
