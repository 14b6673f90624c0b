"""Static-site generator for the scientific computing course website.

This package loads course notebooks and markdown pages, groups them into the
sections declared in ``course.yaml``, and renders each page with a sidebar
that marks the current page active. The CLI entry point is exposed as the
``course-pages`` console script.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from course_pages import main
>>> main()  # doctest: +SKIP
>>> from course_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
