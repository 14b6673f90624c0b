"""Shared fixtures for course_pages tests.

The ``course_tree`` fixture writes a small but representative course into a
temporary directory: a YAML config with two sections and one track, a Pluto
lecture notebook, a markdown exercise linking back to the lecture, an
in-depth page, and an untagged page that no section claims.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

LECTURE_NOTEBOOK = dedent(
    """\
    ### A Pluto.jl notebook ###
    # v0.20.8

    #> [frontmatter]
    #> chapter = "1"
    #> section = "2"
    #> order = "2"
    #> title = "Parallelism"
    #> date = "2025-04-23"
    #> description = "Levels of parallelism"
    #> tags = ["module1", "track_parallel"]
    #> youtube_id = "dQw4w9WgXcQ"
    #>
    #>     [[frontmatter.author]]
    #>     name = "Valentin Churavy"
    #>     url = "https://vchuravy.dev"

    using Markdown
    using InteractiveUtils

    # ╔═╡ 5c4c21e4-1a90-11f0-2f05-47d877772576
    using PlutoUI

    # ╔═╡ 07565449-7cf6-47f2-b8f7-5a1bb2cd56ce
    md\"\"\"
    # Parallelism

    See the [debugging exercise](../exercises/debugging.md#task).
    \"\"\"

    # ╔═╡ 6a1f7c2e-2b1d-4c55-9d8e-0f7b1e2a3c4d
    Threads.nthreads()

    # ╔═╡ 00000000-0000-0000-0000-000000000001
    PLUTO_PROJECT_TOML_CONTENTS = \"\"\"
    [deps]
    PlutoUI = "7f904dfe-b85e-4ff6-b463-dae2292396a8"
    \"\"\"

    # ╔═╡ Cell order:
    # ╟─5c4c21e4-1a90-11f0-2f05-47d877772576
    # ╟─07565449-7cf6-47f2-b8f7-5a1bb2cd56ce
    # ╠═6a1f7c2e-2b1d-4c55-9d8e-0f7b1e2a3c4d
    # ╟─00000000-0000-0000-0000-000000000001
    """
)

EXERCISE_PAGE = dedent(
    """\
    ---
    exercise_number: 9
    indepth_number: 2
    title: Debugging
    description: Find the bug
    tags: [module1, track parallel]
    order: "7.1"
    ---

    Back to the [lecture](../mod1/parallelism.jl).

    ```julia
    push!(list, 1)
    ```
    """
)

INDEPTH_PAGE = dedent(
    """\
    ---
    chapter: 3
    section: 1
    indepth_number: "3"
    tags: [module3]
    ---

    Pin your threads.
    """
)

ORPHAN_PAGE = "No front-matter here.\n"

COURSE_CONFIG = dedent(
    """\
    course:
      name: Scientific Computing
      subtitle: Performance and parallelism
      institution: Example University
      authors:
        - name: Ada Lovelace
          url: https://example.org/ada
      tracks:
        - id: track_parallel
          name: Parallelism
      sections:
        - id: module1
          name: Module 1
        - id: module3
          name: Module 3
    build:
      root_url: /course
      content_dir: src
      output_dir: site
      footer_note: Licensed under MIT.
    """
)


@pytest.fixture
def course_tree(tmp_path: Path) -> Path:
    """Write a sample course into ``tmp_path`` and return the config path."""
    content = tmp_path / "src"
    (content / "mod1").mkdir(parents=True)
    (content / "exercises").mkdir()
    (content / "mod3").mkdir()
    (content / "assets").mkdir()
    (content / "mod1" / "parallelism.jl").write_text(LECTURE_NOTEBOOK, encoding="utf-8")
    (content / "exercises" / "debugging.md").write_text(EXERCISE_PAGE, encoding="utf-8")
    (content / "mod3" / "pinning.md").write_text(INDEPTH_PAGE, encoding="utf-8")
    (content / "notes.md").write_text(ORPHAN_PAGE, encoding="utf-8")
    (content / "assets" / "ignored.md").write_text("# not a page\n", encoding="utf-8")
    config_path = tmp_path / "course.yaml"
    config_path.write_text(COURSE_CONFIG, encoding="utf-8")
    return config_path
