"""Shared fixtures: sample documents and config files."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_DOCUMENT = """\
# Title

## Subtitle

### Subsubtitle

> Quote without formattings (for now)
> Second line

normal *italic* **bold *italic*** done.

horizontal line:

---

* List item #1
* List item #2

This is an [example link](http://example.com/). Or <http://example.org/>."""

SAMPLE_CONFIG = textwrap.dedent("""\
    font_scale = 1.5

    [[rules]]
    name = "issue"
    pattern = '#(\\d+)'
    url = "https://github.com/org/repo/issues/{1}"
    label = "#{1}"

    [[rules]]
    name = "home"
    pattern = "HOME"
    url = "https://example.com/"
    literal = true
    """)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write SAMPLE_DOCUMENT to a temporary file."""
    path = tmp_path / "sample.md"
    path.write_text(SAMPLE_DOCUMENT)
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write SAMPLE_CONFIG to a temporary config.toml."""
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE_CONFIG)
    return path
