"""Test setup for catalogtree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_CATALOG = """\
Section @t(kw)
  item1 @u("http://a")
  item2 @hidden("secret")
    nested detail
Other root
  "quoted \\\\ text" plain @t(str, id)
"""


@pytest.fixture
def sample_catalog() -> str:
    """A small catalog exercising links, hidden entries and types."""
    return SAMPLE_CATALOG
