"""Shared fixtures for core unit tests"""

import pytest

from mdauto.core.constants import BOTTOM_MARKER, HEAD_BLOCK, IMPORT_HEAD, IMPORT_SUBTITLE, SUBTITLE_LINE, TOP_MARKER


SAMPLE_FM_MD = """\
---
id: intro
title: Intro
subtitle: Getting started
noindex: true
---

# Title

Body content.
"""


@pytest.fixture(name="full_region")
def full_region_fixture():
    """A region holding every managed directive in canonical layout."""
    return "\n".join([
        TOP_MARKER,
        IMPORT_SUBTITLE,
        IMPORT_HEAD,
        "",
        HEAD_BLOCK,
        SUBTITLE_LINE,
        "",
        BOTTOM_MARKER,
    ])


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD


@pytest.fixture(name="write_doc")
def write_doc_fixture(tmp_path):
    """Write text to tmp_path/name and return the path."""
    def _write(text: str, name: str = "doc.md"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
