"""Unit tests for core/region.py"""

import pytest

from mdauto.core.constants import BOTTOM_MARKER, TOP_MARKER
from mdauto.core.errors import MarkerDuplication, MarkerError, MarkerMismatch, MarkerOrderInvalid
from mdauto.core.models import MarkerSpan
from mdauto.core.region import clear_region, ensure_region, locate_markers, region_interior, rewrite_region


# --- locate_markers ---

def test_locate_markers_absent():
    """A body without markers has no region."""
    assert locate_markers("# Title\n\ntext\n") is None


def test_locate_markers_present():
    """Indices are zero-based line numbers of the marker lines."""
    body = f"intro\n{TOP_MARKER}\nx\n{BOTTOM_MARKER}\nrest\n"
    assert locate_markers(body) == MarkerSpan(top=1, bottom=3)


def test_locate_markers_detects_by_prefix():
    """Any line whose trimmed text starts with the prefix counts, regardless of its wording."""
    body = "  <!--@ custom wording -->\n\t<!--# other -->\n"
    assert locate_markers(body) == MarkerSpan(top=0, bottom=1)


@pytest.mark.parametrize("body", [
    f"{TOP_MARKER}\n{TOP_MARKER}\n{BOTTOM_MARKER}\n",
    f"{TOP_MARKER}\n{BOTTOM_MARKER}\n{BOTTOM_MARKER}\n",
    f"{TOP_MARKER}\n{TOP_MARKER}\n",
])
def test_locate_markers_duplication(body):
    """More than one marker of either kind is a duplication error."""
    with pytest.raises(MarkerDuplication):
        locate_markers(body)


@pytest.mark.parametrize("body", [f"{TOP_MARKER}\ntext\n", f"text\n{BOTTOM_MARKER}\n"])
def test_locate_markers_mismatch(body):
    """Exactly one marker of the pair is a mismatch error."""
    with pytest.raises(MarkerMismatch):
        locate_markers(body)


def test_locate_markers_order():
    """A bottom marker above the top marker is rejected."""
    with pytest.raises(MarkerOrderInvalid):
        locate_markers(f"{BOTTOM_MARKER}\n{TOP_MARKER}\n")


def test_marker_errors_share_base():
    """All marker failures are MarkerError (and ValueError) subclasses."""
    for cls in (MarkerDuplication, MarkerMismatch, MarkerOrderInvalid):
        assert issubclass(cls, MarkerError)
        assert issubclass(cls, ValueError)


def test_marker_inline_text_is_not_a_marker():
    """A prefix in the middle of a line does not count."""
    assert locate_markers("see <!--@ here\n") is None


# --- ensure_region / rewrite_region ---

def test_ensure_region_prepends_markers():
    """A missing region is created at the top, with leading whitespace of the body trimmed."""
    assert ensure_region("\n\n# Title\n") == f"{TOP_MARKER}\n{BOTTOM_MARKER}\n# Title\n"


def test_ensure_region_keeps_existing():
    body = f"intro\n{TOP_MARKER}\n{BOTTOM_MARKER}\n"
    assert ensure_region(body) == body


def test_rewrite_region_replaces_only_interior():
    """Lines outside the marker pair, and the marker lines themselves, are untouched."""
    body = f"before\n  {TOP_MARKER}\nold 1\nold 2\n{BOTTOM_MARKER}  \nafter\n"
    out = rewrite_region(body, lambda existing: ["new"])
    assert out == f"before\n  {TOP_MARKER}\nnew\n{BOTTOM_MARKER}  \nafter\n"


def test_rewrite_region_passes_existing_interior():
    """compute_interior receives the lines strictly between the markers."""
    seen = []
    body = f"{TOP_MARKER}\na\n\nb\n{BOTTOM_MARKER}\n"
    rewrite_region(body, lambda existing: seen.extend(existing) or existing)
    assert seen == ["a", "", "b"]


def test_rewrite_region_empty_result_is_blank_line():
    """An empty interior is written as one blank line between the markers."""
    out = rewrite_region(f"{TOP_MARKER}\nx\n{BOTTOM_MARKER}\n", lambda existing: [])
    assert out == f"{TOP_MARKER}\n\n{BOTTOM_MARKER}\n"


def test_rewrite_region_validates_before_mutating():
    """Invalid markers raise before compute_interior is ever called."""
    def boom(existing):
        raise AssertionError("must not be called")
    with pytest.raises(MarkerDuplication):
        rewrite_region(f"{TOP_MARKER}\n{TOP_MARKER}\n{BOTTOM_MARKER}\n", boom)


def test_region_interior():
    assert region_interior(f"{TOP_MARKER}\na\n{BOTTOM_MARKER}\n") == ["a"]
    assert region_interior("no region\n") == []


# --- clear_region ---

def test_clear_region_creates_markers_once():
    """Clearing a body without a region yields exactly one marker of each kind."""
    out = clear_region("# Title\n\ntext\n")
    assert out == f"{TOP_MARKER}\n\n{BOTTOM_MARKER}\n# Title\n\ntext\n"
    assert out.count("<!--@") == 1
    assert out.count("<!--#") == 1


def test_clear_region_empties_existing(full_region):
    """Managed content is removed; content after the region survives."""
    out = clear_region(f"{full_region}\n\n# Title\n")
    assert out == f"{TOP_MARKER}\n\n{BOTTOM_MARKER}\n\n# Title\n"


def test_clear_region_is_idempotent():
    once = clear_region("text\n")
    assert clear_region(once) == once
