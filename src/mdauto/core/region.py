"""Auto-generated region: marker validation and interior replacement.

The body is handled as a list of lines (split on ``\\n``) with the region given
by the indices of its two marker lines. Rewrites replace only the lines
strictly between the markers; every other line is carried over unchanged.
"""

from typing import Callable, Optional

from mdauto.core.constants import BOTTOM_MARKER, BOTTOM_MARKER_PREFIX, TOP_MARKER, TOP_MARKER_PREFIX
from mdauto.core.errors import MarkerDuplication, MarkerMismatch, MarkerOrderInvalid
from mdauto.core.models import MarkerSpan


InteriorFn = Callable[[list[str]], list[str]]


def is_top_marker(line: str) -> bool:
    return line.strip().startswith(TOP_MARKER_PREFIX)


def is_bottom_marker(line: str) -> bool:
    return line.strip().startswith(BOTTOM_MARKER_PREFIX)


def locate_markers(body: str) -> Optional[MarkerSpan]:
    """Validate marker cardinality/order and return their line indices, or None if absent.

    Raises MarkerDuplication, MarkerMismatch or MarkerOrderInvalid; callers
    must not write anything when this raises.
    """
    lines = body.split("\n")
    tops = [i for i, line in enumerate(lines) if is_top_marker(line)]
    bottoms = [i for i, line in enumerate(lines) if is_bottom_marker(line)]

    if len(tops) > 1 or len(bottoms) > 1:
        raise MarkerDuplication(len(tops), len(bottoms))
    if len(tops) != len(bottoms):
        raise MarkerMismatch(len(tops), len(bottoms))
    if not tops:
        return None
    if bottoms[0] < tops[0]:
        raise MarkerOrderInvalid(tops[0], bottoms[0])
    return MarkerSpan(top=tops[0], bottom=bottoms[0])


def ensure_region(body: str) -> str:
    """Return body with an empty region prepended when it has no markers."""
    if locate_markers(body) is None:
        return f"{TOP_MARKER}\n{BOTTOM_MARKER}\n{body.lstrip()}"
    return body


def region_interior(body: str) -> list[str]:
    """Lines strictly between the markers; empty when the region is absent."""
    span = locate_markers(body)
    if span is None:
        return []
    return body.split("\n")[span.top + 1:span.bottom]


def rewrite_region(body: str, compute_interior: InteriorFn) -> str:
    """Replace the region interior with ``compute_interior(existing_lines)``.

    A missing region is first created at the top of the body. An empty result
    is written as a single blank line between the markers.
    """
    body = ensure_region(body)
    span = locate_markers(body)
    lines = body.split("\n")
    interior = compute_interior(lines[span.top + 1:span.bottom]) or [""]
    return "\n".join(lines[:span.top + 1] + interior + lines[span.bottom:])


def clear_region(body: str) -> str:
    """Empty the region down to the canonical cleared state."""
    return rewrite_region(body, lambda _existing: [])
