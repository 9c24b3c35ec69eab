"""Data models shared by the splitter, region rewriter and file operations"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


@dataclass
class Document:
    """A split document; ``frontmatter_block + body`` reproduces the source text."""
    frontmatter_block: str             # raw YAML including both fences; '' when absent
    metadata:          dict[str, Any] = field(default_factory=dict)
    body:              str = ""
    has_frontmatter:   bool = False
    decode_error:      Optional[str] = None    # set when the YAML could not be decoded

    @property
    def text(self) -> str:
        return self.frontmatter_block + self.body


@dataclass(frozen=True)
class MarkerSpan:
    """Zero-based line indices of the top and bottom marker lines in a body."""
    top:    int
    bottom: int


class Outcome(str, Enum):
    updated = "updated"
    unchanged = "unchanged"
    skipped = "skipped"
