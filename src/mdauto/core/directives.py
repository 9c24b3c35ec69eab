"""Managed directives and their derivation from frontmatter"""

import re
from dataclasses import dataclass
from typing import Any

from mdauto.core.constants import HEAD_BLOCK, IMPORT_HEAD, IMPORT_SUBTITLE, SUBTITLE_LINE


@dataclass(frozen=True)
class Directive:
    """One managed import + component pair.

    Priorities order directives that are emitted together; lower comes first.
    The patterns also match hand-edited variants so stale copies get stripped.
    """
    name:               str
    import_line:        str
    component:          str
    import_pattern:     re.Pattern
    component_pattern:  re.Pattern    # the component itself, anywhere in a text
    import_priority:    int
    component_priority: int

    @property
    def component_line_pattern(self) -> re.Pattern:
        """The component as whole line(s), including the trailing newline."""
        return re.compile(
            rf"^[ \t]*(?:{self.component_pattern.pattern})[ \t]*(?:\n|$)",
            self.component_pattern.flags | re.MULTILINE,
        )


HEAD_NOINDEX = Directive(
    name="head-noindex",
    import_line=IMPORT_HEAD,
    component=HEAD_BLOCK,
    import_pattern=re.compile(
        r"""^\s*import\s*Head\s*from\s*['"]@docusaurus/Head['"]\s*;?\s*$""", re.IGNORECASE),
    component_pattern=re.compile(
        r"""<Head>\s*<meta\s+name=["']robots["']\s+content=["']noindex,\s*nofollow["']\s*/>\s*</Head>"""),
    import_priority=1,
    component_priority=0,
)

SUBTITLE = Directive(
    name="subtitle",
    import_line=IMPORT_SUBTITLE,
    component=SUBTITLE_LINE,
    import_pattern=re.compile(
        r"""^\s*import\s*Subtitle\s*from\s*['"]@site/src/components/Subtitle['"]\s*;?\s*$""", re.IGNORECASE),
    component_pattern=re.compile(r"<Subtitle\s+text=\{frontMatter\.subtitle\}\s*/>"),
    import_priority=0,
    component_priority=1,
)

DIRECTIVES = (HEAD_NOINDEX, SUBTITLE)


def is_blank(value: Any) -> bool:
    """None or a whitespace-only string."""
    return value is None or (isinstance(value, str) and not value.strip())


def derive_directives(metadata: dict[str, Any]) -> list[Directive]:
    """Directives required by the metadata: noindex is exactly True / subtitle is not blank."""
    active = []
    if metadata.get("noindex") is True:
        active.append(HEAD_NOINDEX)
    if not is_blank(metadata.get("subtitle")):
        active.append(SUBTITLE)
    return active


def import_lines(directives: list[Directive]) -> list[str]:
    ordered = sorted(directives, key=lambda d: d.import_priority)
    return list(dict.fromkeys(d.import_line for d in ordered))


def component_lines(directives: list[Directive]) -> list[str]:
    """Component literals in priority order, split into lines."""
    ordered = sorted(directives, key=lambda d: d.component_priority)
    blocks = dict.fromkeys(d.component for d in ordered)
    return [line for block in blocks for line in block.split("\n")]
