"""Import and component injection into the auto-generated region.

Both injectors strip every managed directive from the region interior and
re-insert the ones the metadata asks for, right after the leading run of
import statements. Stripping first keeps repeated runs from accumulating
duplicates even when earlier copies were reformatted by hand.
"""

import re
from typing import Any

from mdauto.core.directives import DIRECTIVES, component_lines, derive_directives, import_lines
from mdauto.core.region import rewrite_region


IMPORT_RE = re.compile(r"""^\s*import\s+.+from\s+['"].+['"];?\s*$""")


def is_import(line: str) -> bool:
    return bool(IMPORT_RE.match(line))


def import_run_end(lines: list[str]) -> int:
    """Index just past the last line of the leading import run (blank lines allowed inside); 0 if none."""
    end = 0
    for i, line in enumerate(lines):
        if not line.strip():
            continue
        if not is_import(line):
            break
        end = i + 1
    return end


def _drop_leading_blanks(lines: list[str]) -> list[str]:
    i = 0
    while i < len(lines) and not lines[i].strip():
        i += 1
    return lines[i:]


def _split_at_imports(lines: list[str]) -> tuple[list[str], list[str]]:
    """(leading import run, remaining lines without leading blanks)."""
    lines = _drop_leading_blanks(lines)
    end = import_run_end(lines)
    return lines[:end], _drop_leading_blanks(lines[end:])


def strip_managed_imports(lines: list[str]) -> list[str]:
    """Drop lines that are, or loosely look like, a managed import."""
    managed = {d.import_line for d in DIRECTIVES}
    return [
        line for line in lines
        if line.strip() not in managed
        and not any(d.import_pattern.match(line.strip()) for d in DIRECTIVES)
    ]


def strip_managed_components(lines: list[str]) -> list[str]:
    """Drop managed component blocks, including multi-line ones with loose spacing."""
    text = "\n".join(lines)
    for d in DIRECTIVES:
        text = d.component_line_pattern.sub("", text)
    return text.split("\n") if text else []


def inject_imports(lines: list[str], imports: list[str]) -> list[str]:
    """Interior with ``imports`` appended to the leading import run.

    Exactly one blank line separates the imports from whatever follows.
    """
    head, tail = _split_at_imports(strip_managed_imports(lines))
    block = head + imports
    if not block:
        return tail
    return block + [""] + tail


def inject_components(lines: list[str], components: list[str]) -> list[str]:
    """Interior with ``components`` placed after the leading import run, followed by a blank line."""
    head, tail = _split_at_imports(strip_managed_components(lines))
    out = list(head)
    if head:
        out.append("")
    if components:
        out.extend(components)
        out.append("")
    return out + tail


def sync_imports(body: str, metadata: dict[str, Any]) -> str:
    """Rewrite the region so its managed imports match the metadata."""
    imports = import_lines(derive_directives(metadata))
    return rewrite_region(body, lambda existing: inject_imports(existing, imports))


def sync_components(body: str, metadata: dict[str, Any]) -> str:
    """Rewrite the region so its managed components match the metadata."""
    components = component_lines(derive_directives(metadata))
    return rewrite_region(body, lambda existing: inject_components(existing, components))
