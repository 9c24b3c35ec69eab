"""HTML sanitization of frontmatter fields and markdown bodies.

Only raw HTML is cleaned. markdown-it locates it (html blocks and paragraphs
holding inline tags) so code blocks, code spans and plain markdown pass
through as-is.
Managed directives and marker lines are swapped for placeholders first, since
the cleaner would otherwise drop or lowercase them.
"""

import html
import math
import re
from typing import Any, Optional

import nh3
from markdown_it import MarkdownIt

from mdauto.core.directives import DIRECTIVES
from mdauto.core.region import is_bottom_marker, is_top_marker


ALLOWED_TAGS = {
    "a", "b", "i", "strong", "em", "u", "s", "code", "pre", "kbd", "samp",
    "blockquote", "p", "br", "hr", "span",
    "ul", "ol", "li",
    "table", "thead", "tbody", "tr", "th", "td",
    "img",
    "h1", "h2", "h3", "h4", "h5", "h6",
}
ALLOWED_ATTRIBUTES = {
    "a": {"href", "name", "target", "rel", "title"},
    "img": {"src", "alt", "title", "width", "height"},
    "*": {"title"},
}
URL_SCHEMES = {"http", "https", "mailto", "tel", "data"}
SCHEMES_BY_TAG = {
    "a": {"http", "https", "mailto", "tel"},
    "img": {"http", "https", "data"},
}
URL_ATTRIBUTES = {"href", "src"}

SAFE_URL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "/", "./", "../", "#")
SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*:")
IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK_RE = re.compile(r"(?<!!)\[([^\]]*)\]\(([^)]+)\)")
# blockquote / list markers that prefix a nested line
CONTAINER_PREFIX_RE = re.compile(r"^(\s*(?:(?:>|[-*+]|\d+[.)])\s*)*)")
PLACEHOLDER = "@@MDAUTO{}@@"
CODE_PLACEHOLDER = "@@MDAUTOCODE{}@@"
CODE_SPAN_RE = re.compile(r"(`+)(?!`)(.+?)(?<!`)\1(?!`)", re.DOTALL)

FRONTMATTER_TEXT_FIELDS = ("id", "slug", "title", "description", "subtitle")


def _filter_attribute(element: str, attribute: str, value: str) -> Optional[str]:
    """Enforce per-tag URL schemes on top of the global scheme allowlist."""
    if attribute not in URL_ATTRIBUTES:
        return value
    scheme = SCHEME_RE.match(value.strip().lower())
    if scheme and scheme.group(0)[:-1] not in SCHEMES_BY_TAG.get(element, URL_SCHEMES):
        return None
    return value


def clean_html(fragment: str) -> str:
    return nh3.clean(
        fragment,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        attribute_filter=_filter_attribute,
        url_schemes=URL_SCHEMES,
        link_rel=None,
    )


def strip_markup(text: str) -> str:
    """Plain text with every tag removed; entities are decoded so repeated runs are stable."""
    return html.unescape(nh3.clean(text, tags=set())).strip()


def sanitize_frontmatter(fm: dict[str, Any]) -> dict[str, Any]:
    """Clean string fields that are present; never adds missing keys."""
    clean = dict(fm)
    for key in FRONTMATTER_TEXT_FIELDS:
        if isinstance(clean.get(key), str):
            clean[key] = strip_markup(clean[key])

    if "keywords" in clean:
        keywords = clean["keywords"]
        if isinstance(keywords, list):
            cleaned = (strip_markup(k) if isinstance(k, str) else k for k in keywords)
            clean["keywords"] = [k for k in cleaned if isinstance(k, str) and k]
        elif isinstance(keywords, str):
            clean["keywords"] = strip_markup(keywords)

    if isinstance(clean.get("noindex"), str):
        flag = strip_markup(clean["noindex"]).lower()
        clean["noindex"] = flag == "true" if flag in ("true", "false") else flag

    position = clean.get("sidebar_position")
    if isinstance(position, str):
        clean["sidebar_position"] = _as_number(position)
    return clean


def _as_number(value: str) -> Any:
    for cast in (int, float):
        try:
            number = cast(value.strip())
        except ValueError:
            continue
        if isinstance(number, float) and not math.isfinite(number):
            return value
        return number
    return value


def neutralize_url(url: str) -> str:
    """'#' for URLs with a scheme outside the allowlist, else the URL unchanged."""
    u = url.strip().lower()
    if u.startswith(SAFE_URL_PREFIXES):
        return url
    return url if u and not SCHEME_RE.match(u) else "#"


def _neutralize_targets(text: str) -> str:
    text = IMAGE_RE.sub(lambda m: f"![{m.group(1)}]({neutralize_url(m.group(2))})", text)
    return LINK_RE.sub(lambda m: f"[{m.group(1)}]({neutralize_url(m.group(2))})", text)


def _neutralize_links(line: str) -> str:
    """Neutralize markdown link and image targets outside inline code spans."""
    pieces = []
    pos = 0
    for m in CODE_SPAN_RE.finditer(line):
        pieces.append(_neutralize_targets(line[pos:m.start()]))
        pieces.append(m.group(0))
        pos = m.end()
    pieces.append(_neutralize_targets(line[pos:]))
    return "".join(pieces)


def _protect(body: str) -> tuple[str, list[str]]:
    originals: list[str] = []

    def stash(m: re.Match) -> str:
        originals.append(m.group(0))
        return PLACEHOLDER.format(len(originals) - 1)

    for d in DIRECTIVES:
        body = d.component_pattern.sub(stash, body)
    lines = body.split("\n")
    for i, line in enumerate(lines):
        if is_top_marker(line) or is_bottom_marker(line):
            originals.append(line)
            lines[i] = PLACEHOLDER.format(len(originals) - 1)
    return "\n".join(lines), originals


def _restore(body: str, originals: list[str]) -> str:
    for i in reversed(range(len(originals))):
        body = body.replace(PLACEHOLDER.format(i), originals[i])
    return body


def _html_ranges(tokens: list) -> tuple[list[tuple[int, int, bool]], set[int]]:
    """(start, end, nested) line ranges holding raw HTML, plus all lines inside code."""
    ranges = []
    code_lines: set[int] = set()
    for tok in tokens:
        if not tok.map:
            continue
        start, end = tok.map
        if tok.type in ("fence", "code_block"):
            code_lines.update(range(start, end))
        elif tok.type == "html_block":
            ranges.append((start, end, tok.level > 0))
        elif tok.type == "inline" and any(c.type == "html_inline" for c in tok.children or []):
            ranges.append((start, end, True))
    return ranges, code_lines


def _clean_inline(text: str) -> str:
    """Clean paragraph text with its code spans held back from the cleaner."""
    spans: list[str] = []

    def stash(m: re.Match) -> str:
        spans.append(m.group(0))
        return CODE_PLACEHOLDER.format(len(spans) - 1)

    cleaned = clean_html(CODE_SPAN_RE.sub(stash, text))
    for i in reversed(range(len(spans))):
        cleaned = cleaned.replace(CODE_PLACEHOLDER.format(i), spans[i])
    return cleaned


def _clean_lines(lines: list[str], nested: bool) -> list[str]:
    """Clean a span as one fragment.

    Nested spans have their container prefixes lifted off first and put back
    line by line; rows merged by the cleaner (a tag broken over lines) give
    up the trailing prefixes.
    """
    text = "".join(lines)
    content = text.rstrip("\n")
    trail = text[len(content):]
    if not nested:
        return [clean_html(content) + trail]
    rows = content.split("\n")
    prefixes = [CONTAINER_PREFIX_RE.match(row).group(1) for row in rows]
    inner = "\n".join(row[len(prefix):] for row, prefix in zip(rows, prefixes))
    cleaned = _clean_inline(inner).split("\n")
    prefixes += [prefixes[-1]] * (len(cleaned) - len(prefixes))
    return ["\n".join(prefix + row for prefix, row in zip(prefixes, cleaned)) + trail]


def sanitize_body(body: str) -> str:
    """Clean raw HTML and neutralize unsafe link targets, leaving code and managed blocks intact."""
    working, originals = _protect(body)
    parts = working.split("\n")
    lines = [p + "\n" for p in parts[:-1]] + [parts[-1]]
    ranges, code_lines = _html_ranges(MarkdownIt("commonmark").parse(working))

    for i, line in enumerate(lines):
        if i not in code_lines:
            lines[i] = _neutralize_links(lines[i])

    for start, end, nested in sorted(ranges, reverse=True):
        lines[start:end] = _clean_lines(lines[start:end], nested)
    return _restore("".join(lines), originals)
