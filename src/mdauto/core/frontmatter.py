"""Frontmatter defaults, fixed key order, and YAML serialization"""

from typing import Any

import yaml

from mdauto.core.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_KEYWORDS,
    DESCRIPTION_GUIDANCE,
    FRONTMATTER_DEFAULTS,
    FRONTMATTER_KEYS,
    KEYWORD_PLACEHOLDER,
    KEYWORDS_GUIDANCE,
)


def _default(key: str) -> Any:
    value = FRONTMATTER_DEFAULTS[key]
    return list(value) if isinstance(value, tuple) else value


def normalize_frontmatter(metadata: dict[str, Any]) -> dict[str, Any]:
    """Return a new record with the fixed keys first, defaults filled only where a key is absent.

    slug falls back to id when absent or blank; an explicit null is kept.
    sidebar_position and any unknown keys follow in their original order.
    """
    out = {key: metadata[key] if key in metadata else _default(key) for key in FRONTMATTER_KEYS}
    slug = metadata.get("slug", "")
    if slug is not None and not str(slug).strip():
        out["slug"] = str(out["id"] or "")
    if "sidebar_position" in metadata:
        out["sidebar_position"] = metadata["sidebar_position"]
    for key, value in metadata.items():
        out.setdefault(key, value)
    return out


def _needs_keyword_guidance(keywords: Any) -> bool:
    if keywords == list(DEFAULT_KEYWORDS):
        return True
    items = keywords if isinstance(keywords, list) else [keywords]
    return any(isinstance(k, str) and KEYWORD_PLACEHOLDER in k for k in items)


def _dump_field(key: str, value: Any) -> str:
    return yaml.safe_dump({key: value}, default_flow_style=False, allow_unicode=True, sort_keys=False, width=1000)


def dump_frontmatter(fm: dict[str, Any], guidance: bool = True) -> str:
    """Serialize fm between ``---`` fences, one key at a time so comments can sit above fields.

    Guidance comments mark description/keywords that still hold the shipped placeholders.
    """
    parts = ["---\n"]
    for key, value in fm.items():
        if guidance and key == "description" and value == DEFAULT_DESCRIPTION:
            parts.extend(f"{line}\n" for line in DESCRIPTION_GUIDANCE)
        if guidance and key == "keywords" and _needs_keyword_guidance(value):
            parts.extend(f"{line}\n" for line in KEYWORDS_GUIDANCE)
        parts.append(_dump_field(key, value))
    parts.append("---\n")
    return "".join(parts)
