"""File-level operations: read, transform in memory, write back"""

import logging
from pathlib import Path
from typing import Optional

from mdauto.config import Settings
from mdauto.core.errors import FrontmatterDecodeError
from mdauto.core.frontmatter import dump_frontmatter, normalize_frontmatter
from mdauto.core.inject import sync_components, sync_imports
from mdauto.core.models import Outcome
from mdauto.core.parse import read_document, write_document
from mdauto.core.paths import resolve_document_path
from mdauto.core.region import clear_region, ensure_region
from mdauto.core.sanitize import sanitize_body, sanitize_frontmatter
from mdauto.core.sidebar import assign_sidebar_position


logger = logging.getLogger(__name__)


def _with_newline(text: str) -> str:
    return text if text.endswith("\n") else f"{text}\n"


def _write(path: Path, old: str, new: str) -> Outcome:
    """Always write; the outcome only reports whether the text changed."""
    write_document(path, new)
    return Outcome.updated if new != old else Outcome.unchanged


def clear_file(path: Path) -> Outcome:
    """Reset the region to its cleared state, creating it if absent."""
    doc = read_document(path)
    return _write(path, doc.text, doc.frontmatter_block + clear_region(doc.body))


def sync_imports_file(path: Path) -> Outcome:
    doc = read_document(path)
    if not doc.has_frontmatter:
        logger.info("No frontmatter, skipping: %s", path)
        return Outcome.skipped
    return _write(path, doc.text, doc.frontmatter_block + sync_imports(doc.body, doc.metadata))


def sync_components_file(path: Path) -> Outcome:
    doc = read_document(path)
    if not doc.has_frontmatter:
        logger.info("No frontmatter, skipping: %s", path)
        return Outcome.skipped
    return _write(path, doc.text, doc.frontmatter_block + sync_components(doc.body, doc.metadata))


def normalize_file(path: Path) -> Outcome:
    """Rewrite frontmatter in canonical order with defaults and make sure the body has a region."""
    doc = read_document(path)
    if doc.decode_error:
        raise FrontmatterDecodeError(f"Cannot normalize undecodable frontmatter: {doc.decode_error}")
    body = ensure_region(doc.body.lstrip())
    fm = dump_frontmatter(normalize_frontmatter(doc.metadata))
    return _write(path, doc.text, f"{fm}\n{_with_newline(body)}")


def sanitize_file(path: Path) -> Outcome:
    """Sanitize frontmatter strings and raw HTML in the body.

    Frontmatter that failed to decode is carried over untouched.
    """
    doc = read_document(path)
    if doc.has_frontmatter and doc.metadata and not doc.decode_error:
        fm = dump_frontmatter(sanitize_frontmatter(doc.metadata), guidance=False)
    else:
        fm = doc.frontmatter_block
    body = _with_newline(sanitize_body(doc.body).lstrip())
    return _write(path, doc.text, f"{fm}\n{body}" if fm else body)


def rebuild_file(path: Path, settings: Settings) -> list[tuple[str, Outcome]]:
    """Sidebar assignment, then clear -> imports -> components; each step re-reads the file."""
    assign_sidebar_position(path, settings.sidebar_command)
    return [
        ("region-clear", clear_file(path)),
        ("imports-sync", sync_imports_file(path)),
        ("components-sync", sync_components_file(path)),
    ]


def create_document(raw_path: str, title: str, subtitle: Optional[str], settings: Settings) -> Path:
    """Write a new document with normalized frontmatter and a populated region.

    Raises PathEscapeError outside docs_root and FileExistsError for an existing target;
    nothing is written in either case.
    """
    target = resolve_document_path(raw_path, settings)
    if target.exists():
        raise FileExistsError(f"File already exists: {target}")

    metadata = normalize_frontmatter({"id": target.stem, "title": title, "subtitle": subtitle or None})
    body = sync_components(sync_imports(ensure_region(""), metadata), metadata)
    write_document(target, f"{dump_frontmatter(metadata)}\n{body}")
    return target
