"""Frontmatter/body splitting and UTF-8 document I/O"""

import logging
from pathlib import Path

import yaml

from mdauto.core.constants import FENCE_CLOSE, FENCE_OPEN
from mdauto.core.errors import DocumentReadError
from mdauto.core.models import Document


logger = logging.getLogger(__name__)


def split_document(text: str) -> Document:
    """Split text into frontmatter block and body.

    Text without a leading ``---`` fence, or with no closing fence, is all body.
    YAML that fails to decode (or is not a mapping) is logged and yields empty
    metadata; the literal block is kept so the text still round-trips.
    """
    if not text.startswith(FENCE_OPEN):
        return Document(frontmatter_block="", body=text)
    end = text.find(FENCE_CLOSE)
    if end == -1:
        return Document(frontmatter_block="", body=text)

    raw = text[len(FENCE_OPEN):end]
    block_end = end + len(FENCE_CLOSE)
    doc = Document(frontmatter_block=text[:block_end], body=text[block_end:], has_frontmatter=True)

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        doc.decode_error = str(e)
        logger.warning("YAML parse warning: %s", e)
        return doc
    if data is None:
        return doc
    if not isinstance(data, dict):
        doc.decode_error = f"expected a mapping, got {type(data).__name__}"
        logger.warning("YAML parse warning: %s", doc.decode_error)
        return doc
    doc.metadata = data
    return doc


def read_document(path: Path) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentReadError(f"Not valid UTF-8: {path} ({e})") from e
    return split_document(text)


def write_document(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
