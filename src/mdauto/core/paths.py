"""Document path resolution confined to the documents root"""

from pathlib import Path

from mdauto.config import Settings
from mdauto.core.errors import PathEscapeError


MD_SUFFIX = ".md"


def resolve_document_path(raw: str, settings: Settings) -> Path:
    """Resolve raw (``.md`` appended if missing) against workspace_root; must land inside docs_root."""
    rel = raw if raw.endswith(MD_SUFFIX) else f"{raw}{MD_SUFFIX}"
    target = (Path(settings.workspace_root) / rel).resolve()
    root = settings.docs_path
    if target == root or not target.is_relative_to(root):
        raise PathEscapeError(
            f"Refusing to write outside {settings.docs_root}/ directory: {raw}. "
            f"Provide a path under {settings.docs_root}/."
        )
    return target
