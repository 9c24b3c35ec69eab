"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer

from mdauto.config import Settings, configure_logging, load_config
from mdauto.core.errors import FrontmatterDecodeError, MarkerError, PathEscapeError, SidebarAssignmentError
from mdauto.core.models import Outcome
from mdauto.core.paths import resolve_document_path
from mdauto.core.pipeline import (
    clear_file,
    create_document,
    normalize_file,
    rebuild_file,
    sanitize_file,
    sync_components_file,
    sync_imports_file,
)


logger = logging.getLogger("mdauto.cli")

Paths = Annotated[list[Path], typer.Argument(help="Markdown/MDX files to process", show_default=False)]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings)
    return settings


def _run_batch(tool: str, paths: list[Path], step: Callable[[Path], Outcome]) -> None:
    """Apply step to each file in order.

    Missing paths and directories are skipped. Marker errors abort the whole
    run before the offending file is written; IO and decode failures are
    reported, the batch continues, and the exit code is 1.
    """
    _settings()
    failed = False
    for path in paths:
        if not path.exists():
            logger.warning("[%s] Skipping missing file: %s", tool, path)
            continue
        if path.is_dir():
            logger.warning("[%s] Skipping directory: %s", tool, path)
            continue
        try:
            outcome = step(path)
        except MarkerError as e:
            _fail(f"[{tool}] {path}: {e}")
        except (OSError, FrontmatterDecodeError) as e:
            typer.echo(f"[{tool}] Failed {path}: {e}", err=True)
            failed = True
            continue
        typer.echo(f"[{tool}] {outcome.value}: {path}")
    if failed:
        raise typer.Exit(1)


def normalize_cmd(paths: Paths):
    """Ensure frontmatter keys, defaults and order; add an empty auto region if missing."""
    _run_batch("frontmatter-normalize", paths, normalize_file)


def sanitize_cmd(paths: Paths):
    """Strip unsafe HTML from frontmatter strings and the markdown body."""
    _run_batch("markdown-sanitize", paths, sanitize_file)


def clear_cmd(paths: Paths):
    """Empty the auto-generated region, leaving only its markers."""
    _run_batch("region-clear", paths, clear_file)


def imports_cmd(paths: Paths):
    """Sync managed imports in the auto region with the frontmatter."""
    _run_batch("imports-sync", paths, sync_imports_file)


def components_cmd(paths: Paths):
    """Sync managed components in the auto region with the frontmatter."""
    _run_batch("components-sync", paths, sync_components_file)


def rebuild_cmd(
    path: Annotated[str, typer.Argument(help="Document under the docs root (.md optional)")],
    ):
    """Assign sidebar position, then clear and rebuild the auto region of one document."""
    settings = _settings()
    try:
        target = resolve_document_path(path, settings)
    except PathEscapeError as e:
        _fail(f"[document-rebuild] {e}")
    if not target.is_file():
        _fail(f"[document-rebuild] File does not exist: {target}")

    try:
        steps = rebuild_file(target, settings)
    except MarkerError as e:
        _fail(f"[document-rebuild] {target}: {e}")
    except (SidebarAssignmentError, OSError) as e:
        _fail(f"[document-rebuild] {target}", e)
    for step, outcome in steps:
        typer.echo(f"  {step}: {outcome.value}")
    typer.echo(f"[document-rebuild] Rebuilt auto region for {target}")


def create_cmd(
    path: Annotated[str, typer.Argument(help="New document path under the docs root (.md optional)")],
    title: Annotated[str, typer.Argument(help="Document title")],
    subtitle: Annotated[Optional[str], typer.Argument(help="Optional subtitle")] = None,
    ):
    """Create a new document with outlined frontmatter and auto region."""
    settings = _settings()
    try:
        target = create_document(path, title, subtitle, settings)
    except PathEscapeError as e:
        _fail(f"[document-create] {e}")
    except OSError as e:
        _fail(f"[document-create] Could not create {path}", e)
    typer.echo(f"[document-create] Initialized and outlined {target}")
