"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdauto.cli.commands import (
    clear_cmd,
    components_cmd,
    create_cmd,
    imports_cmd,
    normalize_cmd,
    rebuild_cmd,
    sanitize_cmd,
)


app = typer.Typer(name="mdauto", no_args_is_help=True, help="Frontmatter and auto-region maintenance for Markdown/MDX docs")

app.command(name="frontmatter-normalize")(normalize_cmd)
app.command(name="markdown-sanitize")(sanitize_cmd)
app.command(name="region-clear")(clear_cmd)
app.command(name="imports-sync")(imports_cmd)
app.command(name="components-sync")(components_cmd)
app.command(name="document-rebuild")(rebuild_cmd)
app.command(name="document-create")(create_cmd)
