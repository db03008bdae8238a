"""CLI interface for confimport using Typer."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from confimport.cli.documents import (
    parse_agent_command,
    parse_skill_command,
    render_agent_command,
    render_skill_command,
)
from confimport.cli.importer import import_mcp_command
from confimport.utils.config import Config
from confimport.utils.logging import setup_logging

app = typer.Typer(
    name="confimport",
    help="Import MCP servers, skills and agents from pasted text",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()

SourceArg = Annotated[
    str, typer.Argument(help="File to read, or '-' for standard input")
]
NameOpt = Annotated[
    str | None,
    typer.Option("--name", "-n", help="Name to use when the input carries none"),
]


def load_config_callback(ctx: typer.Context, workspace: str):
    """Load configuration and store it in the context."""
    try:
        cfg = Config.load(Path(workspace))
        setup_logging(cfg)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg
    except Exception as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    workspace: str = typer.Option(
        Path.home() / ".confimport",
        "--workspace",
        "-w",
        help="Path to workspace directory",
        callback=load_config_callback,
    ),
) -> None:
    """
    confimport: normalize pasted MCP server configs and markdown definitions.

    Configuration is loaded from ~/.confimport/ by default.
    Use --workspace to specify a custom workspace directory.
    """
    # Config is loaded via callback, nothing to do here
    pass


@app.command("import-mcp")
def import_mcp(
    ctx: typer.Context,
    source: SourceArg,
    name: NameOpt = None,
    records: Annotated[
        bool,
        typer.Option("--records", help="Print descriptor records instead of mcpServers JSON"),
    ] = False,
) -> None:
    """Import MCP servers from a command or JSON snippet."""
    import_mcp_command(ctx, source, name=name, records=records)


@app.command("parse-skill")
def parse_skill(ctx: typer.Context, source: SourceArg, name: NameOpt = None) -> None:
    """Parse a skill or slash command document."""
    parse_skill_command(ctx, source, name=name)


@app.command("parse-agent")
def parse_agent(
    ctx: typer.Context,
    source: SourceArg,
    name: NameOpt = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Description to use when the document has none"),
    ] = None,
) -> None:
    """Parse a sub-agent document."""
    parse_agent_command(ctx, source, name=name, description=description)


@app.command("render-skill")
def render_skill(ctx: typer.Context, source: SourceArg, name: NameOpt = None) -> None:
    """Rewrite a skill document in canonical form."""
    render_skill_command(ctx, source, name=name)


@app.command("render-agent")
def render_agent(
    ctx: typer.Context,
    source: SourceArg,
    name: NameOpt = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Description to use when the document has none"),
    ] = None,
) -> None:
    """Rewrite a sub-agent document in canonical form."""
    render_agent_command(ctx, source, name=name, description=description)


if __name__ == "__main__":
    app()
