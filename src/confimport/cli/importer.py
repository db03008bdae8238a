"""import-mcp CLI command."""

import json
import logging

import typer

from confimport.cli.source import read_source, report_parse_error
from confimport.core.connection_def import to_mcp_servers
from confimport.core.connection_importer import parse_connection_text
from confimport.core.exceptions import ParseError
from confimport.utils.config import Config

logger = logging.getLogger(__name__)


def import_mcp_command(
    ctx: typer.Context, source: str, name: str | None = None, records: bool = False
) -> None:
    """
    Parse MCP server definitions and print them as JSON.

    Args:
        ctx: Typer context holding the loaded config
        source: File path or '-' for stdin
        name: Name for a single inline server config
        records: Print descriptor records instead of an mcpServers object
    """
    config: Config = ctx.obj["config"]
    text = read_source(source)

    try:
        descriptors = parse_connection_text(
            text, default_name=name or config.default_server_name
        )
    except ParseError as e:
        raise report_parse_error(source, e)

    logger.info(
        f"Imported {len(descriptors)} server(s) from {source}: "
        + ", ".join(d.name for d in descriptors)
    )

    if records:
        payload = [d.model_dump(exclude_none=True) for d in descriptors]
    else:
        payload = to_mcp_servers(descriptors)
    typer.echo(json.dumps(payload, indent=2))
