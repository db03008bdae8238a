"""Core parsers: connection import and frontmatter documents."""

from .agent_def import AgentRecord
from .agent_parser import parse_agent_document, render_agent_document
from .connection_def import ConnectionDescriptor, to_mcp_servers
from .connection_importer import (
    DEFAULT_SERVER_NAME,
    normalize_server_config,
    parse_connection_text,
)
from .exceptions import (
    EmptyContentError,
    MalformedPayloadError,
    MissingFieldError,
    ParseError,
    UnrecognizedFormatError,
)
from .skill_def import SkillRecord
from .skill_parser import parse_skill_document, render_skill_document

__all__ = [
    "AgentRecord",
    "ConnectionDescriptor",
    "DEFAULT_SERVER_NAME",
    "EmptyContentError",
    "MalformedPayloadError",
    "MissingFieldError",
    "ParseError",
    "SkillRecord",
    "UnrecognizedFormatError",
    "normalize_server_config",
    "parse_agent_document",
    "parse_connection_text",
    "parse_skill_document",
    "render_agent_document",
    "render_skill_document",
    "to_mcp_servers",
]
