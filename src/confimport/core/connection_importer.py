"""Import MCP server configurations pasted from the clipboard.

Supported inputs:

- ``claude mcp add <name> [-e KEY=value ...] [-s scope] -- <command> <args...>``
- ``claude mcp add-json <name> '<json>'``
- ``{"mcpServers": {...}}`` (Claude Desktop, Cursor)
- ``{"servers": {...}}`` (VS Code)
- ``{"command": "...", "args": [...]}`` (a single inline server)
- ``{"my-server": {"command": "..."}}`` (a single named server)
"""

import json
import re
from typing import Any, Callable

from pydantic import ValidationError

from confimport.core.connection_def import ConnectionDescriptor, Transport
from confimport.core.exceptions import (
    MalformedPayloadError,
    MissingFieldError,
    UnrecognizedFormatError,
)

DEFAULT_SERVER_NAME = "imported-mcp"

# Backslash, optional trailing blanks, line break, indentation of the next line
_CONTINUATION = re.compile(r"\\[ \t]*\r?\n[ \t]*")

_ADD_JSON_PREFIX = re.compile(r"^claude\s+mcp\s+add-json(?:\s|$)")
_ADD_JSON = re.compile(r"^claude\s+mcp\s+add-json\s+(\S+)\s+['\"]?(\{.*\})", re.DOTALL)
_ADD_PREFIX = re.compile(r"^claude\s+mcp\s+add(?:\s|$)")
_ADD = re.compile(r"^claude\s+mcp\s+add\s+(\S+)(?:\s+(.*))?$", re.DOTALL)

_ENV_OPTION = re.compile(
    r"(?:^|(?<=\s))(?:-e|--env)\s+(\w+)=(?:\"([^\"]*)\"|'([^']*)'|(\S+))"
)
_SCOPE_OPTION = re.compile(r"(?:^|(?<=\s))(?:-s|--scope)\s+\S+")

_TRANSPORT_TYPES: dict[str, Transport] = {
    "stdio": "stdio",
    "sse": "sse",
    "http": "http",
    "streamable-http": "http",
    "streamablehttp": "http",
}
_CONFIG_MARKERS = ("command", "url", "type")


def parse_connection_text(
    text: str, default_name: str = DEFAULT_SERVER_NAME
) -> list[ConnectionDescriptor]:
    """
    Detect the dialect of pasted text and normalize it into server descriptors.

    Args:
        text: Clipboard contents
        default_name: Name given to a single inline JSON config, which carries
            no name of its own

    Returns:
        One or more ConnectionDescriptor, in source order

    Raises:
        UnrecognizedFormatError: Text is no known command or JSON shape
        MalformedPayloadError: A known dialect whose payload does not decode
        MissingFieldError: A server without its command or url
    """
    trimmed = _CONTINUATION.sub(" ", text.strip())

    if _ADD_JSON_PREFIX.match(trimmed):
        return [_parse_add_json_command(trimmed)]
    if _ADD_PREFIX.match(trimmed):
        return [_parse_add_command(trimmed)]
    if trimmed.startswith(("{", "[")):
        return _parse_json_config(trimmed, default_name)

    raise UnrecognizedFormatError(
        "Unrecognized format. Paste a Claude MCP command or JSON configuration."
    )


def normalize_server_config(name: str, config: dict[str, Any]) -> ConnectionDescriptor:
    """
    Build a descriptor from one server config object of any supported dialect.

    Args:
        name: Server name
        config: Decoded JSON object for the server

    Returns:
        ConnectionDescriptor

    Raises:
        MissingFieldError: stdio server without a command, or remote server
            without a url
        MalformedPayloadError: Fields of the wrong type
    """
    transport = _detect_transport(config)
    fields: dict[str, Any]

    if transport == "stdio":
        command, args = _split_command(config)
        if not command:
            raise MissingFieldError("command", f"Server '{name}' is missing a command")
        fields = {"command": command, "args": args}
    else:
        url = config.get("url")
        if not isinstance(url, str) or not url:
            raise MissingFieldError("url", f"Server '{name}' is missing a url")
        fields = {"url": url, "headers": _text_mapping(config.get("headers"))}

    try:
        return ConnectionDescriptor(
            name=name,
            transport=transport,
            env=_text_mapping(config.get("env")),
            **fields,
        )
    except ValidationError as e:
        raise MalformedPayloadError(f"Invalid configuration for server '{name}': {e}")


def split_command_line(command_line: str) -> list[str]:
    """
    Split a command line into tokens, honoring single and double quotes.

    Quote characters are consumed and do not nest. There are no escapes.
    """
    parts: list[str] = []
    current = ""
    quote: str | None = None

    for char in command_line:
        if quote:
            if char == quote:
                quote = None
            else:
                current += char
        elif char in ("'", '"'):
            quote = char
        elif char.isspace():
            if current:
                parts.append(current)
                current = ""
        else:
            current += char

    if current:
        parts.append(current)
    return parts


def _find_separator(text: str) -> int | None:
    """Return the offset of the first unquoted standalone ``--``, if any."""
    quote: str | None = None
    for i, char in enumerate(text):
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif (
            text.startswith("--", i)
            and (i == 0 or text[i - 1].isspace())
            and (i + 2 == len(text) or text[i + 2].isspace())
        ):
            return i
    return None


# ============================================================================
# Shell dialects
# ============================================================================


def _parse_add_json_command(text: str) -> ConnectionDescriptor:
    match = _ADD_JSON.match(text)
    if not match:
        raise MalformedPayloadError("Could not parse Claude MCP add-json command")

    name, payload = match.groups()
    try:
        config = json.loads(payload)
    except json.JSONDecodeError:
        raise MalformedPayloadError("Invalid JSON in add-json command")

    if not isinstance(config, dict):
        raise MalformedPayloadError("Invalid JSON in add-json command")
    return normalize_server_config(name, config)


def _parse_add_command(text: str) -> ConnectionDescriptor:
    match = _ADD.match(text)
    if not match or match.group(1).startswith("-"):
        raise MalformedPayloadError("Could not parse Claude MCP command")

    name = match.group(1)
    rest = match.group(2) or ""

    separator = _find_separator(rest)
    if separator is not None:
        options = rest[:separator]
        command_line = rest[separator + 2 :]
    else:
        options = rest
        command_line = _SCOPE_OPTION.sub("", _ENV_OPTION.sub("", rest))

    env: dict[str, str] = {}
    for env_match in _ENV_OPTION.finditer(options):
        key, double_quoted, single_quoted, bare = env_match.groups()
        value = next(v for v in (double_quoted, single_quoted, bare) if v is not None)
        env[key] = _as_placeholder(value)

    parts = split_command_line(command_line)
    if not parts:
        raise MissingFieldError("command", "No command found in MCP add command")

    return ConnectionDescriptor(
        name=name,
        transport="stdio",
        command=parts[0],
        args=parts[1:],
        env=env or None,
    )


def _as_placeholder(value: str) -> str:
    """Keep ``$VAR`` / ``${VAR}`` unresolved, as ``${VAR}``."""
    if not value.startswith("$"):
        return value
    variable = value[1:].removeprefix("{").removesuffix("}")
    return f"${{{variable}}}"


# ============================================================================
# JSON dialects
# ============================================================================

ServerEntries = list[tuple[str, Any]]


def _from_mcp_servers(data: Any, default_name: str) -> ServerEntries | None:
    """``{"mcpServers": {name: config}}``"""
    return _server_map(data, "mcpServers")


def _from_servers(data: Any, default_name: str) -> ServerEntries | None:
    """``{"servers": {name: config}}``"""
    return _server_map(data, "servers")


def _from_inline(data: Any, default_name: str) -> ServerEntries | None:
    """``{"command": ...}`` with no name of its own."""
    if _is_server_config(data):
        return [(default_name, data)]
    return None


def _from_named(data: Any, default_name: str) -> ServerEntries | None:
    """``{name: config}`` with exactly one key."""
    if isinstance(data, dict) and len(data) == 1:
        ((name, config),) = data.items()
        if _is_server_config(config):
            return [(name, config)]
    return None


_JSON_SHAPES: tuple[Callable[[Any, str], ServerEntries | None], ...] = (
    _from_mcp_servers,
    _from_servers,
    _from_inline,
    _from_named,
)


def _parse_json_config(text: str, default_name: str) -> list[ConnectionDescriptor]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        raise MalformedPayloadError("Invalid JSON")

    for shape in _JSON_SHAPES:
        entries = shape(data, default_name)
        if entries is None:
            continue

        descriptors = []
        for name, config in entries:
            if not isinstance(config, dict):
                raise MalformedPayloadError(
                    f"Server '{name}' configuration must be a JSON object"
                )
            descriptors.append(normalize_server_config(name, config))
        return descriptors

    raise UnrecognizedFormatError(
        "JSON parsed but no MCP server configuration found"
    )


def _server_map(data: Any, key: str) -> ServerEntries | None:
    if not isinstance(data, dict):
        return None
    servers = data.get(key)
    if isinstance(servers, dict) and servers:
        return list(servers.items())
    return None


def _is_server_config(value: Any) -> bool:
    return isinstance(value, dict) and any(value.get(k) for k in _CONFIG_MARKERS)


# ============================================================================
# Server config fields
# ============================================================================


def _detect_transport(config: dict[str, Any]) -> Transport:
    raw_type = config.get("type")
    type_name = str(raw_type).lower() if raw_type else ""
    if type_name in _TRANSPORT_TYPES:
        return _TRANSPORT_TYPES[type_name]

    url = config.get("url")
    if url:
        return "sse" if "sse" in str(url) or "sse" in type_name else "http"
    return "stdio"


def _split_command(config: dict[str, Any]) -> tuple[str | None, list[str]]:
    """Return (command, args); an array ``command`` is command + leading args."""
    raw = config.get("command")
    command: str | None = None
    args: list[str] = []

    if isinstance(raw, list):
        if raw:
            command = _as_text(raw[0])
            args = [_as_text(a) for a in raw[1:]]
    elif isinstance(raw, str):
        command = raw

    extra = config.get("args")
    if isinstance(extra, list):
        args += [_as_text(a) for a in extra]
    return command, args


def _text_mapping(value: Any) -> dict[str, str] | None:
    if not isinstance(value, dict):
        return None
    return {str(k): _as_text(v) for k, v in value.items()}


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)
