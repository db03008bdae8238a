"""MCP server connection descriptor model."""

from typing import Any, Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Transport = Literal["stdio", "sse", "http"]


class ConnectionDescriptor(BaseModel):
    """Normalized description of how to reach an MCP server.

    stdio servers are launched as a local process (``command`` + ``args``);
    sse/http servers are reached over the network (``url`` + ``headers``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    transport: Transport
    command: str | None = None
    args: tuple[str, ...] | None = None
    url: str | None = None
    headers: dict[str, str] | None = None
    env: dict[str, str] | None = None

    @field_validator("headers", "env")
    @classmethod
    def empty_mapping_is_none(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        return v or None

    @model_validator(mode="before")
    @classmethod
    def default_stdio_args(cls, data: Any) -> Any:
        """stdio servers always carry args, possibly empty."""
        if (
            isinstance(data, dict)
            and data.get("transport") == "stdio"
            and data.get("args") is None
        ):
            data = {**data, "args": ()}
        return data

    @model_validator(mode="after")
    def check_transport_fields(self) -> "ConnectionDescriptor":
        """Keep process fields and network fields on their own transports."""
        if self.transport == "stdio":
            if not self.command:
                raise ValueError("stdio server requires a command")
            if self.url is not None or self.headers is not None:
                raise ValueError("stdio server cannot have url or headers")
        else:
            if not self.url:
                raise ValueError(f"{self.transport} server requires a url")
            if self.command is not None or self.args is not None:
                raise ValueError(f"{self.transport} server cannot have command or args")
        return self

    def to_config(self) -> dict[str, Any]:
        """
        Encode as a single inline server config.

        The result is the JSON shape the importer accepts back, so
        ``parse_connection_text(json.dumps(d.to_config()), default_name=d.name)``
        returns ``[d]``.
        """
        config: dict[str, Any] = {"type": self.transport}
        if self.transport == "stdio":
            config["command"] = self.command
            config["args"] = list(self.args or [])
        else:
            config["url"] = self.url
            if self.headers:
                config["headers"] = dict(self.headers)
        if self.env:
            config["env"] = dict(self.env)
        return config


def to_mcp_servers(descriptors: Iterable[ConnectionDescriptor]) -> dict[str, Any]:
    """Wrap descriptors as ``{"mcpServers": {name: config}}``."""
    return {"mcpServers": {d.name: d.to_config() for d in descriptors}}
