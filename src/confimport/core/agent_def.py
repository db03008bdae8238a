"""Agent definition models."""

from pydantic import BaseModel, ConfigDict


class AgentRecord(BaseModel):
    """Sub-agent parsed from a markdown document.

    ``name`` and ``description`` are both empty when the document had no
    frontmatter.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    description: str
    body: str
    tools: tuple[str, ...] | None = None
    model: str | None = None
    permission_mode: str | None = None
    skills: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None
