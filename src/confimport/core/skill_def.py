"""Skill definition models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

SkillVariant = Literal["command", "skill"]


class SkillRecord(BaseModel):
    """Skill or slash command parsed from a markdown document.

    An empty ``name`` means the document had no frontmatter and the caller
    still has to ask for one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    description: str | None = None
    body: str
    variant: SkillVariant = "command"
    allowed_tools: tuple[str, ...] | None = None
    argument_hint: str | None = None
    model: str | None = None
    disable_model_invocation: bool | None = None
    tags: tuple[str, ...] | None = None
