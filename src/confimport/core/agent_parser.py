"""Parse and render sub-agent markdown documents (.claude/agents/name.md)."""

from confimport.core.agent_def import AgentRecord
from confimport.core.exceptions import (
    EmptyContentError,
    MalformedPayloadError,
    MissingFieldError,
)
from confimport.utils.frontmatter import (
    extract_frontmatter,
    render_frontmatter,
    resolve_aliases,
    split_comma_list,
)


def parse_agent_document(text: str) -> AgentRecord:
    """
    Parse an agent document into an AgentRecord.

    Without frontmatter the whole text becomes the body; name and description
    are both left empty for the caller to fill in.

    Args:
        text: Raw markdown document

    Returns:
        AgentRecord

    Raises:
        MissingFieldError: Frontmatter has no ``name`` or no ``description``
        EmptyContentError: Input is blank, or nothing follows the frontmatter
    """
    parsed = extract_frontmatter(text)

    if parsed is None:
        content = text.strip()
        if not content:
            raise EmptyContentError("Could not parse agent markdown")
        return AgentRecord(name="", description="", body=content)

    frontmatter = resolve_aliases(parsed.metadata)

    if "name" not in frontmatter:
        raise MissingFieldError("name")
    if "description" not in frontmatter:
        raise MissingFieldError("description")
    if not parsed.body:
        raise EmptyContentError("Missing content after frontmatter")

    return AgentRecord(
        name=frontmatter["name"],
        description=frontmatter["description"],
        body=parsed.body,
        tools=split_comma_list(frontmatter.get("tools")),
        model=frontmatter.get("model"),
        permission_mode=frontmatter.get("permission-mode"),
        skills=split_comma_list(frontmatter.get("skills")),
        tags=split_comma_list(frontmatter.get("tags")),
    )


def render_agent_document(agent: AgentRecord) -> str:
    """Render an AgentRecord back to markdown with frontmatter.

    Raises:
        MalformedPayloadError: A field value spans lines or contains ``---``
    """
    fields = [
        ("name", agent.name),
        ("description", agent.description),
        ("tools", ", ".join(agent.tools or [])),
        ("model", agent.model),
        ("permission-mode", agent.permission_mode),
        ("skills", ", ".join(agent.skills or [])),
        ("tags", ", ".join(agent.tags or [])),
    ]
    try:
        return render_frontmatter(fields, agent.body)
    except ValueError as e:
        raise MalformedPayloadError(str(e)) from e
