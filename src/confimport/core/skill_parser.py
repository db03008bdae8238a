"""Parse and render skill / slash command markdown documents.

Command format (.claude/commands/name.md)::

    ---
    description: What it does
    allowed-tools: Read, Write, Edit
    argument-hint: [file] [--verbose]
    ---
    Content here...

Skill format (.claude/skills/name/SKILL.md)::

    ---
    name: skill-name
    description: What it does
    skill-type: skill
    ---
    Content here...
"""

from confimport.core.exceptions import (
    EmptyContentError,
    MalformedPayloadError,
    MissingFieldError,
)
from confimport.core.skill_def import SkillRecord
from confimport.utils.frontmatter import (
    extract_frontmatter,
    render_frontmatter,
    resolve_aliases,
    split_comma_list,
    split_tool_list,
)


def parse_skill_document(text: str) -> SkillRecord:
    """
    Parse a skill document into a SkillRecord.

    Without frontmatter the whole text becomes the body and the name is left
    empty for the caller to fill in.

    Args:
        text: Raw markdown document

    Returns:
        SkillRecord

    Raises:
        MissingFieldError: Frontmatter has no ``name``
        EmptyContentError: Input is blank, or nothing follows the frontmatter
    """
    parsed = extract_frontmatter(text)

    if parsed is None:
        content = text.strip()
        if not content:
            raise EmptyContentError("Could not parse skill markdown")
        return SkillRecord(name="", body=content)

    frontmatter = resolve_aliases(parsed.metadata)

    if "name" not in frontmatter:
        raise MissingFieldError("name")
    if not parsed.body:
        raise EmptyContentError("Missing content after frontmatter")

    skill_type = frontmatter.get("skill-type", "")
    disable_invocation = frontmatter.get("disable-model-invocation", "")

    return SkillRecord(
        name=frontmatter["name"],
        description=frontmatter.get("description"),
        body=parsed.body,
        variant="skill" if skill_type.lower() == "skill" else "command",
        allowed_tools=split_tool_list(frontmatter.get("allowed-tools")),
        argument_hint=frontmatter.get("argument-hint"),
        model=frontmatter.get("model"),
        disable_model_invocation=disable_invocation.lower() == "true",
        tags=split_comma_list(frontmatter.get("tags")),
    )


def render_skill_document(skill: SkillRecord) -> str:
    """Render a SkillRecord back to markdown with frontmatter.

    Raises:
        MalformedPayloadError: A field value spans lines or contains ``---``
    """
    fields: list[tuple[str, str | None]] = [
        ("name", skill.name),
        ("description", skill.description),
    ]
    if skill.variant == "skill":
        fields.append(("skill-type", "skill"))
    fields += [
        ("allowed-tools", ", ".join(skill.allowed_tools or [])),
        ("argument-hint", skill.argument_hint),
        ("model", skill.model),
        ("disable-model-invocation", "true" if skill.disable_model_invocation else None),
        ("tags", ", ".join(skill.tags or [])),
    ]
    try:
        return render_frontmatter(fields, skill.body)
    except ValueError as e:
        raise MalformedPayloadError(str(e)) from e
