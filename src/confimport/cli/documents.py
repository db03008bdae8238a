"""Skill and agent document CLI commands."""

import logging

import typer

from confimport.cli.source import read_source, report_parse_error
from confimport.core.agent_def import AgentRecord
from confimport.core.agent_parser import parse_agent_document, render_agent_document
from confimport.core.exceptions import ParseError
from confimport.core.skill_def import SkillRecord
from confimport.core.skill_parser import parse_skill_document, render_skill_document

logger = logging.getLogger(__name__)


def _load_skill(source: str, name: str | None) -> SkillRecord:
    try:
        skill = parse_skill_document(read_source(source))
    except ParseError as e:
        raise report_parse_error(source, e)

    # Documents without frontmatter come back nameless
    if not skill.name and name:
        skill = skill.model_copy(update={"name": name})
    logger.info(f"Parsed {skill.variant} '{skill.name}' from {source}")
    return skill


def _load_agent(
    source: str, name: str | None, description: str | None
) -> AgentRecord:
    try:
        agent = parse_agent_document(read_source(source))
    except ParseError as e:
        raise report_parse_error(source, e)

    updates = {}
    if not agent.name and name:
        updates["name"] = name
    if not agent.description and description:
        updates["description"] = description
    if updates:
        agent = agent.model_copy(update=updates)
    logger.info(f"Parsed agent '{agent.name}' from {source}")
    return agent


def parse_skill_command(ctx: typer.Context, source: str, name: str | None = None) -> None:
    """Print a skill document as JSON."""
    skill = _load_skill(source, name)
    typer.echo(skill.model_dump_json(indent=2, exclude_none=True))


def render_skill_command(ctx: typer.Context, source: str, name: str | None = None) -> None:
    """Print a skill document rewritten in canonical form."""
    skill = _load_skill(source, name)
    try:
        text = render_skill_document(skill)
    except ParseError as e:
        raise report_parse_error(source, e)
    typer.echo(text, nl=False)


def parse_agent_command(
    ctx: typer.Context,
    source: str,
    name: str | None = None,
    description: str | None = None,
) -> None:
    """Print an agent document as JSON."""
    agent = _load_agent(source, name, description)
    typer.echo(agent.model_dump_json(indent=2, exclude_none=True))


def render_agent_command(
    ctx: typer.Context,
    source: str,
    name: str | None = None,
    description: str | None = None,
) -> None:
    """Print an agent document rewritten in canonical form."""
    agent = _load_agent(source, name, description)
    try:
        text = render_agent_document(agent)
    except ParseError as e:
        raise report_parse_error(source, e)
    typer.echo(text, nl=False)
