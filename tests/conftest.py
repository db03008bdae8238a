"""Shared test fixtures for confimport test suite."""

from pathlib import Path

import pytest

from confimport.utils.config import Config


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config with workspace pointing to tmp_path."""
    return Config(workspace=tmp_path)


@pytest.fixture
def skill_markdown() -> str:
    """Skill document using every supported field."""
    return """---
name: my-skill
description: A helpful skill
allowed-tools: Read, Write, Edit
argument-hint: [file] [--verbose]
skill-type: command
tags: utility, file-ops
---
This is the skill content.

It can have multiple lines."""


@pytest.fixture
def agent_markdown() -> str:
    """Agent document using every supported field."""
    return """---
name: code-reviewer
description: Expert code review agent
tools: Read, Write, Edit, Grep
model: haiku
permission-mode: acceptEdits
skills: linting, testing
tags: code, review, quality
---
You are an expert code reviewer. Analyze the code for:
- Bugs and errors
- Performance issues"""


@pytest.fixture
def mcp_servers_json() -> str:
    """Claude Desktop style config with a single stdio server."""
    return '{"mcpServers":{"fs":{"command":"npx","args":["-y","server"]}}}'
