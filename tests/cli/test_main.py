"""Tests for CLI main module."""

import json

import pytest
from typer.testing import CliRunner

from confimport.cli.main import app

runner = CliRunner()


@pytest.fixture
def invoke(tmp_path):
    """Run the CLI against a temporary workspace."""

    def _invoke(*args: str, input: str | None = None):
        return runner.invoke(app, ["--workspace", str(tmp_path), *args], input=input)

    return _invoke


def test_commands_registered():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("import-mcp", "parse-skill", "parse-agent", "render-skill", "render-agent"):
        assert command in result.output


class TestImportMcp:
    def test_import_file(self, invoke, tmp_path, mcp_servers_json):
        source = tmp_path / "servers.json"
        source.write_text(mcp_servers_json)

        result = invoke("import-mcp", str(source))

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "mcpServers": {"fs": {"type": "stdio", "command": "npx", "args": ["-y", "server"]}}
        }

    def test_import_stdin_records(self, invoke):
        result = invoke(
            "import-mcp",
            "-",
            "--records",
            input="claude mcp add github -e TOKEN=$GH -- npx -y server-github\n",
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {
                "name": "github",
                "transport": "stdio",
                "command": "npx",
                "args": ["-y", "server-github"],
                "env": {"TOKEN": "${GH}"},
            }
        ]

    def test_name_for_inline_config(self, invoke):
        result = invoke(
            "import-mcp", "-", "--name", "events", input='{"type":"sse","url":"https://x/sse"}'
        )

        assert result.exit_code == 0
        assert list(json.loads(result.output)["mcpServers"]) == ["events"]

    def test_default_name_from_config(self, invoke, tmp_path):
        (tmp_path / "config.user.yaml").write_text("default_server_name: pasted\n")

        result = invoke("import-mcp", "-", input='{"command":"node"}')

        assert result.exit_code == 0
        assert list(json.loads(result.output)["mcpServers"]) == ["pasted"]

    def test_parse_error_exits_nonzero(self, invoke):
        result = invoke("import-mcp", "-", input="random text")

        assert result.exit_code == 1
        assert "Unrecognized format" in result.output

    def test_missing_file(self, invoke, tmp_path):
        result = invoke("import-mcp", str(tmp_path / "nope.json"))

        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_failure_is_logged(self, invoke, tmp_path):
        invoke("import-mcp", "-", input="{broken")

        log_text = (tmp_path / ".logs" / "confimport.log").read_text()
        assert "malformed_payload" in log_text


class TestDocuments:
    def test_parse_skill(self, invoke, tmp_path, skill_markdown):
        source = tmp_path / "SKILL.md"
        source.write_text(skill_markdown)

        result = invoke("parse-skill", str(source))

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "my-skill"
        assert data["allowed_tools"] == ["Read", "Write", "Edit"]
        assert data["variant"] == "command"

    def test_parse_skill_missing_name(self, invoke):
        result = invoke("parse-skill", "-", input="---\ndescription: d\n---\nBody")

        assert result.exit_code == 1
        assert "Missing required field: name" in result.output

    def test_parse_agent_fallback_with_options(self, invoke):
        result = invoke(
            "parse-agent", "-", "--name", "helper", "-d", "Helps out", input="Be helpful."
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "name": "helper",
            "description": "Helps out",
            "body": "Be helpful.",
        }

    def test_options_do_not_override_frontmatter(self, invoke, agent_markdown):
        result = invoke("parse-agent", "-", "--name", "other", input=agent_markdown)

        assert json.loads(result.output)["name"] == "code-reviewer"

    def test_undecodable_file(self, invoke, tmp_path):
        source = tmp_path / "SKILL.md"
        source.write_bytes(b"body \xff\xfe")

        result = invoke("parse-skill", str(source))

        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_render_rejects_unwritable_description(self, invoke):
        result = invoke(
            "render-agent", "-", "--name", "a", "-d", "Split on --- markers", input="Do it."
        )

        assert result.exit_code == 1
        assert "Cannot write description" in result.output

    def test_render_agent(self, invoke):
        result = invoke(
            "render-agent",
            "-",
            input="---\npermissionMode: plan\ndescription: d\nname: a\n---\nPrompt.",
        )

        assert result.exit_code == 0
        assert result.output == (
            "---\nname: a\ndescription: d\npermission-mode: plan\n---\n\nPrompt.\n"
        )

    def test_render_skill_named_from_option(self, invoke):
        result = invoke("render-skill", "-", "--name", "tidy", input="Tidy up.")

        assert result.exit_code == 0
        assert result.output == "---\nname: tidy\n---\n\nTidy up.\n"
