"""Tests for pingpong.cli module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from pingpong.cli import main


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def initialized_project(temp_project: Path) -> Path:
    """Create a project whose config turns sample data off."""
    pingpong_dir = temp_project / ".pingpong"
    pingpong_dir.mkdir()
    config = {
        "storage": {"data_file": "tasks.txt", "sample_data": False},
        "display": {"show_dividers": False},
    }
    (pingpong_dir / "config.json").write_text(json.dumps(config))
    return temp_project


class TestMainGroup:
    """Tests for main CLI group."""

    def test_version(self, cli_runner: CliRunner) -> None:
        """Test --version option."""
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "pingpong" in result.output
        assert "0.1.0" in result.output

    def test_help(self, cli_runner: CliRunner) -> None:
        """Test --help lists the subcommands."""
        result = cli_runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "chat" in result.output
        assert "do" in result.output
        assert "init" in result.output

    @pytest.mark.usefixtures("reset_logging")
    def test_no_subcommand_starts_chat(
        self, cli_runner: CliRunner, initialized_project: Path
    ) -> None:
        """Test running without a subcommand opens the chat."""
        result = cli_runner.invoke(main, [], input="todo Read book\nbye\n")
        assert result.exit_code == 0
        assert "Hello! I'm Pingpong" in result.output
        assert "Got it. I've added this task:" in result.output
        assert (initialized_project / "tasks.txt").read_text() == "T | 0 | Read book\n"


@pytest.mark.usefixtures("reset_logging")
class TestChatCommand:
    """Tests for chat command."""

    def test_chat_until_end_of_input(
        self, cli_runner: CliRunner, initialized_project: Path
    ) -> None:
        """Test the chat ends when input runs out."""
        result = cli_runner.invoke(main, ["chat"], input="list\n")
        assert result.exit_code == 0
        assert "Here are the tasks in your list:" in result.output
        assert "Bye. Hope to see you again soon!" in result.output

    def test_first_run_loads_samples(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test defaults seed sample tasks into data/pingpong.txt."""
        result = cli_runner.invoke(main, ["chat"], input="bye\n")
        assert result.exit_code == 0
        assert "Sample tasks have been loaded" in result.output
        assert len((temp_project / "data" / "pingpong.txt").read_text().splitlines()) == 7

    def test_writes_log_file(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test the session logs to .pingpong/pingpong.log."""
        cli_runner.invoke(main, ["chat"], input="bye\n")
        assert (initialized_project / ".pingpong" / "pingpong.log").exists()


@pytest.mark.usefixtures("reset_logging")
class TestDoCommand:
    """Tests for do command."""

    def test_add_then_list(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test separate invocations share the task file."""
        cli_runner.invoke(main, ["do", "deadline", "Return book", "/by", "2024-12-25"])
        result = cli_runner.invoke(main, ["do", "list"])
        assert result.exit_code == 0
        assert "1.[D][ ] Return book (by: Dec 25 2024)" in result.output

    def test_error_exit_code(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test a rejected command exits with status 1."""
        result = cli_runner.invoke(main, ["do", "mark", "1"])
        assert result.exit_code == 1
        assert "OOPS!!! Task number 1 does not exist." in result.output

    def test_data_file_override(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test --data-file replaces the configured file."""
        result = cli_runner.invoke(main, ["do", "--data-file", "other.txt", "todo", "Elsewhere"])
        assert result.exit_code == 0
        assert (initialized_project / "other.txt").exists()
        assert not (initialized_project / "tasks.txt").exists()

    def test_config_option(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test --config points at another config file."""
        config_path = temp_project / "custom.json"
        config_path.write_text(
            json.dumps({"storage": {"data_file": "custom.txt", "sample_data": False}})
        )
        result = cli_runner.invoke(main, ["--config", str(config_path), "do", "todo", "Custom"])
        assert result.exit_code == 0
        assert (temp_project / "custom.txt").read_text() == "T | 0 | Custom\n"

    def test_requires_words(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test do needs a command."""
        result = cli_runner.invoke(main, ["do"])
        assert result.exit_code != 0

    def test_negative_number_is_not_an_option(
        self, cli_runner: CliRunner, initialized_project: Path
    ) -> None:
        """Test a dash-prefixed word reaches the parser."""
        result = cli_runner.invoke(main, ["do", "delete", "-1"])
        assert result.exit_code == 1
        assert "Task numbers must be positive integers." in result.output


class TestInitCommand:
    """Tests for init command."""

    def test_writes_default_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test init creates .pingpong/config.json."""
        result = cli_runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "Configuration saved!" in result.output

        data = json.loads((temp_project / ".pingpong" / "config.json").read_text())
        assert data["storage"]["data_file"] == "data/pingpong.txt"

    def test_already_initialized(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test init leaves an existing config alone."""
        result = cli_runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "already initialized" in result.output

        data = json.loads((initialized_project / ".pingpong" / "config.json").read_text())
        assert data["storage"]["data_file"] == "tasks.txt"

    def test_force(self, cli_runner: CliRunner, initialized_project: Path) -> None:
        """Test --force overwrites an existing config."""
        result = cli_runner.invoke(main, ["init", "--force"])
        assert result.exit_code == 0

        data = json.loads((initialized_project / ".pingpong" / "config.json").read_text())
        assert data["storage"]["data_file"] == "data/pingpong.txt"
