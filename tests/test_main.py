"""Test the command-line entry point."""
import pytest
from slashcmds.main import run, split_invocation


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point config, home and working directory at an empty temp tree."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("SLASHCMDS_CONFIG", str(tmp_path / "missing.yaml"))
    return tmp_path


def test_split_invocation_single_word():
    """One shell word is parsed as a whole invocation string."""
    assert split_invocation(['\\review-pr 123 "high priority"']) == (
        "review-pr",
        ["123", "high priority"],
    )


def test_split_invocation_keeps_shell_words():
    """Separate shell words stay separate arguments."""
    assert split_invocation(["\\cmd", "arg one", "two"]) == ("cmd", ["arg one", "two"])


def test_split_invocation_not_a_command():
    """Without a leading backslash there is no command."""
    assert split_invocation(["cmd", "arg"]) == ("", [])
    assert split_invocation([]) == ("", [])


@pytest.mark.asyncio
async def test_run_rejects_non_command(isolated_env):
    """Input that is not a command exits with status 2."""
    assert await run(["hello"]) == 2


@pytest.mark.asyncio
async def test_run_help(isolated_env, capsys):
    """help prints the command list without calling the agent."""
    commands = isolated_env / ".claude" / "commands"
    commands.mkdir(parents=True)
    (commands / "review.md").write_text("---\ndescription: Review code\n---\nReview.")

    assert await run(["\\help"]) == 0

    out = capsys.readouterr().out
    assert "Available Commands:" in out
    assert "`\\review` - Review code (project)" in out


@pytest.mark.asyncio
async def test_run_unknown_command(isolated_env, capsys):
    """Unknown commands exit with status 1 and report the error."""
    assert await run(["\\nope"]) == 1

    assert "command 'nope' not found" in capsys.readouterr().err
