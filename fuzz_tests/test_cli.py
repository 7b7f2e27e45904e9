from hypothesis import assume, given
from hypothesis import strategies as st
from typer.testing import CliRunner

from dimkey import KeyMode
from dimkey.cli import app

from .strategies import cli_commands

runner = CliRunner()


@given(command=st.lists(st.text()))
def test_cli_cannot_crash(command):
    # Arguments to a CLI cannot contain null bytes.
    assume(not any("\0" in string for string in command))

    _ = runner.invoke(app, command, catch_exceptions=False)


@given(cli_commands())
def test_cli_prints_one_line_per_key(key_and_command):
    keys, sizes, command = key_and_command

    result = runner.invoke(app, command, catch_exceptions=False)

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == len(keys)
    for key, line in zip(keys, lines, strict=True):
        resolves = len(sizes) > 0 and key.mode == KeyMode.range
        assert (" -> " in line) == resolves
