from __future__ import annotations

from click.testing import CliRunner

from pdfobjx.cli import cli


def test_encode_command_prints_token() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["encode", '{"Type": {"$name": "Page"}, "Parent": {"$ref": [2, 0]}}'])

    assert result.exit_code == 0
    assert result.output == "<< /Type /Page\n/Parent 2 0 R\n>>\n"


def test_encode_command_reads_stdin_in_content_stream_mode() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["encode", "--content-stream"], input='["é", 1e-7]')

    assert result.exit_code == 0
    assert result.output == "[<c3a9> 0.0000001]\n"


def test_encode_command_rejects_invalid_json() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["encode", "{1"])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_encode_command_reports_encoding_errors() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["encode", '{"$unknown": [1]}'])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_encode_command_enforces_max_depth() -> None:
    runner = CliRunner()

    assert runner.invoke(cli, ["encode", "--max-depth", "2", "[[1]]"]).exit_code == 0
    result = runner.invoke(cli, ["encode", "--max-depth", "1", "[[1]]"])
    assert result.exit_code == 1
    assert "Nesting depth" in result.output


def test_name_command_shows_token() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["name", "Font Name"])

    assert result.exit_code == 0
    assert "/Font#20Name" in result.output
    assert "466f6e74204e616d65" in result.output


def test_encode_command_reports_overly_nested_json() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["encode"], input="[" * 100000 + "]" * 100000)

    assert result.exit_code == 1
    assert "nested too deeply" in result.output
