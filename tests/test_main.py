"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from avscomplete.main import cli

runner = CliRunner()


def write_vocabulary(tmp_path, document: dict):
    path = tmp_path / "completions.json"
    path.write_text(json.dumps(document))
    return path


def test_complete_json_output():
    result = runner.invoke(cli, ["complete", "x = clip.", "Tri", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["snippet"] == "Trim(${1:first_frame}, ${2:last_frame}, ${3:pad})"
    assert payload[0]["type"] == "function"


def test_complete_no_result_json_is_null():
    result = runner.invoke(cli, ["complete", "", ".", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) is None


def test_complete_table_output():
    result = runner.invoke(cli, ["complete", "x = ", "las"])

    assert result.exit_code == 0
    assert "last" in result.stdout


def test_complete_no_result_message():
    result = runner.invoke(cli, ["complete", "function Foo(clip ", "c"])

    assert result.exit_code == 0
    assert "no completions" in result.stdout


def test_check_bundled_vocabulary():
    result = runner.invoke(cli, ["check"])

    assert result.exit_code == 0
    assert "vocabulary OK" in result.stdout


def test_check_reports_bad_definitions(tmp_path):
    path = write_vocabulary(
        tmp_path,
        {
            "functions": [
                {"text": "Broken", "description": "d", "signature": "[!@#"},
                {"description": "no text"},
            ],
        },
    )

    result = runner.invoke(cli, ["check", "--vocabulary", str(path)])

    assert result.exit_code == 1
    assert "bad_signature" in result.stdout
    assert "skipped" in result.stdout


def test_missing_vocabulary_exits_with_error(tmp_path):
    result = runner.invoke(cli, ["complete", "x = ", "a", "--vocabulary", str(tmp_path / "missing.json")])

    assert result.exit_code == 2
    assert "not found" in result.stdout
