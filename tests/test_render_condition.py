"""Tests for the render-condition console script."""

import json

from typer.testing import CliRunner

from namerec.between.scripts.render_condition import app

runner = CliRunner()

CONDITION = json.dumps(
    {
        'op': 'BETWEEN',
        'expr': {'field': 'c2'},
        'low': {'value': 2},
        'high': {'value': 3},
    },
)


def test_render_from_stdin() -> None:
    result = runner.invoke(app, ['--dialect', 'postgres'], input=CONDITION)

    assert result.exit_code == 0
    assert result.output.strip() == '("c2" BETWEEN 2 AND 3)'


def test_render_default_dialect() -> None:
    result = runner.invoke(app, [], input=CONDITION)

    assert result.exit_code == 0
    assert result.output.strip() == '(c2 BETWEEN 2 AND 3)'


def test_render_from_file(tmp_path) -> None:
    path = tmp_path / 'condition.json'
    path.write_text(CONDITION)

    result = runner.invoke(app, [str(path), '-d', 'mock://sqlserver', '--quote', 'always'])

    assert result.exit_code == 0
    assert result.output.strip() == '([c2] BETWEEN 2 AND 3)'


def test_quote_never() -> None:
    result = runner.invoke(app, ['-d', 'postgres', '-q', 'never'], input=CONDITION)

    assert result.exit_code == 0
    assert result.output.strip() == '(c2 BETWEEN 2 AND 3)'


def test_pretty() -> None:
    condition = json.dumps({'op': 'not between', 'expr': 'c2', 'low': {'value': 1}, 'high': {'value': 4}})
    result = runner.invoke(app, ['--pretty'], input=condition)

    assert result.exit_code == 0
    assert 'NOT BETWEEN 1 AND 4' in result.output


def test_empty_input() -> None:
    result = runner.invoke(app, [], input='   ')

    assert result.exit_code == 1
    assert 'No input provided' in result.output


def test_invalid_json() -> None:
    result = runner.invoke(app, [], input='{not json')

    assert result.exit_code == 1
    assert 'Invalid JSON' in result.output


def test_invalid_jsql() -> None:
    result = runner.invoke(app, [], input=json.dumps({'op': 'IN', 'expr': 'c2'}))

    assert result.exit_code == 1
    assert 'Invalid JSQL' in result.output
    assert 'at path: op' in result.output


def test_incomplete_condition() -> None:
    result = runner.invoke(app, [], input=json.dumps({'op': 'BETWEEN', 'expr': 'c2', 'low': {'value': 1}}))

    assert result.exit_code == 1
    assert 'missing: upper_bound' in result.output


def test_unknown_dialect() -> None:
    result = runner.invoke(app, ['-d', 'oracle'], input=CONDITION)

    assert result.exit_code == 1
    assert "Unknown dialect: 'oracle'" in result.output


def test_unknown_quote_mode() -> None:
    result = runner.invoke(app, ['-q', 'sometimes'], input=CONDITION)

    assert result.exit_code == 1
    assert 'Unknown quoting mode' in result.output
