#!/usr/bin/env python3
"""Console script rendering a JSQL BETWEEN condition as SQL."""

import json
import sys
from typing import Annotated

import typer

from namerec.between.core.exceptions import BetweenError
from namerec.between.jsql.converter import jsql_to_sql
from namerec.between.jsql.exceptions import JSQLSyntaxError

app = typer.Typer(help='Render JSQL BETWEEN / NOT BETWEEN conditions as SQL.')

# --quote values mapped to Database(quote_identifiers=...)
QUOTE_MODES = {'auto': None, 'always': True, 'never': False}


@app.command()
def render(
    input_file: Annotated[
        typer.FileText | None,
        typer.Argument(help='Input file with a JSQL condition (defaults to stdin)'),
    ] = None,
    dialect: Annotated[
        str,
        typer.Option('--dialect', '-d', help='Dialect profile or URL (generic, postgres, mysql, sqlite, sqlserver, ...)'),
    ] = 'generic',
    quote: Annotated[
        str,
        typer.Option('--quote', '-q', help='Identifier quoting: auto (dialect default), always or never'),
    ] = 'auto',
    pretty: Annotated[
        bool,
        typer.Option('--pretty/--no-pretty', help='Normalize keyword case'),
    ] = False,
) -> None:
    """
    Render a JSQL condition as SQL for the given dialect.

    Examples:

        echo '{"op": "BETWEEN", "expr": "c2", "low": {"value": 2}, "high": {"value": 3}}' \\
            | render-condition -d postgres

        render-condition condition.json --dialect mock://sqlserver
    """
    try:
        input_text = input_file.read() if input_file else sys.stdin.read()
        input_text = input_text.strip()

        if not input_text:
            typer.echo('Error: No input provided', err=True)
            raise typer.Exit(1)

        typer.echo(_render(input_text, dialect, quote, pretty))

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f'Error: {e}', err=True)
        raise typer.Exit(1)


def _render(input_text: str, dialect: str, quote: str, pretty: bool) -> str:
    """Parse JSQL input and render it."""
    if quote not in QUOTE_MODES:
        typer.echo(f'Error: Unknown quoting mode "{quote}". Use one of: {", ".join(QUOTE_MODES)}.', err=True)
        raise typer.Exit(1)

    try:
        condition = json.loads(input_text)
    except json.JSONDecodeError as e:
        typer.echo(f'Error: Invalid JSON: {e}', err=True)
        raise typer.Exit(1)

    try:
        return jsql_to_sql(condition, dialect, quote_identifiers=QUOTE_MODES[quote], pretty=pretty)
    except JSQLSyntaxError as e:
        typer.echo(f'Error: Invalid JSQL: {e!s}', err=True)
        if e.path:
            typer.echo(f'  at path: {e.path}', err=True)
        raise typer.Exit(1)
    except BetweenError as e:
        typer.echo(f'Error: {e!s}', err=True)
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the script."""
    app()


if __name__ == '__main__':
    main()
