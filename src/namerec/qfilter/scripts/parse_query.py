#!/usr/bin/env python3
"""Console script to parse a filter query string into typed conditions."""

import json
import math
import sys
from datetime import datetime
from typing import Annotated
from typing import Any

import typer
from pydantic import ValidationError

from namerec.qfilter.conditions import BaseCondition
from namerec.qfilter.config import Settings
from namerec.qfilter.config import load_timezone
from namerec.qfilter.constants import DEFAULT_OPERATORS
from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.exceptions import QueryFilterError
from namerec.qfilter.logging_config import configure_logging
from namerec.qfilter.parser import QueryParser
from namerec.qfilter.splitter import split_clauses
from namerec.qfilter.types import OperatorSet

app = typer.Typer(help='Parse a delimited filter query into typed key/operator/value conditions.')

KeyList = list[str] | None


@app.command()
def parse(
    query: Annotated[
        str | None,
        typer.Argument(help='Query string (defaults to stdin)'),
    ] = None,
    text: Annotated[KeyList, typer.Option('--text', help='Declare a text key')] = None,
    text_list: Annotated[KeyList, typer.Option('--text-list', help='Declare a comma separated text key')] = None,
    int_keys: Annotated[KeyList, typer.Option('--int', help='Declare an integer key')] = None,
    int_list: Annotated[KeyList, typer.Option('--int-list', help='Declare a comma separated integer key')] = None,
    float_keys: Annotated[KeyList, typer.Option('--float', help='Declare a floating point key')] = None,
    bool_keys: Annotated[KeyList, typer.Option('--bool', help='Declare a boolean key')] = None,
    timestamp: Annotated[KeyList, typer.Option('--timestamp', help='Declare a YYYY-MM-DD HH:MM:SS key')] = None,
    ops: Annotated[
        KeyList,
        typer.Option('--op', help='Operator token, repeatable, tried in the given order (default: >= <= != = > <)'),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option('--delimiter', '-d', help='Clause delimiter (default from QFILTER_DELIMITER or "&")'),
    ] = None,
    timezone: Annotated[
        str | None,
        typer.Option('--timezone', '-z', help='Time zone for timestamp keys (default from QFILTER_DEFAULT_TIMEZONE)'),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option('--strict', help='Reject operator lists where a token shadows a longer one (or QFILTER_STRICT_OPERATORS)'),
    ] = False,
    pretty: Annotated[
        bool,
        typer.Option('--pretty/--no-pretty', help='Pretty print output'),
    ] = True,
    split_only: Annotated[
        bool,
        typer.Option('--split-only', help='Print the clauses the query splits into and exit'),
    ] = False,
) -> None:
    """
    Parse QUERY and print matched conditions as JSON.

    Keys are matched in the order text, text-list, int, int-list, float,
    bool, timestamp, and in command line order within each kind.

    Examples:

        qfilter 'age>=30&name=alice' --int age --text name

        echo 'ts=2020-12-26 14:20:33' | qfilter --timestamp ts -z Asia/Tokyo

        qfilter 'a=1;b="x;y"' -d ';' --split-only
    """
    try:
        settings = Settings()
    except ValidationError as e:
        typer.echo(f'Error: Invalid settings: {e}', err=True)
        raise typer.Exit(1)

    configure_logging(settings.log_level, stream=settings.log_stream)

    input_text = query if query is not None else sys.stdin.read().rstrip('\n')
    clause_delimiter = delimiter if delimiter is not None else settings.delimiter

    if split_only:
        try:
            clauses = split_clauses(input_text, clause_delimiter)
        except ValueError as e:
            typer.echo(f'Error: {e}', err=True)
            raise typer.Exit(1)
        typer.echo(_dump(clauses, pretty))
        return

    try:
        zone = load_timezone(timezone) if timezone is not None else settings.timezone()
        parser = QueryParser(
            clause_delimiter,
            default_timezone=zone,
            strict_operators=strict or settings.strict_operators,
        )
        operators = OperatorSet(*(ops or DEFAULT_OPERATORS))
        declared = _declare(parser, operators, {
            ConditionKind.TEXT: text,
            ConditionKind.TEXT_LIST: text_list,
            ConditionKind.INT: int_keys,
            ConditionKind.INT_LIST: int_list,
            ConditionKind.FLOAT: float_keys,
            ConditionKind.BOOL: bool_keys,
            ConditionKind.TIMESTAMP: timestamp,
        })
        result = parser.parse(input_text)
    except QueryFilterError as e:
        typer.echo(f'Error: {e}', err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f'Error: Invalid option: {e}', err=True)
        raise typer.Exit(1)

    output: dict[str, Any] = {}
    for key, sink in declared:
        if sink in result:
            match = result[sink]
            output[key] = {'op': match.op, 'value': _jsonable(match.value)}

    typer.echo(_dump(output, pretty))


def _declare(
    parser: QueryParser,
    operators: OperatorSet,
    keys_by_kind: dict[ConditionKind, list[str] | None],
) -> list[tuple[str, BaseCondition]]:
    """Register every declared key and return (key, sink) pairs in registration order."""
    declared = []
    for kind, keys in keys_by_kind.items():
        for key in keys or []:
            declared.append((key, parser.register_condition(key, operators, kind)))
    return declared


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, float) and not math.isfinite(value):
        # JSON has no NaN or Infinity literals
        return str(value)
    return value


def _dump(data: Any, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def main() -> None:
    """Entry point for the script."""
    app()


if __name__ == '__main__':
    main()
