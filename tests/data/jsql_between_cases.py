"""Test cases for JSQL condition to SQL rendering.

Each test case contains:
- name: Unique test case identifier
- jsql: JSQL condition dictionary (input)
- expected_sql: Expected SQL string (output)
- dialect: Dialect profile (default: 'sqlite')
- description: Optional description of what is being tested
"""

from typing import Any


def create_test_case(
    name: str,
    jsql: dict[str, Any],
    expected_sql: str,
    dialect: str = 'sqlite',
    description: str | None = None,
) -> dict[str, Any]:
    """Helper function to create test case dictionary."""
    return {
        'name': name,
        'jsql': jsql,
        'expected_sql': expected_sql,
        'dialect': dialect,
        'description': description,
    }


BETWEEN_CASES = [
    create_test_case(
        name='between_values',
        jsql={
            'op': 'BETWEEN',
            'expr': {'field': 'amount'},
            'low': {'value': 100},
            'high': {'value': 1000},
        },
        expected_sql='(amount BETWEEN 100 AND 1000)',
        description='Field between two numeric values',
    ),
    create_test_case(
        name='not_between_values',
        jsql={
            'op': 'NOT BETWEEN',
            'expr': {'field': 'amount'},
            'low': {'value': 100},
            'high': {'value': 1000},
        },
        expected_sql='(amount NOT BETWEEN 100 AND 1000)',
        description='Field not between two numeric values',
    ),
    create_test_case(
        name='between_fields_postgres',
        jsql={
            'op': 'BETWEEN',
            'expr': {'field': 'a'},
            'low': {'field': 'b'},
            'high': {'field': 'c'},
        },
        expected_sql='("a" BETWEEN "b" AND "c")',
        dialect='postgres',
        description='Identifiers are quoted on postgres',
    ),
    create_test_case(
        name='between_fields_sqlserver',
        jsql={
            'op': 'BETWEEN',
            'expr': {'field': 'a'},
            'low': {'field': 'b'},
            'high': {'field': 'c'},
        },
        expected_sql='(a BETWEEN b AND c)',
        dialect='sqlserver',
        description='Identifiers are left bare on SQL Server',
    ),
    create_test_case(
        name='between_shorthand_fields',
        jsql={
            'op': 'between',
            'expr': 'd',
            'low': 'e',
            'high': 'f',
        },
        expected_sql='("d" BETWEEN "e" AND "f")',
        dialect='postgres',
        description='Bare strings are field references, operator is case-insensitive',
    ),
    create_test_case(
        name='between_string_values',
        jsql={
            'op': 'BETWEEN',
            'expr': {'field': 'name'},
            'low': {'value': 'a'},
            'high': {'value': 'm'},
        },
        expected_sql="(name BETWEEN 'a' AND 'm')",
        description='String values are rendered as quoted literals',
    ),
    create_test_case(
        name='between_raw_literal',
        jsql={
            'op': 'BETWEEN',
            'expr': {'literal': 'price * 2'},
            'low': {'field': 'low_price'},
            'high': {'value': 50},
        },
        expected_sql='(price * 2 BETWEEN "low_price" AND 50)',
        dialect='postgres',
        description='Raw SQL is emitted verbatim',
    ),
    create_test_case(
        name='between_function_call',
        jsql={
            'op': 'NOT BETWEEN',
            'expr': {'func': 'length', 'args': [{'field': 'name'}]},
            'low': {'value': 3},
            'high': {'value': 10},
        },
        expected_sql='(length(name) NOT BETWEEN 3 AND 10)',
        description='Function call as tested value',
    ),
]
