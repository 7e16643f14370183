"""Conversion between JSQL conditions and BETWEEN expressions."""

import logging
from typing import Any

import sqlparse
from sqlalchemy import func
from sqlalchemy import literal
from sqlalchemy.sql.elements import BindParameter
from sqlalchemy.sql.elements import ClauseElement
from sqlalchemy.sql.functions import FunctionElement

from namerec.between.config import DEFAULT_DIALECT
from namerec.between.core.exceptions import BetweenError
from namerec.between.database import Database
from namerec.between.jsql.constants import BETWEEN_OPERATORS
from namerec.between.jsql.constants import OPERAND_PARTS
from namerec.between.jsql.constants import JSQLField
from namerec.between.jsql.constants import JSQLOperator
from namerec.between.jsql.exceptions import InvalidOperandError
from namerec.between.jsql.exceptions import JSQLSyntaxError
from namerec.between.jsql.exceptions import MissingFieldError
from namerec.between.jsql.exceptions import UnknownOperatorError
from namerec.between.jsql.exceptions import UnsupportedOperandError
from namerec.between.jsql.types import JSQLBetweenCondition
from namerec.between.jsql.types import JSQLOperand
from namerec.between.sql.between import BetweenExpression
from namerec.between.sql.between import between
from namerec.between.sql.compiler import BETWEEN_TAG
from namerec.between.sql.expressions import GenericExpression
from namerec.between.sql.expressions import Identifier
from namerec.between.sql.expressions import LiteralString

logger = logging.getLogger(__name__)


def _join_path(path: str, name: str) -> str:
    return f'{path}.{name}' if path else name


def _name_of(operand: dict[str, Any], key: str, path: str, part: str | None) -> str:
    """Get a name-valued operand key ('field', 'literal', 'func'), which must be a string."""
    value = operand[key]
    if not isinstance(value, str):
        raise InvalidOperandError(
            f'"{key}" must be a string, got {type(value).__name__}',
            path=_join_path(path, key),
            operand=operand,
            part=part,
        )
    return value


def jsql_operand_to_sql(
    operand: JSQLOperand,
    params: dict[str, Any] | None = None,
    path: str = '',
    part: str | None = None,
) -> ClauseElement:
    """
    Convert JSQL operand to SQLAlchemy element.

    Args:
        operand: JSQL operand (bare string = field name)
        params: Values for {'param': ...} operands
        path: Path of the operand in the JSQL structure
        part: BetweenExpression part being built, used in error messages

    Returns:
        SQLAlchemy element

    Raises:
        InvalidOperandError: If operand structure is invalid or a parameter is not provided
    """
    if isinstance(operand, str):
        return Identifier(operand)

    if not isinstance(operand, dict):
        raise InvalidOperandError(
            f'operand must be string or dict, got {type(operand).__name__}',
            path=path,
            operand=operand,
            part=part,
        )

    if JSQLField.FIELD.value in operand:
        return Identifier(_name_of(operand, JSQLField.FIELD.value, path, part))
    if JSQLField.VALUE.value in operand:
        return literal(operand[JSQLField.VALUE.value])
    if JSQLField.LITERAL.value in operand:
        return LiteralString(_name_of(operand, JSQLField.LITERAL.value, path, part))
    if JSQLField.PARAM.value in operand:
        param_name = operand[JSQLField.PARAM.value]
        if params is None or param_name not in params:
            raise InvalidOperandError(f'Parameter "{param_name}" not provided', path=path, operand=operand, part=part)
        return literal(params[param_name])
    if JSQLField.FUNC.value in operand:
        name = _name_of(operand, JSQLField.FUNC.value, path, part)
        args_path = _join_path(path, JSQLField.ARGS.value)
        args = operand.get(JSQLField.ARGS.value, [])
        if not isinstance(args, list):
            raise InvalidOperandError(
                f'"{JSQLField.ARGS.value}" must be a list',
                path=args_path,
                operand=operand,
                part=part,
            )
        sql_args = [jsql_operand_to_sql(arg, params, f'{args_path}[{i}]', part) for i, arg in enumerate(args)]
        return getattr(func, name)(*sql_args)

    raise InvalidOperandError(
        "operand must contain one of: 'field', 'value', 'param', 'literal', 'func'",
        path=path,
        operand=operand,
        part=part,
    )


def jsql_to_between(
    condition: JSQLBetweenCondition | dict[str, Any],
    params: dict[str, Any] | None = None,
    path: str = '',
) -> BetweenExpression:
    """
    Convert JSQL BETWEEN / NOT BETWEEN condition to a BetweenExpression.

    Bounds may be omitted and supplied later with ``lower()`` / ``upper()``.

    Args:
        condition: JSQL condition
        params: Values for {'param': ...} operands
        path: Path of the condition in an enclosing JSQL structure

    Returns:
        BETWEEN expression

    Raises:
        JSQLSyntaxError: If the condition is not a dict
        MissingFieldError: If 'op' or 'expr' is absent
        UnknownOperatorError: If 'op' is not BETWEEN / NOT BETWEEN
        InvalidOperandError: If an operand is invalid

    Example:
        >>> jsql_to_between({
        ...     'op': 'NOT BETWEEN',
        ...     'expr': {'field': 'amount'},
        ...     'low': {'value': 100},
        ...     'high': {'value': 1000},
        ... })
    """
    if not isinstance(condition, dict):
        raise JSQLSyntaxError(f'Condition must be dict, got {type(condition).__name__}', path=path)

    if JSQLField.OP.value not in condition:
        raise MissingFieldError(JSQLField.OP.value, path=_join_path(path, JSQLField.OP.value))

    op = ' '.join(str(condition[JSQLField.OP.value]).upper().split())
    if op not in {o.value for o in BETWEEN_OPERATORS}:
        raise UnknownOperatorError(
            operator=str(condition[JSQLField.OP.value]),
            path=_join_path(path, JSQLField.OP.value),
            supported=sorted(o.value for o in BETWEEN_OPERATORS),
        )

    if JSQLField.EXPR.value not in condition:
        raise MissingFieldError(JSQLField.EXPR.value, path=_join_path(path, JSQLField.EXPR.value), operator=op)

    logger.debug(f'Processing {op} operator')

    operands = {}
    for key, part in OPERAND_PARTS.items():
        if key in condition:
            operands[part] = jsql_operand_to_sql(condition[key], params, _join_path(path, key), part)

    return between(
        operands['expression'],
        operands.get('lower_bound'),
        operands.get('upper_bound'),
        negated=op == JSQLOperator.NOT_BETWEEN.value,
    )


def sql_operand_to_jsql(element: ClauseElement, path: str = '', part: str | None = None) -> dict[str, Any]:
    """
    Convert SQLAlchemy element back to a JSQL operand.

    Raises:
        UnsupportedOperandError: If the element has no JSQL form
    """
    if isinstance(element, GenericExpression):
        return sql_operand_to_jsql(element.element, path, part)
    if isinstance(element, LiteralString):
        return {JSQLField.LITERAL.value: element.name}
    if isinstance(element, Identifier):
        return {JSQLField.FIELD.value: element.name}
    if isinstance(element, BindParameter):
        return {JSQLField.VALUE.value: element.value}
    if isinstance(element, FunctionElement):
        args_path = _join_path(path, JSQLField.ARGS.value)
        return {
            JSQLField.FUNC.value: element.name,
            JSQLField.ARGS.value: [
                sql_operand_to_jsql(arg, f'{args_path}[{i}]', part) for i, arg in enumerate(element.clauses)
            ],
        }

    raise UnsupportedOperandError(type(element).__name__, part=part, path=path)


def between_to_jsql(expression: BetweenExpression) -> dict[str, Any]:
    """
    Convert BetweenExpression to JSQL condition.

    Absent operands are left out of the result.

    Args:
        expression: BETWEEN expression

    Returns:
        JSQL condition

    Raises:
        UnsupportedOperandError: If an operand has no JSQL form
    """
    op = JSQLOperator.NOT_BETWEEN if expression.negated else JSQLOperator.BETWEEN
    jsql: dict[str, Any] = {JSQLField.OP.value: op.value}

    for key, part in OPERAND_PARTS.items():
        operand = getattr(expression, part)
        if operand is not None:
            jsql[key] = sql_operand_to_jsql(operand, key, part)

    logger.debug(f'Converted {op.value} expression to JSQL: {jsql}')
    return jsql


def jsql_to_sql(
    condition: JSQLBetweenCondition | dict[str, Any],
    dialect: str = DEFAULT_DIALECT,
    params: dict[str, Any] | None = None,
    quote_identifiers: bool | None = None,
    pretty: bool = False,
) -> str:
    """
    Render JSQL BETWEEN / NOT BETWEEN condition as SQL.

    Args:
        condition: JSQL condition
        dialect: Dialect profile name or database URL
        params: Values for {'param': ...} operands
        quote_identifiers: Override the profile's identifier quoting (None = profile default)
        pretty: Upper-case keywords with sqlparse

    Returns:
        SQL string with literal values inlined

    Raises:
        JSQLSyntaxError: If JSQL syntax is invalid
        BetweenError: If the dialect is unknown or the condition is incomplete

    Example:
        >>> jsql_to_sql({'op': 'BETWEEN', 'expr': 'a', 'low': 'b', 'high': {'value': 2}}, 'postgres')
        '("a" BETWEEN "b" AND 2)'
    """
    logger.info(f'Converting JSQL condition to SQL, dialect={dialect}')
    logger.debug(f'Input JSQL: {condition}')

    try:
        expression = jsql_to_between(condition, params)
        db = Database(dialect, quote_identifiers=quote_identifiers).extension(BETWEEN_TAG)
        sql = db.literal(expression)

    except BetweenError as e:
        logger.error(f'Failed to convert JSQL: {e}', exc_info=True)
        raise
    except Exception as e:
        logger.error(f'Unexpected error during JSQL conversion: {e}', exc_info=True)
        raise JSQLSyntaxError(
            message=f'Failed to convert JSQL to SQL: {e!s}',
            path='',
        ) from e

    if pretty:
        sql = sqlparse.format(sql, keyword_case='upper')

    logger.debug(f'Generated SQL: {sql}')
    return sql
