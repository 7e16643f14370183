"""SQL rendering of BETWEEN expressions."""

import logging
from typing import Any

from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.compiler import SQLCompiler

from namerec.between.core.exceptions import IncompleteExpressionError
from namerec.between.sql.between import BetweenExpression

logger = logging.getLogger(__name__)

# Tag the rendering hook is registered under
BETWEEN_TAG = 'between'

_registered = False


def compile_between(element: BetweenExpression, compiler: SQLCompiler, **kw: Any) -> str:
    """
    Render ``(expression [NOT] BETWEEN lower AND upper)``.

    Operands are rendered by the compiler itself, so identifier quoting and
    literal formatting follow the dialect in use.

    Args:
        element: BETWEEN expression
        compiler: SQLAlchemy statement compiler
        **kw: Compiler keyword arguments, passed through to operands

    Returns:
        SQL fragment

    Raises:
        IncompleteExpressionError: If any operand was never supplied
    """
    if missing := element.missing_parts():
        raise IncompleteExpressionError(missing)

    sql = ['(']
    sql.append(compiler.process(element.expression, **kw))
    if element.negated:
        sql.append(' NOT')
    sql.append(' BETWEEN ')
    sql.append(compiler.process(element.lower_bound, **kw))
    sql.append(' AND ')
    sql.append(compiler.process(element.upper_bound, **kw))
    sql.append(')')
    return ''.join(sql)


def register_between_compiler() -> None:
    """
    Install the BETWEEN rendering hook into SQLAlchemy's compiler dispatch.

    Safe to call repeatedly; only the first call registers.
    """
    global _registered  # noqa: PLW0603
    if _registered:
        return

    compiles(BetweenExpression)(compile_between)
    _registered = True
    logger.info(f'Registered {BETWEEN_TAG!r} compiler for {BetweenExpression.__name__}')


def is_between_compiler_registered() -> bool:
    return _registered
