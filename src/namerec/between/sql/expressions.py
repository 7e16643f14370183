"""Expression kinds that carry the BETWEEN builder methods."""

from typing import Any

from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.compiler import SQLCompiler
from sqlalchemy.sql.elements import ClauseElement
from sqlalchemy.sql.elements import ColumnClause
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.elements import quoted_name
from sqlalchemy.sql.visitors import InternalTraversal
from sqlalchemy.types import NullType

from namerec.between.sql.between import BetweenMethods
from namerec.between.sql.between import coerce_operand

# Dialect attribute set by Database; absent on plain SQLAlchemy dialects
QUOTE_IDENTIFIERS_ATTR = 'quote_identifiers'


class Identifier(BetweenMethods, ColumnClause[Any]):
    """
    Plain SQL identifier (column name).

    Quoted according to the database's identifier quoting policy; outside a
    Database it compiles like ``sqlalchemy.column()``.
    """

    inherit_cache = True

    def __init__(self, name: str, type_: Any = None, **kw: Any) -> None:
        super().__init__(name, type_=type_, **kw)


class LiteralString(BetweenMethods, ColumnClause[Any]):
    """Raw SQL text inserted verbatim, like ``sqlalchemy.literal_column()``."""

    inherit_cache = True

    def __init__(self, text: str, type_: Any = None, is_literal: bool = True, **kw: Any) -> None:
        super().__init__(text, type_=type_, is_literal=is_literal, **kw)


class GenericExpression(BetweenMethods, ColumnElement[Any]):
    """Wrapper giving any SQL element (function call, arithmetic, ...) the BETWEEN builders."""

    __visit_name__ = 'generic_expression'

    _traverse_internals = [
        ('element', InternalTraversal.dp_clauseelement),
    ]

    def __init__(self, element: Any) -> None:
        self.element = coerce_operand(element)
        self.type = getattr(self.element, 'type', NullType())

    @property
    def _from_objects(self) -> list[Any]:
        return self.element._from_objects


@compiles(Identifier)
def compile_identifier(element: Identifier, compiler: SQLCompiler, **kw: Any) -> str:
    """
    Render identifier, quoting its name unconditionally when the dialect asks for it.

    Table, subquery and schema prefixes are rendered by SQLAlchemy as for any column.
    """
    if getattr(compiler.dialect, QUOTE_IDENTIFIERS_ATTR, False) and not element.is_literal:
        quoted = element._clone()
        quoted.name = quoted_name(element.name, True)
        # Keep result rows addressable by the original column
        kw['result_map_targets'] = (element, *kw.get('result_map_targets', ()))
        element = quoted
    return compiler.visit_column(element, **kw)


@compiles(GenericExpression)
def compile_generic_expression(element: GenericExpression, compiler: SQLCompiler, **kw: Any) -> str:
    return compiler.process(element.element, **kw)


def ident(name: str) -> Identifier:
    """
    Create an identifier.

    Example:
        >>> ident('price').between(10, 20)
    """
    return Identifier(name)


def lit(text: str) -> LiteralString:
    """
    Create a raw SQL fragment, emitted without quoting or escaping.

    Example:
        >>> lit('price * 2').between(10, 20)
    """
    return LiteralString(text)


def expr(value: Any) -> BetweenMethods:
    """
    Wrap a value as an expression with the BETWEEN builders.

    Strings become identifiers, SQL elements are wrapped as they are, other
    Python values become bound literals.

    Example:
        >>> expr('price').between(10, 20)
        >>> expr(func.length(ident('name'))).not_between(3, 10)
    """
    if isinstance(value, BetweenMethods):
        return value
    if isinstance(value, str):
        return Identifier(value)
    if isinstance(value, ClauseElement) or hasattr(value, '__clause_element__'):
        return GenericExpression(value)
    return GenericExpression(coerce_operand(value))
