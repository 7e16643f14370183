"""BETWEEN / NOT BETWEEN expressions for SQLAlchemy Core."""

import itertools
import logging
from typing import Any

from sqlalchemy import Boolean
from sqlalchemy import literal
from sqlalchemy.sql.elements import BindParameter
from sqlalchemy.sql.elements import ClauseElement
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.visitors import InternalTraversal

logger = logging.getLogger(__name__)

# Public names of the three parts, in rendering order
BETWEEN_PARTS = ('expression', 'lower_bound', 'upper_bound')


def coerce_operand(value: Any) -> ClauseElement | None:
    """
    Convert an operand into something the SQL compiler can process.

    SQL elements (and objects exposing ``__clause_element__``, such as ORM
    attributes) are kept as is, plain Python values become bound literals.
    ``None`` means "not supplied yet" and is kept; use ``sqlalchemy.null()``
    for a SQL NULL bound.

    Args:
        value: Operand value

    Returns:
        SQL element, or None when the operand is absent
    """
    if value is None or isinstance(value, ClauseElement):
        return value
    if hasattr(value, '__clause_element__'):
        return value.__clause_element__()
    return literal(value)


def _same_operand(current: ClauseElement | None, value: Any) -> bool:
    """Check whether ``value`` would leave the stored operand unchanged."""
    if current is value:
        return True
    if current is None or value is None:
        return False
    if hasattr(value, '__clause_element__'):
        value = value.__clause_element__()
    if isinstance(value, ClauseElement):
        return current.compare(value)
    # Plain Python value against a previously coerced literal
    return isinstance(current, BindParameter) and type(current.value) is type(value) and current.value == value


class BetweenExpression(ColumnElement[bool]):
    """
    SQL ``BETWEEN`` comparison: ``(expression [NOT] BETWEEN lower AND upper)``.

    Instances are immutable. ``expr()``, ``lower()``, ``upper()`` and ``negate()``
    return a new expression, or the same instance when nothing changes.
    Any of the three operands may be left out while the expression is being
    built up; all three are required by the time it is rendered.

    Example:
        >>> between(ident('c2')).lower(2).upper(3)
        >>> between(ident('c2'), 2, 3).negate()
    """

    __visit_name__ = 'between_expression'

    _traverse_internals = [
        ('_expression', InternalTraversal.dp_clauseelement),
        ('_lower_bound', InternalTraversal.dp_clauseelement),
        ('_upper_bound', InternalTraversal.dp_clauseelement),
        ('_negated', InternalTraversal.dp_boolean),
    ]

    type = Boolean()
    _is_implicitly_boolean = True

    def __init__(
        self,
        expression: Any = None,
        lower_bound: Any = None,
        upper_bound: Any = None,
        negated: bool = False,
    ) -> None:
        """
        Initialize BETWEEN expression.

        Args:
            expression: Tested value
            lower_bound: Lower bound (inclusive)
            upper_bound: Upper bound (inclusive)
            negated: Render as NOT BETWEEN
        """
        self._expression = coerce_operand(expression)
        self._lower_bound = coerce_operand(lower_bound)
        self._upper_bound = coerce_operand(upper_bound)
        self._negated = bool(negated)

    @property
    def expression(self) -> ClauseElement | None:  # type: ignore[override]
        """Tested value."""
        return self._expression

    @property
    def lower_bound(self) -> ClauseElement | None:
        """Lower bound."""
        return self._lower_bound

    @property
    def upper_bound(self) -> ClauseElement | None:
        """Upper bound."""
        return self._upper_bound

    @property
    def negated(self) -> bool:
        """True for NOT BETWEEN."""
        return self._negated

    def is_negated(self) -> bool:
        return self._negated

    def missing_parts(self) -> list[str]:
        """Names of the operands that have not been supplied."""
        return [name for name in BETWEEN_PARTS if getattr(self, name) is None]

    def is_complete(self) -> bool:
        return not self.missing_parts()

    def expr(self, value: Any) -> 'BetweenExpression':
        """Return expression with the tested value replaced."""
        if _same_operand(self._expression, value):
            return self
        return self.__class__(value, self._lower_bound, self._upper_bound, negated=self._negated)

    def lower(self, value: Any) -> 'BetweenExpression':
        """Return expression with the lower bound replaced."""
        if _same_operand(self._lower_bound, value):
            return self
        return self.__class__(self._expression, value, self._upper_bound, negated=self._negated)

    def upper(self, value: Any) -> 'BetweenExpression':
        """Return expression with the upper bound replaced."""
        if _same_operand(self._upper_bound, value):
            return self
        return self.__class__(self._expression, self._lower_bound, value, negated=self._negated)

    def negate(self) -> 'BetweenExpression':
        """Return expression with BETWEEN / NOT BETWEEN swapped."""
        return self.__class__(self._expression, self._lower_bound, self._upper_bound, negated=not self._negated)

    def __invert__(self) -> 'BetweenExpression':
        return self.negate()

    def _negate(self) -> 'BetweenExpression':
        # Used by sqlalchemy.not_()
        return self.negate()

    def self_group(self, against: Any = None) -> 'BetweenExpression':
        # Rendered output is already parenthesized
        return self

    @property
    def _from_objects(self) -> list[Any]:
        return list(itertools.chain(*[c._from_objects for c in self.get_children()]))

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(expression={self._expression!r}, '
            f'lower_bound={self._lower_bound!r}, upper_bound={self._upper_bound!r}, '
            f'negated={self._negated!r})'
        )


class BetweenMethods:
    """
    Mixin giving an expression kind fluent ``between()`` / ``not_between()``.

    The receiver becomes the tested value. Mix it in ahead of the SQLAlchemy
    base class so these methods take precedence over
    ``ColumnOperators.between()``.
    """

    def between(self, lower: Any, upper: Any, negated: bool = False) -> BetweenExpression:
        """
        Build ``(self BETWEEN lower AND upper)``.

        Args:
            lower: Lower bound
            upper: Upper bound
            negated: Build NOT BETWEEN instead

        Returns:
            BETWEEN expression with this element as the tested value
        """
        return BetweenExpression(self, lower, upper, negated=negated)

    def not_between(self, lower: Any, upper: Any) -> BetweenExpression:
        """Build ``(self NOT BETWEEN lower AND upper)``."""
        return BetweenExpression(self, lower, upper, negated=True)


def between(
    expr: Any,
    lower: Any = None,
    upper: Any = None,
    *,
    negated: bool = False,
) -> BetweenExpression:
    """
    Build a BETWEEN expression.

    When ``expr`` already is a BetweenExpression the call merges into it:
    bounds given here replace the existing ones, omitted bounds are kept, and
    ``negated=True`` flips its negation.

    Args:
        expr: Tested value, or an existing BetweenExpression to merge into
        lower: Lower bound (None = not supplied)
        upper: Upper bound (None = not supplied)
        negated: Build NOT BETWEEN (negate the merged expression)

    Returns:
        BETWEEN expression

    Example:
        >>> between(ident('c2'), 2, 3)
        >>> between(ident('c2'), 1).upper(ident('c3'))
        >>> between(between(ident('c2'), 1), upper=10)
    """
    if isinstance(expr, BetweenExpression):
        logger.debug(f'Merging bounds into existing BETWEEN expression, negated={negated}')
        result = expr.lower(lower if lower is not None else expr.lower_bound)
        result = result.upper(upper if upper is not None else expr.upper_bound)
        return result.negate() if negated else result

    logger.debug(f'Building {"NOT " if negated else ""}BETWEEN expression')
    return BetweenExpression(expr, lower, upper, negated=negated)


def not_between(expr: Any, lower: Any = None, upper: Any = None) -> BetweenExpression:
    """Build a NOT BETWEEN expression; same as ``between(..., negated=True)``."""
    return between(expr, lower, upper, negated=True)
