"""Constants for JSQL conditions to avoid magic strings."""

from enum import Enum


class JSQLField(str, Enum):
    """Field names used in JSQL conditions."""

    # Condition structure
    OP = 'op'
    EXPR = 'expr'
    LOW = 'low'
    HIGH = 'high'

    # Operands
    FIELD = 'field'
    VALUE = 'value'
    PARAM = 'param'
    LITERAL = 'literal'
    FUNC = 'func'
    ARGS = 'args'


class JSQLOperator(str, Enum):
    """Range operators understood by the converter."""

    BETWEEN = 'BETWEEN'
    NOT_BETWEEN = 'NOT BETWEEN'


BETWEEN_OPERATORS = frozenset({JSQLOperator.BETWEEN, JSQLOperator.NOT_BETWEEN})

# JSQL operand keys and the BetweenExpression parts they fill
OPERAND_PARTS = {
    JSQLField.EXPR.value: 'expression',
    JSQLField.LOW.value: 'lower_bound',
    JSQLField.HIGH.value: 'upper_bound',
}
