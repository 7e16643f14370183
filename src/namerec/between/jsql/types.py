"""Type definitions for JSQL conditions."""

from typing import Any
from typing import NotRequired
from typing import TypedDict

# Operand: {'field': ...}, {'value': ...}, {'param': ...}, {'literal': ...},
# {'func': ..., 'args': [...]}, or a bare string meaning a field
JSQLOperand = dict[str, Any] | str


class JSQLBetweenCondition(TypedDict):
    """BETWEEN / NOT BETWEEN condition."""

    op: str
    expr: JSQLOperand
    low: NotRequired[JSQLOperand]
    high: NotRequired[JSQLOperand]
