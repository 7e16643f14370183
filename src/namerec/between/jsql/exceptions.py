"""Errors raised while converting JSQL BETWEEN conditions."""

from namerec.between.core.exceptions import BetweenError
from namerec.between.jsql.constants import OPERAND_PARTS


class JSQLSyntaxError(BetweenError, ValueError):
    """Raised when JSQL syntax is invalid."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """
        Initialize JSQLSyntaxError.

        Args:
            message: Error message
            path: Path in JSQL structure where error occurred (e.g., 'low.args[0]')
        """
        self.path = path
        if path:
            super().__init__(f'{message} (at {path})')
        else:
            super().__init__(message)


class UnknownOperatorError(JSQLSyntaxError):
    """'op' names something other than a range operator."""

    def __init__(self, operator: str, path: str = '', supported: list[str] | None = None) -> None:
        self.operator = operator
        self.supported = supported or []

        message = f"Unknown operator: '{operator}'"
        if self.supported:
            message += f". A range condition takes {' or '.join(self.supported)}"

        super().__init__(message, path)


class MissingFieldError(JSQLSyntaxError):
    """
    A BETWEEN condition lacks a required key.

    ``part`` is the BetweenExpression part the key would have filled
    ('expression' for 'expr'), or None for 'op'.
    """

    def __init__(self, field: str, path: str = '', operator: str | None = None) -> None:
        self.field = field
        self.part = OPERAND_PARTS.get(field)

        message = f"{operator or 'Range'} condition has no '{field}'"
        if self.part:
            message += f' to build its {self.part} from'

        super().__init__(message, path)


class InvalidOperandError(JSQLSyntaxError):
    """An operand of a BETWEEN condition cannot be turned into a SQL element."""

    def __init__(self, message: str, path: str = '', operand: object = None, part: str | None = None) -> None:
        """
        Initialize InvalidOperandError.

        Args:
            message: What is wrong with the operand
            path: Path of the operand in the JSQL structure
            operand: The offending operand
            part: BetweenExpression part the operand was meant for
        """
        self.operand = operand
        self.part = part
        super().__init__(f'Invalid {part}: {message}' if part else message, path)


class UnsupportedOperandError(JSQLSyntaxError):
    """A BetweenExpression part holds an element that has no JSQL spelling."""

    def __init__(self, element_type: str, part: str | None = None, path: str = '') -> None:
        self.element_type = element_type
        self.part = part

        subject = part or 'operand'
        super().__init__(
            f'Cannot write {subject} of type {element_type} as JSQL; '
            'use identifiers, values or raw SQL, possibly inside function calls',
            path,
        )
