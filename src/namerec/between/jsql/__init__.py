"""JSQL (JSON-SQL) conditions for BETWEEN expressions."""

from namerec.between.jsql.converter import between_to_jsql
from namerec.between.jsql.converter import jsql_operand_to_sql
from namerec.between.jsql.converter import jsql_to_between
from namerec.between.jsql.converter import jsql_to_sql
from namerec.between.jsql.exceptions import InvalidOperandError
from namerec.between.jsql.exceptions import JSQLSyntaxError
from namerec.between.jsql.exceptions import MissingFieldError
from namerec.between.jsql.exceptions import UnknownOperatorError
from namerec.between.jsql.exceptions import UnsupportedOperandError
from namerec.between.jsql.types import JSQLBetweenCondition

__all__ = [
    'InvalidOperandError',
    'JSQLBetweenCondition',
    'JSQLSyntaxError',
    'MissingFieldError',
    'UnknownOperatorError',
    'UnsupportedOperandError',
    'between_to_jsql',
    'jsql_operand_to_sql',
    'jsql_to_between',
    'jsql_to_sql',
]
