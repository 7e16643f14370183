"""SQL expression types and rendering hooks."""

from namerec.between.sql.between import BetweenExpression
from namerec.between.sql.between import BetweenMethods
from namerec.between.sql.between import between
from namerec.between.sql.between import not_between
from namerec.between.sql.compiler import BETWEEN_TAG
from namerec.between.sql.compiler import compile_between
from namerec.between.sql.compiler import register_between_compiler
from namerec.between.sql.expressions import GenericExpression
from namerec.between.sql.expressions import Identifier
from namerec.between.sql.expressions import LiteralString
from namerec.between.sql.expressions import expr
from namerec.between.sql.expressions import ident
from namerec.between.sql.expressions import lit

__all__ = [
    'BETWEEN_TAG',
    'BetweenExpression',
    'BetweenMethods',
    'GenericExpression',
    'Identifier',
    'LiteralString',
    'between',
    'compile_between',
    'expr',
    'ident',
    'lit',
    'not_between',
    'register_between_compiler',
]
