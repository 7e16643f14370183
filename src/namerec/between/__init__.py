"""
namerec.between - BETWEEN / NOT BETWEEN expressions for SQLAlchemy Core.
"""

from namerec.between.config import DialectProfile
from namerec.between.config import get_dialect_profile
from namerec.between.config import list_dialect_profiles
from namerec.between.config import register_dialect_profile
from namerec.between.core.exceptions import BetweenError
from namerec.between.core.exceptions import ExtensionNotLoadedError
from namerec.between.core.exceptions import IncompleteExpressionError
from namerec.between.core.exceptions import UnknownDialectError
from namerec.between.core.exceptions import UnknownExtensionError
from namerec.between.database import Database
from namerec.between.database import connect
from namerec.between.extensions import ExtensionRegistry
from namerec.between.extensions import get_global_registry
from namerec.between.extensions import init_global_registry
from namerec.between.jsql import JSQLSyntaxError
from namerec.between.jsql import between_to_jsql
from namerec.between.jsql import jsql_to_between
from namerec.between.jsql import jsql_to_sql
from namerec.between.sql import BetweenExpression
from namerec.between.sql import BetweenMethods
from namerec.between.sql import GenericExpression
from namerec.between.sql import Identifier
from namerec.between.sql import LiteralString
from namerec.between.sql import between
from namerec.between.sql import expr
from namerec.between.sql import ident
from namerec.between.sql import lit
from namerec.between.sql import not_between
from namerec.between.sql import register_between_compiler

__version__ = '1.0'

__all__ = [
    # Expressions
    'BetweenExpression',
    'BetweenMethods',
    'GenericExpression',
    'Identifier',
    'LiteralString',
    'between',
    'not_between',
    'expr',
    'ident',
    'lit',
    'register_between_compiler',
    # Database
    'Database',
    'connect',
    # Config
    'DialectProfile',
    'register_dialect_profile',
    'get_dialect_profile',
    'list_dialect_profiles',
    # Extensions
    'ExtensionRegistry',
    'init_global_registry',
    'get_global_registry',
    # JSQL
    'jsql_to_between',
    'jsql_to_sql',
    'between_to_jsql',
    # Exceptions
    'BetweenError',
    'IncompleteExpressionError',
    'UnknownDialectError',
    'UnknownExtensionError',
    'ExtensionNotLoadedError',
    'JSQLSyntaxError',
]
