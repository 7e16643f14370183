"""Core definitions for namerec.between."""

from namerec.between.core.exceptions import BetweenError
from namerec.between.core.exceptions import ExtensionNotLoadedError
from namerec.between.core.exceptions import IncompleteExpressionError
from namerec.between.core.exceptions import UnknownDialectError
from namerec.between.core.exceptions import UnknownExtensionError

__all__ = [
    'BetweenError',
    'ExtensionNotLoadedError',
    'IncompleteExpressionError',
    'UnknownDialectError',
    'UnknownExtensionError',
]
