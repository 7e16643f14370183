"""Dialect-bound database handle used to render expressions as SQL."""

import logging
from typing import Any

from sqlalchemy import null
from sqlalchemy.engine import Dialect

from namerec.between.config import DEFAULT_DIALECT
from namerec.between.config import DialectProfile
from namerec.between.config import profile_for_url
from namerec.between.core.exceptions import ExtensionNotLoadedError
from namerec.between.extensions import get_global_registry
from namerec.between.sql.between import coerce_operand
from namerec.between.sql.expressions import QUOTE_IDENTIFIERS_ATTR

logger = logging.getLogger(__name__)


class Database:
    """
    Database handle without a connection.

    Holds a SQLAlchemy dialect configured with the profile's identifier quoting
    policy, and the set of extensions loaded for it.

    Example:
        >>> db = Database('postgres').extension('between')
        >>> db.literal(between(ident('a'), ident('b'), 2))
        '("a" BETWEEN "b" AND 2)'
    """

    def __init__(
        self,
        dialect: str | DialectProfile = DEFAULT_DIALECT,
        *,
        quote_identifiers: bool | None = None,
    ) -> None:
        """
        Initialize database.

        Args:
            dialect: Dialect profile, profile name, or database URL
            quote_identifiers: Override the profile's identifier quoting (None = profile default)
        """
        self.profile = dialect if isinstance(dialect, DialectProfile) else profile_for_url(dialect)
        if quote_identifiers is None:
            quote_identifiers = self.profile.quote_identifiers
        self.quote_identifiers = quote_identifiers

        self.dialect: Dialect = self.profile.create_dialect()
        setattr(self.dialect, QUOTE_IDENTIFIERS_ATTR, quote_identifiers)

        self._extensions: set[str] = set()

    @property
    def extensions(self) -> frozenset[str]:
        """Names of loaded extensions."""
        return frozenset(self._extensions)

    def extension(self, *names: str) -> 'Database':
        """
        Load extensions into this database.

        Args:
            *names: Extension names

        Returns:
            This database, for chaining

        Raises:
            UnknownExtensionError: If an extension is not registered
        """
        registry = get_global_registry()
        for name in names:
            registry.load(name)
            self._extensions.add(name)
            logger.debug(f'Extension {name!r} enabled for {self.profile.name} database')
        return self

    def literal(self, value: Any) -> str:
        """
        Render a value as inline SQL for this database's dialect.

        Args:
            value: SQL expression or plain Python value

        Returns:
            SQL string with literal values inlined

        Raises:
            ExtensionNotLoadedError: If the expression needs an extension not loaded here
            IncompleteExpressionError: If a BETWEEN expression is missing operands
        """
        element = coerce_operand(value)
        if element is None:
            element = null()

        missing = get_global_registry().required_extensions(element) - self._extensions
        if missing:
            raise ExtensionNotLoadedError(sorted(missing)[0], self.profile.name)

        sql = str(element.compile(dialect=self.dialect, compile_kwargs={'literal_binds': True}))
        logger.debug(f'Rendered SQL ({self.profile.name}): {sql}')
        return sql

    def __repr__(self) -> str:
        return f'Database({self.profile.name!r}, quote_identifiers={self.quote_identifiers})'


def connect(url: str = DEFAULT_DIALECT, **kwargs: Any) -> Database:
    """
    Create a database handle from a URL.

    Args:
        url: Profile name, 'mock://<profile>' or SQLAlchemy URL
        **kwargs: Passed to Database

    Returns:
        Database for the URL's dialect
    """
    return Database(url, **kwargs)
