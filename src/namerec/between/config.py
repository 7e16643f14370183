"""Dialect profiles: which SQLAlchemy dialect to render with and how to quote identifiers."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.dialects import mssql
from sqlalchemy.dialects import mysql
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.engine import make_url
from sqlalchemy.engine.default import DefaultDialect
from sqlalchemy.exc import ArgumentError

from namerec.between.core.exceptions import UnknownDialectError

logger = logging.getLogger(__name__)

# URL scheme for dialect-only databases ('mock://postgres')
MOCK_SCHEME = 'mock'
DEFAULT_DIALECT = 'generic'


@dataclass(frozen=True)
class DialectProfile:
    """
    Rendering configuration for one database flavour.

    ``quote_identifiers`` forces every identifier built with ``ident()`` to be
    quoted; when False the dialect's own rules apply (quote reserved words and
    mixed case only).
    """

    name: str
    factory: Callable[[], Dialect]
    quote_identifiers: bool = False
    aliases: tuple[str, ...] = ()

    def create_dialect(self) -> Dialect:
        """Create a fresh SQLAlchemy dialect instance for this profile."""
        return self.factory()


_profiles: dict[str, DialectProfile] = {}
_aliases: dict[str, str] = {}


def register_dialect_profile(profile: DialectProfile) -> None:
    """
    Register (or replace) a dialect profile.

    Args:
        profile: Profile to register; its name and aliases become lookup keys
    """
    key = profile.name.lower()
    _profiles[key] = profile
    for alias in profile.aliases:
        _aliases[alias.lower()] = key
    logger.debug(f'Registered dialect profile {key!r} (aliases: {profile.aliases}, quote={profile.quote_identifiers})')


def get_dialect_profile(name: str) -> DialectProfile:
    """
    Get dialect profile by name or alias (case-insensitive).

    Args:
        name: Profile name or alias

    Returns:
        Registered profile

    Raises:
        UnknownDialectError: If no profile matches
    """
    key = name.lower()
    key = _aliases.get(key, key)
    if key not in _profiles:
        raise UnknownDialectError(name, list_dialect_profiles())
    return _profiles[key]


def list_dialect_profiles() -> list[str]:
    return sorted(_profiles)


def profile_for_url(url: str) -> DialectProfile:
    """
    Resolve a dialect profile from a name or a database URL.

    Accepts a bare profile name ('postgres'), a mock URL ('mock://sqlserver')
    or any SQLAlchemy URL ('postgresql+asyncpg://user@host/db').

    Args:
        url: Profile name or URL

    Returns:
        Matching profile

    Raises:
        UnknownDialectError: If the URL is malformed or its backend has no profile
    """
    if '://' not in url:
        return get_dialect_profile(url)

    try:
        parsed = make_url(url)
    except ArgumentError as e:
        raise UnknownDialectError(url, list_dialect_profiles()) from e

    if parsed.drivername == MOCK_SCHEME:
        return get_dialect_profile(parsed.host or DEFAULT_DIALECT)
    return get_dialect_profile(parsed.get_backend_name())


def _register_builtin_profiles() -> None:
    for profile in (
        DialectProfile(DEFAULT_DIALECT, DefaultDialect, aliases=('default',)),
        DialectProfile('postgres', postgresql.dialect, quote_identifiers=True, aliases=('postgresql', 'pg')),
        DialectProfile('mysql', mysql.dialect, quote_identifiers=True, aliases=('mariadb',)),
        DialectProfile('sqlite', sqlite.dialect, aliases=('sqlite3',)),
        DialectProfile('sqlserver', mssql.dialect, aliases=('mssql', 'tsql')),
    ):
        register_dialect_profile(profile)


_register_builtin_profiles()
