"""Pytest configuration and fixtures."""

from collections.abc import Callable

import pytest
import pytest_asyncio
from sqlalchemy import Column
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import String
from sqlalchemy import Table
from sqlalchemy.ext.asyncio import create_async_engine

from namerec.between import Database
from namerec.between import connect
from namerec.between import init_global_registry
from namerec.between import register_between_compiler


@pytest.fixture
def dbf() -> Callable[[str], Database]:
    """Factory for mock databases with the between extension loaded."""

    def factory(db_type: str) -> Database:
        return connect(f'mock://{db_type}').extension('between')

    return factory


@pytest.fixture
def postgres(dbf: Callable[[str], Database]) -> Database:
    return dbf('postgres')


@pytest.fixture
def sqlserver(dbf: Callable[[str], Database]) -> Database:
    return dbf('sqlserver')


@pytest.fixture
def sqlite(dbf: Callable[[str], Database]) -> Database:
    return dbf('sqlite')


@pytest.fixture
def metadata() -> MetaData:
    """Create test metadata with the c1/c2 table."""
    metadata = MetaData()

    Table(
        'items',
        metadata,
        Column('id', Integer, primary_key=True),
        Column('c1', String(10), nullable=False),
        Column('c2', Integer, nullable=False),
    )

    return metadata


@pytest_asyncio.fixture
async def engine(metadata: MetaData):  # noqa: ANN201
    """Create async engine with test database."""
    register_between_compiler()
    engine = create_async_engine('sqlite+aiosqlite:///:memory:')

    items = metadata.tables['items']
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(
            items.insert(),
            [
                {'c1': 'a', 'c2': 1},
                {'c1': 'b', 'c2': 2},
                {'c1': 'c', 'c2': 3},
                {'c1': 'd', 'c2': 4},
            ],
        )

    yield engine

    await engine.dispose()


@pytest.fixture(autouse=True)
def reset_global_registry() -> None:
    """Reset extension registry before each test."""
    init_global_registry()
