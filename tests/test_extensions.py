"""Tests for extension loading."""

import logging

import pytest
from sqlalchemy import and_
from sqlalchemy import or_

from namerec.between import Database
from namerec.between import ExtensionNotLoadedError
from namerec.between import UnknownExtensionError
from namerec.between import between
from namerec.between import get_global_registry
from namerec.between import ident
from namerec.between.sql.compiler import is_between_compiler_registered


class TestDatabaseExtensions:
    def test_extension_returns_database(self) -> None:
        db = Database('postgres')
        assert db.extension('between') is db
        assert db.extensions == frozenset({'between'})

    def test_not_loaded(self) -> None:
        db = Database('postgres')

        with pytest.raises(ExtensionNotLoadedError, match="Extension 'between' is not loaded on postgres") as exc_info:
            db.literal(between(ident('a'), 1, 2))

        assert exc_info.value.extension == 'between'
        assert exc_info.value.dialect == 'postgres'

    def test_not_loaded_nested(self) -> None:
        db = Database('sqlite')

        with pytest.raises(ExtensionNotLoadedError):
            db.literal(or_(ident('b') == 1, and_(ident('c') == 2, between(ident('a'), 1, 2))))

    def test_loading_is_per_database(self) -> None:
        condition = between(ident('a'), 1, 2)
        Database('sqlite').extension('between')

        with pytest.raises(ExtensionNotLoadedError):
            Database('sqlite').literal(condition)

    def test_plain_expressions_need_no_extension(self) -> None:
        assert Database('sqlite').literal(ident('a') == 1) == 'a = 1'

    def test_unknown_extension(self) -> None:
        with pytest.raises(UnknownExtensionError, match="Unknown extension: 'pivot'") as exc_info:
            Database('postgres').extension('pivot')

        assert exc_info.value.available == ['between']

    def test_load_registers_compiler(self) -> None:
        Database('postgres').extension('between')
        assert is_between_compiler_registered()


class TestRegistry:
    def test_builtin(self) -> None:
        assert get_global_registry().list_extensions() == ['between']

    def test_load_installs_once(self) -> None:
        registry = get_global_registry()
        calls = []
        registry.register('counter', lambda: calls.append(1))

        first = registry.load('counter')
        second = registry.load('counter')

        assert first is second
        assert first.installed
        assert calls == [1]

    def test_unregister(self) -> None:
        registry = get_global_registry()
        registry.register('temp', lambda: None)
        registry.unregister('temp')

        with pytest.raises(UnknownExtensionError):
            registry.get('temp')

    def test_required_extensions(self) -> None:
        registry = get_global_registry()
        assert registry.required_extensions(and_(ident('b') == 1, between(ident('a'), 1, 2))) == {'between'}
        assert registry.required_extensions(ident('b') == 1) == set()

    def test_load_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger='namerec.between.extensions')
        get_global_registry().load('between')
        assert "Loaded extension 'between'" in caplog.text
