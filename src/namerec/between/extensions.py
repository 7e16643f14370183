"""Extension registry: named features a Database can load."""

import logging
from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from sqlalchemy.sql.elements import ClauseElement
from sqlalchemy.sql.visitors import iterate

from namerec.between.core.exceptions import UnknownExtensionError
from namerec.between.sql.between import BetweenExpression
from namerec.between.sql.compiler import BETWEEN_TAG
from namerec.between.sql.compiler import register_between_compiler

logger = logging.getLogger(__name__)


@dataclass
class Extension:
    """
    Registered extension.

    ``installer`` hooks the extension into SQLAlchemy and runs once per
    process; ``element_types`` are the expression classes that can only be
    rendered by databases that loaded the extension.
    """

    name: str
    installer: Callable[[], None]
    element_types: tuple[type[ClauseElement], ...] = ()
    installed: bool = field(default=False, compare=False)


class ExtensionRegistry:
    """
    Registry for extensions.
    Maps extension names to their installers.
    """

    def __init__(self) -> None:
        """Initialize registry with built-in extensions."""
        self._extensions: dict[str, Extension] = {}
        self.register(BETWEEN_TAG, register_between_compiler, element_types=(BetweenExpression,))

    def register(
        self,
        name: str,
        installer: Callable[[], None],
        element_types: Iterable[type[ClauseElement]] = (),
    ) -> None:
        """
        Register an extension.

        Args:
            name: Extension name
            installer: Callable installing the extension's compiler hooks
            element_types: Expression classes requiring the extension
        """
        self._extensions[name] = Extension(name, installer, tuple(element_types))

    def unregister(self, name: str) -> None:
        """
        Unregister an extension.

        Args:
            name: Extension name
        """
        self._extensions.pop(name, None)

    def get(self, name: str) -> Extension:
        """
        Get extension by name.

        Raises:
            UnknownExtensionError: If not registered
        """
        if name not in self._extensions:
            raise UnknownExtensionError(name, self.list_extensions())
        return self._extensions[name]

    def load(self, name: str) -> Extension:
        """
        Install extension if not yet installed.

        Args:
            name: Extension name

        Returns:
            Installed extension

        Raises:
            UnknownExtensionError: If not registered
        """
        extension = self.get(name)
        if not extension.installed:
            extension.installer()
            extension.installed = True
            logger.info(f'Loaded extension {name!r}')
        return extension

    def list_extensions(self) -> list[str]:
        return sorted(self._extensions)

    def required_extensions(self, element: ClauseElement) -> set[str]:
        """
        Find extensions needed to render an expression tree.

        Args:
            element: Root of the expression tree

        Returns:
            Names of extensions owning any element in the tree
        """
        required = set()
        for node in iterate(element):
            for extension in self._extensions.values():
                if extension.element_types and isinstance(node, extension.element_types):
                    required.add(extension.name)
        return required


# Global registry singleton
_global_registry: ExtensionRegistry | None = None


def init_global_registry() -> ExtensionRegistry:
    """
    Initialize global registry.

    Returns:
        Initialized registry
    """
    global _global_registry  # noqa: PLW0603
    _global_registry = ExtensionRegistry()
    return _global_registry


def get_global_registry() -> ExtensionRegistry:
    """
    Get global registry instance.

    Returns:
        Global registry (initialized on first use)
    """
    if _global_registry is None:
        return init_global_registry()
    return _global_registry
