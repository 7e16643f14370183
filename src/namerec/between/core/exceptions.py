"""Exception hierarchy for namerec.between."""


class BetweenError(Exception):
    """Base exception for namerec.between errors."""


class IncompleteExpressionError(BetweenError):
    """BETWEEN expression rendered before all of its parts were supplied."""

    def __init__(self, missing: list[str], message: str | None = None) -> None:
        """
        Initialize incomplete expression error.

        Args:
            missing: Names of the absent parts ('expression', 'lower_bound', 'upper_bound')
            message: Optional custom message
        """
        self.missing = missing
        msg = message or f'Cannot render BETWEEN expression, missing: {", ".join(missing)}'
        super().__init__(msg)


class UnknownDialectError(BetweenError, ValueError):
    """Dialect profile not registered."""

    def __init__(self, dialect: str, available: list[str] | None = None) -> None:
        """
        Initialize unknown dialect error.

        Args:
            dialect: Requested dialect name or URL
            available: Names of registered dialect profiles
        """
        self.dialect = dialect
        self.available = available or []

        message = f"Unknown dialect: '{dialect}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"

        super().__init__(message)


class UnknownExtensionError(BetweenError, ValueError):
    """Extension not registered."""

    def __init__(self, extension: str, available: list[str] | None = None) -> None:
        """
        Initialize unknown extension error.

        Args:
            extension: Requested extension name
            available: Names of registered extensions
        """
        self.extension = extension
        self.available = available or []

        message = f"Unknown extension: '{extension}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"

        super().__init__(message)


class ExtensionNotLoadedError(BetweenError):
    """Expression requires an extension the database has not loaded."""

    def __init__(self, extension: str, dialect: str | None = None) -> None:
        """
        Initialize extension not loaded error.

        Args:
            extension: Name of the missing extension
            dialect: Dialect profile of the database
        """
        self.extension = extension
        self.dialect = dialect
        where = f' on {dialect} database' if dialect else ''
        super().__init__(f"Extension '{extension}' is not loaded{where}. Call Database.extension('{extension}') first.")
