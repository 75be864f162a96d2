"""Domain exceptions for confseek.

All library errors inherit from ConfseekError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

A missing candidate file during a search is not an error: it is reported
as a NotFound result. Only explicit loads raise ConfigFileNotFoundError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class ConfseekError(Exception):
    """Base class for all confseek exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(ConfseekError):
    """Raised for invalid explorer options or misregistered loaders."""

    pass


class LoaderNotFoundError(ConfigurationError):
    """Raised when a matched file has no registered loader.

    This means a search place was configured without a loader for its
    extension or filename. It is never treated as a search miss.

    Attributes:
        filepath: The file that could not be dispatched.
        key: The loader key derived from the filename.
    """

    def __init__(self, filepath: Path, key: str) -> None:
        self.filepath = filepath
        self.key = key
        if key.startswith("."):
            description = f"extension '{key}'"
        else:
            description = "files without extensions"
        super().__init__(
            f"No loader specified for {description}, "
            f"so search place '{filepath.name}' is invalid"
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest registering a loader."""
        return (
            f"Register a loader for '{self.key}' or remove "
            f"'{self.filepath.name}' from the search places"
        )


class InvalidFilePathError(ConfseekError, ValueError):
    """Raised when load() is called with an empty file path."""

    def __init__(self, filepath: object) -> None:
        self.filepath = filepath
        super().__init__(f"load() expects a non-empty file path, got {filepath!r}")


class ConfigReadError(ConfseekError):
    """Base class for failures reading a configuration file.

    Attributes:
        filepath: The file that could not be read.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        filepath: Path,
        cause: Exception | None = None,
    ) -> None:
        self.filepath = filepath
        self.cause = cause
        super().__init__(message)


class ConfigFileNotFoundError(ConfigReadError):
    """Raised when an explicitly loaded file doesn't exist."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the config file exists: {self.filepath}"


class ConfigAccessError(ConfigReadError):
    """Raised when a configuration file cannot be read due to permissions."""

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions."""
        return f"Check read permissions on {self.filepath}"


class ConfigParseError(ConfseekError):
    """Raised by the built-in loaders when file content cannot be parsed.

    Attributes:
        filepath: Path to the file that failed to parse.
        line: Line number where the error occurred (if available).
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        filepath: Path,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.filepath = filepath
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file at the specific line."""
        if self.line:
            return f"Check {self.filepath.name} at line {self.line}"
        return f"Check {self.filepath.name} for syntax errors"
