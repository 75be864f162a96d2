"""Filesystem reader adapters for configuration files."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from confseek.core.exceptions import (
    ConfigAccessError,
    ConfigFileNotFoundError,
    ConfigReadError,
)


if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)

# Errors meaning "no file at this path" while probing search places
_NOT_A_FILE_ERRORS = (IsADirectoryError, NotADirectoryError)


class FilesystemReader:
    """Reader adapter for local text files.

    Implements FileReaderPort. A missing file (or a directory at the
    candidate path) is reported as None during searches. For explicit
    loads a missing file raises ConfigFileNotFoundError and a directory
    raises ConfigReadError.

    Args:
        encoding: Text encoding of configuration files.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, filepath: Path, *, throw_not_found: bool = False) -> str | None:
        """Read a file's text content.

        Args:
            filepath: Absolute path of the file.
            throw_not_found: If True, raise instead of returning None.

        Returns:
            The file content, or None if the file does not exist.

        Raises:
            ConfigFileNotFoundError: If the file does not exist and
                throw_not_found is True.
            ConfigAccessError: If the file cannot be read due to permissions.
            ConfigReadError: For any other I/O or decoding failure,
                including a directory at filepath when throw_not_found
                is True.
        """
        try:
            return filepath.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            if throw_not_found:
                raise ConfigFileNotFoundError(
                    f"Config file not found: {filepath}",
                    filepath=filepath,
                    cause=e,
                ) from e
            logger.debug("No file at %s", filepath)
            return None
        except _NOT_A_FILE_ERRORS as e:
            if throw_not_found:
                raise ConfigReadError(
                    f"Not a file: {filepath}",
                    filepath=filepath,
                    cause=e,
                ) from e
            logger.debug("No file at %s", filepath)
            return None
        except PermissionError as e:
            raise ConfigAccessError(
                f"Permission denied reading {filepath}",
                filepath=filepath,
                cause=e,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(
                f"Could not read {filepath}: {e}",
                filepath=filepath,
                cause=e,
            ) from e


class AsyncFilesystemReader:
    """Non-blocking reader adapter implementing AsyncFileReaderPort.

    Runs FilesystemReader.read() in a worker thread so the event loop is
    never blocked on disk access.
    """

    def __init__(self, reader: FilesystemReader | None = None) -> None:
        """Initialize with an optional blocking reader to delegate to.

        Args:
            reader: Reader doing the actual I/O. Defaults to a UTF-8
                FilesystemReader.
        """
        self._reader = reader or FilesystemReader()

    async def read(
        self, filepath: Path, *, throw_not_found: bool = False
    ) -> str | None:
        """Read a file's text content in a worker thread.

        Same contract as FilesystemReader.read().
        """
        return await asyncio.to_thread(
            self._reader.read, filepath, throw_not_found=throw_not_found
        )
