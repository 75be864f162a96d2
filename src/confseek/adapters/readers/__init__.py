"""Reader adapters providing the raw file-read primitive.

- FilesystemReader: blocking reads, used by ExplorerSync
- AsyncFilesystemReader: thread-offloaded reads, used by Explorer
"""

from confseek.adapters.readers.filesystem import AsyncFilesystemReader, FilesystemReader


__all__ = ["AsyncFilesystemReader", "FilesystemReader"]
