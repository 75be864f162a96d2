"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite, most notably `engine`, which runs a
test once against Explorer and once against ExplorerSync.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import pytest

from confseek import Explorer, ExplorerSync, FilesystemReader, build_options


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and search")
    config.addinivalue_line("markers", "loaders: Loader registry and adapters")
    config.addinivalue_line("markers", "readers: Reader adapters")
    config.addinivalue_line("markers", "cache: Cache adapter and wrapper")
    config.addinivalue_line("markers", "concurrency: Async engine concurrency")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard)",
    )


class CountingReader:
    """Blocking reader that records every path it is asked to read."""

    def __init__(self) -> None:
        self._reader = FilesystemReader()
        self.calls: list[Path] = []

    def read(self, filepath: Path, *, throw_not_found: bool = False) -> str | None:
        self.calls.append(filepath)
        return self._reader.read(filepath, throw_not_found=throw_not_found)


class AsyncCountingReader:
    """Async reader that yields to the event loop before every read."""

    def __init__(self, counting: CountingReader | None = None) -> None:
        self.counting = counting or CountingReader()

    @property
    def calls(self) -> list[Path]:
        return self.counting.calls

    async def read(
        self, filepath: Path, *, throw_not_found: bool = False
    ) -> str | None:
        await asyncio.sleep(0)
        return self.counting.read(filepath, throw_not_found=throw_not_found)


class EngineHarness:
    """Uniform blocking facade over Explorer or ExplorerSync.

    Attributes:
        kind: "async" or "sync".
        reader: The counting reader used by the explorer.
        explorer: The wrapped explorer.
    """

    def __init__(self, kind: str, module_name: str = "demo", **overrides: Any) -> None:
        self.kind = kind
        options = build_options(module_name, **overrides)
        counting = CountingReader()
        if kind == "async":
            self.reader = AsyncCountingReader(counting)
            self.explorer: Explorer | ExplorerSync = Explorer(
                options, reader=self.reader
            )
        else:
            self.reader = counting
            self.explorer = ExplorerSync(options, reader=counting)

    @property
    def calls(self) -> list[Path]:
        return self.reader.calls

    def search(self, search_from: Path | str | None = None) -> Any:
        if isinstance(self.explorer, Explorer):
            return asyncio.run(self.explorer.search(search_from))
        return self.explorer.search_sync(search_from)

    def load(self, filepath: Path | str) -> Any:
        if isinstance(self.explorer, Explorer):
            return asyncio.run(self.explorer.load(filepath))
        return self.explorer.load_sync(filepath)


@pytest.fixture(params=["async", "sync"])
def engine(request: pytest.FixtureRequest) -> Any:
    """Factory building an EngineHarness for each explorer implementation.

    Call it with build_options() keyword arguments.
    """

    def make(module_name: str = "demo", **overrides: Any) -> EngineHarness:
        return EngineHarness(request.param, module_name, **overrides)

    return make


@pytest.fixture
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    xdg_home = tmp_path / "xdg-config"
    xdg_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_home))
    return xdg_home


@pytest.fixture
def async_reader() -> AsyncCountingReader:
    """Async reader that counts reads and suspends before each one."""
    return AsyncCountingReader()


@pytest.fixture(autouse=True)
def confseek_logger() -> Any:
    """Restore the package logger's handlers and level after each test.

    The CLI's --verbose flag configures the global "confseek" logger.
    """
    logger = logging.getLogger("confseek")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
