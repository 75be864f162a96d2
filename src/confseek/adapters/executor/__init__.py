"""Executor adapters driving search and load steps."""

from confseek.adapters.executor.executor import AsyncioExecutor, SynchronousExecutor


__all__ = ["AsyncioExecutor", "SynchronousExecutor"]
