"""Utilities for build tasks."""

from buildpipe.build_task.utils.async_utils import is_async_function, resolve, run_callable

__all__ = ["is_async_function", "resolve", "run_callable"]
