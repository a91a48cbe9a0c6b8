"""
Async helpers.
Run callables that may be sync or async uniformly.
"""

import asyncio
import functools
import inspect
from collections.abc import Callable
from typing import Any


def is_async_function(func: Any) -> bool:
    """
    Check if a function is async.

    Args:
        func: Function to check.

    Returns:
        True if function is async, False otherwise.
    """
    return inspect.iscoroutinefunction(func)


async def resolve(value: Any) -> Any:
    """
    Await a value if it is awaitable.

    Args:
        value: Plain value or awaitable returned by a task or hook.

    Returns:
        The value itself, or the awaited result.
    """
    if inspect.isawaitable(value):
        return await value
    return value


async def run_callable(func: Callable[..., Any], *args: Any) -> Any:
    """
    Call a sync or async function and wait for its result.

    Sync functions run in the default executor so the event loop is not
    blocked while they work.

    Args:
        func: Function to call.
        *args: Positional arguments for the function.

    Returns:
        The result of the call.
    """
    if is_async_function(func):
        return await func(*args)

    loop = asyncio.get_running_loop()
    return await resolve(await loop.run_in_executor(None, functools.partial(func, *args)))
