"""
Async Runner Utility - Run the async handlers from synchronous Firebase entrypoints.

Firebase Functions invokes the decorated functions synchronously, sometimes on
a worker that already owns a running event loop. In that case the loop is
patched with nest_asyncio so the coroutine can run to completion inside it.
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

import nest_asyncio

logger = logging.getLogger(__name__)


def run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """
    Run a coroutine to completion and return its result.

    Args:
        coro: The coroutine to run

    Returns:
        The result of the coroutine

    Example:
        >>> async def my_async_function():
        ...     return "result"
        >>> result = run_async(my_async_function())
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    # Already inside a loop (gunicorn worker, notebook): nest into it
    nest_asyncio.apply(loop)
    logger.debug("Running coroutine inside an existing event loop")
    return loop.run_until_complete(coro)
