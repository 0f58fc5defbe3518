"""Uniform invocation of handlers, hooks and middleware.

Route authors may write any of:
- plain functions (result returned directly)
- coroutine functions (``async def``)
- generator functions that ``yield`` awaitables and receive their results

``call()`` runs any of them and returns the final result, so the request
pipeline never needs to know which style a handler uses.

Usage:
    async def handler(ctx, state):
        ctx.body = await load(ctx.params["id"])

    def handler(ctx, state):
        ctx.body = yield load(ctx.params["id"])

    await call(handler, ctx, state)
"""

import inspect
from collections.abc import Callable, Generator
from typing import Any


async def call(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
    """Call ``fn`` and resolve whatever it returns.

    Args:
        fn: Handler, hook or middleware in any supported style.
        *args: Positional arguments for ``fn``.
        **kwargs: Keyword arguments for ``fn``.

    Returns:
        Any: Final result after every suspension point resolved.
    """
    return await resolve(fn(*args, **kwargs))


async def resolve(value: Any) -> Any:
    """Resolve an awaitable or drive a generator to completion."""
    if inspect.isgenerator(value):
        return await _drive(value)
    if inspect.isawaitable(value):
        return await resolve(await value)
    return value


async def _drive(gen: Generator[Any, Any, Any]) -> Any:
    # Each yielded value is resolved and sent back; exceptions raised while
    # resolving are thrown into the generator so it can handle them.
    try:
        yielded = next(gen)
        while True:
            try:
                result = await resolve(yielded)
            except Exception as exc:
                yielded = gen.throw(exc)
            else:
                yielded = gen.send(result)
    except StopIteration as stop:
        return stop.value
