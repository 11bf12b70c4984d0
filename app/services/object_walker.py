"""
Recursive traversal of JSON-like values.

Lists keep their order, dicts keep their keys (untouched) and key order,
strings go through the transform and every other value is returned as is.
The input is never mutated; a new structure is built.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Union

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


def walk(value: JSONValue, transform: Callable[[str], str]) -> JSONValue:
    if isinstance(value, list):
        return [walk(item, transform) for item in value]
    if isinstance(value, dict):
        return {key: walk(item, transform) for key, item in value.items()}
    if isinstance(value, str):
        return transform(value)
    return value


async def walk_async(
    value: JSONValue, transform: Callable[[str], Awaitable[str]]
) -> JSONValue:
    """Like ``walk`` but siblings are transformed concurrently."""
    if isinstance(value, list):
        return list(await asyncio.gather(*(walk_async(item, transform) for item in value)))
    if isinstance(value, dict):
        keys = list(value.keys())
        items = await asyncio.gather(*(walk_async(value[key], transform) for key in keys))
        return dict(zip(keys, items))
    if isinstance(value, str):
        return await transform(value)
    return value
