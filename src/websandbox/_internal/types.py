"""Shared type aliases used across websandbox modules."""

from collections.abc import Awaitable, Callable, Mapping, MutableMapping, Sequence
from typing import Any, TypeAlias

# Node.js style header object: a single value, a list of values, or unset
NodeHeaderValue: TypeAlias = str | Sequence[str | None] | None
NodeHeaders: TypeAlias = Mapping[str, NodeHeaderValue]

# Raw ASGI receive callable
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
