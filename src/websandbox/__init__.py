"""websandbox: HTTP glue for a sandboxed middleware runtime.

Converts Node-style header objects to ``Headers`` and back, splits
comma-joined ``Set-Cookie`` values, and exposes push-style chunk
sources as async iterators.

Basic usage::

    from websandbox import from_node_headers, to_node_headers

    headers = from_node_headers({"set-cookie": ["a=1", "b=2; Expires=Wed, 09 Jun 2021 10:18:14 GMT"]})
    to_node_headers(headers)
    # {'set-cookie': ['a=1', 'b=2; Expires=Wed, 09 Jun 2021 10:18:14 GMT']}
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Headers",
    "PropertyNotImplementedError",
    "ReadResult",
    "ReadableStream",
    "SandboxConfig",
    "StreamClosedError",
    "StreamError",
    "StreamLockedError",
    "WebSandboxError",
    "from_node_headers",
    "not_implemented",
    "receive_to_iterator",
    "split_cookies_string",
    "stream_to_iterator",
    "to_node_headers",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "websandbox.errors",
    "PropertyNotImplementedError": "websandbox.errors",
    "StreamClosedError": "websandbox.errors",
    "StreamError": "websandbox.errors",
    "StreamLockedError": "websandbox.errors",
    "WebSandboxError": "websandbox.errors",
    "not_implemented": "websandbox.errors",
    "SandboxConfig": "websandbox.config",
    "Headers": "websandbox.http.headers",
    "split_cookies_string": "websandbox.http.cookies",
    "from_node_headers": "websandbox.http.node",
    "to_node_headers": "websandbox.http.node",
    "ReadResult": "websandbox.streams",
    "ReadableStream": "websandbox.streams",
    "receive_to_iterator": "websandbox.streams",
    "stream_to_iterator": "websandbox.streams",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import websandbox`` free of anyio until streams are used.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
