"""websandbox exception hierarchy.

Shared across the header adapters, the stream adapters, and the
unimplemented-property stub so every module raises and catches the
same types. The Set-Cookie splitter has no failure path and raises
nothing.
"""

from dataclasses import dataclass
from typing import NoReturn


class WebSandboxError(Exception):
    """Base for all websandbox-specific errors."""


class ConfigurationError(WebSandboxError):
    """Raised when a ``SandboxConfig`` value is invalid.

    Raised from ``SandboxConfig.__post_init__`` at construction time.
    """


@dataclass(frozen=True, slots=True)
class PropertyNotImplementedError(WebSandboxError, NotImplementedError):  # noqa: N818
    """A property of a sandboxed component is deliberately unsupported.

    Also a ``NotImplementedError`` so generic callers can catch it
    without importing websandbox.
    """

    name: str
    member: str

    def __str__(self) -> str:
        return (
            f"Failed to get the '{self.member}' property on '{self.name}': "
            "the property is not implemented"
        )


class StreamError(WebSandboxError):
    """Base for ``ReadableStream`` misuse."""


class StreamLockedError(StreamError):
    """``get_reader()`` was called while another reader holds the lock."""


class StreamClosedError(StreamError):
    """A chunk was enqueued after the stream was closed."""


def not_implemented(name: str, member: str) -> NoReturn:
    """Raise ``PropertyNotImplementedError`` for ``name.member``.

    Used to mark unsupported surface area::

        @property
        def trailer(self):
            not_implemented("Response", "trailer")
    """
    raise PropertyNotImplementedError(name=name, member=member)
