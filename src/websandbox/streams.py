"""Push-to-pull stream adapters.

``ReadableStream`` is a push-style chunk source in the shape of the web
streams API: a producer enqueues chunks, a single locked reader pulls
them. ``stream_to_iterator`` turns any such readable into an async
iterator; ``receive_to_iterator`` does the same for an ASGI ``receive``
callable.

Backpressure comes from a zero-buffer anyio memory object stream:
``enqueue`` does not return until a reader has pulled the chunk.
"""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from websandbox._internal.types import Receive
from websandbox.config import DEFAULT_CONFIG, SandboxConfig
from websandbox.errors import StreamClosedError, StreamError, StreamLockedError

logger = logging.getLogger("websandbox.streams")

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True, slots=True)
class ReadResult(Generic[T]):
    """One ``read()`` outcome. ``value`` is ``None`` once ``done``."""

    value: T | None = None
    done: bool = False


class StreamReader(Protocol[T_co]):
    """Reader side of a readable stream."""

    async def read(self) -> "ReadResult[T_co]": ...
    def release_lock(self) -> None: ...


class Readable(Protocol[T_co]):
    """Anything that hands out a ``StreamReader``."""

    def get_reader(self) -> StreamReader[T_co]: ...


class ReadableStream(Generic[T]):
    """A push-style chunk source with a single exclusive reader.

    Usage::

        stream = ReadableStream[bytes]()

        async def produce() -> None:
            await stream.enqueue(b"hello")
            await stream.close()

        async with anyio.create_task_group() as tg:
            tg.start_soon(produce)
            async for chunk in stream_to_iterator(stream):
                ...
    """

    def __init__(self) -> None:
        send: MemoryObjectSendStream[T]
        receive: MemoryObjectReceiveStream[T]
        send, receive = anyio.create_memory_object_stream(max_buffer_size=0)
        self._send = send
        self._receive = receive
        self._locked = False
        self._closed = False
        self._done = False

    @property
    def locked(self) -> bool:
        """True while a reader holds the lock."""
        return self._locked

    @property
    def closed(self) -> bool:
        return self._closed

    async def enqueue(self, chunk: T) -> None:
        """Push one chunk. Suspends until a reader pulls it."""
        if self._closed:
            raise StreamClosedError("Cannot enqueue a chunk into a closed stream")
        await self._send.send(chunk)

    async def close(self) -> None:
        """Signal end of stream. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        await self._send.aclose()

    def get_reader(self) -> "StreamDefaultReader[T]":
        """Lock the stream to a new reader.

        Raises:
            StreamLockedError: If another reader already holds the lock.
        """
        if self._locked:
            raise StreamLockedError("ReadableStream is already locked to a reader")
        self._locked = True
        return StreamDefaultReader(self)

    def _unlock(self) -> None:
        self._locked = False


class StreamDefaultReader(Generic[T]):
    """The reader returned by ``ReadableStream.get_reader()``."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ReadableStream[T]) -> None:
        self._stream: ReadableStream[T] | None = stream

    async def read(self) -> ReadResult[T]:
        """Pull the next chunk. Keeps returning ``done`` once drained."""
        stream = self._stream
        if stream is None:
            raise StreamError("Reader has released its lock")
        if stream._done:
            return ReadResult(done=True)
        try:
            value = await stream._receive.receive()
        except anyio.EndOfStream:
            stream._done = True
            stream._receive.close()
            return ReadResult(done=True)
        return ReadResult(value=value)

    def release_lock(self) -> None:
        """Give the stream back. Releasing twice is a no-op."""
        if self._stream is not None:
            self._stream._unlock()
            self._stream = None


async def stream_to_iterator(
    readable: Readable[T],
    *,
    config: SandboxConfig | None = None,
) -> AsyncIterator[T]:
    """Pull chunks from *readable* one at a time until it is done.

    Empty chunks are dropped (``skip_empty_chunks``). The reader lock is
    released when the stream ends, when the consumer stops early, or
    when an error propagates.
    """
    config = config or DEFAULT_CONFIG
    reader = readable.get_reader()
    try:
        while True:
            result = await reader.read()
            if result.done:
                break
            if result.value is None:
                continue
            if config.skip_empty_chunks and not result.value:
                continue
            yield result.value
    finally:
        reader.release_lock()
        logger.debug("Released reader lock on %r", readable)


async def receive_to_iterator(receive: Receive) -> AsyncIterator[bytes]:
    """Stream an ASGI request body in chunks.

    Ends on the last ``http.request`` message (``more_body`` false) or on
    ``http.disconnect``.
    """
    while True:
        message = await receive()
        if message.get("type") == "http.disconnect":
            logger.debug("Client disconnected before the body was complete")
            break
        body = message.get("body", b"")
        if body:
            yield body
        if not message.get("more_body", False):
            break
