"""Case-insensitive, multi-valued HTTP headers.

Implements ``Mapping[str, str]`` plus ``get_list`` for repeated headers.
Stores raw byte pairs (ASGI compatible); decodes on access.
"""

from collections.abc import Iterable, Iterator, Mapping

from websandbox.config import DEFAULT_CONFIG, SandboxConfig


class Headers(Mapping[str, str]):
    """Ordered, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    ``combined`` returns them joined the way fetch ``Headers.get`` does.

    Repeated ``append`` calls keep repeated entries; nothing is merged
    until ``combined`` or ``entries`` is asked for.
    """

    __slots__ = ("_config", "_raw")

    def __init__(
        self,
        raw: Iterable[tuple[bytes, bytes]] = (),
        *,
        config: SandboxConfig | None = None,
    ) -> None:
        self._raw: list[tuple[bytes, bytes]] = list(raw)
        self._config = config or DEFAULT_CONFIG

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str]],
        *,
        config: SandboxConfig | None = None,
    ) -> "Headers":
        """Build headers from ``(name, value)`` string pairs."""
        headers = cls(config=config)
        for name, value in pairs:
            headers.append(name, value)
        return headers

    def _encode(self, text: str) -> bytes:
        return text.encode(self._config.header_encoding)

    def _decode(self, data: bytes) -> str:
        return data.decode(self._config.header_encoding)

    def _key(self, key: str) -> bytes:
        return self._encode(key.lower())

    # -- Mapping --

    def __getitem__(self, key: str) -> str:
        key_lower = self._key(key)
        for name, value in self._raw:
            if name.lower() == key_lower:
                return self._decode(value)
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = self._key(key)
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = self._decode(name).lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.entries())
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = self._key(key)
        return [self._decode(value) for name, value in self._raw if name.lower() == key_lower]

    def combined(self, key: str) -> str:
        """Return every value for *key* joined with ``", "``.

        Raises ``KeyError`` when the header is absent.
        """
        values = self.get_list(key)
        if not values:
            raise KeyError(key)
        return self._config.combine_separator.join(values)

    def entries(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, combined value)`` once per header name."""
        for key in self:
            yield key, self.combined(key)

    # -- Mutation --

    def append(self, name: str, value: str) -> None:
        """Add a value, keeping any existing values for *name*."""
        self._raw.append((self._encode(name), self._encode(value)))

    def set(self, name: str, value: str) -> None:
        """Replace every value for *name* with *value*."""
        self.delete(name)
        self.append(name, value)

    def delete(self, name: str) -> None:
        """Remove every value for *name*. Missing names are ignored."""
        key_lower = self._key(name)
        self._raw = [(n, v) for n, v in self._raw if n.lower() != key_lower]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Access raw header byte pairs for ASGI compatibility."""
        return tuple(self._raw)
