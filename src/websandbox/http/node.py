"""Node.js header object adapters.

Converts between a Node-style header object (``{name: value | [values]}``)
and ``Headers``. On the way out, repeated headers are combined into one
string the way fetch does it, except ``Set-Cookie``, which is split back
into a list because its values may contain commas.
"""

import logging

from websandbox._internal.types import NodeHeaders
from websandbox.config import DEFAULT_CONFIG, SandboxConfig
from websandbox.http.cookies import split_cookies_string
from websandbox.http.headers import Headers

logger = logging.getLogger("websandbox.http")


def from_node_headers(
    node_headers: NodeHeaders,
    *,
    config: SandboxConfig | None = None,
) -> Headers:
    """Build ``Headers`` from a Node-style header object.

    List values are appended one entry per item, in order. ``None``
    values and ``None`` list items are skipped.
    """
    headers = Headers(config=config)
    for name, value in node_headers.items():
        values = [value] if value is None or isinstance(value, str) else value
        for item in values:
            if item is not None:
                headers.append(name, item)
    return headers


def to_node_headers(
    headers: Headers | None = None,
    *,
    config: SandboxConfig | None = None,
) -> dict[str, str | list[str]]:
    """Convert headers to a Node-style header object.

    Every header maps to its combined value, except the cookie header
    (``set-cookie`` by default, any case), which maps to the list of
    individual cookies.
    """
    config = config or DEFAULT_CONFIG
    result: dict[str, str | list[str]] = {}
    if headers is None:
        return result

    cookie_header = config.cookie_header.lower()
    for key in headers:
        value = config.combine_separator.join(headers.get_list(key))
        if key.lower() == cookie_header:
            cookies = split_cookies_string(value)
            logger.debug("Split %s header into %d value(s)", key, len(cookies))
            result[key] = cookies
        else:
            result[key] = value
    return result
