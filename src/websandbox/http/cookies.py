"""Set-Cookie field-value splitting.

Set-Cookie field-values are sometimes comma joined in one string
(RFC 2616 section 4.2 allows it, and some fetch implementations do it for
every header). A plain ``split(",")`` breaks on the comma inside
``Expires=Wed, 09 Jun 2021 10:18:14 GMT``, so the joined value is
scanned instead: a comma separates two cookies only when the next
special character after it is ``=``.

Based on the j2objc ``HttpCookie`` splitter by Tom Ball.
"""

from collections.abc import Sequence

_SPECIAL = frozenset("=;,")

# ECMAScript \s: WhiteSpace plus LineTerminator. Narrower than str.isspace()
# (no U+001C-U+001F, no U+0085) and wider by U+FEFF.
_WHITESPACE = frozenset(
    " \t\n\v\f\r\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
) | frozenset(map(chr, range(0x2000, 0x200B)))


def split_cookies_string(cookies_string: str | bytes | Sequence[str] | None) -> list[str]:
    """Split a comma-joined ``Set-Cookie`` value into individual cookies.

    A comma is a separator when, after skipping the whitespace that
    follows it, the run of characters up to the next ``=``, ``;`` or
    ``,`` ends at ``=``. Any other comma (e.g. inside an ``Expires``
    date, or trailing) is kept as cookie content.

    Whitespace after a separator is dropped; nothing else is trimmed.
    Quotes get no special treatment. Never raises.

    A list of values (as Node.js stores ``set-cookie``) is split item by
    item. Raw header ``bytes`` are decoded as latin-1 first. ``None``
    and ``""`` give ``[]``.

        >>> split_cookies_string("a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT, b=2")
        ['a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT', 'b=2']
    """
    if cookies_string is None:
        return []
    if isinstance(cookies_string, (bytes, bytearray)):
        cookies_string = cookies_string.decode("latin-1")
    if not isinstance(cookies_string, str):
        return [cookie for value in cookies_string for cookie in split_cookies_string(value)]

    s = cookies_string
    end = len(s)
    cookies: list[str] = []
    pos = 0

    def skip_whitespace() -> bool:
        nonlocal pos
        while pos < end and s[pos] in _WHITESPACE:
            pos += 1
        return pos < end

    while pos < end:
        start = pos
        separator_found = False

        while skip_whitespace():
            if s[pos] != ",":
                pos += 1
                continue

            # ',' separates cookies if the first special char after it is '='
            last_comma = pos
            pos += 1
            skip_whitespace()
            next_start = pos
            while pos < end and s[pos] not in _SPECIAL:
                pos += 1

            if pos < end and s[pos] == "=":
                separator_found = True
                # pos is inside the next cookie; rewind to where it begins
                pos = next_start
                cookies.append(s[start:last_comma])
                break

            # ',' inside a value (Expires) or before ';': keep scanning after it
            pos = last_comma + 1

        if not separator_found or pos >= end:
            cookies.append(s[start:])

    return cookies
