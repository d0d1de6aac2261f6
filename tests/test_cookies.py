"""Tests for websandbox.http.cookies: comma-joined Set-Cookie splitting."""

import pytest

from websandbox.http.cookies import _WHITESPACE, split_cookies_string


def _reconstructs(raw: str, cookies: list[str]) -> bool:
    """True if *cookies* joined by ',' plus the skipped whitespace is *raw*."""
    pos = 0
    for i, cookie in enumerate(cookies):
        if i:
            if raw[pos] != ",":
                return False
            pos += 1
            while pos < len(raw) and raw[pos] in _WHITESPACE:
                pos += 1
        if not raw.startswith(cookie, pos):
            return False
        pos += len(cookie)
    return pos == len(raw)


class TestBasics:
    def test_empty_string(self) -> None:
        assert split_cookies_string("") == []

    def test_none(self) -> None:
        assert split_cookies_string(None) == []

    def test_single_cookie(self) -> None:
        assert split_cookies_string("a=1") == ["a=1"]

    def test_two_cookies(self) -> None:
        assert split_cookies_string("a=1, b=2") == ["a=1", "b=2"]

    def test_no_space_after_separator(self) -> None:
        assert split_cookies_string("a=1,b=2,c=3") == ["a=1", "b=2", "c=3"]

    def test_cookie_with_attributes(self) -> None:
        raw = "session=abc; Path=/; HttpOnly, theme=dark; Max-Age=3600"
        assert split_cookies_string(raw) == [
            "session=abc; Path=/; HttpOnly",
            "theme=dark; Max-Age=3600",
        ]


class TestExpiresDates:
    def test_comma_inside_date_is_content(self) -> None:
        raw = "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT, b=2"
        assert split_cookies_string(raw) == [
            "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT",
            "b=2",
        ]

    def test_date_at_end_of_last_cookie(self) -> None:
        raw = "a=1, b=2; Expires=Thu, 01 Jan 1970 00:00:00 GMT"
        assert split_cookies_string(raw) == [
            "a=1",
            "b=2; Expires=Thu, 01 Jan 1970 00:00:00 GMT",
        ]

    def test_date_followed_by_attribute(self) -> None:
        raw = "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT; Path=/, b=2; Expires=Fri, 01 Jan 2100 00:00:00 GMT"
        assert split_cookies_string(raw) == [
            "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT; Path=/",
            "b=2; Expires=Fri, 01 Jan 2100 00:00:00 GMT",
        ]

    def test_every_cookie_has_a_date(self) -> None:
        one = "a=1; Expires=Mon, 01 Jan 2024 00:00:00 GMT"
        two = "b=2; Expires=Tue, 02 Jan 2024 00:00:00 GMT"
        three = "c=3; Expires=Wed, 03 Jan 2024 00:00:00 GMT"
        assert split_cookies_string(f"{one}, {two}, {three}") == [one, two, three]


class TestEdgeCases:
    def test_trailing_comma_is_content(self) -> None:
        assert split_cookies_string("a=1,") == ["a=1,"]

    def test_trailing_comma_and_whitespace(self) -> None:
        assert split_cookies_string("a=1,  ") == ["a=1,  "]

    def test_comma_then_text_to_end_is_content(self) -> None:
        assert split_cookies_string("a=1, trailing text") == ["a=1, trailing text"]

    def test_comma_followed_by_semicolon(self) -> None:
        assert split_cookies_string("a=1,; b=2") == ["a=1,; b=2"]

    def test_comma_followed_by_comma(self) -> None:
        assert split_cookies_string("a=1,, b=2") == ["a=1,", "b=2"]

    def test_only_whitespace(self) -> None:
        assert split_cookies_string("   ") == ["   "]

    def test_leading_whitespace_kept(self) -> None:
        assert split_cookies_string("  a=1, b=2") == ["  a=1", "b=2"]

    def test_whitespace_before_separator_kept(self) -> None:
        assert split_cookies_string("a=1 , b=2") == ["a=1 ", "b=2"]

    def test_whitespace_after_separator_dropped(self) -> None:
        assert split_cookies_string("a=1,\t \nb=2") == ["a=1", "b=2"]

    def test_internal_spacing_preserved(self) -> None:
        assert split_cookies_string("a = 1 ;  x,  b =2") == ["a = 1 ;  x", "b =2"]

    def test_no_equals_at_all(self) -> None:
        assert split_cookies_string("foo, bar, baz") == ["foo, bar, baz"]

    def test_leading_comma_separator(self) -> None:
        assert split_cookies_string(", a=1") == ["", "a=1"]

    def test_unmatched_equals(self) -> None:
        assert split_cookies_string("=, =") == ["=", "="]

    def test_quotes_are_not_special(self) -> None:
        raw = 'a="x, y=z"'
        assert split_cookies_string(raw) == ['a="x', 'y=z"']

    def test_already_split_value_unchanged(self) -> None:
        cookie = "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT; Secure"
        assert split_cookies_string(cookie) == [cookie]
        assert split_cookies_string(split_cookies_string(cookie)[0]) == [cookie]


class TestWhitespaceSet:
    @pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85"])
    def test_info_separators_and_nel_are_content(self, ch: str) -> None:
        assert split_cookies_string(f"a=1,{ch}b=2") == ["a=1", f"{ch}b=2"]

    def test_byte_order_mark_is_whitespace(self) -> None:
        assert split_cookies_string("a=1,\ufeffb=2") == ["a=1", "b=2"]

    @pytest.mark.parametrize("ch", ["\u00a0", "\u2003", "\u2028", "\u3000"])
    def test_unicode_spaces_skipped_after_separator(self, ch: str) -> None:
        assert split_cookies_string(f"a=1,{ch}b=2") == ["a=1", "b=2"]

    def test_control_char_only_input_is_one_segment(self) -> None:
        assert split_cookies_string("\x1f") == ["\x1f"]


class TestSequenceInput:
    def test_bytes_decoded_as_latin1(self) -> None:
        assert split_cookies_string(b"a=1, b=caf\xe9") == ["a=1", "b=café"]

    def test_empty_bytes(self) -> None:
        assert split_cookies_string(b"") == []

    def test_list_of_values(self) -> None:
        assert split_cookies_string(["a=1, b=2", "c=3"]) == ["a=1", "b=2", "c=3"]

    def test_empty_list(self) -> None:
        assert split_cookies_string([]) == []

    def test_tuple_with_empty_value(self) -> None:
        assert split_cookies_string(("a=1", "")) == ["a=1"]


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "a=1",
        "a=1, b=2",
        "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT, b=2",
        "a=1,",
        "a=1,, b=2",
        "  a=1 ,\t b=2;,c",
        "x, y, z=1, , ;=",
        ", a=1",
    ],
)
def test_segments_reconstruct_input(raw: str) -> None:
    cookies = split_cookies_string(raw)
    assert _reconstructs(raw, cookies)
