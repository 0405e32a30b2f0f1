"""Tests for crumb.parser: the public parse / parse_cookies entry points."""

import logging

import pytest

from crumb.config import ParserConfig
from crumb.cookie import Cookie
from crumb.cookies import Cookies
from crumb.errors import CookieError, InternalError, InternalErrorKind, ParseError
from crumb.parser import parse, parse_cookies
from crumb.span import Span
from crumb.syntax.errors import InvalidToken, LimitExceeded, UnrecognizedEOF, UnrecognizedToken


def _pairs(header: str, config: ParserConfig | None = None) -> list[tuple[str, str]]:
    return parse(header, config).pairs()


class TestSingleCookie:
    def test_plain(self) -> None:
        assert _pairs("test=1234") == [("test", "1234")]

    def test_quoted(self) -> None:
        assert _pairs('quoted_test="quotedval"') == [("quoted_test", "quotedval")]

    def test_equals_in_value(self) -> None:
        assert _pairs("test=abc=123") == [("test", "abc=123")]

    def test_base64_padding(self) -> None:
        assert _pairs("token=YWJj==") == [("token", "YWJj==")]

    def test_ows_before(self) -> None:
        assert _pairs(" \t ztest=9876") == [("ztest", "9876")]

    def test_single_space_before(self) -> None:
        assert _pairs(" qtest=9878") == [("qtest", "9878")]

    def test_ows_after(self) -> None:
        assert _pairs("abcde=77766test \t\t    ") == [("abcde", "77766test")]

    def test_single_space_after(self) -> None:
        assert _pairs("xyzzz=test3 ") == [("xyzzz", "test3")]

    def test_ows_before_and_after(self) -> None:
        assert _pairs(" \t ztest=9876       ") == [("ztest", "9876")]

    def test_empty_name(self) -> None:
        assert _pairs("=nokey") == [("", "nokey")]

    def test_empty_name_with_ows_before(self) -> None:
        assert _pairs(" =nokey") == [("", "nokey")]

    def test_empty_value(self) -> None:
        assert _pairs("noval=") == [("noval", "")]

    def test_empty_value_with_ows_after(self) -> None:
        assert _pairs("noval= ") == [("noval", "")]

    def test_empty_name_and_value(self) -> None:
        assert _pairs("=") == [("", "")]

    def test_no_equals(self) -> None:
        assert _pairs("nokey") == [("", "nokey")]

    def test_cookie_octets_value(self) -> None:
        assert _pairs("path=/a/b?c:d") == [("path", "/a/b?c:d")]

    def test_case_preserved(self) -> None:
        assert _pairs("SID=AbC") == [("SID", "AbC")]

    def test_percent_encoding_not_decoded(self) -> None:
        assert _pairs("q=a%20b") == [("q", "a%20b")]


class TestMultipleCookies:
    def test_two(self) -> None:
        assert _pairs("cookie1=value1; cookie2=value2") == [
            ("cookie1", "value1"),
            ("cookie2", "value2"),
        ]

    def test_three(self) -> None:
        expected = [("test1", "0x1234"), ("test2", "test2"), ("third_val", "v4lue")]
        assert _pairs("test1=0x1234; test2=test2; third_val=v4lue") == expected
        assert _pairs(" test1=0x1234; test2=test2; third_val=v4lue") == expected
        assert _pairs("test1=0x1234; test2=test2; third_val=v4lue   ") == expected
        assert _pairs("   test1=0x1234; test2=test2; third_val=v4lue ") == expected

    def test_no_spacing(self) -> None:
        assert _pairs("test1=0x1234;test2=test2;third_val=v4lue") == [
            ("test1", "0x1234"),
            ("test2", "test2"),
            ("third_val", "v4lue"),
        ]

    def test_ows_around_separator(self) -> None:
        assert _pairs("a=1 ;\t b=2") == [("a", "1"), ("b", "2")]

    def test_mixed_forms(self) -> None:
        assert _pairs('a=1; flag; ="q"; b=') == [("a", "1"), ("", "flag"), ("", "q"), ("b", "")]

    def test_duplicates_kept_in_order(self) -> None:
        assert _pairs("a=1; a=2") == [("a", "1"), ("a", "2")]


class TestSpans:
    def test_cookie_records_source_offsets(self) -> None:
        header = 'x=1; name="value"'
        cookie = parse(header)[1]
        assert cookie.name_span == Span(5, 9)
        assert cookie.value_span == Span(11, 16)
        assert header[cookie.value_span.start : cookie.value_span.end] == cookie.value

    def test_returns_cookies(self) -> None:
        result = parse("a=1")
        assert isinstance(result, Cookies)
        assert result[0] == Cookie("a", "1")


class TestParseErrors:
    @pytest.mark.parametrize(
        ("header", "cause"),
        [
            ("", UnrecognizedEOF),
            ("   ", UnrecognizedEOF),
            ("a=1;", UnrecognizedEOF),
            ("a=1; ", UnrecognizedEOF),
            ("a=1;;b=2", UnrecognizedToken),
            (";", UnrecognizedToken),
            ('name="value', UnrecognizedEOF),
            ('a="b c"', UnrecognizedToken),
            ("a=b c", UnrecognizedToken),
            ("a =b", UnrecognizedToken),
            ("a=b,c", InvalidToken),
            ("a=é", InvalidToken),
            ("a=1\r\n", InvalidToken),
        ],
    )
    def test_malformed(self, header: str, cause: type) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(header)
        assert isinstance(exc_info.value.error, cause)
        assert exc_info.value.__cause__ is exc_info.value.error

    def test_no_partial_result(self) -> None:
        """A single bad pair invalidates the whole header."""
        with pytest.raises(ParseError):
            parse("good=1; also_good=2; bad=\"x")

    def test_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("a=1;")
        assert str(exc_info.value).startswith(
            "Cookie Parsing Error: Parse Error: Unrecognized EOF found at 4"
        )

    def test_rejection_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="crumb.parser"), pytest.raises(ParseError):
            parse("a=b,c")
        assert "offset 3" in caplog.text


class TestConfig:
    def test_allow_empty(self) -> None:
        cfg = ParserConfig(allow_empty=True)
        assert parse("", cfg) == Cookies()
        assert parse(" \t ", cfg) == Cookies()

    def test_allow_empty_still_parses(self) -> None:
        assert _pairs("a=1", ParserConfig(allow_empty=True)) == [("a", "1")]

    def test_allow_empty_does_not_forgive_dangling_separator(self) -> None:
        with pytest.raises(ParseError):
            parse(";", ParserConfig(allow_empty=True))

    def test_max_length(self) -> None:
        cfg = ParserConfig(max_length=5)
        assert _pairs("a=123", cfg) == [("a", "123")]
        with pytest.raises(ParseError) as exc_info:
            parse("a=1234", cfg)
        assert isinstance(exc_info.value.error, LimitExceeded)

    def test_max_cookies(self) -> None:
        cfg = ParserConfig(max_cookies=1)
        with pytest.raises(ParseError) as exc_info:
            parse("a=1; b=2", cfg)
        assert isinstance(exc_info.value.error, LimitExceeded)

    def test_max_length_applies_to_blank_header(self) -> None:
        cfg = ParserConfig(allow_empty=True, max_length=4)
        with pytest.raises(ParseError) as exc_info:
            parse(" " * 10_000, cfg)
        assert isinstance(exc_info.value.error, LimitExceeded)

    def test_blank_header_within_max_length(self) -> None:
        assert parse("  ", ParserConfig(allow_empty=True, max_length=4)) == Cookies()


class TestInternalError:
    def test_out_of_range_span_is_internal_error(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        from crumb.cookie import RawCookie
        from crumb.syntax.grammar import CookieGrammar

        monkeypatch.setattr(
            CookieGrammar, "parse", lambda self: [RawCookie(Span(0, 1), Span(2, 99))]
        )
        with caplog.at_level(logging.ERROR, logger="crumb.parser"):
            with pytest.raises(InternalError) as exc_info:
                parse("a=1")
        assert exc_info.value.kind is InternalErrorKind.SPAN_OUT_OF_BOUNDS
        assert isinstance(exc_info.value, CookieError)
        assert "span resolution failed" in caplog.text


class TestParseCookies:
    def test_empty_string(self) -> None:
        assert parse_cookies("") == {}

    def test_single_cookie(self) -> None:
        assert parse_cookies("session=abc123") == {"session": "abc123"}

    def test_multiple_cookies(self) -> None:
        result = parse_cookies("session=abc; theme=dark; lang=en")
        assert result == {"session": "abc", "theme": "dark", "lang": "en"}

    def test_value_with_equals(self) -> None:
        """Values can contain '=' (e.g. base64)."""
        assert parse_cookies("token=abc=def=") == {"token": "abc=def="}

    def test_quoted_value(self) -> None:
        assert parse_cookies('theme="dark"') == {"theme": "dark"}

    def test_duplicate_keys_last_wins(self) -> None:
        assert parse_cookies("a=1; a=2") == {"a": "2"}

    def test_malformed_header_yields_nothing(self) -> None:
        assert parse_cookies("session=abc; broken=\"x") == {}

    def test_whitespace_only(self) -> None:
        assert parse_cookies("   ") == {}
