"""Parse ``Cookie`` request header values.

``parse`` is strict and all-or-nothing: it returns every cookie in header
order or raises ``CookieError``. ``parse_cookies`` is the forgiving
request-side helper that treats a malformed header as "no cookies".
"""

import logging

from crumb.config import DEFAULT_CONFIG, ParserConfig
from crumb.cookies import Cookies
from crumb.errors import CookieError, InternalError, ParseError
from crumb.syntax.errors import GrammarError, LimitExceeded
from crumb.syntax.grammar import CookieGrammar
from crumb.syntax.lexer import CookieLexer

logger = logging.getLogger("crumb.parser")


def parse(header: str, config: ParserConfig | None = None) -> Cookies:
    """Parse an RFC 6265 §4.2.1 ``cookie-string``.

    Args:
        header: The field value after ``Cookie:``, already unfolded.
        config: Edge-case policy and limits. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        The cookies in the order they appear in *header*.

    Raises:
        ParseError: *header* is not a valid cookie-string. Empty and
            whitespace-only headers are invalid unless
            ``config.allow_empty`` is set.
        InternalError: A span escaped the input (a crumb bug).
    """
    cfg = config or DEFAULT_CONFIG

    try:
        if cfg.max_length is not None and len(header) > cfg.max_length:
            raise LimitExceeded(cfg.max_length, "header length", cfg.max_length)
        if cfg.allow_empty and not header.strip(" \t"):
            return Cookies()
        raw = CookieGrammar(CookieLexer(header), max_cookies=cfg.max_cookies).parse()
    except GrammarError as exc:
        logger.debug("Rejected cookie header at offset %d: %s", exc.location, exc)
        raise ParseError(exc) from exc

    try:
        return Cookies(pair.resolve(header) for pair in raw)
    except InternalError:
        logger.exception("Cookie span resolution failed for header of length %d", len(header))
        raise


def parse_cookies(header: str, config: ParserConfig | None = None) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty, missing, or malformed headers.
    A repeated name keeps its last value.
    """
    if not header:
        return {}
    try:
        return parse(header, config).to_dict()
    except CookieError as exc:
        logger.debug("Ignoring unparseable cookie header: %s", exc)
        return {}
