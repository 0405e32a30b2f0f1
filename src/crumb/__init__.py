"""Crumb: RFC 6265 ``Cookie`` header parsing.

Parses the request-side ``Cookie`` header into ordered name/value pairs,
following the §4.2.1 grammar exactly: optional whitespace, quoted values,
empty names and values, and ``=`` inside values.

Basic usage::

    import crumb

    cookies = crumb.parse("session=abc123; theme=dark")
    cookies[0].name          # "session"
    cookies.get("theme")     # "dark"

Malformed headers raise ``crumb.ParseError``; use ``crumb.parse_cookies``
to get ``{}`` instead.
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "Cookie",
    "CookieError",
    "Cookies",
    "CrumbError",
    "InternalError",
    "InternalErrorKind",
    "ParseError",
    "ParserConfig",
    "Span",
    "parse",
    "parse_cookies",
]

_LAZY_IMPORTS: dict[str, str] = {
    "parse": "crumb.parser",
    "parse_cookies": "crumb.parser",
    "Cookie": "crumb.cookie",
    "Cookies": "crumb.cookies",
    "Span": "crumb.span",
    "DEFAULT_CONFIG": "crumb.config",
    "ParserConfig": "crumb.config",
    "ConfigurationError": "crumb.errors",
    "CookieError": "crumb.errors",
    "CrumbError": "crumb.errors",
    "InternalError": "crumb.errors",
    "InternalErrorKind": "crumb.errors",
    "ParseError": "crumb.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
