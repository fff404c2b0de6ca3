"""
curlparse - turn curl command lines into structured requests
"""

import pkgutil

# Declare top-level shortcuts
from curlparse.command import ParsedCommand
from curlparse.exceptions import (
    CurlSyntaxError,
    MissingArgument,
    MissingUrl,
    UnknownOption,
    UnterminatedQuote,
)
from curlparse.parser import parse, parse_curl
from curlparse.tokenizer import Token, tokenize

__all__ = [
    "CurlSyntaxError",
    "MissingArgument",
    "MissingUrl",
    "ParsedCommand",
    "Token",
    "UnknownOption",
    "UnterminatedQuote",
    "__version__",
    "parse",
    "parse_curl",
    "tokenize",
    "version_info",
]


__version__ = (pkgutil.get_data(__package__, "VERSION") or b"").decode("ascii").strip()
version_info = tuple(int(v) if v.isdigit() else v for v in __version__.split("."))


del pkgutil
