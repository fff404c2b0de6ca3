"""
curlparse exceptions

Every error raised while reading a curl command derives from
:class:`CurlSyntaxError`, itself a :class:`ValueError`, so callers that only
care about "the command could not be understood" can catch either.
"""

from __future__ import annotations

from typing import Any

# Parsing


class CurlSyntaxError(ValueError):
    """Base class for errors found while tokenizing or parsing a command.

    :param offset: index into the original command text where the problem
                   was found, or ``None`` when it applies to the whole command.
                   Like :attr:`~curlparse.tokenizer.Token.offset` it counts
                   code points of the ``str``, not bytes
    :param token: the offending text (a quote character, a flag spelling...),
                  if any
    """

    def __init__(self, message: str, offset: int | None = None, token: str | None = None):
        super().__init__(message)
        self.offset = offset
        self.token = token

    def pointer(self, text: str) -> str:
        """Render the line of *text* holding :attr:`offset` with a caret
        under the offending character.

        Returns an empty string when the error has no offset.
        """
        if self.offset is None:
            return ""
        start = text.rfind("\n", 0, self.offset) + 1
        end = text.find("\n", self.offset)
        if end == -1:
            end = len(text)
        line = text[start:end].replace("\t", " ")
        return f"{line}\n{' ' * (self.offset - start)}^"


class UnterminatedQuote(CurlSyntaxError):
    """A quote was opened but never closed before the end of input"""

    def __init__(self, quote: str, offset: int):
        super().__init__(f"unterminated {quote} quote at offset {offset}", offset, quote)
        self.quote = quote


class MissingArgument(CurlSyntaxError):
    """An option that requires a value was the last token"""

    def __init__(self, flag: str, offset: int):
        super().__init__(f"option {flag} requires an argument", offset, flag)
        self.flag = flag


class MissingUrl(CurlSyntaxError):
    """No positional URL and no ``--url`` option were found"""

    def __init__(self) -> None:
        super().__init__("no URL specified")


class UnknownOption(CurlSyntaxError):
    """An unrecognized option was found while parsing in strict mode"""

    def __init__(self, flag: str, offset: int):
        super().__init__(f"unknown option {flag} at offset {offset}", offset, flag)
        self.flag = flag


# Commands


class UsageError(Exception):
    """To indicate a command-line usage error"""

    def __init__(self, *a: Any, **kw: Any):
        self.print_help = kw.pop("print_help", True)
        super().__init__(*a, **kw)
