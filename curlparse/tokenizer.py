"""
Shell-like tokenizer for curl command lines.

This follows POSIX shell word splitting closely enough for commands copied
from a browser ("Copy as cURL") or from documentation, while keeping track of
where each word started so errors can point back into the original text.
"""

from __future__ import annotations

from typing import Any

from curlparse.exceptions import UnterminatedQuote

PROGRAM_NAME = "curl"

_WHITESPACE = frozenset(" \t\r\n")
# characters a backslash escapes inside double quotes, see shlex.escapedquotes
_DQUOTE_ESCAPABLE = frozenset('"\\$`')


class Token:
    """A word of the command line, with shell quoting already removed.

    :param value: the unquoted text, possibly empty (``''`` on the command line)
    :param offset: index in the original text of the first character of the
                   word, opening quote included. This is a ``str`` index
                   (code points), not a byte offset into an encoded command
    :param quoted: whether any part of the word was quoted

    Tokens are immutable.
    """

    __slots__ = ["value", "offset", "quoted"]

    def __init__(self, value: str, offset: int, quoted: bool = False):
        _set = super().__setattr__
        _set("value", value)
        _set("offset", offset)
        _set("quoted", quoted)

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("Trying to modify an immutable Token object")

    def __delattr__(self, name: str) -> None:
        raise TypeError("Trying to modify an immutable Token object")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.value == other.value
            and self.offset == other.offset
            and self.quoted == other.quoted
        )

    def __hash__(self) -> int:
        return hash(self.value) ^ hash(self.offset) ^ hash(self.quoted)

    def __repr__(self) -> str:
        return (
            f"Token(value={self.value!r}, offset={self.offset!r}, "
            f"quoted={self.quoted!r})"
        )

    def is_option(self) -> bool:
        """Whether the token is spelled like an option (``-x``, ``--xyz``).
        A lone ``-`` is not an option."""
        return len(self.value) > 1 and self.value.startswith("-")


def _line_continuation(text: str, i: int) -> int:
    """Return the length of a backslash-newline sequence starting at *i*, or 0."""
    if text.startswith("\\\n", i):
        return 2
    if text.startswith("\\\r\n", i):
        return 3
    return 0


def _read_double_quoted(text: str, start: int, parts: list[str]) -> int:
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            return i + 1
        if ch == "\\" and i + 1 < n:
            nxt = text[i + 1]
            if nxt in _DQUOTE_ESCAPABLE:
                parts.append(nxt)
                i += 2
                continue
            skip = _line_continuation(text, i)
            if skip:
                i += skip
                continue
        parts.append(ch)
        i += 1
    raise UnterminatedQuote('"', start)


def _read_word(text: str, start: int) -> tuple[Token, int]:
    parts: list[str] = []
    quoted = False
    i = start
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _WHITESPACE:
            break
        if ch == "'":
            end = text.find("'", i + 1)
            if end == -1:
                raise UnterminatedQuote("'", i)
            parts.append(text[i + 1 : end])
            quoted = True
            i = end + 1
        elif ch == '"':
            i = _read_double_quoted(text, i, parts)
            quoted = True
        elif ch == "\\":
            skip = _line_continuation(text, i)
            if skip:
                i += skip
            elif i + 1 < n:
                parts.append(text[i + 1])
                i += 2
            else:
                # trailing backslash, nothing to escape
                parts.append(ch)
                i += 1
        else:
            parts.append(ch)
            i += 1
    return Token("".join(parts), start, quoted), i


def tokenize(text: str) -> list[Token]:
    """Split *text* into :class:`Token` objects the way a POSIX shell would.

    Whitespace outside quotes separates words; single quotes preserve their
    content literally; inside double quotes a backslash only escapes ``"``,
    ``\\``, ``$``, backticks and newlines; elsewhere it escapes any character.
    Backslash-newline sequences are line continuations and are dropped.

    A leading unquoted ``curl`` word (in any case) is removed.

    :raises UnterminatedQuote: if a quote is never closed, with the offset of
                               the opening quote
    """
    tokens: list[Token] = []
    i = 0
    n = len(text)
    while i < n:
        if text[i] in _WHITESPACE:
            i += 1
            continue
        skip = _line_continuation(text, i)
        if skip:
            i += skip
            continue
        token, i = _read_word(text, i)
        tokens.append(token)

    if tokens and not tokens[0].quoted and tokens[0].value.lower() == PROGRAM_NAME:
        del tokens[0]
    return tokens


def split(text: str) -> list[str]:
    """Like :func:`shlex.split`, but with the tokenizing rules of :func:`tokenize`."""
    return [token.value for token in tokenize(text)]
