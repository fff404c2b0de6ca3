"""
Option parser: turns the tokens of a curl command line into a
:class:`~curlparse.command.ParsedCommand`.

The grammar is LL(1) over tokens: every option's arity is known from its
spelling, so a single forward pass with one token of lookahead (for the value
of an option) is enough.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from curlparse.command import ParsedCommand
from curlparse.exceptions import MissingArgument, MissingUrl, UnknownOption
from curlparse.options import Arity, lookup
from curlparse.tokenizer import tokenize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from curlparse.options import Option
    from curlparse.tokenizer import Token


logger = logging.getLogger(__name__)

END_OF_OPTIONS = "--"


def parse_header(value: str) -> tuple[str, str]:
    """Split a ``Name: Value`` header line on its first colon.

    Surrounding whitespace is stripped from both parts. A line without a
    colon is a header with an empty value, like curl accepts it.
    """
    name, _, val = value.partition(":")
    return name.strip(), val.strip()


class _CommandBuilder:
    """Collects option values during the scan; :meth:`build` freezes them."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.headers: list[tuple[str, str]] = []
        self.data: list[str] = []
        self.form: list[str] = []
        self.flags: set[str] = set()
        # (stream index, token) so displaced URLs keep their place
        self.unrecognized: list[tuple[int, Token]] = []
        self.unknown_options: list[Token] = []
        self.explicit_url: str | None = None
        self.positional_url: tuple[int, Token] | None = None

    def apply(self, option: Option, value: str | None) -> None:
        if option.arity is Arity.SWITCH:
            self.flags.add(option.field)
            return
        assert value is not None
        field = option.field
        if field == "headers":
            self.headers.append(parse_header(value))
        elif field == "data":
            self.data.append(value)
        elif field == "form":
            self.form.append(value)
        elif field == "url":
            # an empty --url is consumed but, like an empty positional, never the URL
            if not value:
                return
            if self.positional_url is not None:
                self.unrecognized.append(self.positional_url)
                self.positional_url = None
            self.explicit_url = value
        else:
            self.values[field] = value

    def add_positional(self, index: int, token: Token) -> None:
        if (
            token.value
            and self.explicit_url is None
            and self.positional_url is None
        ):
            self.positional_url = (index, token)
        else:
            self.unrecognized.append((index, token))

    def add_unrecognized(self, index: int, token: Token) -> None:
        logger.debug(
            "Unrecognized curl option %s at offset %d", token.value, token.offset
        )
        self.unknown_options.append(token)
        self.unrecognized.append((index, token))

    @property
    def url(self) -> str | None:
        if self.explicit_url is not None:
            return self.explicit_url
        if self.positional_url is not None:
            return self.positional_url[1].value
        return None

    def build(self) -> ParsedCommand:
        return ParsedCommand(
            url=self.url,
            method=self.values.get("method"),
            headers=self.headers,
            data=self.data,
            form=self.form,
            user=self.values.get("user"),
            cookies=self.values.get("cookies"),
            cookie_jar=self.values.get("cookie_jar"),
            user_agent=self.values.get("user_agent"),
            referer=self.values.get("referer"),
            output_file=self.values.get("output_file"),
            flags=self.flags,
            unrecognized=[token for _, token in sorted(self.unrecognized, key=_first)],
            unknown_options=self.unknown_options,
        )


def _first(item: tuple[int, Token]) -> int:
    return item[0]


def _expand_long(spelling: str) -> list[tuple[Option, str | None, str]] | None:
    name, sep, attached = spelling.partition("=")
    option = lookup(name)
    if option is None:
        return None
    if sep:
        if not option.takes_value:
            return None
        return [(option, attached, name)]
    return [(option, None, name)]


def _expand_short(spelling: str) -> list[tuple[Option, str | None, str]] | None:
    """Expand ``-X``, ``-XPOST`` and switch clusters such as ``-sLk`` or
    ``-sXPOST`` into (option, attached value, spelling) triples.

    Returns ``None`` if any letter is unknown, in which case nothing in the
    token is applied.
    """
    expanded: list[tuple[Option, str | None, str]] = []
    letters = spelling[1:]
    for pos, letter in enumerate(letters):
        option = lookup("-" + letter)
        if option is None:
            return None
        if option.takes_value:
            attached = letters[pos + 1 :]
            expanded.append((option, attached or None, "-" + letter))
            break
        expanded.append((option, None, "-" + letter))
    return expanded


def parse(tokens: Iterable[Token], strict: bool = False) -> ParsedCommand:
    """Build a :class:`~curlparse.command.ParsedCommand` from *tokens*.

    Tokens spelled like options are looked up in the option table;
    options taking a value consume it from the same token (``-XPOST``,
    ``--request=POST``) or from the next one. The first other token is the
    URL, unless ``--url`` sets it. Everything left over goes to
    :attr:`~curlparse.command.ParsedCommand.unrecognized`.

    :param strict: raise :exc:`~curlparse.exceptions.UnknownOption` for the
                   first unrecognized option instead of recording it
    :raises MissingArgument: an option requiring a value ends the command
    :raises MissingUrl: no URL was found
    """
    tokens = list(tokens)
    builder = _CommandBuilder()
    options_ended = False
    i = 0
    while i < len(tokens):
        index = i
        token = tokens[i]
        i += 1
        if options_ended or not token.is_option():
            builder.add_positional(index, token)
            continue
        if token.value == END_OF_OPTIONS:
            options_ended = True
            continue

        if token.value.startswith("--"):
            expanded = _expand_long(token.value)
        else:
            expanded = _expand_short(token.value)
        if expanded is None:
            builder.add_unrecognized(index, token)
            continue

        for option, value, spelling in expanded:
            if option.takes_value and value is None:
                if i >= len(tokens):
                    raise MissingArgument(spelling, token.offset)
                value = tokens[i].value
                i += 1
            builder.apply(option, value)

    if strict and builder.unknown_options:
        first = builder.unknown_options[0]
        raise UnknownOption(first.value, first.offset)

    if builder.url is None:
        raise MissingUrl()
    return builder.build()


def parse_curl(text: str, strict: bool = False) -> ParsedCommand:
    """Parse a curl command line, such as the ones produced by the "Copy as
    cURL" feature of web browsers.

    The leading ``curl`` is optional::

        >>> parse_curl("curl 'http://example.com' -H 'Accept: */*'").headers
        (('Accept', '*/*'),)

    :param str text: the command line
    :param bool strict: reject unknown options instead of recording them in
                        :attr:`~curlparse.command.ParsedCommand.unrecognized`
    :raises CurlSyntaxError: if the command cannot be tokenized or parsed
    """
    return parse(tokenize(text), strict=strict)
