"""
This module defines the ParsedCommand object, the structured result of
parsing a curl command line.

It holds what the command line says and nothing more: policies such as "a
request with a body and no explicit method is a POST" are offered as helpers
(:attr:`ParsedCommand.effective_method`) but never baked into the fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from curlparse.options import GET_WITH_DATA, HEAD_ONLY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from curlparse.tokenizer import Token


class ParsedCommand:
    """The structured form of a curl command.

    :param url: the target URL, from ``--url`` or the first positional word
    :param method: the ``-X``/``--request`` value, as given
    :param headers: ``(name, value)`` pairs in command line order
    :param data: one entry per ``-d``/``--data`` occurrence, in order
    :param form: one entry per ``-F``/``--form`` occurrence, in order
    :param user: the ``-u``/``--user`` value, ``user:password`` unsplit
    :param cookies: the ``-b``/``--cookie`` value
    :param cookie_jar: the ``-c``/``--cookie-jar`` target
    :param user_agent: the ``-A``/``--user-agent`` value
    :param referer: the ``-e``/``--referer`` value
    :param output_file: the ``-o``/``--output`` target
    :param flags: names of the boolean switches found, see :mod:`curlparse.options`
    :param unrecognized: tokens that matched no known option and were not
                         used as the URL
    :param unknown_options: the subset of *unrecognized* that was read as an
                            option and matched none; words after ``--`` are
                            never part of it

    Instances are immutable.
    """

    __slots__ = [
        "url",
        "method",
        "headers",
        "data",
        "form",
        "user",
        "cookies",
        "cookie_jar",
        "user_agent",
        "referer",
        "output_file",
        "flags",
        "unrecognized",
        "unknown_options",
    ]

    def __init__(
        self,
        url: str | None = None,
        method: str | None = None,
        headers: Iterable[tuple[str, str]] = (),
        data: Iterable[str] = (),
        form: Iterable[str] = (),
        user: str | None = None,
        cookies: str | None = None,
        cookie_jar: str | None = None,
        user_agent: str | None = None,
        referer: str | None = None,
        output_file: str | None = None,
        flags: Iterable[str] = (),
        unrecognized: Iterable[Token] = (),
        unknown_options: Iterable[Token] = (),
    ):
        _set = super().__setattr__
        _set("url", url)
        _set("method", method)
        _set("headers", tuple((name, value) for name, value in headers))
        _set("data", tuple(data))
        _set("form", tuple(form))
        _set("user", user)
        _set("cookies", cookies)
        _set("cookie_jar", cookie_jar)
        _set("user_agent", user_agent)
        _set("referer", referer)
        _set("output_file", output_file)
        _set("flags", frozenset(flags))
        _set("unrecognized", tuple(unrecognized))
        _set("unknown_options", tuple(unknown_options))

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("Trying to modify an immutable ParsedCommand object")

    def __delattr__(self, name: str) -> None:
        raise TypeError("Trying to modify an immutable ParsedCommand object")

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    @property
    def body(self) -> str | None:
        """The data fragments joined with ``&``, as curl sends them, or
        ``None`` if there is no data."""
        if not self.data:
            return None
        return "&".join(self.data)

    @property
    def effective_method(self) -> str:
        """The method curl would use: the explicit one if given, then
        ``HEAD`` for ``-I``, ``GET`` for ``-G``, ``POST`` when there is data
        or form content, ``GET`` otherwise."""
        if self.method:
            return self.method
        if HEAD_ONLY in self.flags:
            return "HEAD"
        if GET_WITH_DATA in self.flags:
            return "GET"
        if self.data or self.form:
            return "POST"
        return "GET"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the command."""
        return {
            "url": self.url,
            "method": self.method,
            "headers": [list(header) for header in self.headers],
            "data": list(self.data),
            "form": list(self.form),
            "user": self.user,
            "cookies": self.cookies,
            "cookie_jar": self.cookie_jar,
            "user_agent": self.user_agent,
            "referer": self.referer,
            "output_file": self.output_file,
            "flags": sorted(self.flags),
            "unrecognized": [
                {"value": token.value, "offset": token.offset}
                for token in self.unrecognized
            ],
            "unknown_options": [
                {"value": token.value, "offset": token.offset}
                for token in self.unknown_options
            ],
        }

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return all(
            getattr(self, name) == getattr(other, name) for name in self.__slots__
        )

    def __hash__(self) -> int:
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in self.__slots__
            if getattr(self, name)
        )
        return f"ParsedCommand({fields})"
