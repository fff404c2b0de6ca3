"""
Conversion of parsed curl commands into keyword arguments for an HTTP client.

This is where curl's own defaults are applied (``POST`` when there is data,
``http://`` when the URL has no scheme...); the parser itself keeps the
command exactly as written.
"""

from __future__ import annotations

import warnings
from http.cookies import SimpleCookie
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from w3lib.http import basic_auth_header

from curlparse.options import GET_WITH_DATA
from curlparse.parser import parse_curl

if TYPE_CHECKING:
    from curlparse.command import ParsedCommand


def _parse_cookies(value: str, cookies: dict[str, str]) -> None:
    for name, morsel in SimpleCookie(value).items():
        cookies[name] = morsel.value


def _parse_headers_and_cookies(
    command: ParsedCommand,
) -> tuple[list[tuple[str, str | bytes]], dict[str, str]]:
    headers: list[tuple[str, str | bytes]] = []
    cookies: dict[str, str] = {}
    for name, val in command.headers:
        if name.title() == "Cookie":
            _parse_cookies(val, cookies)
        else:
            headers.append((name, val))

    # -b also accepts a file name to read cookies from, which is not resolved here
    if command.cookies and "=" in command.cookies:
        _parse_cookies(command.cookies, cookies)

    if command.user_agent is not None:
        headers.append(("User-Agent", command.user_agent))
    if command.referer is not None:
        headers.append(("Referer", command.referer))

    if command.user:
        user, _, password = command.user.partition(":")
        headers.append(("Authorization", basic_auth_header(user, password)))

    return headers, cookies


def _add_query(url: str, query: str) -> str:
    base, sep, fragment = url.partition("#")
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{query}{sep}{fragment}"


def command_to_request_kwargs(
    command: ParsedCommand, default_scheme: str = "http"
) -> dict[str, Any]:
    """Convert a :class:`~curlparse.command.ParsedCommand` to HTTP request
    kwargs (``method``, ``url`` and, when present, ``headers``, ``cookies``
    and ``body``).

    :param default_scheme: scheme prepended to URLs without one, as curl does

    Multipart form fields (``-F``) are not converted: building a multipart body
    needs the referenced files, so ``command.form`` is left to the caller.
    """
    assert command.url is not None
    url = command.url

    # curl automatically prepends 'http' if the scheme is missing, but most
    # HTTP clients need the scheme to work
    parsed_url = urlparse(url)
    if not parsed_url.scheme:
        url = f"{default_scheme}://{url}"

    body = command.body
    if body is not None and command.has_flag(GET_WITH_DATA):
        url = _add_query(url, body)
        body = None

    result: dict[str, Any] = {
        "method": command.effective_method.upper(),
        "url": url,
    }

    headers, cookies = _parse_headers_and_cookies(command)

    if headers:
        result["headers"] = headers
    if cookies:
        result["cookies"] = cookies
    if body is not None:
        result["body"] = body

    return result


def curl_to_request_kwargs(
    curl_command: str,
    ignore_unknown_options: bool = True,
    default_scheme: str = "http",
) -> dict[str, Any]:
    """Convert a cURL command syntax to HTTP request kwargs.

    :param str curl_command: string containing the curl command
    :param bool ignore_unknown_options: If true, only a warning is emitted when
                                        cURL options are unknown. Otherwise
                                        raises an error. (default: True)
    :param str default_scheme: scheme used when the URL has none
    :return: dictionary of request kwargs
    """
    command = parse_curl(curl_command)

    unknown = [token.value for token in command.unknown_options]
    if unknown:
        msg = f"Unrecognized options: {', '.join(unknown)}"
        if ignore_unknown_options:
            warnings.warn(msg)
        else:
            raise ValueError(msg)

    return command_to_request_kwargs(command, default_scheme=default_scheme)
