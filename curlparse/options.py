"""
The subset of curl options understood by the parser.

Each spelling maps to an :class:`Option` describing whether it takes a value
and which :class:`~curlparse.command.ParsedCommand` field it feeds. Adding an
option is a matter of adding a line to :data:`OPTION_DEFINITIONS`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class Arity(Enum):
    VALUE = "value"
    SWITCH = "switch"


# Names of the boolean switches stored in ParsedCommand.flags
INSECURE = "insecure"
LOCATION = "location"
SILENT = "silent"
VERBOSE = "verbose"
COMPRESSED = "compressed"
HEAD_ONLY = "head_only"
GET_WITH_DATA = "get_with_data"

SWITCHES = frozenset(
    [INSECURE, LOCATION, SILENT, VERBOSE, COMPRESSED, HEAD_ONLY, GET_WITH_DATA]
)


class Option:
    """A recognized curl option.

    :param name: canonical spelling, used in messages
    :param arity: whether the option consumes a value
    :param field: the ParsedCommand field a value goes to, or the switch name
    """

    __slots__ = ["name", "arity", "field"]

    def __init__(self, name: str, arity: Arity, field: str):
        self.name: str = name
        self.arity: Arity = arity
        self.field: str = field

    @property
    def takes_value(self) -> bool:
        return self.arity is Arity.VALUE

    def __repr__(self) -> str:
        return f"Option(name={self.name!r}, arity={self.arity!r}, field={self.field!r})"


# (spellings, arity, field)
OPTION_DEFINITIONS: list[tuple[tuple[str, ...], Arity, str]] = [
    (("-X", "--request"), Arity.VALUE, "method"),
    (("-H", "--header"), Arity.VALUE, "headers"),
    (
        (
            "-d",
            "--data",
            "--data-raw",
            "--data-binary",
            "--data-ascii",
            "--data-urlencode",
        ),
        Arity.VALUE,
        "data",
    ),
    (("-u", "--user"), Arity.VALUE, "user"),
    (("-b", "--cookie"), Arity.VALUE, "cookies"),
    (("-c", "--cookie-jar"), Arity.VALUE, "cookie_jar"),
    (("-o", "--output"), Arity.VALUE, "output_file"),
    (("-A", "--user-agent"), Arity.VALUE, "user_agent"),
    (("-e", "--referer"), Arity.VALUE, "referer"),
    (("-F", "--form"), Arity.VALUE, "form"),
    (("--url",), Arity.VALUE, "url"),
    (("-G", "--get"), Arity.SWITCH, GET_WITH_DATA),
    (("-I", "--head"), Arity.SWITCH, HEAD_ONLY),
    (("-L", "--location"), Arity.SWITCH, LOCATION),
    (("-k", "--insecure"), Arity.SWITCH, INSECURE),
    (("-s", "--silent"), Arity.SWITCH, SILENT),
    (("-v", "--verbose"), Arity.SWITCH, VERBOSE),
    (("--compressed",), Arity.SWITCH, COMPRESSED),
]


def _build_table(
    definitions: list[tuple[tuple[str, ...], Arity, str]],
) -> Mapping[str, Option]:
    table: dict[str, Option] = {}
    for spellings, arity, field in definitions:
        name = next((s for s in spellings if s.startswith("--")), spellings[0])
        option = Option(name, arity, field)
        for spelling in spellings:
            if spelling in table:
                raise ValueError(f"Duplicate curl option spelling: {spelling}")
            table[spelling] = option
    return MappingProxyType(table)


OPTIONS: Mapping[str, Option] = _build_table(OPTION_DEFINITIONS)


def lookup(spelling: str) -> Option | None:
    """Return the :class:`Option` for *spelling* (``-X``, ``--request``...), if known."""
    return OPTIONS.get(spelling)
