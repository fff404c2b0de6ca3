"""
Base class for curlparse commands
"""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from curlparse.exceptions import UsageError
from curlparse.utils.conf import arglist_to_dict
from curlparse.utils.console import get_console

if TYPE_CHECKING:
    from collections.abc import Iterable

    from curlparse.exceptions import CurlSyntaxError
    from curlparse.settings import Settings


class CurlparseCommand(ABC):
    """
    Base class for implementing curlparse commands.

    Class Attributes:
        default_settings (dict[str, Any]): Default settings to use for this command
            instead of global defaults. Default: {}.

    Instance Attributes:
        settings (Settings | None): The settings instance for this command,
            set automatically by curlparse.cmdline when the command is run.

        exitcode (int): The exit code to return when the command finishes.
            Set this to a non-zero value to indicate an error. Default: 0.

    Example:
        A command printing the URL of a curl command::

            from curlparse import parse_curl
            from curlparse.commands import CurlparseCommand

            class Command(CurlparseCommand):
                default_settings = {"LOG_ENABLED": False}

                def short_desc(self):
                    return "Print the URL of a curl command"

                def run(self, args, opts):
                    print(parse_curl(args[0]).url)
    """

    # default settings to be used for this command instead of global defaults
    default_settings: dict[str, Any] = {}

    exitcode: int = 0

    def __init__(self) -> None:
        self.settings: Settings | None = None  # set in curlparse.cmdline

    def syntax(self) -> str:
        """
        Return the command syntax (preferably one-line). Do not include command name.
        """
        return ""

    @abstractmethod
    def short_desc(self) -> str:
        """
        Return a short description of the command.
        """
        return ""

    def long_desc(self) -> str:
        """A long description of the command. Return short description when not
        available. It cannot contain newlines since contents will be formatted
        by argparse which removes newlines and wraps text.
        """
        return self.short_desc()

    def add_options(self, parser: argparse.ArgumentParser) -> None:
        """
        Populate option parse with options available for this command
        """
        assert self.settings is not None
        group = parser.add_argument_group(title="Global Options")
        group.add_argument(
            "--logfile", metavar="FILE", help="log file. if omitted stderr will be used"
        )
        group.add_argument(
            "-L",
            "--loglevel",
            metavar="LEVEL",
            default=None,
            help=f"log level (default: {self.settings['LOG_LEVEL']})",
        )
        group.add_argument(
            "--nolog", action="store_true", help="disable logging completely"
        )
        group.add_argument(
            "-s",
            "--set",
            action="append",
            default=[],
            metavar="NAME=VALUE",
            help="set/override setting (may be repeated)",
        )

    def process_options(self, args: list[str], opts: argparse.Namespace) -> None:
        assert self.settings is not None
        try:
            self.settings.setdict(arglist_to_dict(opts.set), priority="cmdline")
        except ValueError:
            raise UsageError("Invalid -s value, use -s NAME=VALUE", print_help=False)

        if opts.logfile:
            self.settings.set("LOG_ENABLED", True, priority="cmdline")
            self.settings.set("LOG_FILE", opts.logfile, priority="cmdline")

        if opts.loglevel:
            self.settings.set("LOG_ENABLED", True, priority="cmdline")
            self.settings.set("LOG_LEVEL", opts.loglevel, priority="cmdline")

        if opts.nolog:
            self.settings.set("LOG_ENABLED", False, priority="cmdline")

    @abstractmethod
    def run(self, args: list[str], opts: argparse.Namespace) -> None:
        """
        Entry point for running commands
        """
        raise NotImplementedError


class BaseCurlCommand(CurlparseCommand):
    """
    Base class for commands that take a single curl command line as argument.

    The command line must be passed as one (quoted) argument, or as ``-`` to
    read it from standard input.
    """

    default_settings = {"LOG_ENABLED": False}

    def syntax(self) -> str:
        return '[options] "<curl_command>"'

    def add_options(self, parser: argparse.ArgumentParser) -> None:
        super().add_options(parser)
        parser.add_argument(
            "--strict",
            dest="strict",
            action="store_true",
            default=None,
            help="raise an error when cURL options are unknown",
        )

    def process_options(self, args: list[str], opts: argparse.Namespace) -> None:
        super().process_options(args, opts)
        if opts.strict:
            assert self.settings is not None
            self.settings.set("CURL_STRICT_OPTIONS", True, priority="cmdline")

    def read_curl_command(self, args: list[str]) -> str:
        if len(args) < 1 or not args[0]:
            raise UsageError()
        if len(args) > 1:
            raise UsageError(
                "it is only possible to pass one cURL command and it must be "
                "between quotation marks"
            )
        if args[0] == "-":
            return sys.stdin.read()
        return args[0]

    @property
    def strict(self) -> bool:
        assert self.settings is not None
        return self.settings.getbool("CURL_STRICT_OPTIONS")

    def report_syntax_error(self, text: str, error: CurlSyntaxError) -> None:
        """Print *error* with a pointer into *text* on stderr and make the
        command exit with status 1."""
        console = get_console(use_stderr=True)
        console.print(
            f"[error]error:[/error] {escape(str(error))}",
            highlight=False,
            soft_wrap=True,
        )
        pointer = error.pointer(text)
        if pointer:
            console.print(pointer, markup=False, highlight=False, soft_wrap=True)
        self.exitcode = 1


class CurlparseHelpFormatter(argparse.HelpFormatter):
    """
    Help Formatter for curlparse command line help messages.
    """

    def __init__(
        self,
        prog: str,
        indent_increment: int = 2,
        max_help_position: int = 24,
        width: int | None = None,
    ):
        super().__init__(
            prog,
            indent_increment=indent_increment,
            max_help_position=max_help_position,
            width=width,
        )

    def _join_parts(self, part_strings: Iterable[str]) -> str:
        parts = self.format_part_strings(list(part_strings))
        return super()._join_parts(parts)

    def format_part_strings(self, part_strings: list[str]) -> list[str]:
        """
        Underline and title case command line help message headers.
        """
        if part_strings and part_strings[0].startswith("usage: "):
            part_strings[0] = "Usage\n=====\n  " + part_strings[0][len("usage: ") :]
        headings = [
            i for i in range(len(part_strings)) if part_strings[i].endswith(":\n")
        ]
        for index in headings[::-1]:
            char = "-" if "Global Options" in part_strings[index] else "="
            part_strings[index] = part_strings[index][:-2].title()
            underline = "".join(["\n", (char * len(part_strings[index])), "\n"])
            part_strings.insert(index + 1, underline)
        return part_strings
