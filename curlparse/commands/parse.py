from __future__ import annotations

import argparse
import json

from rich.table import Table

from curlparse.commands import BaseCurlCommand
from curlparse.exceptions import CurlSyntaxError, UsageError
from curlparse.parser import parse_curl
from curlparse.utils.console import get_console

OUTPUT_FORMATS = ("json", "table")


class Command(BaseCurlCommand):
    def short_desc(self) -> str:
        return "Print the structured form of a cURL command"

    def add_options(self, parser: argparse.ArgumentParser) -> None:
        super().add_options(parser)
        parser.add_argument(
            "--format",
            "-f",
            dest="format",
            metavar="FORMAT",
            default=None,
            help=f"output format, one of {', '.join(OUTPUT_FORMATS)}",
        )

    def process_options(self, args: list[str], opts: argparse.Namespace) -> None:
        super().process_options(args, opts)
        assert self.settings is not None
        if opts.format:
            self.settings.set("PARSE_OUTPUT_FORMAT", opts.format, priority="cmdline")
        if self.settings["PARSE_OUTPUT_FORMAT"] not in OUTPUT_FORMATS:
            raise UsageError(
                f"Unrecognized output format {self.settings['PARSE_OUTPUT_FORMAT']!r}",
                print_help=False,
            )

    def run(self, args: list[str], opts: argparse.Namespace) -> None:
        assert self.settings is not None
        text = self.read_curl_command(args)
        try:
            command = parse_curl(text, strict=self.strict)
        except CurlSyntaxError as e:
            self.report_syntax_error(text, e)
            return

        console = get_console(use_stderr=False)
        if self.settings["PARSE_OUTPUT_FORMAT"] == "json":
            console.print_json(
                json.dumps(command.to_dict()),
                indent=self.settings.getint("PARSE_OUTPUT_INDENT"),
            )
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value")
        for name, value in command.to_dict().items():
            if value in (None, []):
                continue
            table.add_row(name, json.dumps(value))
        console.print(table)
