import argparse

from rich.table import Table

from curlparse.commands import BaseCurlCommand
from curlparse.exceptions import CurlSyntaxError
from curlparse.tokenizer import tokenize
from curlparse.utils.console import get_console


class Command(BaseCurlCommand):
    def syntax(self) -> str:
        return '"<curl_command>"'

    def short_desc(self) -> str:
        return "Print the shell words of a cURL command with their offsets"

    def run(self, args: list[str], opts: argparse.Namespace) -> None:
        text = self.read_curl_command(args)
        try:
            tokens = tokenize(text)
        except CurlSyntaxError as e:
            self.report_syntax_error(text, e)
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Offset", style="number", justify="right")
        table.add_column("Token", no_wrap=True)
        table.add_column("Quoted")
        for token in tokens:
            table.add_row(str(token.offset), repr(token.value), "yes" if token.quoted else "")
        get_console(use_stderr=False).print(table)
