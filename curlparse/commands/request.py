import argparse

from curlparse.commands import BaseCurlCommand
from curlparse.exceptions import CurlSyntaxError, UsageError
from curlparse.utils.request import curl_to_request_kwargs


class Command(BaseCurlCommand):
    def short_desc(self) -> str:
        return "Print the HTTP request keyword arguments equivalent to a cURL command"

    def run(self, args: list[str], opts: argparse.Namespace) -> None:
        assert self.settings is not None
        text = self.read_curl_command(args)
        try:
            kwargs = curl_to_request_kwargs(
                text,
                ignore_unknown_options=not self.strict,
                default_scheme=self.settings["CURL_DEFAULT_SCHEME"],
            )
        except CurlSyntaxError as e:
            self.report_syntax_error(text, e)
            return
        except ValueError as e:
            raise UsageError(str(e), print_help=False)

        request_kwargs_str = [f"{name}={value!r}" for name, value in kwargs.items()]
        print(f"Request({', '.join(request_kwargs_str)})")
