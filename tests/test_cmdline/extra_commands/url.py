"""A custom command used to check COMMANDS_MODULE loading"""

from curlparse.commands import BaseCurlCommand
from curlparse.parser import parse_curl


class Command(BaseCurlCommand):
    def short_desc(self):
        return "Print the URL of a cURL command"

    def run(self, args, opts):
        print(parse_curl(self.read_curl_command(args), strict=self.strict).url)
