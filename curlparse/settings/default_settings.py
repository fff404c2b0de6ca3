"""This module contains the default values for all settings used by curlparse.

curlparse developers, if you add a setting here remember to:

* add it in alphabetical order, with the exception that enabling flags and
  other high-level settings for a group should come first in their group
* group similar settings without leaving blank lines
* add its documentation to README.rst
"""

__all__ = [
    "COMMANDS_MODULE",
    "CURL_DEFAULT_SCHEME",
    "CURL_STRICT_OPTIONS",
    "LOG_DATEFORMAT",
    "LOG_ENABLED",
    "LOG_ENCODING",
    "LOG_FILE",
    "LOG_FILE_APPEND",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "LOG_SHORT_NAMES",
    "LOG_VERSIONS",
    "PARSE_OUTPUT_FORMAT",
    "PARSE_OUTPUT_INDENT",
]

COMMANDS_MODULE = ""

CURL_DEFAULT_SCHEME = "http"
CURL_STRICT_OPTIONS = False

LOG_ENABLED = True
LOG_DATEFORMAT = "%Y-%m-%d %H:%M:%S"
LOG_ENCODING = "utf-8"
LOG_FILE = None
LOG_FILE_APPEND = True
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_LEVEL = "INFO"
LOG_SHORT_NAMES = False
LOG_VERSIONS = [
    "w3lib",
    "rich",
]

PARSE_OUTPUT_FORMAT = "json"
PARSE_OUTPUT_INDENT = 2
