from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

import curlparse
from curlparse.settings.default_settings import LOG_VERSIONS

_DEFAULT_SOFTWARE = ["curlparse", *LOG_VERSIONS, "Python", "Platform"]


def _version(item: str) -> str:
    lowercase_item = item.lower()
    if lowercase_item == "curlparse":
        return curlparse.__version__
    if lowercase_item == "platform":
        return platform.platform()
    if lowercase_item == "python":
        return sys.version.replace("\n", "- ")
    try:
        return version(item)
    except PackageNotFoundError:
        return "not installed"


def get_versions(
    software: list[str] | None = None,
) -> list[tuple[str, str]]:
    software = software or _DEFAULT_SOFTWARE
    return [(item, _version(item)) for item in software]
