from __future__ import annotations

import os
from typing import TYPE_CHECKING

from curlparse.settings import Settings, iter_default_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

ENVVAR_PREFIX = "CURLPARSE_"


def arglist_to_dict(arglist: list[str]) -> dict[str, str]:
    """Convert a list of arguments like ['arg1=val1', 'arg2=val2', ...] to a
    dict
    """
    return dict(x.split("=", 1) for x in arglist)


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Return the default settings, overridden by ``CURLPARSE_<NAME>``
    environment variables for every known setting ``NAME``.
    """
    if environ is None:
        environ = os.environ

    settings = Settings()
    valid_envvars = {name for name, _ in iter_default_settings()}
    curlparse_envvars = {
        k[len(ENVVAR_PREFIX) :]: v
        for k, v in environ.items()
        if k.startswith(ENVVAR_PREFIX) and k[len(ENVVAR_PREFIX) :] in valid_envvars
    }
    settings.setdict(curlparse_envvars, priority="environment")
    return settings
