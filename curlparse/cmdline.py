from __future__ import annotations

import argparse
import inspect
import sys
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

import curlparse
from curlparse.commands import BaseCurlCommand, CurlparseCommand, CurlparseHelpFormatter
from curlparse.exceptions import UsageError
from curlparse.utils.conf import get_settings
from curlparse.utils.log import configure_logging, log_curlparse_info
from curlparse.utils.misc import walk_modules

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    # typing.ParamSpec requires Python 3.10
    from typing_extensions import ParamSpec

    from curlparse.settings import BaseSettings, Settings

    _P = ParamSpec("_P")


class CurlparseArgumentParser(argparse.ArgumentParser):
    def _parse_optional(
        self, arg_string: str
    ) -> tuple[argparse.Action | None, str, str | None] | None:
        # a curl command line passed as a single argument is never an option
        if arg_string[:1] == "-" and any(ch.isspace() for ch in arg_string):
            return None

        return super()._parse_optional(arg_string)


def _iter_command_classes(module_name: str) -> Iterable[type[CurlparseCommand]]:
    for module in walk_modules(module_name):
        for obj in vars(module).values():
            if (
                inspect.isclass(obj)
                and issubclass(obj, CurlparseCommand)
                and obj.__module__ == module.__name__
                and obj not in (CurlparseCommand, BaseCurlCommand)
            ):
                yield obj


def _get_commands_from_module(module: str) -> dict[str, CurlparseCommand]:
    d: dict[str, CurlparseCommand] = {}
    for cmd in _iter_command_classes(module):
        cmdname = cmd.__module__.split(".")[-1]
        d[cmdname] = cmd()
    return d


def _get_commands_from_entry_points(
    group: str = "curlparse.commands",
) -> dict[str, CurlparseCommand]:
    cmds: dict[str, CurlparseCommand] = {}
    if sys.version_info >= (3, 10):
        eps = entry_points(group=group)
    else:
        eps = entry_points().get(group, ())
    for entry_point in eps:
        obj = entry_point.load()
        if inspect.isclass(obj):
            cmds[entry_point.name] = obj()
        else:
            raise Exception(f"Invalid entry point {entry_point.name}")
    return cmds


def _get_commands_dict(settings: BaseSettings) -> dict[str, CurlparseCommand]:
    cmds = _get_commands_from_module("curlparse.commands")
    cmds.update(_get_commands_from_entry_points())
    cmds_module = settings["COMMANDS_MODULE"]
    if cmds_module:
        cmds.update(_get_commands_from_module(cmds_module))
    return cmds


def _pop_command_name(argv: list[str]) -> str | None:
    for i, arg in enumerate(argv[1:], start=1):
        if not arg.startswith("-"):
            del argv[i]
            return arg
    return None


def _print_header() -> None:
    print(f"curlparse {curlparse.__version__}\n")


def _print_commands(settings: BaseSettings) -> None:
    _print_header()
    print("Usage:")
    print("  curlparse <command> [options] [args]\n")
    print("Available commands:")
    cmds = _get_commands_dict(settings)
    for cmdname, cmdclass in sorted(cmds.items()):
        print(f"  {cmdname:<13} {cmdclass.short_desc()}")
    print()
    print('Use "curlparse <command> -h" to see more info about a command')


def _print_unknown_command(cmdname: str) -> None:
    _print_header()
    print(f"Unknown command: {cmdname}\n")
    print('Use "curlparse" to see available commands')


def _run_print_help(
    parser: argparse.ArgumentParser,
    func: Callable[_P, None],
    *a: _P.args,
    **kw: _P.kwargs,
) -> None:
    try:
        func(*a, **kw)
    except UsageError as e:
        if str(e):
            parser.error(str(e))
        if e.print_help:
            parser.print_help()
        sys.exit(2)


def execute(argv: list[str] | None = None, settings: Settings | None = None) -> None:
    if argv is None:
        argv = sys.argv

    if settings is None:
        settings = get_settings()

    cmds = _get_commands_dict(settings)
    cmdname = _pop_command_name(argv)
    if not cmdname:
        _print_commands(settings)
        sys.exit(0)
    elif cmdname not in cmds:
        _print_unknown_command(cmdname)
        sys.exit(2)

    cmd = cmds[cmdname]
    parser = CurlparseArgumentParser(
        formatter_class=CurlparseHelpFormatter,
        usage=f"curlparse {cmdname} {cmd.syntax()}",
        conflict_handler="resolve",
        description=cmd.long_desc(),
    )
    settings.setdict(cmd.default_settings, priority="command")
    cmd.settings = settings
    cmd.add_options(parser)
    opts, args = parser.parse_known_args(args=argv[1:])
    _run_print_help(parser, cmd.process_options, args, opts)
    settings.freeze()

    configure_logging(settings)
    log_curlparse_info(settings)
    _run_print_help(parser, cmd.run, args, opts)
    sys.exit(cmd.exitcode)


if __name__ == "__main__":
    execute()
