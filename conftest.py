from pathlib import Path


def _py_files(folder):
    return (str(p) for p in Path(folder).rglob("*.py"))


collect_ignore = [
    # not a test, but looks like a test
    "curlparse/utils/test.py",
    # contains commands loaded through COMMANDS_MODULE by tests/test_cmdline
    *_py_files("tests/test_cmdline/extra_commands"),
]
