"""
Prioritized settings.

Every value is stored with the priority of the source that set it; a later
``set`` only replaces a value when its priority is at least as high. The
sources, from lowest to highest, are the module defaults, the defaults of the
running command, ``CURLPARSE_*`` environment variables and ``-s`` options.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from importlib import import_module
from typing import TYPE_CHECKING, Any

from curlparse.settings import default_settings

if TYPE_CHECKING:
    from types import ModuleType


SETTINGS_PRIORITIES: dict[str, int] = {
    "default": 0,
    "command": 10,
    "environment": 20,
    "cmdline": 40,
}


def get_settings_priority(priority: int | str) -> int:
    """Return the numeric value of *priority*, which may be a key of
    :data:`SETTINGS_PRIORITIES` or already a number."""
    if isinstance(priority, str):
        return SETTINGS_PRIORITIES[priority]
    return priority


class SettingsAttribute:
    __slots__ = ["value", "priority"]

    def __init__(self, value: Any, priority: int):
        self.value = value
        self.priority = priority

    def set(self, value: Any, priority: int) -> None:
        if priority >= self.priority:
            self.value = value
            self.priority = priority

    def __repr__(self) -> str:
        return f"<SettingsAttribute value={self.value!r} priority={self.priority}>"


class BaseSettings(MutableMapping[str, Any]):
    """A mapping of setting names to values that remembers where each value
    came from and can be frozen once configuration is complete.

    Missing settings read as ``None``.
    """

    def __init__(
        self, values: Mapping[str, Any] | None = None, priority: int | str = "cmdline"
    ):
        self.frozen: bool = False
        self.attributes: dict[str, SettingsAttribute] = {}
        if values:
            self.setdict(values, priority)

    def __getitem__(self, name: str) -> Any:
        attribute = self.attributes.get(name)
        return None if attribute is None else attribute.value

    def __contains__(self, name: object) -> bool:
        return name in self.attributes

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self._assert_mutability()
        del self.attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def get(self, name: str, default: Any = None) -> Any:
        value = self[name]
        return default if value is None else value

    def getbool(self, name: str, default: bool = False) -> bool:
        """
        Get a setting value as a boolean.

        ``1``, ``'1'``, ``True``, ``'True'`` and ``'true'`` are true; ``0``,
        ``'0'``, ``False``, ``'False'``, ``'false'`` and ``None`` are false.
        Values read from the environment are strings, hence the string forms.
        """
        got = self.get(name, default)
        if got in ("True", "true"):
            return True
        if got in ("False", "false"):
            return False
        try:
            return bool(int(got))
        except ValueError:
            raise ValueError(
                f"Invalid boolean value {got!r} for setting {name}, "
                "use 0/1, True/False or true/false"
            ) from None

    def getint(self, name: str, default: int = 0) -> int:
        return int(self.get(name, default))

    def getlist(self, name: str, default: list[Any] | None = None) -> list[Any]:
        """Get a setting value as a list; strings are split on commas."""
        value = self.get(name, default or [])
        if not value:
            return []
        if isinstance(value, str):
            return value.split(",")
        return list(value)

    def set(self, name: str, value: Any, priority: int | str = "cmdline") -> None:
        """Store *value* for *name* unless a higher priority already set it."""
        self._assert_mutability()
        priority = get_settings_priority(priority)
        if name in self.attributes:
            self.attributes[name].set(value, priority)
        else:
            self.attributes[name] = SettingsAttribute(value, priority)

    def setdict(self, values: Mapping[str, Any], priority: int | str = "cmdline") -> None:
        for name, value in values.items():
            self.set(name, value, priority)

    def setmodule(self, module: ModuleType | str, priority: int | str = "cmdline") -> None:
        """Store every upper case global of *module* (or of the module at that
        import path)."""
        if isinstance(module, str):
            module = import_module(module)
        for name in dir(module):
            if name.isupper():
                self.set(name, getattr(module, name), priority)

    def freeze(self) -> None:
        self.frozen = True

    def _assert_mutability(self) -> None:
        if self.frozen:
            raise TypeError("Trying to modify an immutable Settings object")

    def copy_to_dict(self) -> dict[str, Any]:
        """Return a plain ``dict`` snapshot of the current values."""
        return {
            name: list(value) if isinstance(value, (list, tuple)) else value
            for name, value in self.items()
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.copy_to_dict()!r}>"


class Settings(BaseSettings):
    """:class:`BaseSettings` preloaded with :mod:`curlparse.settings.default_settings`
    at ``default`` priority."""

    def __init__(
        self, values: Mapping[str, Any] | None = None, priority: int | str = "cmdline"
    ):
        super().__init__()
        self.setmodule(default_settings, "default")
        if values:
            self.setdict(values, priority)


def iter_default_settings() -> Iterable[tuple[str, Any]]:
    """Return the default settings as an iterator of (name, value) tuples"""
    for name in dir(default_settings):
        if name.isupper():
            yield name, getattr(default_settings, name)
