"""Global store for typed setting groups, kept in sync with editor variables."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Sequence, TypeVar

logger = logging.getLogger(__name__)

VARIABLE_PREFIX = "gridfront_"

UpdateHandlerFunc = Callable[[Any], None]
ReaderFunc = Callable[[], Any]

T = TypeVar("T")


class SettingNotFoundError(KeyError):
    """Raised when a setting group or named setting has not been registered."""


class Settings:
    """Holds one value per setting type plus update and read handlers per setting name.

    The ``nvim`` objects given to the async methods must provide awaitable
    ``get_var(name)``, ``set_var(name, value)`` and ``command(text)``.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._settings: dict[type, Any] = {}
        self._listeners: dict[str, UpdateHandlerFunc] = {}
        self._readers: dict[str, ReaderFunc] = {}

    def set_setting_handlers(
        self,
        property_name: str,
        update_func: UpdateHandlerFunc,
        reader_func: ReaderFunc,
    ) -> None:
        with self._lock:
            self._listeners[property_name] = update_func
            self._readers[property_name] = reader_func

    def set(self, value: Any) -> None:
        """Store a copy of ``value`` under its type, replacing any earlier one."""
        with self._lock:
            self._settings[type(value)] = copy.copy(value)

    def get(self, setting_type: type[T]) -> T:
        """Return a copy of the stored value of ``setting_type``."""
        with self._lock:
            try:
                value = self._settings[setting_type]
            except KeyError:
                raise SettingNotFoundError(
                    f"Trying to retrieve a settings object that doesn't exist: "
                    f"{setting_type.__name__}"
                ) from None
            return copy.copy(value)

    def _names(self) -> list[str]:
        with self._lock:
            return list(self._listeners)

    def _listener(self, name: str) -> UpdateHandlerFunc:
        with self._lock:
            try:
                return self._listeners[name]
            except KeyError:
                raise SettingNotFoundError(f"No setting named {name!r}") from None

    def _reader(self, name: str) -> ReaderFunc:
        with self._lock:
            try:
                return self._readers[name]
            except KeyError:
                raise SettingNotFoundError(f"No setting named {name!r}") from None

    async def read_initial_values(self, nvim: Any) -> None:
        """Load each setting from the editor, or push the local value if it is unset."""
        for name in self._names():
            variable_name = f"{VARIABLE_PREFIX}{name}"
            try:
                value = await nvim.get_var(variable_name)
            except Exception as error:  # noqa: BLE001 - any failure means "not set"
                logger.debug("Initial value load failed for %s: %s", name, error)
                setting = self._reader(name)()
                try:
                    await nvim.set_var(variable_name, setting)
                except Exception:  # noqa: BLE001
                    pass
            else:
                self._listener(name)(value)

    async def setup_changed_listeners(self, nvim: Any) -> None:
        """Ask the editor to notify us whenever one of the settings changes."""
        for name in self._names():
            vimscript = (
                'exe "'
                f"fun! GridfrontNotify{name}Changed(d, k, z)\n"
                f"call rpcnotify(1, 'setting_changed', '{name}', "
                f"g:{VARIABLE_PREFIX}{name})\n"
                "endf\n"
                f"call dictwatcheradd(g:, '{VARIABLE_PREFIX}{name}', "
                f"'GridfrontNotify{name}Changed')\""
            )
            try:
                await nvim.command(vimscript)
            except Exception as error:
                raise RuntimeError(
                    f"Could not setup setting notifier for {name}"
                ) from error

    def handle_changed_notification(self, arguments: Sequence[Any]) -> None:
        """Dispatch a (name, value) change notification to the matching listener."""
        if len(arguments) < 2:
            raise ValueError("setting change notification needs a name and a value")
        name, value = arguments[0], arguments[1]
        if not isinstance(name, str):
            raise TypeError(f"setting name must be a string, got {name!r}")
        self._listener(name)(value)


SETTINGS = Settings()