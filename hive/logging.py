"""
Console logging for Hive games.

Every module asks for its own logger by name. What gets printed depends on
a global level plus optional per-module levels. Both are read from HIVE_LOG_*
environment variables at import time and can be changed with
configure_logging().

Usage:
    from hive.logging import get_logger

    log = get_logger('spawner')
    log.debug("Spawned %s", bee)

Environment:
    HIVE_LOG_LEVEL=WARNING        # Global level
    HIVE_LOG_SPAWNER=DEBUG        # Level for get_logger('spawner')
    HIVE_LOG_GAME_MODE=INFO       # Level for get_logger('game_mode')
"""

import os
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Mapping, Optional

ENV_PREFIX = 'HIVE_LOG_'


class LogLevel(IntEnum):
    """Severity levels, numbered like the standard logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100

    @classmethod
    def parse(cls, name: str) -> 'LogLevel':
        """Level from its name, case-insensitive. Unknown names give INFO."""
        key = name.strip().upper()
        if key == 'WARN':
            key = 'WARNING'
        return cls.__members__.get(key, cls.INFO)


# Tag printed after the module name
_TAGS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}


@dataclass
class LogSettings:
    """Global level and per-module overrides (keyed by normalized module name)."""
    default: LogLevel = LogLevel.INFO
    modules: Dict[str, LogLevel] = field(default_factory=dict)

    def level_for(self, key: str) -> LogLevel:
        return self.modules.get(key, self.default)


settings = LogSettings()


def _module_key(name: str) -> str:
    return name.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: Optional[str] = None,
    modules: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Change logging levels at runtime.

    Args:
        level: New global level name (unchanged if None)
        modules: Module name -> level name overrides
    """
    if level is not None:
        settings.default = LogLevel.parse(level)
    for name, module_level in (modules or {}).items():
        settings.modules[_module_key(name)] = LogLevel.parse(module_level)


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> None:
    """Apply HIVE_LOG_LEVEL and HIVE_LOG_<MODULE> variables (os.environ by default)."""
    env = os.environ if environ is None else environ
    for key, value in env.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):]
        if name == 'LEVEL':
            configure_logging(level=value)
        elif name:
            configure_logging(modules={name: value})


def disable_logging() -> None:
    """Silence every logger, dropping per-module overrides."""
    settings.default = LogLevel.OFF
    settings.modules.clear()


class HiveLogger:
    """
    Logger for one module.

    Prints "[module] LEVEL: message" to stdout when the message level is at
    or above the module's effective level. Arguments are applied printf
    style, only when the message is actually printed.
    """

    def __init__(self, module: str):
        self.name = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return settings.level_for(self._key)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.name}] {_TAGS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)


@lru_cache(maxsize=None)
def get_logger(module: str) -> HiveLogger:
    """
    Get the logger for a module (one instance per name).

    Args:
        module: Short module name, e.g. 'game_mode' or 'assets'
    """
    return HiveLogger(module)


load_env_config()
