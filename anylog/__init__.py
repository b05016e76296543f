"""
anylog - get a logger. Any logger.

    import anylog

    log = anylog.get("my-app:db")
    log("connected")                 # level 'log'
    log("warn", "disk", "full")      # level 'warn'
    log.error("query failed")

Functions:
- get(name, config): Returns the named logger, or the whole registry when no name is given.
- create(name, config): Builds a new logger via the active hooks without registering it.
- new(name, config): Builds a fresh, unextended logger.
- dispatch(name, args): Routes a raw logger call to the right level method.
- ext(logger): (Re-)binds the level methods of a logger.
- extend_all(): Re-extends every registered logger.
"""

from anylog.configs.config import Settings, settings, sink_from_settings
from anylog.core.hooks import Hooks
from anylog.core.levels import DEFAULT_LEVEL, DEFAULT_LEVELS
from anylog.core.logger import Logger
from anylog.core.registry import Registry

# process-wide default; build your own Registry to inject elsewhere
registry = Registry(sink=sink_from_settings(settings))


def get(name: str | None = None, config=None):
    return registry.get(name, config)


def create(name: str, config=None) -> Logger:
    return registry.create(name, config)


def new(name: str, config=None) -> Logger:
    return registry.new(name, config)


def dispatch(name: str, args) -> None:
    registry.dispatch(name, args)


def ext(logger: Logger) -> Logger:
    return registry.ext(logger)


def extend_all() -> None:
    registry.extend_all()


__all__ = [
    "DEFAULT_LEVEL",
    "DEFAULT_LEVELS",
    "Hooks",
    "Logger",
    "Registry",
    "Settings",
    "create",
    "dispatch",
    "ext",
    "extend_all",
    "get",
    "new",
    "registry",
    "settings",
]
