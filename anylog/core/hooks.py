"""
hooks.py

Default creation strategy for loggers. Each step is a plain attribute lookup at
call time, so a hook can be swapped on an instance (`hooks.ext = my_ext`) or in
a subclass and every later creation/extension picks it up.

Functions (all receive the owning registry first):
- create(registry, name, config): new() then ext().
- new(registry, name, config): Builds a fresh, unbound Logger.
- dispatch(registry, name, args, logger): Picks the level from args and calls the bound method.
- ext(registry, logger): (Re-)binds one method per level from the registry's sink.
"""

from anylog.core.levels import DEFAULT_LEVEL, is_level
from anylog.core.logger import Logger, bind, level_method, noop


def sink_method(sink, method_name: str):
    """Return sink.<method_name> when it exists and is callable, else None."""
    if sink is None:
        return None
    method = getattr(sink, method_name, None)
    return method if callable(method) else None


class Hooks:
    def create(self, registry, name: str, config=None) -> Logger:
        return self.ext(registry, self.new(registry, name, config))

    def new(self, registry, name: str, config=None) -> Logger:
        return Logger(name, registry, config)

    def dispatch(self, registry, name: str, args: list, logger: Logger | None = None) -> None:
        # a calling logger dispatches on itself; by-name calls go through the registry
        if logger is None:
            logger = registry.loggers.get(name)
        if logger is None:
            return
        # a lone argument is always the payload, never a level selector
        level = args.pop(0) if len(args) > 1 and is_level(registry.levels, args[0]) else DEFAULT_LEVEL
        level_method(logger, level)(*args)

    def ext(self, registry, logger: Logger) -> Logger:
        """
        Bind one method per level in registry.levels: the sink's own method,
        else the sink's `log`, else a no-op.

        Sink methods arrive already bound to the sink. An override that binds
        plain functions and wants the logger as receiver can wrap them with
        types.MethodType(fn, logger) before handing them to bind().
        """
        sink = registry.sink
        fallback = sink_method(sink, DEFAULT_LEVEL) or noop
        bind(logger, {level: sink_method(sink, level) or fallback for level in registry.levels})
        return logger
