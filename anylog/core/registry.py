"""
registry.py

Name -> Logger cache. Loggers are created lazily on first request and the same
instance is returned for every later request with that name.
"""

import threading

from anylog.configs.logger import logger as diag
from anylog.core.hooks import Hooks
from anylog.core.levels import default_levels
from anylog.core.logger import Logger


class Registry:
    def __init__(self, sink=None, levels: dict[str, int] | None = None, hooks: Hooks | None = None):
        self.sink = sink
        self.levels = default_levels() if levels is None else levels
        self.hooks = hooks or Hooks()
        self.loggers: dict[str, Logger] = {}
        # re-entrant: a custom create hook may call back into get()
        self._lock = threading.RLock()

    def get(self, name: str | None = None, config=None):
        """
        Return the logger called `name`, creating it on first use.

        With no name (or an empty one) the whole name -> Logger map is returned.
        It is the live map, not a copy.
        """
        if not name:
            return self.loggers

        logger = self.loggers.get(name)
        if logger is not None:
            return logger

        with self._lock:
            logger = self.loggers.get(name)
            if logger is None:
                logger = self.hooks.create(self, name, config)
                self.loggers[name] = logger
                diag.debug("logger created", name=name, levels=sorted(self.levels, key=self.levels.get))
        return logger

    def __call__(self, name: str | None = None, config=None):
        return self.get(name, config)

    def create(self, name: str, config=None) -> Logger:
        with self._lock:
            return self.hooks.create(self, name, config)

    def new(self, name: str, config=None) -> Logger:
        return self.hooks.new(self, name, config)

    def dispatch(self, name: str, args) -> None:
        self.hooks.dispatch(self, name, list(args))

    def ext(self, logger: Logger) -> Logger:
        with self._lock:
            return self.hooks.ext(self, logger)

    def extend_all(self) -> None:
        """Re-run ext() on every registered logger, e.g. after the sink or levels changed."""
        with self._lock:
            loggers = list(self.loggers.values())
            for logger in loggers:
                self.hooks.ext(self, logger)
        diag.debug("loggers re-extended", count=len(loggers))
