"""
logger.py

The named, callable logger handed out by the registry. Identity is carried by
`name`; the per-level methods live in a binding table that `bind` replaces
wholesale, so a call never sees a half-rebound logger.

Apart from `name`, a Logger has no public attributes of its own: any level
name (`config`, `levels`, `bind`, ...) resolves to its bound level method.
The helpers below work on a logger from the outside for that reason.

Functions:
- bind(logger, methods): Installs a fresh level -> callable table on the logger.
- level_method(logger, level): Returns the method bound for level, or a no-op.
- bound_levels(logger): Lists the level names currently bound on the logger.
"""


def noop(*args, **kwargs) -> None:
    return None


class Logger:
    def __init__(self, name: str, registry, config=None):
        self.name = name
        self.__name__ = name
        self._config = config
        self._registry = registry
        self._methods: dict = {}

    def __call__(self, *args) -> None:
        # logger([level='log'] [, ...args])
        registry = self._registry
        registry.hooks.dispatch(registry, self.name, list(args), self)

    def __getattr__(self, attr):
        # only reached when normal lookup fails, i.e. for level names
        methods = self.__dict__.get("_methods", {})
        try:
            return methods[attr]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} {self.__dict__.get('name')!r} has no level method {attr!r}"
            ) from None

    def __repr__(self) -> str:
        return f"<Logger {self.name!r}>"


def bind(logger: Logger, methods: dict) -> None:
    logger._methods = dict(methods)


def level_method(logger: Logger, level: str):
    return logger._methods.get(level, noop)


def bound_levels(logger: Logger) -> list[str]:
    return list(logger._methods)
