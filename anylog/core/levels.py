"""
levels.py

Functions:
- default_levels(): Returns a fresh copy of the default level table.
- is_level(levels, value): Checks whether value names a level in the given table.
"""

DEFAULT_LEVEL = "log"

# higher value == more verbose; 0 would mean no logging at all
DEFAULT_LEVELS: dict[str, int] = {
    "error": 1,
    "warn": 2,
    "info": 3,
    "log": 4,
    "debug": 5,
    "trace": 6,
}


def default_levels() -> dict[str, int]:
    return dict(DEFAULT_LEVELS)


def is_level(levels: dict[str, int], value) -> bool:
    # args can be anything; only str keys can name a level
    return isinstance(value, str) and bool(levels.get(value))
