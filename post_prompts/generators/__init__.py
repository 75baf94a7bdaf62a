"""Text generator registry, keyed by output path (e.g. "text.final_copy")."""

from typing import Type

from .base import Generator

_REGISTRY: dict[str, Type[Generator]] = {}


def register(path: str):
    """Class decorator: make a generator available under `path`."""
    def decorator(cls):
        _REGISTRY[path] = cls
        return cls
    return decorator


def get_generator_class(path: str) -> Type[Generator]:
    """Look up a generator class; raises ValueError for unknown paths."""
    from . import text  # noqa: F401  (registers the built-in generators)

    try:
        return _REGISTRY[path]
    except KeyError:
        raise ValueError(f"Unknown generator: {path}") from None


def build_generators(paths: list[str]) -> list[Generator]:
    """One generator instance per path, in the given order."""
    return [get_generator_class(path)() for path in paths]


__all__ = [
    "Generator",
    "register",
    "get_generator_class",
    "build_generators",
]
