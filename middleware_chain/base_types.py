"""Base types used in middleware_chain."""
import inspect
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from .errors import InvalidMiddleware

FACTORY = "factory"
FUNCTION = "function"


def handler_kind(target: Any) -> str:
    """
    Classify a registered target.

    Classes are factories: they are constructed with the continuation as the first argument.
    Any other callable is a function, called with the payload directly.
    """
    if inspect.isclass(target):
        return FACTORY
    if callable(target):
        return FUNCTION
    raise InvalidMiddleware(target)


@dataclass(frozen=True, eq=False)
class HandlerDescriptor:
    """
    One not-yet-instantiated registration in a chain.
    Lookups compare `target` only, never the captured arguments.
    Descriptors hash and compare by identity; captured kwargs are read-only.
    """
    target: Any
    args: tuple = field(default_factory=tuple)
    kwargs: Mapping = field(default_factory=dict)
    block: Optional[Callable] = field(default=None)

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))

    @property
    def kind(self) -> str:
        return handler_kind(self.target)

    def matches(self, target: Any) -> bool:
        return self.target is target or self.target == target
