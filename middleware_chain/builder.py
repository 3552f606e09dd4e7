"""
DSL for building up a stack of middlewares.

Usage:

    app = Builder(lambda b: b.use(A).use(B, "option"))
    app.call(7)

Nothing is instantiated while building: `call` snapshots the stack into a fresh runner each time.
"""
import logging
from typing import Any, Callable, Optional, Union

from .base_types import HandlerDescriptor
from .config import BuilderConfig
from .errors import InvalidReference
from .loggers import CallLogger
from .utils import format_arguments, target_label

Reference = Union[int, Any]


class Builder:
    """
    Mutable, ordered collection of handler descriptors.

    A reference given to insert / insert_after / replace / delete is either a zero-based position
    or a registered target; targets resolve to their first occurrence.
    Not safe for concurrent mutation, serialize access externally.
    """

    def __init__(
        self,
        setup: Optional[Callable[["Builder"], Any]] = None,
        config: Union[BuilderConfig, dict, None] = None,
        **options,
    ):
        if isinstance(config, BuilderConfig):
            config = dict(config)
        self.config = BuilderConfig(**{**(config or {}), **options})
        self._stack: list[HandlerDescriptor] = []
        if setup is not None:
            setup(self)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def stack(self) -> tuple[HandlerDescriptor, ...]:
        return tuple(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def flatten(self) -> Callable:
        """
        Returns this builder wrapped as a single function.
        `use(other.flatten())` embeds `other` as one step instead of merging its handlers.
        """
        return lambda env: self.call(env)

    def use(self, middleware, *args, block: Callable = None, **kwargs) -> "Builder":
        """
        Appends a middleware. Extra arguments and `block` are saved and passed on construction.
        Another Builder is merged: its current handlers are appended in order.
        """
        if isinstance(middleware, Builder):
            self._stack.extend(middleware.stack)
        else:
            self._stack.append(HandlerDescriptor(middleware, args, kwargs, block))
        return self

    def insert(self, index: Reference, middleware, *args, block: Callable = None, **kwargs) -> "Builder":
        """Inserts a middleware at the given position or directly before the given middleware."""
        index = self._resolve(index, "no such middleware to insert before", allow_end=True)
        self._stack.insert(index, HandlerDescriptor(middleware, args, kwargs, block))
        return self

    insert_before = insert

    def insert_after(self, index: Reference, middleware, *args, block: Callable = None, **kwargs) -> "Builder":
        index = self._resolve(index, "no such middleware to insert after")
        return self.insert(index + 1, middleware, *args, block=block, **kwargs)

    def insert_before_each(self, middleware, *args, block: Callable = None, **kwargs) -> "Builder":
        descriptor = HandlerDescriptor(middleware, args, kwargs, block)
        self._stack = [i for item in self._stack for i in (descriptor, item)]
        return self

    def insert_after_each(self, middleware, *args, block: Callable = None, **kwargs) -> "Builder":
        descriptor = HandlerDescriptor(middleware, args, kwargs, block)
        self._stack = [i for item in self._stack for i in (item, descriptor)]
        return self

    def replace(self, index: Reference, middleware, *args, block: Callable = None, **kwargs) -> "Builder":
        """Swaps the referenced middleware for a new one, keeping its position."""
        index = self._resolve(index, "no such middleware to replace")
        del self._stack[index]
        self._stack.insert(index, HandlerDescriptor(middleware, args, kwargs, block))
        return self

    def delete(self, index: Reference) -> "Builder":
        index = self._resolve(index, "no such middleware to delete")
        del self._stack[index]
        return self

    def inject_logger(self, logger: logging.Logger = None) -> "Builder":
        """Traces every registered middleware with a CallLogger tagged with this builder's name."""
        self.insert_before_each(CallLogger, logger or logging.getLogger(self.name), self.name)
        return self

    def index(self, middleware) -> Optional[int]:
        """Returns the position of the first registration of `middleware`, or None."""
        for i, descriptor in enumerate(self._stack):
            if descriptor.matches(middleware):
                return i
        return None

    def to_app(self) -> Callable:
        """Converts the current stack to a runnable chain."""
        logging.debug("Building %s", self)
        return self.config.runner_factory(list(self._stack))

    def call(self, env=None):
        return self.to_app()(env)

    __call__ = call

    def __repr__(self):
        return self.name + "[" + ", ".join(
            f"{target_label(d.target)}({format_arguments(d.args, d.kwargs)})"
            for d in self._stack
        ) + "]"

    __str__ = __repr__

    def _resolve(self, reference: Reference, message: str, allow_end: bool = False) -> int:
        # Integers are always positions, never looked up as targets.
        if isinstance(reference, int) and not isinstance(reference, bool):
            size = len(self._stack)
            index = reference + size if reference < 0 else reference
            if not 0 <= index <= (size if allow_end else size - 1):
                raise InvalidReference(reference, f"{message}: position {reference} is out of range")
            return index
        index = self.index(reference)
        if index is None:
            raise InvalidReference(reference, f"{message}: {reference!r}")
        return index
