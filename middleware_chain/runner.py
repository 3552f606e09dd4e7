"""Turns a snapshot of handler descriptors into a single callable."""
import logging
from typing import Any, Iterable

from .base_types import FACTORY, HandlerDescriptor
from .errors import InvalidMiddleware
from .utils import ANONYMOUS_LABEL, target_label


def to_descriptor(item: Any) -> HandlerDescriptor:
    """
    Accepts a descriptor, a bare target,
    or a `(target, args, block)` sequence where `args` and `block` are optional.
    """
    if isinstance(item, HandlerDescriptor):
        return item
    if isinstance(item, (tuple, list)):
        if not item or len(item) > 3:
            raise InvalidMiddleware(item)
        target, args, block = (list(item) + [None, None])[:3]
        if args is None:
            args = ()
        elif not isinstance(args, (tuple, list)):
            args = (args,)
        return HandlerDescriptor(target, tuple(args), block=block)
    return HandlerDescriptor(item)


class Continuation:
    """
    Stands for everything from `position` to the end of the chain.

    The handler at `position` is only instantiated the first time the continuation is called,
    then reused for the rest of the invocation.
    Past the last position the continuation returns the payload unchanged.
    """
    __slots__ = ("_runner", "_position", "_handler")

    def __init__(self, runner: "Runner", position: int):
        self._runner = runner
        self._position = position
        self._handler = None

    @property
    def is_terminal(self) -> bool:
        return self._position >= len(self._runner)

    @property
    def label(self) -> str:
        if self.is_terminal:
            return ANONYMOUS_LABEL
        return target_label(self._runner.stack[self._position].target)

    def resolve(self):
        if self._handler is None:
            self._handler = self._runner.link(
                self._position,
                Continuation(self._runner, self._position + 1),
            )
        return self._handler

    def __call__(self, env=None):
        if self.is_terminal:
            return env
        return self.resolve()(env)

    def __repr__(self):
        return f"<Continuation {self._position}: {self.label}>"


class Runner:
    """
    Runs an immutable copy of a middleware stack.

    Every target is validated on construction, so a bad registration fails before anything runs.
    Handlers are created per call and never cached across calls.
    """

    def __init__(self, stack: Iterable = ()):
        self.stack: tuple[HandlerDescriptor, ...] = tuple(to_descriptor(i) for i in stack)
        self._kinds = tuple(d.kind for d in self.stack)

    def __len__(self) -> int:
        return len(self.stack)

    def link(self, position: int, continuation: Continuation):
        """Resolves the descriptor at `position` against the callable standing for the rest."""
        descriptor = self.stack[position]
        if self._kinds[position] == FACTORY:
            kwargs = dict(descriptor.kwargs)
            if descriptor.block is not None:
                kwargs["block"] = descriptor.block
            logging.debug("Instantiating middleware #%d: %s", position, descriptor.target)
            return descriptor.target(continuation, *descriptor.args, **kwargs)

        fn, args, kwargs = descriptor.target, descriptor.args, descriptor.kwargs

        def step(env):
            return continuation(fn(env, *args, **kwargs))

        return step

    def call(self, env=None):
        if not self.stack:
            return env
        return Continuation(self, 0)(env)

    __call__ = call
