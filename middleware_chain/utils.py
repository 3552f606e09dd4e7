"""Common usage utility functions."""
import inspect
import functools
from pprint import pformat
from typing import Any, Callable, Union

from microcore.utils import resolve_callable

ANONYMOUS_LABEL = "Proc"


def target_label(target: Any) -> str:
    """
    Label used when rendering a chain or logging a call.
    Anonymous callables (lambdas, partials) render as "Proc", everything else by declared name.
    """
    if isinstance(target, functools.partial):
        return ANONYMOUS_LABEL
    if inspect.isclass(target) or inspect.isfunction(target) or inspect.ismethod(target):
        name = getattr(target, "__name__", "")
        return ANONYMOUS_LABEL if name == "<lambda>" or not name else name
    return type(target).__name__


def format_arguments(args: tuple, kwargs: dict) -> str:
    parts = [str(a) for a in args]
    parts += [f"{k}={v}" for k, v in kwargs.items()]
    return ", ".join(parts)


def pretty_format(item: Any) -> str:
    return pformat(item)


def resolve_factory(item: Union[str, Callable], debug_name: str = None) -> Callable:
    """Resolves a callable given directly or as a dotted import path."""
    if isinstance(item, str):
        try:
            item = resolve_callable(item)
        except (ImportError, AttributeError, KeyError) as e:
            raise ValueError(f"Can't resolve {debug_name or 'item'}: {item!r}") from e
    if not callable(item):
        raise ValueError(f"Invalid {debug_name or 'item'}: {item!r}")
    return item
