"""Composable middleware chains: build an ordered stack of handlers and run it as one callable."""
from .base_types import HandlerDescriptor
from .builder import Builder
from .config import BuilderConfig
from .errors import InvalidMiddleware, InvalidReference, MiddlewareError
from .loggers import CallLogger
from .middleware import BaseMiddleware
from .runner import Continuation, Runner


__all__ = [
    "Builder",
    "BuilderConfig",
    "Runner",
    "Continuation",
    "HandlerDescriptor",
    "BaseMiddleware",
    "CallLogger",
    "MiddlewareError",
    "InvalidReference",
    "InvalidMiddleware",
]
