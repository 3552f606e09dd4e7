"""Errors raised by the chain builder and runner."""


class MiddlewareError(Exception):
    """Base class for errors raised by middleware_chain itself."""


class InvalidReference(MiddlewareError, LookupError):
    """A position or target lookup did not match any registered handler."""

    def __init__(self, reference, message: str = None):
        self.reference = reference
        super().__init__(message or f"No such middleware: {reference!r}")


class InvalidMiddleware(MiddlewareError, TypeError):
    """A registered target is neither a class nor a callable."""

    def __init__(self, middleware):
        self.middleware = middleware
        super().__init__(
            f"Invalid middleware, doesn't respond to `__call__`: {middleware!r}"
        )
