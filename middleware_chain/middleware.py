from typing import Callable
from dataclasses import dataclass


@dataclass
class BaseMiddleware:
    """
    Base class for middleware components.
    `app` is the continuation: calling it runs the rest of the chain.
    """
    app: Callable

    def __call__(self, env):
        """Process the payload and pass it to the next handler in the chain."""
        return self.app(env)
