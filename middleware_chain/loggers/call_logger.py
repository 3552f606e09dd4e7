import time
import logging
from typing import Any, Optional
from dataclasses import dataclass, field

from ..middleware import BaseMiddleware
from ..runner import Continuation
from ..utils import pretty_format, target_label

MAX_MESSAGE_LENGTH = 255


@dataclass
class CallLogger(BaseMiddleware):
    """
    Logs each pass through the next handler: the payload on the way in,
    elapsed time and result on the way out.
    The result is returned unchanged.
    """
    sink: Any = field(default=None)
    name: Optional[str] = field(default=None)

    def __call__(self, env):
        self.write(self.way_in_message(self.next_middleware_name, env))
        started = time.perf_counter()
        result = self.app(env)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        self.write(self.way_out_message(self.next_middleware_name, elapsed_ms, result))
        return result

    @property
    def next_middleware_name(self) -> str:
        if isinstance(self.app, Continuation):
            return self.app.label
        return target_label(self.app)

    def way_in_message(self, name: str, env) -> str:
        return " %s has been called with: %s" % (name, pretty_format(env))

    def way_out_message(self, name: str, elapsed_ms: float, value) -> str:
        return " %s finished in %.0f ms and returned: %s" % (name, elapsed_ms, pretty_format(value))

    def write(self, message: str):
        message = message[:MAX_MESSAGE_LENGTH].strip()
        if self.name:
            self.sink.log(logging.INFO, "[%s] %s", self.name, message, extra={"middleware": self.name})
        else:
            self.sink.log(logging.INFO, "%s", message)
