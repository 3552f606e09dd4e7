"""
Configuration model for middleware builders.
"""
from typing import Any

from pydantic import BaseModel, field_validator

from .runner import Runner
from .utils import resolve_factory


class BuilderConfig(BaseModel):
    """Options recognized by `Builder`."""
    name: str = "Middleware"
    runner_factory: Any = Runner

    @field_validator("runner_factory")
    @classmethod
    def _resolve_runner_factory(cls, value):
        """Dotted import paths are resolved, e.g. "my_app.chains.TracingRunner"."""
        return resolve_factory(value, debug_name="runner_factory")
