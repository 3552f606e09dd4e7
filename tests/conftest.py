from typing import Callable

import pytest


@pytest.fixture
def data() -> dict:
    return {"data": []}


@pytest.fixture
def appender() -> Callable:
    """Returns a factory of functions that append a value to env["data"] and pass env on."""
    def make(value):
        def append(env):
            env["data"].append(value)
            return env
        return append
    return make
