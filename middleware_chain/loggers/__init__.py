"""Diagnostic middleware for tracing calls through a chain."""
from .call_logger import CallLogger


__all__ = ["CallLogger"]
