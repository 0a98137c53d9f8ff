"""Evaluation host package: serves the hand evaluator over WebSocket."""

from .server import EvalHost, EvalRequestError, HostConfig

__all__ = ["EvalHost", "EvalRequestError", "HostConfig"]
