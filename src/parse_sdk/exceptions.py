"""Errors raised by callers of the typing layer."""

from __future__ import annotations

NOT_INITIALIZED = 109
INCORRECT_TYPE = 111


class ParseError(Exception):
    """Error carrying one of the Parse REST API error codes."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"ParseError(code={self.code}, message={self.message!r})"


__all__ = ["INCORRECT_TYPE", "NOT_INITIALIZED", "ParseError"]
