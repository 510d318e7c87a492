from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional


class ComputeError(Exception):
    """Base class for compute support failures."""


@dataclass
class ErrorItem:
    reason: str = ""
    message: str = ""
    domain: Optional[str] = None


class ApiError(ComputeError):
    """
    Structured failure returned by the compute API: HTTP status code plus an
    ordered list of (reason, message) entries. Status is carried, never matched.
    """

    def __init__(self, code: int, errors: Optional[List[ErrorItem]] = None,
                 message: str = "", *, body: Optional[str] = None):
        self.code = int(code)
        self.errors: List[ErrorItem] = list(errors or [])
        self.message = message or ""
        self.body = body
        super().__init__(str(self))

    @property
    def reasons(self) -> List[str]:
        return [e.reason for e in self.errors]

    def __str__(self) -> str:
        out = f"Error {self.code}"
        if self.message:
            out += f": {self.message}"
        reasons = [r for r in self.reasons if r]
        if reasons:
            out += ", " + ", ".join(reasons)
        return out

    def __repr__(self) -> str:
        return f"ApiError(code={self.code!r}, reasons={self.reasons!r}, message={self.message!r})"


class AnnotatedError(ComputeError):
    """
    Adds caller context around another error, e.g.
    AnnotatedError("deleting disk my-disk", err) -> "deleting disk my-disk: <err>".
    """

    def __init__(self, context: str, err: BaseException):
        self.context = context
        self.err = err
        super().__init__(f"{context}: {err}")
        self.__cause__ = err

    def unwrap(self) -> BaseException:
        return self.err


class MalformedEndpointError(ComputeError, ValueError):
    """Endpoint (or requested variant) does not fit <scheme>://<host>/<prefix>/<version>/."""
