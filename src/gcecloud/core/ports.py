from __future__ import annotations
from typing import Protocol, Iterable, Union, runtime_checkable

@runtime_checkable
class Wrapper(Protocol):
    """
    Any error that hands out the error(s) it annotates.
    unwrap() may return a single error, an iterable of errors, or None.
    """

    def unwrap(self) -> Union[BaseException, Iterable[BaseException], None]:
        ...
