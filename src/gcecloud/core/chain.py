from __future__ import annotations
from typing import Any, Callable, Iterator, List, Optional, Type, TypeVar

from gcecloud.core.ports import Wrapper

E = TypeVar("E", bound=BaseException)


def _unwrapped(err: BaseException) -> Optional[List[BaseException]]:
    """
    Result of err.unwrap() as a list, or None when err has no usable unwrap().
    A broken unwrap() counts as absent so the search falls back to cause/context.
    """
    unwrap = getattr(err, "unwrap", None)
    if not isinstance(err, Wrapper) or not callable(unwrap):
        return None
    try:
        inner = unwrap()
    except Exception:
        return None
    if inner is None:
        return []
    if isinstance(inner, BaseException):
        return [inner]
    if not isinstance(inner, (list, tuple, set, frozenset)):
        try:
            inner = list(inner)
        except Exception:
            return None
    return [e for e in inner if isinstance(e, BaseException)]


def _children(err: BaseException) -> List[BaseException]:
    """
    Errors directly wrapped by `err`, in search order.
    A working unwrap() wins over the interpreter's cause/context links.
    """
    unwrapped = _unwrapped(err)
    if unwrapped is not None:
        return unwrapped

    # ExceptionGroup members (3.11+); duck-typed so older interpreters still work
    members = getattr(err, "exceptions", None)
    if isinstance(members, (tuple, list)) and all(isinstance(e, BaseException) for e in members):
        return list(members)

    if err.__cause__ is not None:
        return [err.__cause__]
    if err.__context__ is not None and not err.__suppress_context__:
        return [err.__context__]
    return []


def iter_chain(err: Any) -> Iterator[BaseException]:
    """
    Depth-first, pre-order walk of `err` and everything it wraps, starting with
    `err` itself. Each error is yielded once, so cyclic chains terminate.
    Anything that is not an exception yields nothing.
    """
    if not isinstance(err, BaseException):
        return
    seen = set()
    stack = [err]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur
        # reversed so the first child is visited first
        stack.extend(reversed(_children(cur)))


def find_in_chain(err: Any, predicate: Callable[[BaseException], bool]) -> Optional[BaseException]:
    for link in iter_chain(err):
        if predicate(link):
            return link
    return None


def as_error(err: Any, cls: Type[E]) -> Optional[E]:
    """First error in the chain that is an instance of `cls`, or None."""
    found = find_in_chain(err, lambda e: isinstance(e, cls))
    return found  # type: ignore[return-value]
