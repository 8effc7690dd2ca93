"""
Error-axis helpers shared by Response, RemoteData and Recyclable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from remotedata._types import Transport, Custom, RemoteError


def map_transport[T, T2, C](
    f: Callable[[T], T2], error: RemoteError[T, C]
) -> RemoteError[T2, C]:
    match error:
        case Transport(t):
            return Transport(f(t))
        case Custom():
            return error
        case _:
            assert_never(error)


def map_custom[T, C, C2](
    f: Callable[[C], C2], error: RemoteError[T, C]
) -> RemoteError[T, C2]:
    match error:
        case Custom(c):
            return Custom(f(c))
        case Transport():
            return error
        case _:
            assert_never(error)


def map_both[E, E2](
    f: Callable[[E], E2], error: RemoteError[E, E]
) -> RemoteError[E2, E2]:
    """Apply f to whichever payload is present, keeping the tag."""
    match error:
        case Transport(t):
            return Transport(f(t))
        case Custom(c):
            return Custom(f(c))
        case _:
            assert_never(error)


def payload[E](error: RemoteError[E, E]) -> E:
    match error:
        case Transport(t) | Custom(t):
            return t
        case _:
            assert_never(error)


def is_transport(error: RemoteError[object, object]) -> bool:
    return isinstance(error, Transport)


def is_custom(error: RemoteError[object, object]) -> bool:
    return isinstance(error, Custom)


__all__ = (
    "map_transport",
    "map_custom",
    "map_both",
    "payload",
    "is_transport",
    "is_custom",
)
