"""
Recyclable transforms, projections and predicates.

Errors are reached in two places: bare Failure and Recycling(_, FailureStage).
Every error-axis operation treats both the same and never touches the
retained value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Option, Some, Nothing

from remotedata import _errors
from remotedata._types import RemoteError
from remotedata.response._types import Failure
from remotedata.recyclable._types import (
    LoadingStage,
    FailureStage,
    NeverAsked,
    Loading,
    Ready,
    Recycling,
    Recyclable,
)

# ═══════════════════════════════════════════════════════════════════════════════
# Transforms
# ═══════════════════════════════════════════════════════════════════════════════


def map[T, C, V, V2](
    f: Callable[[V], V2], state: Recyclable[T, C, V]
) -> Recyclable[T, C, V2]:
    """Apply f to the value in Ready/Recycling; other states pass through."""
    match state:
        case Ready(v):
            return Ready(f(v))
        case Recycling(v, stage):
            return Recycling(f(v), stage)
        case NeverAsked() | Loading() | Failure():
            return state
        case _:
            assert_never(state)


def _map_error[T, C, T2, C2, V](
    f: Callable[[RemoteError[T, C]], RemoteError[T2, C2]],
    state: Recyclable[T, C, V],
) -> Recyclable[T2, C2, V]:
    match state:
        case Failure(e):
            return Failure(f(e))
        case Recycling(v, FailureStage(e)):
            return Recycling(v, FailureStage(f(e)))
        case NeverAsked() | Loading() | Ready() | Recycling(_, LoadingStage()):
            return state
        case _:
            assert_never(state)


def map_custom_error[T, C, C2, V](
    f: Callable[[C], C2], state: Recyclable[T, C, V]
) -> Recyclable[T, C2, V]:
    return _map_error(lambda e: _errors.map_custom(f, e), state)


def map_transport_error[T, T2, C, V](
    f: Callable[[T], T2], state: Recyclable[T, C, V]
) -> Recyclable[T2, C, V]:
    return _map_error(lambda e: _errors.map_transport(f, e), state)


def map_errors[E, E2, V](
    f: Callable[[E], E2], state: Recyclable[E, E, V]
) -> Recyclable[E2, E2, V]:
    """Apply f to either error payload, keeping its Transport/Custom tag."""
    return _map_error(lambda e: _errors.map_both(f, e), state)


# ═══════════════════════════════════════════════════════════════════════════════
# Projections (lossy — prefer match)
# ═══════════════════════════════════════════════════════════════════════════════


def with_default[T, C, V](default: V, state: Recyclable[T, C, V]) -> V:
    """
    Value of a bare Ready, else default.

    Note: Recycling's retained value does NOT count. Use retained_value()
    for "whatever we last fetched".
    """
    match state:
        case Ready(v):
            return v
        case NeverAsked() | Loading() | Failure() | Recycling():
            return default
        case _:
            assert_never(state)


def merge[E](default: E, state: Recyclable[E, E, E]) -> E:
    """
    Settled value or error payload; default while loading or never asked.

    Requires transport, custom and value types to coincide.
    """
    match state:
        case Ready(v):
            return v
        case Failure(e) | Recycling(_, FailureStage(e)):
            return _errors.payload(e)
        case NeverAsked() | Loading() | Recycling(_, LoadingStage()):
            return default
        case _:
            assert_never(state)


def to_error[T, C, V](state: Recyclable[T, C, V]) -> Option[RemoteError[T, C]]:
    """Error of a bare or recycling failure, else Nothing."""
    match state:
        case Failure(e) | Recycling(_, FailureStage(e)):
            return Some(e)
        case NeverAsked() | Loading() | Ready() | Recycling(_, LoadingStage()):
            return Nothing()
        case _:
            assert_never(state)


def retained_value[T, C, V](state: Recyclable[T, C, V]) -> Option[V]:
    """The value a UI keeps showing: Ready or Recycling payload."""
    match state:
        case Ready(v) | Recycling(v, _):
            return Some(v)
        case NeverAsked() | Loading() | Failure():
            return Nothing()
        case _:
            assert_never(state)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates
# ═══════════════════════════════════════════════════════════════════════════════


def is_never_asked(state: Recyclable[object, object, object]) -> bool:
    return isinstance(state, NeverAsked)


def is_ready(state: Recyclable[object, object, object]) -> bool:
    """Bare Ready only; Recycling is not ready."""
    return isinstance(state, Ready)


def is_recycling(state: Recyclable[object, object, object]) -> bool:
    return isinstance(state, Recycling)


def is_loading(state: Recyclable[object, object, object]) -> bool:
    match state:
        case Loading() | Recycling(_, LoadingStage()):
            return True
        case _:
            return False


def is_error(state: Recyclable[object, object, object]) -> bool:
    """True for bare Failure and Recycling(_, FailureStage)."""
    return _error_of(state) is not None


def is_transport_error(state: Recyclable[object, object, object]) -> bool:
    error = _error_of(state)
    return error is not None and _errors.is_transport(error)


def is_custom_error(state: Recyclable[object, object, object]) -> bool:
    error = _error_of(state)
    return error is not None and _errors.is_custom(error)


def _error_of(
    state: Recyclable[object, object, object],
) -> RemoteError[object, object] | None:
    match state:
        case Failure(e) | Recycling(_, FailureStage(e)):
            return e
        case _:
            return None


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "map",
    "map_custom_error",
    "map_transport_error",
    "map_errors",
    "with_default",
    "merge",
    "to_error",
    "retained_value",
    "is_never_asked",
    "is_ready",
    "is_recycling",
    "is_loading",
    "is_error",
    "is_transport_error",
    "is_custom_error",
)
