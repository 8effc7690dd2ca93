"""
RemoteData operations.

Success/Failure delegate to the Response operations; NotAsked and Loading
pass through every transform untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Option, Nothing

from remotedata import response as R
from remotedata._types import RemoteError
from remotedata.response._types import Success, Failure, Response
from remotedata.remote._types import NotAsked, Loading, RemoteData

# ═══════════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════════


def from_response[T, C, V](response: Response[T, C, V]) -> RemoteData[T, C, V]:
    """Success(v) ↦ Success(v), Failure(e) ↦ Failure(e)."""
    match response:
        case Success() | Failure():
            return response
        case _:
            assert_never(response)


# ═══════════════════════════════════════════════════════════════════════════════
# Transforms
# ═══════════════════════════════════════════════════════════════════════════════


def map[T, C, V, V2](
    f: Callable[[V], V2], data: RemoteData[T, C, V]
) -> RemoteData[T, C, V2]:
    match data:
        case NotAsked() | Loading():
            return data
        case Success() | Failure():
            return R.map(f, data)
        case _:
            assert_never(data)


def and_then[T, C, V, V2](
    f: Callable[[V], RemoteData[T, C, V2]], data: RemoteData[T, C, V]
) -> RemoteData[T, C, V2]:
    """Chain on Success only."""
    match data:
        case Success(v):
            return f(v)
        case NotAsked() | Loading() | Failure():
            return data
        case _:
            assert_never(data)


def map_custom_error[T, C, C2, V](
    f: Callable[[C], C2], data: RemoteData[T, C, V]
) -> RemoteData[T, C2, V]:
    match data:
        case NotAsked() | Loading():
            return data
        case Success() | Failure():
            return R.map_custom_error(f, data)
        case _:
            assert_never(data)


def map_transport_error[T, T2, C, V](
    f: Callable[[T], T2], data: RemoteData[T, C, V]
) -> RemoteData[T2, C, V]:
    match data:
        case NotAsked() | Loading():
            return data
        case Success() | Failure():
            return R.map_transport_error(f, data)
        case _:
            assert_never(data)


def map_errors[E, E2, V](
    f: Callable[[E], E2], data: RemoteData[E, E, V]
) -> RemoteData[E2, E2, V]:
    match data:
        case NotAsked() | Loading():
            return data
        case Success() | Failure():
            return R.map_errors(f, data)
        case _:
            assert_never(data)


# ═══════════════════════════════════════════════════════════════════════════════
# Projections (lossy — prefer match)
# ═══════════════════════════════════════════════════════════════════════════════


def with_default[T, C, V](default: V, data: RemoteData[T, C, V]) -> V:
    match data:
        case NotAsked() | Loading():
            return default
        case Success() | Failure():
            return R.with_default(default, data)
        case _:
            assert_never(data)


def merge[E](default: E, data: RemoteData[E, E, E]) -> E:
    """
    Success value or error payload; default while NotAsked/Loading.

    Requires transport, custom and value types to coincide.
    """
    match data:
        case NotAsked() | Loading():
            return default
        case Success() | Failure():
            return R.merge(data)
        case _:
            assert_never(data)


def to_optional_value[T, C, V](data: RemoteData[T, C, V]) -> Option[V]:
    match data:
        case NotAsked() | Loading():
            return Nothing()
        case Success() | Failure():
            return R.to_optional_value(data)
        case _:
            assert_never(data)


def to_optional_error[T, C, V](
    data: RemoteData[T, C, V],
) -> Option[RemoteError[T, C]]:
    match data:
        case NotAsked() | Loading():
            return Nothing()
        case Success() | Failure():
            return R.to_optional_error(data)
        case _:
            assert_never(data)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates
# ═══════════════════════════════════════════════════════════════════════════════


def is_not_asked(data: RemoteData[object, object, object]) -> bool:
    return isinstance(data, NotAsked)


def is_loading(data: RemoteData[object, object, object]) -> bool:
    return isinstance(data, Loading)


def is_success(data: RemoteData[object, object, object]) -> bool:
    return isinstance(data, Success)


def is_error(data: RemoteData[object, object, object]) -> bool:
    """True for either error kind."""
    return isinstance(data, Failure)


def is_transport_error(data: RemoteData[object, object, object]) -> bool:
    return is_error(data) and R.is_transport_error(data)


def is_custom_error(data: RemoteData[object, object, object]) -> bool:
    return is_error(data) and R.is_custom_error(data)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "from_response",
    "map",
    "and_then",
    "map_custom_error",
    "map_transport_error",
    "map_errors",
    "with_default",
    "merge",
    "to_optional_value",
    "to_optional_error",
    "is_not_asked",
    "is_loading",
    "is_success",
    "is_error",
    "is_transport_error",
    "is_custom_error",
)
