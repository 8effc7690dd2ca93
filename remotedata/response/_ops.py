"""
Response operations — normalization, transforms, projections.

Projections marked "lossy" collapse the union; prefer `match` at read sites.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

from remotedata import _errors
from remotedata._types import Transport, Custom, RemoteError, Nested
from remotedata.response._types import Success, Failure, Response

# ═══════════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════════


def from_nested_result[T, C, V](outer: Nested[T, C, V]) -> Response[T, C, V]:
    """
    Normalize a two-level result into a Response.

        Error(t)      → Failure(Transport(t))
        Ok(Error(c))  → Failure(Custom(c))
        Ok(Ok(v))     → Success(v)
    """
    match outer:
        case Error(t):
            return Failure(Transport(t))
        case Ok(Error(c)):
            return Failure(Custom(c))
        case Ok(Ok(v)):
            return Success(v)
        case _:
            assert_never(outer)


async def resolve[T, C, V](
    lazy: LazyCoroResult[Result[V, C], T],
) -> Response[T, C, V]:
    """
    Await a lazy transport call and normalize its outcome.

    Example:
        def get_user(uid: int) -> LazyCoroResult[Result[User, NotFound], HttpError]: ...

        response = await R.resolve(get_user(1))
    """
    return from_nested_result(await lazy)


# ═══════════════════════════════════════════════════════════════════════════════
# Transforms
# ═══════════════════════════════════════════════════════════════════════════════


def map[T, C, V, V2](
    f: Callable[[V], V2], response: Response[T, C, V]
) -> Response[T, C, V2]:
    match response:
        case Success(v):
            return Success(f(v))
        case Failure():
            return response
        case _:
            assert_never(response)


def and_then[T, C, V, V2](
    f: Callable[[V], Response[T, C, V2]], response: Response[T, C, V]
) -> Response[T, C, V2]:
    """Chain a follow-up step. Failure short-circuits."""
    match response:
        case Success(v):
            return f(v)
        case Failure():
            return response
        case _:
            assert_never(response)


def _map_error[T, C, T2, C2, V](
    f: Callable[[RemoteError[T, C]], RemoteError[T2, C2]],
    response: Response[T, C, V],
) -> Response[T2, C2, V]:
    match response:
        case Failure(e):
            return Failure(f(e))
        case Success():
            return response
        case _:
            assert_never(response)


def map_custom_error[T, C, C2, V](
    f: Callable[[C], C2], response: Response[T, C, V]
) -> Response[T, C2, V]:
    return _map_error(lambda e: _errors.map_custom(f, e), response)


def map_transport_error[T, T2, C, V](
    f: Callable[[T], T2], response: Response[T, C, V]
) -> Response[T2, C, V]:
    return _map_error(lambda e: _errors.map_transport(f, e), response)


def map_errors[E, E2, V](
    f: Callable[[E], E2], response: Response[E, E, V]
) -> Response[E2, E2, V]:
    """Apply f to either error payload, keeping its Transport/Custom tag."""
    return _map_error(lambda e: _errors.map_both(f, e), response)


# ═══════════════════════════════════════════════════════════════════════════════
# Projections
# ═══════════════════════════════════════════════════════════════════════════════


def to_optional_value[T, C, V](response: Response[T, C, V]) -> Option[V]:
    """Success value or Nothing. Lossy: the failure reason is dropped."""
    match response:
        case Success(v):
            return Some(v)
        case Failure():
            return Nothing()
        case _:
            assert_never(response)


def to_optional_error[T, C, V](
    response: Response[T, C, V],
) -> Option[RemoteError[T, C]]:
    match response:
        case Failure(e):
            return Some(e)
        case Success():
            return Nothing()
        case _:
            assert_never(response)


def with_default[T, C, V](default: V, response: Response[T, C, V]) -> V:
    """Success value or default. Lossy."""
    match response:
        case Success(v):
            return v
        case Failure():
            return default
        case _:
            assert_never(response)


def merge[E](response: Response[E, E, E]) -> E:
    """
    Collapse to the single payload.

    Only meaningful when the transport, custom and value types are the same
    (e.g. after mapping both errors into a user-facing message).
    """
    match response:
        case Success(v):
            return v
        case Failure(e):
            return _errors.payload(e)
        case _:
            assert_never(response)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates (lossy)
# ═══════════════════════════════════════════════════════════════════════════════


def is_success(response: Response[object, object, object]) -> bool:
    return isinstance(response, Success)


def is_failure(response: Response[object, object, object]) -> bool:
    return isinstance(response, Failure)


def is_custom_error(response: Response[object, object, object]) -> bool:
    match response:
        case Failure(e):
            return _errors.is_custom(e)
        case _:
            return False


def is_transport_error(response: Response[object, object, object]) -> bool:
    match response:
        case Failure(e):
            return _errors.is_transport(e)
        case _:
            return False


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "from_nested_result",
    "resolve",
    "map",
    "and_then",
    "map_custom_error",
    "map_transport_error",
    "map_errors",
    "to_optional_value",
    "to_optional_error",
    "with_default",
    "merge",
    "is_success",
    "is_failure",
    "is_custom_error",
    "is_transport_error",
)
