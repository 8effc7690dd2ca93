"""
Recyclable transitions — the two caller-driven moves plus constructors.

Both transitions are total: every state × input has exactly one output.
"""

from __future__ import annotations

from typing import assert_never

from remotedata.response._types import Success, Failure, Response
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
# to_loading() — a new fetch was dispatched
# ═══════════════════════════════════════════════════════════════════════════════


def to_loading[T, C, V](state: Recyclable[T, C, V]) -> Recyclable[T, C, V]:
    """
    Mark a fetch as in flight.

        NeverAsked | Loading | Failure   → Loading
        Ready(v) | Recycling(v, _)       → Recycling(v, LoadingStage())
    """
    match state:
        case NeverAsked() | Loading() | Failure():
            return Loading()
        case Ready(v) | Recycling(v, _):
            return Recycling(v, LoadingStage())
        case _:
            assert_never(state)


# ═══════════════════════════════════════════════════════════════════════════════
# merge_response() — a fetch completed
# ═══════════════════════════════════════════════════════════════════════════════


def merge_response[T, C, V](
    response: Response[T, C, V], state: Recyclable[T, C, V]
) -> Recyclable[T, C, V]:
    """
    Fold a completed response into the current state.

    Success always yields a bare Ready with the new value; the old one is
    dropped. Failure keeps whatever value was retained.

        any                              + Success(v2) → Ready(v2)
        NeverAsked | Loading | Failure   + Failure(e)  → Failure(e)
        Ready(v) | Recycling(v, _)       + Failure(e)  → Recycling(v, FailureStage(e))
    """
    match response:
        case Success(v2):
            return Ready(v2)
        case Failure(e):
            match state:
                case NeverAsked() | Loading() | Failure():
                    return response
                case Ready(v) | Recycling(v, _):
                    return Recycling(v, FailureStage(e))
                case _:
                    assert_never(state)
        case _:
            assert_never(response)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def from_response[T, C, V](response: Response[T, C, V]) -> Recyclable[T, C, V]:
    """
    Start a fresh lifecycle from a response, ignoring any prior state.

    Never produces Recycling. Use merge_response to keep a retained value;
    use this when the resource identity changed (different id, filter, ...).
    """
    match response:
        case Success(v):
            return Ready(v)
        case Failure():
            return response
        case _:
            assert_never(response)


def first_loading() -> Loading:
    """Initial state for a model that dispatches its first request right away."""
    return Loading()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "to_loading",
    "merge_response",
    "from_response",
    "first_loading",
)
