"""
Recyclable types — fetch lifecycle that keeps the last good value.
"""

from __future__ import annotations

from dataclasses import dataclass

from remotedata._types import RemoteError

# Bare failure (nothing retained yet) is the Response variant
from remotedata.response._types import Failure

# ═══════════════════════════════════════════════════════════════════════════════
# RecyclingStage — what is happening while a value is retained
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LoadingStage:
    """A reload is in flight."""


@dataclass(frozen=True, slots=True)
class FailureStage[T, C]:
    """The latest reload failed."""

    error: RemoteError[T, C]


type RecyclingStage[T, C] = LoadingStage | FailureStage[T, C]

# ═══════════════════════════════════════════════════════════════════════════════
# Recyclable = NeverAsked | Loading | Failure | Ready | Recycling
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class NeverAsked:
    """No request has been made. Also what an absent store key means."""


@dataclass(frozen=True, slots=True)
class Loading:
    """First request in flight; nothing retained yet."""


@dataclass(frozen=True, slots=True)
class Ready[V]:
    """Settled on a successfully fetched value."""

    value: V


@dataclass(frozen=True, slots=True)
class Recycling[T, C, V]:
    """
    A retained value plus what the current fetch is doing.

    Note: Nested stage instead of RecyclingLoading/RecyclingFailure variants.
    Keeps the outer union from doubling once a value is retained.
    """

    value: V
    stage: RecyclingStage[T, C]


type Recyclable[T, C, V] = (
    NeverAsked | Loading | Failure[T, C] | Ready[V] | Recycling[T, C, V]
)
"""
Lifecycle:

    NeverAsked ─to_loading─► Loading ─fail─► Failure ─to_loading─► Loading
                                │                                     │
                             success ◄─────────── success ────────────┘
                                ▼
                             Ready(v) ─to_loading─► Recycling(v, LoadingStage)
                                ▲                         │
                                └──── success ─── fail ───┴─► Recycling(v, FailureStage(e))

Once a value is retained only a fresh success replaces it.
"""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "LoadingStage",
    "FailureStage",
    "RecyclingStage",
    "NeverAsked",
    "Loading",
    "Failure",
    "Ready",
    "Recycling",
    "Recyclable",
)
