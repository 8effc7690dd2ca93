"""
Response types — outcome of one completed fetch.
"""

from __future__ import annotations

from dataclasses import dataclass

from remotedata._types import RemoteError

# ═══════════════════════════════════════════════════════════════════════════════
# Response = Success | Failure
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Success[V]:
    """The fetch completed and produced a value."""

    value: V


@dataclass(frozen=True, slots=True)
class Failure[T, C]:
    """The fetch completed with a transport or custom error."""

    error: RemoteError[T, C]


type Response[T, C, V] = Success[V] | Failure[T, C]

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Success",
    "Failure",
    "Response",
)
