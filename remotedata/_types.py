"""
Core types for remotedata.

Re-exports from kungfu + the error vocabulary shared by every lifecycle type.
"""

from __future__ import annotations

from dataclasses import dataclass

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# RemoteError — Transport | Custom
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Transport[T]:
    """
    Failure below the application protocol.

    Connectivity, timeouts, TLS, a proxy returning garbage — anything that
    happened before the service got a chance to answer.
    """

    error: T


@dataclass(frozen=True, slots=True)
class Custom[C]:
    """
    Failure reported by the application/service itself.

    Validation, authorization, "not found" — the request arrived and the
    service said no. Richer taxonomies belong in C, not in new variants.
    """

    error: C


type RemoteError[T, C] = Transport[T] | Custom[C]
"""Exactly one of the two failure kinds. There is no "no error" variant."""

# ═══════════════════════════════════════════════════════════════════════════════
# Nested — what the transport layer hands over
# ═══════════════════════════════════════════════════════════════════════════════

type Nested[T, C, V] = Result[Result[V, C], T]
"""
Two-level outcome: outer transport result wrapping the application result.

    Error(t)         transport failed
    Ok(Error(c))     transport fine, service rejected
    Ok(Ok(v))        success
"""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Error vocabulary
    "Transport",
    "Custom",
    "RemoteError",
    # Transport outcome
    "Nested",
)
