"""
RemoteData types — four-state fetch lifecycle, no memory of prior data.
"""

from __future__ import annotations

from dataclasses import dataclass

# Terminal states are the Response variants themselves
from remotedata.response._types import Success, Failure

# ═══════════════════════════════════════════════════════════════════════════════
# RemoteData = NotAsked | Loading | Failure | Success
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class NotAsked:
    """No request has been made."""


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight."""


type RemoteData[T, C, V] = NotAsked | Loading | Failure[T, C] | Success[V]
"""
Lifecycle:
    NotAsked ──(caller)──► Loading ──from_response──► Failure | Success

Nothing here moves back to NotAsked or Loading; construct Loading()
yourself when the next request starts.
"""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "NotAsked",
    "Loading",
    "Failure",
    "Success",
    "RemoteData",
)
