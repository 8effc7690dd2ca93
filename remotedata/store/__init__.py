"""
Store — Recyclable states kept under keys.

    from remotedata import store as S

    users: dict[int, RC.Recyclable[HttpError, NotFound, User]] = {}

    users = S.to_loading(1, users)                  # {1: Loading()}
    users = S.merge_response(1, response, users)    # {1: Ready(user)}
    S.get(2, users)                                 # NeverAsked()
"""

from __future__ import annotations

from remotedata.store._ops import (
    Store,
    get,
    update,
    to_loading,
    merge_response,
    compact,
)

__all__ = (
    "Store",
    "get",
    "update",
    "to_loading",
    "merge_response",
    "compact",
)
