"""
Keyed-store adapter — Recyclable transitions over a mapping.

An absent key IS NeverAsked. No key is ever stored with NeverAsked: writes
that produce it delete the key instead, so the store only holds resources
that were fetched at least once.

Inputs are never mutated; every operation returns a new dict.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping

from remotedata import recyclable as RC
from remotedata.recyclable._types import NeverAsked, Recyclable
from remotedata.response._types import Response

logger = logging.getLogger(__name__)

type Store[K: Hashable, T, C, V] = Mapping[K, Recyclable[T, C, V]]

# ═══════════════════════════════════════════════════════════════════════════════
# get() / update()
# ═══════════════════════════════════════════════════════════════════════════════


def get[K: Hashable, T, C, V](
    key: K, store: Store[K, T, C, V]
) -> Recyclable[T, C, V]:
    """Stored state, or NeverAsked() when the key is absent."""
    return store.get(key, NeverAsked())


def update[K: Hashable, T, C, V](
    key: K,
    f: Callable[[Recyclable[T, C, V]], Recyclable[T, C, V]],
    store: Store[K, T, C, V],
) -> dict[K, Recyclable[T, C, V]]:
    """
    Apply f to the state under key and write it back.

    A NeverAsked result removes the key.

    Example:
        users = S.update(uid, RC.to_loading, users)
    """
    new_state = f(get(key, store))
    result = dict(store)
    if isinstance(new_state, NeverAsked):
        if result.pop(key, None) is not None:
            logger.debug("Key %r reverted to NeverAsked, removed", key)
        return result
    if key not in result:
        logger.debug("Key %r stored for the first time", key)
    result[key] = new_state
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Transitions by key
# ═══════════════════════════════════════════════════════════════════════════════


def to_loading[K: Hashable, T, C, V](
    key: K, store: Store[K, T, C, V]
) -> dict[K, Recyclable[T, C, V]]:
    """RC.to_loading on the entry under key."""
    return update(key, RC.to_loading, store)


def merge_response[K: Hashable, T, C, V](
    key: K, response: Response[T, C, V], store: Store[K, T, C, V]
) -> dict[K, Recyclable[T, C, V]]:
    """
    Fold a response into the entry under key.

    Present key: RC.merge_response. Absent key: RC.from_response. Either way
    the result is a Ready/Failure/Recycling and is stored.
    """
    result = dict(store)
    if key in result:
        result[key] = RC.merge_response(response, result[key])
    else:
        logger.debug("Key %r stored for the first time", key)
        result[key] = RC.from_response(response)
    return result


def compact[K: Hashable, T, C, V](
    store: Store[K, T, C, V],
) -> dict[K, Recyclable[T, C, V]]:
    """Copy of store without explicit NeverAsked entries."""
    result = {k: v for k, v in store.items() if not isinstance(v, NeverAsked)}
    if dropped := len(store) - len(result):
        logger.debug("Compacted %d NeverAsked entries", dropped)
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Store",
    "get",
    "update",
    "to_loading",
    "merge_response",
    "compact",
)
