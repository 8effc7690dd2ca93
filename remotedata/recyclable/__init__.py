"""
Recyclable — fetch lifecycle that keeps showing the last good value.

    from remotedata import recyclable as RC

    state = RC.NeverAsked()
    state = RC.to_loading(state)                  # Loading()
    state = RC.merge_response(response, state)    # Ready(user)
    state = RC.to_loading(state)                  # Recycling(user, LoadingStage())
    state = RC.merge_response(failed, state)      # Recycling(user, FailureStage(err))

    match state:
        case RC.NeverAsked():                         ...
        case RC.Loading():                            ...
        case RC.Failure(e):                           ...
        case RC.Ready(user):                          ...
        case RC.Recycling(user, RC.LoadingStage()):   ...
        case RC.Recycling(user, RC.FailureStage(e)):  ...
"""

from __future__ import annotations

from remotedata.recyclable._types import (
    LoadingStage,
    FailureStage,
    RecyclingStage,
    NeverAsked,
    Loading,
    Failure,
    Ready,
    Recycling,
    Recyclable,
)
from remotedata.recyclable._transitions import (
    to_loading,
    merge_response,
    from_response,
    first_loading,
)
from remotedata.recyclable._ops import (
    map,
    map_custom_error,
    map_transport_error,
    map_errors,
    with_default,
    merge,
    to_error,
    retained_value,
    is_never_asked,
    is_ready,
    is_recycling,
    is_loading,
    is_error,
    is_transport_error,
    is_custom_error,
)

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
    "to_loading",
    "merge_response",
    "from_response",
    "first_loading",
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
