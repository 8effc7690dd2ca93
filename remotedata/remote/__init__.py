"""
RemoteData — fetch lifecycle without memory.

    from remotedata import remote as RD

    data: RD.RemoteData[HttpError, NotFound, User] = RD.NotAsked()
    data = RD.Loading()                       # request dispatched
    data = RD.from_response(response)         # Success | Failure

    match data:
        case RD.NotAsked():  ...
        case RD.Loading():   ...
        case RD.Failure(e):  ...
        case RD.Success(u):  ...
"""

from __future__ import annotations

from remotedata.remote._types import (
    NotAsked,
    Loading,
    Failure,
    Success,
    RemoteData,
)
from remotedata.remote._ops import (
    from_response,
    map,
    and_then,
    map_custom_error,
    map_transport_error,
    map_errors,
    with_default,
    merge,
    to_optional_value,
    to_optional_error,
    is_not_asked,
    is_loading,
    is_success,
    is_error,
    is_transport_error,
    is_custom_error,
)

__all__ = (
    "NotAsked",
    "Loading",
    "Failure",
    "Success",
    "RemoteData",
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
