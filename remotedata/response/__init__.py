"""
Response — outcome of one completed fetch.

    from remotedata import response as R

    response = R.from_nested_result(Ok(Ok(user)))     # Success(user)
    response = R.from_nested_result(Ok(Error(nf)))    # Failure(Custom(nf))
    response = R.from_nested_result(Error(timeout))   # Failure(Transport(timeout))

    response = await R.resolve(get_user(uid))        # from a LazyCoroResult
"""

from __future__ import annotations

from remotedata.response._types import Success, Failure, Response
from remotedata.response._ops import (
    from_nested_result,
    resolve,
    map,
    and_then,
    map_custom_error,
    map_transport_error,
    map_errors,
    to_optional_value,
    to_optional_error,
    with_default,
    merge,
    is_success,
    is_failure,
    is_custom_error,
    is_transport_error,
)

__all__ = (
    "Success",
    "Failure",
    "Response",
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
