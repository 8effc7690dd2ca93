"""
remotedata — fetch lifecycles as closed sets of states.

    from remotedata import response as R      # Outcome of one fetch
    from remotedata import remote as RD       # NotAsked/Loading/Failure/Success
    from remotedata import recyclable as RC   # ... keeping the last good value
    from remotedata import store as S         # Recyclable states under keys
"""

# Order matters: each namespace imports the ones above it.
from remotedata import response
from remotedata import remote
from remotedata import recyclable
from remotedata import store
from remotedata._types import (
    Transport,
    Custom,
    RemoteError,
    Nested,
)

__version__ = "0.1.0"

__all__ = (
    "response",
    "remote",
    "recyclable",
    "store",
    "Transport",
    "Custom",
    "RemoteError",
    "Nested",
)
