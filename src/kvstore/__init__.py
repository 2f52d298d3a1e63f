"""kvstore — async client for a remote key-value storage service.

Every operation is one JSON action posted to a single endpoint with a
bearer token.  Failures surface as :class:`RequestFailedError`.
"""

from kvstore.client import KVStore, store
from kvstore.exceptions import KVStoreError, MalformedResponseError, RequestFailedError
from kvstore.models import KVEntry, KVStoreOptions, LoginFormData, RegisterFormData
from kvstore.types import JSONObject, JSONValue

__all__ = [
    "JSONObject",
    "JSONValue",
    "KVEntry",
    "KVStore",
    "KVStoreError",
    "KVStoreOptions",
    "LoginFormData",
    "MalformedResponseError",
    "RegisterFormData",
    "RequestFailedError",
    "store",
]
