"""JSON value aliases shared by the client and its models."""

from __future__ import annotations

from typing import Any, Union  # noqa: F401

from typing_extensions import TypeAliasType

# Any value the service can store.  Opaque to the client: sent and
# returned verbatim.
JSONValue = TypeAliasType(
    "JSONValue",
    "Union[dict[str, JSONValue], list[JSONValue], str, int, float, bool, None]",
)

# Decoded response bodies.  Unknown fields are kept, never rejected.
JSONObject = dict[str, Any]
