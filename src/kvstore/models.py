"""Pydantic models for client configuration and request payloads.

Field names are snake_case in Python; the service speaks camelCase, so
every model also accepts (and dumps to) the wire aliases.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kvstore.types import JSONValue


class KVStoreOptions(BaseModel):
    """Connection settings for a :class:`~kvstore.client.KVStore`.

    Immutable once built.  Accepts either naming style::

        KVStoreOptions(access_token="t", store_name="s", db_name="d")
        KVStoreOptions.model_validate({"accessToken": "t", "storeName": "s", "dbName": "d"})

    Attributes:
        access_token: Bearer token attached to every request.
        store_name:   Default store for operations that don't name one.
        db_name:      Default database for operations that don't name one.
    """

    model_config = ConfigDict(frozen=True, validate_by_name=True, validate_by_alias=True)

    access_token: str = Field(alias="accessToken", repr=False)
    store_name: str = Field(alias="storeName")
    db_name: str = Field(alias="dbName")


class RegisterFormData(BaseModel):
    """Registration form.  Extra fields are forwarded to the service as-is."""

    model_config = ConfigDict(extra="allow")

    username: str
    email: str
    password: str = Field(repr=False)


class LoginFormData(BaseModel):
    """Login credentials.  Extra fields are forwarded to the service as-is."""

    model_config = ConfigDict(extra="allow")

    username: str
    password: str = Field(repr=False)


class KVEntry(BaseModel):
    """A single key/value pair as exchanged with a store."""

    key: str
    value: JSONValue

    def to_wire(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}
