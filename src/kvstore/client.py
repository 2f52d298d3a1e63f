"""KVStore — async client for the key-value service's single action endpoint."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from kvstore.exceptions import DEFAULT_FAILURE_MESSAGE, MalformedResponseError, RequestFailedError
from kvstore.models import KVEntry, KVStoreOptions, LoginFormData, RegisterFormData
from kvstore.types import JSONObject, JSONValue

logger = logging.getLogger(__name__)


def _as_params(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return dict(data)


def _as_entry(entry: KVEntry | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(entry, KVEntry):
        return entry.to_wire()
    return dict(entry)


class KVStore:
    """Talks to a remote key-value service through one JSON action endpoint.

    Every public method is a single ``POST`` to ``api_url`` carrying an
    ``action`` name, the default ``dbName``/``storeName`` and the
    operation's own fields.  The client keeps no state between calls, so
    concurrent calls are independent requests.

    Parameters:
        api_url: The service endpoint (e.g. ``https://api.example.com/connect``).
        options: :class:`KVStoreOptions`, or a mapping with ``accessToken``,
            ``storeName`` and ``dbName`` (snake_case keys work too).
        http_client: Optional ``httpx.AsyncClient`` to send requests with.
            The caller owns it (timeouts, proxies, closing).  When omitted a
            short-lived client is opened per request.

    Example:
        >>> kv = KVStore(
        ...     "https://api.example.com/connect",
        ...     {"accessToken": "your-token", "storeName": "mystore", "dbName": "mydb"},
        ... )
        >>> await kv.set("key1", "value1")
        >>> await kv.get("key1")
        'value1'
    """

    def __init__(
        self,
        api_url: str,
        options: KVStoreOptions | Mapping[str, Any],
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not isinstance(options, KVStoreOptions):
            options = KVStoreOptions.model_validate(options)
        self._api_url = api_url
        self._options = options
        self._http_client = http_client

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(api_url={self._api_url!r}, "
            f"db_name={self.db_name!r}, store_name={self.store_name!r})"
        )

    # ── configuration ────────────────────────────────────────

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def options(self) -> KVStoreOptions:
        return self._options

    @property
    def access_token(self) -> str:
        return self._options.access_token

    @property
    def store_name(self) -> str:
        return self._options.store_name

    @property
    def db_name(self) -> str:
        return self._options.db_name

    # ── transport ────────────────────────────────────────────

    async def _request(self, action: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send one action to the service and return the decoded body.

        The body is ``{"action", "dbName", "storeName", **params}``; a
        ``dbName`` or ``storeName`` in *params* replaces the default for
        this call only.

        Args:
            action: Action name understood by the service.
            params: Extra request fields.

        Returns:
            The parsed JSON body, unmodified.

        Raises:
            RequestFailedError: If the response status is not 2xx.  The
                message is the service's ``error`` field, or
                ``"Request failed"`` when it has none.
        """
        payload: dict[str, Any] = {
            "action": action,
            "dbName": self.db_name,
            "storeName": self.store_name,
            **(params or {}),
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.access_token}",
        }

        logger.debug("kvstore action %r -> %s", action, self._api_url)
        if self._http_client is not None:
            response = await self._http_client.post(self._api_url, json=payload, headers=headers)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(self._api_url, json=payload, headers=headers)

        data = response.json()

        if not response.is_success:
            error = data.get("error") if isinstance(data, dict) else None
            message = error if isinstance(error, str) and error else DEFAULT_FAILURE_MESSAGE
            logger.warning(
                "kvstore action %r failed: HTTP %s: %s", action, response.status_code, message
            )
            raise RequestFailedError(message, status_code=response.status_code, body=data)

        return data

    @staticmethod
    def _field(result: Any, action: str, field: str) -> Any:
        """Pull *field* out of a successful response."""
        if not isinstance(result, dict) or field not in result:
            raise MalformedResponseError(action, field)
        return result[field]

    # ── users ────────────────────────────────────────────────

    async def register(self, form_data: RegisterFormData | Mapping[str, Any]) -> JSONObject:
        """Register a new user.  Every form field is sent, extras included.

        Example:
            >>> await kv.register(
            ...     {"username": "john_doe", "email": "john@example.com", "password": "secure123"}
            ... )
        """
        return await self._request("register", _as_params(form_data))

    async def login(self, form_data: LoginFormData | Mapping[str, Any]) -> JSONObject:
        """Log in an existing user."""
        return await self._request("login", _as_params(form_data))

    async def generate_token(self) -> JSONObject:
        """Ask the service for a new access token (returned as ``result["token"]``)."""
        return await self._request("generate-token")

    async def get_user_info(self) -> JSONObject:
        return await self._request("get-user-info")

    # ── databases & stores ───────────────────────────────────

    async def get_databases(self) -> JSONObject:
        return await self._request("get-databases")

    async def create_database(self, name: str) -> JSONObject:
        return await self._request("create-database", {"name": name})

    async def create_store(self, db_name: str, store_name: str) -> JSONObject:
        """Create *store_name* inside *db_name* (both replace the defaults)."""
        return await self._request("create-store", {"dbName": db_name, "storeName": store_name})

    async def get_stores(self, db_name: str) -> list[str]:
        """Return the store names in *db_name*."""
        result = await self._request("get-stores", {"dbName": db_name})
        return self._field(result, "get-stores", "stores")

    async def delete_store(self, db_name: str, store_name: str) -> JSONObject:
        """Delete a store and everything in it.  Cannot be undone."""
        return await self._request("delete-store", {"dbName": db_name, "storeName": store_name})

    async def delete_database(self, db_name: str) -> JSONObject:
        """Delete a database along with all of its stores.  Cannot be undone."""
        return await self._request("delete-database", {"dbName": db_name})

    # ── single keys ──────────────────────────────────────────

    async def set(self, key: str, value: JSONValue) -> JSONObject:
        """Store *value* under *key* in the default store.

        Example:
            >>> await kv.set("user:123", {"name": "John", "age": 30})
        """
        return await self._request("set", {"key": key, "value": value})

    async def get(self, key: str) -> JSONValue:
        """Return the value stored under *key*."""
        result = await self._request("get", {"key": key})
        return self._field(result, "get", "value")

    async def update(self, key: str, value: JSONValue) -> JSONObject:
        return await self._request("update", {"key": key, "value": value})

    async def delete(self, key: str) -> JSONObject:
        return await self._request("delete", {"key": key})

    # ── batches ──────────────────────────────────────────────

    async def set_many(self, entries: Iterable[KVEntry | Mapping[str, Any]]) -> JSONObject:
        """Store several entries in one request.

        Example:
            >>> await kv.set_many([
            ...     {"key": "user:1", "value": {"name": "Alice"}},
            ...     KVEntry(key="user:2", value={"name": "Bob"}),
            ... ])
        """
        return await self._request("setMany", {"entries": [_as_entry(e) for e in entries]})

    async def get_many(self, keys: list[str]) -> list[JSONValue]:
        """Return the values for *keys*, in the order the service sends them."""
        result = await self._request("getMany", {"keys": keys})
        return self._field(result, "getMany", "values")

    async def delete_many(self, keys: list[str]) -> JSONObject:
        return await self._request("deleteMany", {"keys": keys})

    # ── whole store ──────────────────────────────────────────

    async def entries(
        self,
        db_name: str | None = None,
        store_name: str | None = None,
    ) -> list[JSONObject]:
        """Return every ``{"key", "value"}`` entry of a store.

        Empty or missing names fall back to the configured defaults.
        """
        result = await self._request(
            "entries",
            {"dbName": db_name or self.db_name, "storeName": store_name or self.store_name},
        )
        return self._field(result, "entries", "entries")

    async def keys(self) -> list[str]:
        result = await self._request("keys")
        return self._field(result, "keys", "keys")

    async def values(self) -> list[JSONValue]:
        result = await self._request("values")
        return self._field(result, "values", "values")

    async def clear(self) -> JSONObject:
        """Remove every entry from the default store.  Cannot be undone."""
        return await self._request("clear")


def store(api_url: str, options: KVStoreOptions | Mapping[str, Any]) -> KVStore:
    """Create a :class:`KVStore`.

    Deprecated: kept for existing call sites, prefer ``KVStore(...)``.
    Emits no warning; it behaves exactly like the constructor.
    """
    return KVStore(api_url, options)
