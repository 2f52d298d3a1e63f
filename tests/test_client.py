"""Tests for KVStore construction, options and the legacy factory."""

import warnings

import pydantic
import pytest

from kvstore import KVEntry, KVStore, KVStoreOptions, store


def test_instance_holds_configuration(kv, api_url):
    assert kv.api_url == api_url
    assert kv.access_token == "test-token"
    assert kv.store_name == "test-store"
    assert kv.db_name == "test-db"


def test_options_from_camel_case_mapping(api_url):
    kv = KVStore(api_url, {"accessToken": "t", "storeName": "s", "dbName": "d"})
    assert (kv.access_token, kv.store_name, kv.db_name) == ("t", "s", "d")


def test_options_from_snake_case_mapping(api_url):
    kv = KVStore(api_url, {"access_token": "t", "store_name": "s", "db_name": "d"})
    assert kv.options == KVStoreOptions(access_token="t", store_name="s", db_name="d")


def test_options_are_immutable(options):
    with pytest.raises(pydantic.ValidationError):
        options.db_name = "other"


def test_configuration_properties_are_read_only(kv):
    with pytest.raises(AttributeError):
        kv.db_name = "other"


def test_token_hidden_from_repr(kv, options):
    assert "test-token" not in repr(options)
    assert "test-token" not in repr(kv)


def test_construction_does_no_validation_of_values(api_url):
    kv = KVStore(api_url, {"accessToken": "", "storeName": "", "dbName": ""})
    assert kv.db_name == ""


def test_missing_option_is_rejected(api_url):
    with pytest.raises(pydantic.ValidationError):
        KVStore(api_url, {"accessToken": "t", "storeName": "s"})


def test_legacy_factory(api_url, options):
    kv = store(api_url, options)
    assert isinstance(kv, KVStore)
    assert kv.api_url == api_url
    assert kv.options == options


async def test_legacy_factory_behaves_like_constructor(api_url, options, sent):
    await store(api_url, options).set("k", "v")
    via_factory = sent()
    await KVStore(api_url, options).set("k", "v")
    assert sent() == via_factory


def test_entry_keeps_value_structure():
    entry = KVEntry(key="user:1", value={"name": "Alice", "tags": ["a", 1, None], "ok": True})
    assert entry.to_wire() == {
        "key": "user:1",
        "value": {"name": "Alice", "tags": ["a", 1, None], "ok": True},
    }


def test_legacy_factory_emits_no_warning(api_url, options):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        store(api_url, options)


def test_options_from_aliases_and_names_agree():
    by_alias = KVStoreOptions.model_validate({"accessToken": "t", "storeName": "s", "dbName": "d"})
    by_name = KVStoreOptions(access_token="t", store_name="s", db_name="d")
    assert by_alias == by_name
