import time

import pytest

from hakjdb.common import HASH_MAP_MAX_FIELDS
from hakjdb.db import DB, DBConfig, DBKeyType, HashMapFieldValueResult


@pytest.fixture
def db():
    return DB("test", "", DBConfig(max_hash_map_fields=HASH_MAP_MAX_FIELDS))


FIELDS = {"field1": b"value1", "field2": b"value2", "field3": b"value3"}


def test_get_key_type_not_found(db):
    assert db.get_key_type("key1") is None


def test_get_key_type_string(db):
    db.set_string("key1", b"value")
    assert db.get_key_type("key1") == DBKeyType.STRING
    assert str(db.get_key_type("key1")) == "String"


def test_get_key_type_hash_map(db):
    db.set_hash_map("key1", {})
    assert db.get_key_type("key1") == DBKeyType.HASH_MAP
    assert str(db.get_key_type("key1")) == "HashMap"


def test_set_string_nonexistent_key(db):
    db.set_string("key1", b"value1")
    assert db.get_key_count() == 1


def test_set_string_overwrite(db):
    db.set_string("key1", b"value1")
    db.set_string("key1", b"value2")
    assert db.get_key_count() == 1
    assert db.get_string("key1") == b"value2"


def test_set_string_updates_database(db):
    original = db.updated_at
    time.sleep(0.01)
    db.set_string("key1", b"value1")
    assert db.updated_at > original


def test_set_string_replaces_hash_map(db):
    db.set_hash_map("key1", FIELDS)
    db.set_string("key1", b"v")
    assert db.get_key_count() == 1
    assert db.get_hash_map("key1") is None
    assert db.get_string("key1") == b"v"


def test_get_string_nonexistent(db):
    assert db.get_string("key1") is None


def test_get_string_existing(db):
    db.set_string("key1", b"value1")
    assert db.get_string("key1") == b"value1"


def test_delete_nonexistent_keys(db):
    assert db.delete_keys(["key1"]) == 0
    assert db.delete_keys(["key2", "key3"]) == 0


def test_delete_existing_key(db):
    db.set_string("key1", b"value1")
    assert db.delete_keys(["key1"]) == 1
    assert db.delete_keys(["key1"]) == 0


def test_delete_multiple_existing_keys(db):
    for i in (1, 2, 3):
        db.set_string(f"key{i}", f"val{i}".encode())
    assert db.delete_keys(["key1", "key2", "key3"]) == 3
    assert db.delete_keys(["key3", "key1", "key2"]) == 0


def test_delete_multiple_keys_but_not_all(db):
    for i in (1, 2, 3, 4):
        db.set_string(f"key{i}", f"val{i}".encode())
    assert db.delete_keys(["key3", "key4"]) == 2
    assert db.delete_keys(["key2"]) == 1
    assert db.delete_keys(["key2", "key3", "key4"]) == 0
    assert db.delete_keys(["key1", "key2", "key3", "key4"]) == 1


def test_delete_not_updated_if_key_missing(db):
    original = db.updated_at
    time.sleep(0.01)
    db.delete_keys(["key1"])
    assert db.updated_at == original


def test_delete_updates_if_key_deleted(db):
    db.set_string("key1", b"val1")
    original = db.updated_at
    time.sleep(0.01)
    db.delete_keys(["key1"])
    assert db.updated_at > original


def test_get_key_count(db):
    assert db.get_key_count() == 0
    db.set_string("key1", b"value1")
    assert db.get_key_count() == 1
    db.set_hash_map("key2", {"field1": b"value1"})
    assert db.get_key_count() == 2
    db.delete_keys(["key1"])
    assert db.get_key_count() == 1
    db.delete_keys(["key2"])
    assert db.get_key_count() == 0
    db.set_string("key1", b"value1")
    db.set_hash_map("key2", {"field1": b"value1"})
    assert db.get_key_count() == 2


def test_delete_all_keys_no_keys(db):
    db.delete_all_keys()
    assert db.get_key_count() == 0


def test_delete_all_keys_multiple(db):
    for key in ("key1", "key2", "key3"):
        db.set_string(key, b"value")
    assert db.get_key_count() == 3
    db.delete_all_keys()
    assert db.get_key_count() == 0


def test_get_all_keys_empty(db):
    assert db.get_all_keys() == []


def test_get_all_keys_multiple(db):
    keys = ["key1", "key2", "key3"]
    for key in keys:
        db.set_string(key, b"val")
    actual = db.get_all_keys()
    assert len(actual) == len(keys)
    assert sorted(actual) == keys


def test_set_hash_map_nonexistent_key(db):
    assert db.set_hash_map("key1", FIELDS) == 3
    assert db.get_key_count() == 1


def test_set_hash_map_overwrite_existing(db):
    db.set_hash_map("key1", FIELDS)
    assert db.set_hash_map("key1", {}) == 0
    assert db.get_key_count() == 1


def test_set_hash_map_updates_database(db):
    original = db.updated_at
    time.sleep(0.01)
    db.set_hash_map("key1", FIELDS)
    assert db.updated_at > original


def test_set_hash_map_max_field_limit():
    db = DB("test", "", DBConfig(max_hash_map_fields=2))
    fields2 = {"field4": b"val", "field5": b"val", "field6": b"val"}
    assert db.set_hash_map("key1", FIELDS) == 2
    assert db.set_hash_map("key1", fields2) == 0
    assert len(db.get_hash_map("key1")) == 2


def test_get_hash_map_field_values_nonexistent_key(db):
    assert db.get_hash_map_field_values("key1", ["field2"]) is None


def test_get_hash_map_field_values_nonexistent_field(db):
    db.set_hash_map("key1", FIELDS)
    values = db.get_hash_map_field_values("key1", ["field1234"])
    assert values["field1234"] == HashMapFieldValueResult(b"", False)


def test_get_hash_map_field_values_existing(db):
    db.set_hash_map("key1", FIELDS)
    values = db.get_hash_map_field_values("key1", ["field1", "field2", "field3"])
    for field, expected in FIELDS.items():
        assert values[field].value == expected
        assert values[field].ok is True


def test_delete_hash_map_fields_key_not_found(db):
    assert db.delete_hash_map_fields("key1", ["field2", "field3"]) is None


def test_delete_hash_map_fields_exist(db):
    db.set_hash_map("key1", FIELDS)
    assert db.delete_hash_map_fields("key1", ["field2", "field3"]) == 2


def test_delete_hash_map_fields_not_found(db):
    db.set_hash_map("key1", FIELDS)
    assert db.delete_hash_map_fields("key1", ["field123", "field1234"]) == 0


def test_delete_hash_map_fields_duplicates(db):
    db.set_hash_map("key1", FIELDS)
    assert db.delete_hash_map_fields("key1", ["field1", "field1", "field1"]) == 1


def test_delete_hash_map_fields_empty_map(db):
    db.set_hash_map("key1", {})
    assert db.delete_hash_map_fields("key1", ["field1"]) == 0


def test_get_hash_map_nonexistent(db):
    assert db.get_hash_map("key1") is None


def test_get_hash_map_existing(db):
    db.set_hash_map("key1", FIELDS)
    assert db.get_hash_map("key1") == FIELDS


def test_change_name_and_description(db):
    original = db.updated_at
    time.sleep(0.01)
    db.change_name("renamed")
    db.change_description("desc")
    assert db.name == "renamed"
    assert db.description == "desc"
    assert db.updated_at > original
    assert db.created_at <= original


def test_estimated_storage_size(db):
    assert db.get_estimated_storage_size_bytes() == 0
    db.set_string("k", b"v")
    assert db.get_estimated_storage_size_bytes() == 34
    before = db.get_estimated_storage_size_bytes()
    db.set_hash_map("h", {"f": b"abc"})
    assert db.get_estimated_storage_size_bytes() > before
    db.delete_all_keys()
    assert db.get_estimated_storage_size_bytes() == 0