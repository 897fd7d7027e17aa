"""In-memory database holding String and HashMap keys."""

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from hakjdb.common import HASH_MAP_MAX_FIELDS

# Estimated bookkeeping overhead of every stored key, value and field.
_STORED_TYPE_BYTES = 16


class DBKeyType(str, Enum):
    """Data type of a database key."""

    STRING = "String"
    HASH_MAP = "HashMap"

    def __str__(self):
        return self.value


@dataclass
class DBConfig:
    """Settings of a single database."""

    max_hash_map_fields: int = HASH_MAP_MAX_FIELDS


@dataclass(frozen=True)
class HashMapFieldValueResult:
    """Value of a HashMap field and whether the field exists."""

    value: bytes = b""
    ok: bool = False


def _now():
    return datetime.now(timezone.utc)


def _byte_len(text):
    return len(text.encode("utf-8"))


class DB:
    """A named namespace of key-value pairs, safe to share between threads."""

    def __init__(self, name, description="", config=None):
        self._name = name
        self._description = description
        self._config = config if config is not None else DBConfig()
        self._created_at = _now()
        self._updated_at = _now()
        self._strings = {}
        self._hash_maps = {}
        self._lock = threading.RLock()

    def __repr__(self):
        return f"DB(name={self.name!r}, keys={self.get_key_count()})"

    @property
    def name(self):
        with self._lock:
            return self._name

    @property
    def description(self):
        with self._lock:
            return self._description

    @property
    def created_at(self):
        return self._created_at

    @property
    def updated_at(self):
        with self._lock:
            return self._updated_at

    @property
    def config(self):
        return self._config

    def _touch(self):
        self._updated_at = _now()

    def change_name(self, new_name):
        """Rename the database."""
        with self._lock:
            self._name = new_name
            self._touch()

    def change_description(self, new_description):
        """Replace the description of the database."""
        with self._lock:
            self._description = new_description
            self._touch()

    def get_key_count(self):
        """Return the number of keys in the database."""
        with self._lock:
            return len(self._strings) + len(self._hash_maps)

    def get_estimated_storage_size_bytes(self):
        """Return the estimated size of the stored data in bytes."""
        with self._lock:
            size = 0
            for key, value in self._strings.items():
                size += _STORED_TYPE_BYTES + _byte_len(key)
                size += _STORED_TYPE_BYTES + len(value)
            for key, fields in self._hash_maps.items():
                size += _STORED_TYPE_BYTES + _byte_len(key)
                size += _STORED_TYPE_BYTES
                for field, value in fields.items():
                    size += _STORED_TYPE_BYTES + _byte_len(field)
                    size += _STORED_TYPE_BYTES + len(value)
            return size

    def get_key_type(self, key):
        """Return the type of key, or None if it does not exist."""
        with self._lock:
            if key in self._strings:
                return DBKeyType.STRING
            if key in self._hash_maps:
                return DBKeyType.HASH_MAP
            return None

    def get_string(self, key):
        """Return the value of a String key, or None if there is no such String key."""
        with self._lock:
            return self._strings.get(key)

    def set_string(self, key, value):
        """Set a String key, replacing any previous key of any type."""
        with self._lock:
            self._hash_maps.pop(key, None)
            self._strings[key] = bytes(value)
            self._touch()

    def delete_keys(self, keys):
        """Delete the given keys and return how many were deleted."""
        with self._lock:
            deleted = 0
            for key in keys:
                if self._strings.pop(key, None) is not None:
                    deleted += 1
                elif self._hash_maps.pop(key, None) is not None:
                    deleted += 1
            if deleted:
                self._touch()
            return deleted

    def delete_all_keys(self):
        """Delete every key in the database."""
        with self._lock:
            self._strings.clear()
            self._hash_maps.clear()
            self._touch()

    def get_all_keys(self):
        """Return a list of every key in the database."""
        with self._lock:
            return [*self._strings, *self._hash_maps]

    def set_hash_map(self, key, fields):
        """Set fields of a HashMap key, creating it if needed.

        Replaces a String key of the same name. New fields beyond the
        configured maximum are ignored. Returns the number of fields added.
        """
        with self._lock:
            self._strings.pop(key, None)
            stored = self._hash_maps.setdefault(key, {})
            added = 0
            for field, value in fields.items():
                if field not in stored:
                    if len(stored) >= self._config.max_hash_map_fields:
                        continue
                    added += 1
                stored[field] = bytes(value)
            self._touch()
            return added

    def get_hash_map_field_values(self, key, fields):
        """Return a result for each requested field, or None if the HashMap key does not exist."""
        with self._lock:
            stored = self._hash_maps.get(key)
            if stored is None:
                return None
            return {
                field: HashMapFieldValueResult(stored[field], True)
                if field in stored
                else HashMapFieldValueResult()
                for field in fields
            }

    def get_hash_map(self, key):
        """Return a copy of a HashMap key's fields, or None if there is no such HashMap key."""
        with self._lock:
            stored = self._hash_maps.get(key)
            return dict(stored) if stored is not None else None

    def delete_hash_map_fields(self, key, fields):
        """Remove fields from a HashMap key.

        Returns the number of fields removed, or None if the HashMap key does not exist.
        """
        with self._lock:
            stored = self._hash_maps.get(key)
            if stored is None:
                return None
            if not stored:
                return 0
            removed = 0
            for field in fields:
                if stored.pop(field, None) is not None:
                    removed += 1
            if removed:
                self._touch()
            return removed