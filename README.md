# hakjdb

The storage core of an in-memory key-value database. A `DB` is a named
namespace holding keys of two data types:

- **String** keys, whose value is a byte string;
- **HashMap** keys, whose value is a mapping of field names to byte strings.

Next to the store the package has input validation, a small levelled logger,
a set of exceptions, a description of the host operating system and a few
file-system helpers.

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## Using a database

```python
from hakjdb.db import DB, DBConfig, DBKeyType

db = DB("default", "", DBConfig(max_hash_map_fields=100))

db.set_string("greeting", b"hello")
db.get_string("greeting")                   # b"hello"
db.get_string("missing")                    # None
db.get_key_type("greeting")                 # DBKeyType.STRING
db.get_key_type("missing")                  # None

db.set_hash_map("user", {"name": b"ann", "role": b"admin"})   # 2 fields added
db.get_hash_map_field_values("user", ["name", "age"])
# {"name": HashMapFieldValueResult(value=b"ann", ok=True),
#  "age": HashMapFieldValueResult(value=b"", ok=False)}
db.get_hash_map("user")                     # {"name": b"ann", "role": b"admin"}
db.delete_hash_map_fields("user", ["role"]) # 1

db.get_key_count()                          # 2
db.get_all_keys()                           # ["greeting", "user"]
db.get_estimated_storage_size_bytes()
db.delete_keys(["greeting", "user"])        # 2
db.delete_all_keys()
```

Behaviour worth knowing:

- Setting a key of one type replaces a key of the same name of the other type.
- `set_hash_map` returns the number of *new* fields. New fields beyond
  `DBConfig.max_hash_map_fields` are silently ignored; existing fields can
  still be overwritten. The default limit is `hakjdb.common.HASH_MAP_MAX_FIELDS`.
- `get_hash_map_field_values`, `get_hash_map` and `delete_hash_map_fields`
  return `None` when the key does not exist or is not a HashMap.
- `name`, `description`, `created_at`, `updated_at` and `config` are
  read-only properties; `change_name` and `change_description` change the
  first two. `updated_at` (UTC) moves forward on every change; deleting keys
  or fields that do not exist leaves it untouched.
- All operations take an internal lock, so a `DB` can be shared between threads.

## Validation

```python
from hakjdb.validation import validate_db_name, validate_db_desc, validate_db_key
from hakjdb.errors import DatabaseNameInvalidError

try:
    validate_db_name("bad name!")
except DatabaseNameInvalidError as exc:
    print(exc)  # database name contains invalid characters
```

- Database names must be non-blank, at most 64 bytes (UTF-8) and made only of
  letters, digits, `-` and `_` (`DatabaseNameRequiredError`,
  `DatabaseNameTooLongError`, `DatabaseNameInvalidError`).
- Descriptions are at most 255 bytes (`DatabaseDescriptionTooLongError`).
- Keys must be non-blank and at most 1024 bytes (`KeyRequiredError`,
  `KeyTooLongError`).

The helpers `is_blank`, `is_too_long` and `db_name_contains_valid_characters`
are available as well.

## Logging

```python
import sys
from hakjdb.logger import DefaultLogger, LogLevel, log_level_from_str

log = DefaultLogger(sys.stdout)         # standard error when no stream is given
log.set_log_level(LogLevel.DEBUG)
log.info("Created database '%s'", "default")
# 2024-05-01T12:00:00.123+02:00 [Info] Created database 'default'

log.enable_log_file("server.log")       # lines are appended to the file too
log.close_log_file()

level, valid = log_level_from_str("Warning")   # (LogLevel.WARNING, True)
level, valid = log_level_from_str("loud")      # (LogLevel.INFO, False)
```

Messages below the configured level are dropped; the default level is
`LogLevel.INFO`. `fatal` writes only when the level is `LogLevel.FATAL`, and
then raises `SystemExit(1)`. `disable()` or `disabled_logger()` gives a logger
that writes nothing. A `DefaultLogger` is also a context manager that closes
its log file on exit.

## Host and file-system helpers

- `hakjdb.osinfo.get_os_info()` describes the operating system (on Linux it
  runs `uname -r -m`, on Windows `cmd /c ver`) and raises `GetOSInfoError`
  when that command fails.
- `hakjdb.common` has `get_exec_path`, `get_exec_parent_dir_path`,
  `get_dir_path`, `create_directories_in_dir_path`,
  `create_file_if_not_exist`, `read_file_lines` and `bytes_to_megabytes`,
  together with constants such as `VERSION`, `API_VERSION`,
  `SERVER_DEFAULT_HOST`, `SERVER_DEFAULT_PORT`, `DB_MAX_KEY_COUNT` and
  `DEFAULT_MAX_CLIENT_CONNECTIONS`.

## Errors

Every exception the package defines derives from `hakjdb.errors.HakjDBError`
and carries a fixed default message.

## What this package does not do

This is the storage layer only. It has no network server, no client, no
authentication, no configuration loading and no command-line program. Data
lives in memory and is not written to disk. Some exceptions (for example
`AuthFailedError` or `MaxClientConnectionsReachedError`) and constants (such
as the metadata key names) are defined for applications built on top of the
package but are not raised or used by it.

## Running the tests

```
pip install ".[test]"
pytest
```