"""Validation of database names, descriptions and keys."""

import re

from hakjdb.errors import (
    DatabaseDescriptionTooLongError,
    DatabaseNameInvalidError,
    DatabaseNameRequiredError,
    DatabaseNameTooLongError,
    KeyRequiredError,
    KeyTooLongError,
)

DB_NAME_MAX_SIZE = 64
DB_DESC_MAX_SIZE = 255
DB_KEY_MAX_SIZE = 1024

_DB_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def is_blank(text):
    """Return True if text is empty or only whitespace."""
    return not text.strip()


def is_too_long(text, target_bytes):
    """Return True if the UTF-8 encoding of text is longer than target_bytes."""
    return len(text.encode("utf-8")) > target_bytes


def db_name_contains_valid_characters(name):
    """Return True if name consists only of letters, digits, '-' and '_'."""
    return _DB_NAME_PATTERN.fullmatch(name) is not None


def validate_db_name(name):
    """Raise if name is not a valid database name."""
    if is_blank(name):
        raise DatabaseNameRequiredError()
    if is_too_long(name, DB_NAME_MAX_SIZE):
        raise DatabaseNameTooLongError()
    if not db_name_contains_valid_characters(name):
        raise DatabaseNameInvalidError()


def validate_db_desc(desc):
    """Raise if desc is not a valid database description."""
    if is_too_long(desc, DB_DESC_MAX_SIZE):
        raise DatabaseDescriptionTooLongError()


def validate_db_key(key):
    """Raise if key is not a valid database key."""
    if is_blank(key):
        raise KeyRequiredError()
    if is_too_long(key, DB_KEY_MAX_SIZE):
        raise KeyTooLongError()