"""Shared constants and filesystem helpers."""

import os
import sys

VERSION = "1.2.0"
API_VERSION = "1.2.0"

GRPC_METADATA_KEY_DB_NAME = "database"
GRPC_METADATA_KEY_API_VERSION = "api-version"
# Metadata key under which clients send their authentication credential.
GRPC_METADATA_KEY_AUTH = "auth-token"

SERVER_DEFAULT_HOST = "localhost"
SERVER_DEFAULT_PORT = 12345
DB_MAX_KEY_COUNT = 2**32 - 1
HASH_MAP_MAX_FIELDS = 2**32 - 1
DEFAULT_MAX_CLIENT_CONNECTIONS = 1000


def get_exec_path():
    """Return the absolute, symlink-resolved path of the running executable."""
    exec_path = sys.executable or (sys.argv[0] if sys.argv else "")
    if not exec_path:
        raise OSError("failed to get executable path")
    return os.path.abspath(os.path.realpath(exec_path))


def get_exec_parent_dir_path():
    """Return the absolute path of the executable's parent directory."""
    return os.path.dirname(get_exec_path())


def get_dir_path(parent, dir_name):
    """Join parent and dir_name, creating that directory if it does not exist."""
    path = os.path.join(parent, dir_name)
    if not os.path.exists(path):
        os.mkdir(path)
    return path


def create_directories_in_dir_path(dir_path):
    """Create dir_path and any missing parent directories."""
    os.makedirs(dir_path, exist_ok=True)


def create_file_if_not_exist(file_path):
    """Create an empty file if it does not exist; leave an existing one alone."""
    if not os.path.exists(file_path):
        with open(file_path, "x"):
            pass


def read_file_lines(file_path):
    """Return the lines of a file without their line endings."""
    with open(file_path, encoding="utf-8", errors="replace", newline="") as file:
        return [_strip_line_ending(line) for line in file]


def _strip_line_ending(line):
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def bytes_to_megabytes(num_bytes):
    """Convert a byte count to megabytes."""
    return num_bytes / 1024 / 1024