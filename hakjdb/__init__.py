"""In-memory key-value database core: String and HashMap keys, validation and logging."""

__version__ = "1.2.0"

__all__ = ["common", "db", "errors", "logger", "osinfo", "validation"]