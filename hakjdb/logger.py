"""Leveled logger writing to a stream and optionally to a log file."""

import sys
from datetime import datetime
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self):
        """Lower-case name of the level."""
        return self.name.lower()


DEFAULT_LOG_LEVEL = LogLevel.INFO


def _timestamp(now=None):
    now = now if now is not None else datetime.now().astimezone()
    text = now.strftime("%Y-%m-%dT%H:%M:%S")
    millis = f"{now.microsecond // 1000:03d}".rstrip("0")
    if millis:
        text += "." + millis
    offset = now.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{text}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


class DefaultLogger:
    """Logger writing to a stream (standard error by default) and an optional log file."""

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stderr
        self._log_file = None
        self._file_sink = None
        self._log_file_enabled = False
        self._level = DEFAULT_LOG_LEVEL

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close_log_file()
        return False

    def set_log_level(self, level):
        """Set the minimum level of messages that are written."""
        self._level = int(level)

    @property
    def log_level(self):
        """The configured log level, or the default if the configured one is unknown."""
        try:
            return LogLevel(self._level)
        except ValueError:
            return DEFAULT_LOG_LEVEL

    @property
    def log_file_enabled(self):
        return self._log_file_enabled

    def enable_log_file(self, file_path):
        """Append log messages also to the file at file_path."""
        log_file = open(file_path, "a", encoding="utf-8")
        self._log_file = log_file
        self._file_sink = log_file
        self._log_file_enabled = True

    def close_log_file(self):
        """Close the log file if one is open."""
        if self._log_file is not None:
            log_file, self._log_file = self._log_file, None
            if self._file_sink is log_file:
                self._file_sink = None
            log_file.close()

    def disable(self):
        """Discard all log output."""
        self._stream = None
        self._file_sink = None

    @staticmethod
    def _line(text):
        return text if text.endswith("\n") else text + "\n"

    def _emit(self, tag, message, args):
        body = message % args if args else str(message)
        line = self._line(f"{_timestamp()} [{tag}] {body}")
        if self._stream is not None:
            self._stream.write(line)
            self._stream.flush()
        if self._log_file_enabled and self._file_sink is not None:
            self._file_sink.write(line)
            self._file_sink.flush()

    def debug(self, message, *args):
        if self._level <= LogLevel.DEBUG:
            self._emit("Debug", message, args)

    def info(self, message, *args):
        if self._level <= LogLevel.INFO:
            self._emit("Info", message, args)

    def warning(self, message, *args):
        if self._level <= LogLevel.WARNING:
            self._emit("Warning", message, args)

    def error(self, message, *args):
        if self._level <= LogLevel.ERROR:
            self._emit("Error", message, args)

    def fatal(self, message, *args):
        """Write a fatal message and exit with status 1 when the level is FATAL."""
        if self._level == LogLevel.FATAL:
            self._emit("Fatal", message, args)
            raise SystemExit(1)


def disabled_logger():
    """Return a logger that discards all output."""
    logger = DefaultLogger()
    logger.disable()
    return logger


def log_level_from_str(level_str):
    """Return (level, valid) for a level name; unknown names give the default level."""
    try:
        return LogLevel[level_str.upper()], True
    except KeyError:
        return DEFAULT_LOG_LEVEL, False