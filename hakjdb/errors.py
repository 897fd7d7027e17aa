"""Exceptions raised by the database server and its components."""


class HakjDBError(Exception):
    """Base class of all errors raised by this package."""

    message = "hakjdb error"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.message)


class DatabaseNotFoundError(HakjDBError):
    """A database could not be found."""

    message = "database not found"


class DatabaseExistsError(HakjDBError):
    """A database with the requested name already exists."""

    message = "database already exists"


class DatabaseNameRequiredError(HakjDBError):
    """A blank database name was given."""

    message = "database name required"


class DatabaseNameTooLongError(HakjDBError):
    """A database name exceeds the maximum length."""

    message = "database name too long"


class DatabaseNameInvalidError(HakjDBError):
    """A database name contains characters that are not allowed."""

    message = "database name contains invalid characters"


class DatabaseDescriptionTooLongError(HakjDBError):
    """A database description exceeds the maximum length."""

    message = "database description too long"


class KeyRequiredError(HakjDBError):
    """A key with a blank name was given."""

    message = "key required"


class KeyTooLongError(HakjDBError):
    """A key exceeds the maximum length."""

    message = "key too long"


class MaxKeysReachedError(HakjDBError):
    """The database holds the maximum number of keys."""

    message = "max key limit reached"


class MissingMetadataError(HakjDBError):
    """Request metadata is required but missing."""

    message = "missing metadata"


class InvalidCredentialsError(HakjDBError):
    """The provided credentials are incorrect."""

    message = "invalid credentials"


class InvalidAuthTokenError(HakjDBError):
    """The authentication token is invalid."""

    message = "invalid auth token"


class AuthFailedError(HakjDBError):
    """Authentication failed to produce a token."""

    message = "failed to obtain auth token"


class AuthNotEnabledError(HakjDBError):
    """Authentication is not enabled on the server."""

    message = "authentication not enabled"


class UserNotFoundError(HakjDBError):
    """The requested user does not exist."""

    message = "user not found"


class LogFileNotEnabledError(HakjDBError):
    """Logs were requested but the log file is not enabled."""

    message = "log file is not enabled"


class ReadLogFileError(HakjDBError):
    """Reading the log file failed."""

    message = "cannot read log file"


class GetOSInfoError(HakjDBError):
    """Information about the operating system could not be obtained."""

    message = "cannot get information about OS"


class MaxClientConnectionsReachedError(HakjDBError):
    """The maximum number of client connections is reached."""

    message = "max client connections reached"