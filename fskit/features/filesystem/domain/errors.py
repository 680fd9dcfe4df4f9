from fskit.core.common.enums import FsErrorKind


class InvalidPathError(ValueError):
    """
    Raised when a caller passes a path (or extension) that can never be valid,
    e.g. an empty string. Raised before the filesystem is touched.
    """
    kind = FsErrorKind.INVALID_ARGUMENT


def classify_error(error: BaseException) -> FsErrorKind:
    """
    Maps an exception raised by a filesystem operation to an FsErrorKind.
    Errors themselves are never wrapped; this only labels them.
    """
    if isinstance(error, InvalidPathError):
        return FsErrorKind.INVALID_ARGUMENT
    if isinstance(error, FileNotFoundError):
        return FsErrorKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return FsErrorKind.PERMISSION_DENIED
    return FsErrorKind.IO_ERROR
