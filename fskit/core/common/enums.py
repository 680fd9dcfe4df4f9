# File: fskit/core/common/enums.py

from enum import Enum, unique

@unique
class FsErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IO_ERROR = "io_error"
    INVALID_ARGUMENT = "invalid_argument"
