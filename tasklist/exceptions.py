"""Error taxonomy for the task list API.

Every error the application raises on purpose derives from
``TaskListError`` and carries a machine-readable ``ErrorCode``. The
exception handlers translate codes into HTTP statuses.
"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    MALFORMED_HASH = "MALFORMED_HASH"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    INVALID_QUERY = "INVALID_QUERY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TaskListError(Exception):
    """Base class for application errors."""

    code = ErrorCode.INTERNAL_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentialsError(TaskListError):
    """Bad password or unknown username.

    Both cases share this one error so callers cannot tell which happened.
    """

    code = ErrorCode.INVALID_CREDENTIALS
    default_message = "Incorrect username or password"


class UnauthorizedError(TaskListError):
    """Missing or invalid bearer credential on a protected path."""

    code = ErrorCode.UNAUTHORIZED
    default_message = "Not authenticated"


class ForbiddenError(TaskListError):
    code = ErrorCode.FORBIDDEN
    default_message = "Forbidden"


class DuplicateUsernameError(TaskListError):
    code = ErrorCode.DUPLICATE_USERNAME

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username already registered")


class MalformedHashError(TaskListError):
    """A stored password hash that bcrypt cannot parse."""

    code = ErrorCode.MALFORMED_HASH
    default_message = "Stored password hash is malformed"


class TaskNotFoundError(TaskListError):
    code = ErrorCode.TASK_NOT_FOUND

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__("Task not found")


class InvalidQueryError(TaskListError):
    """Unknown filter, sort field or sort order in a task listing."""

    code = ErrorCode.INVALID_QUERY
    default_message = "Invalid query"
