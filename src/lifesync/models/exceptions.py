"""Application error types."""

from lifesync.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND


class AppError(Exception):
    """Application error carrying the exit code the CLI should return."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class ValidationError(AppError):
    """User input was rejected; nothing was stored."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_INVALID_ARGS)


class NotFoundError(AppError):
    """No record with the requested id."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_NOT_FOUND)
