"""Exception hierarchy for s3-client."""


class S3ClientToolError(Exception):
    """Base exception for all s3-client errors."""

    pass


class InvalidArgumentsError(S3ClientToolError):
    """Raised when a command receives the wrong number or shape of arguments."""

    def __init__(self, detail: str = ""):
        message = "invalid arguments"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnknownCommandError(S3ClientToolError):
    """Raised when the requested subcommand does not exist."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"unknown command: {command}")


class ValidationError(S3ClientToolError):
    """Raised when validation fails."""

    pass


class AddressError(ValidationError):
    """Raised when a bucket/key address cannot be parsed."""

    pass


class CrossBucketDeleteError(ValidationError):
    """Raised when a delete batch spans more than one bucket."""

    pass


class StorageOperationError(S3ClientToolError):
    """Raised when the storage service reports a failed operation."""

    pass
