"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidInputError(Exception):
    """Raised when a request references data that cannot be accepted."""

    def __init__(self, message: str = "invalid input"):
        self.message = message
        super().__init__(message)


class UnauthorizedError(Exception):
    """Raised when credentials or a token cannot be verified."""

    def __init__(self, message: str = "unauthorized"):
        self.message = message
        super().__init__(message)


class ForbiddenError(Exception):
    """Raised when an authenticated caller may not perform an operation."""

    def __init__(self, message: str = "forbidden"):
        self.message = message
        super().__init__(message)


class InternalError(Exception):
    """Raised for failures that are not the caller's fault."""

    def __init__(self, message: str = "internal server error"):
        self.message = message
        super().__init__(message)


class BackupError(InternalError):
    """Raised when an archive export fails as a whole.

    ``stage`` names the pipeline step that failed ("listing", "manifest",
    "finalize"); the underlying exception is chained as ``__cause__``.
    """

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"{stage} failed: {message}")
