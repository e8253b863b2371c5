"""Custom exception classes for the Volders repositories."""


class VoldersException(Exception):
    """
    Base exception class for all repository errors.
    """
    pass


class AlreadyExistsError(VoldersException):
    """
    Raised when creating an entity whose ID is already taken.
    """

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} already exists [id={entity_id}]")
        self.entity = entity
        self.entity_id = entity_id


class NotFoundError(VoldersException):
    """
    Raised when a get, update or delete references an absent ID.
    """

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found [id={entity_id}]")
        self.entity = entity
        self.entity_id = entity_id


class UnsupportedOperationError(VoldersException, NotImplementedError):
    """
    Raised when a backend does not provide an operation.
    """
    pass


class StorageBackendError(VoldersException):
    """
    Raised when the underlying store fails (connection, query or scan error).
    """
    pass


class OperationCancelledError(VoldersException):
    """
    Raised when the caller's context is cancelled or its deadline passes.
    """
    pass
