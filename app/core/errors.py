"""Error types raised by the chat core."""


class InvalidInputError(ValueError):
    """Raised when an inbound chat message is missing, blank or not a string."""


class CollaboratorUnavailableError(RuntimeError):
    """Raised when a storage collaborator cannot serve a collection lookup."""


class InvalidRecordError(CollaboratorUnavailableError):
    """Raised when a stored record does not match its collection shape."""

    def __init__(self, collection: str, detail: str) -> None:
        super().__init__(f"Invalid record in collection '{collection}': {detail}")
        self.collection = collection
