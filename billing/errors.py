class NotFoundError(Exception):
    """Raised when a record looked up by id does not exist."""

    def __init__(self, resource: str, record_id: int):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")


class PersistenceError(Exception):
    """Raised when the store rejects a write. The message is reported as-is."""
