"""Errors surfaced by the record store and the use cases."""


class RecordStoreError(RuntimeError):
    """Base error for record store failures."""


class RecordNotFoundError(RecordStoreError):
    """Raised when an update or delete targets a missing record.

    Attributes:
        kind: Record kind (account, transaction, valuation).
        record_id: Identifier that was not found.
    """

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind.capitalize()} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id


class StoreUnavailableError(RecordStoreError):
    """Raised when the persistent store cannot be read or written."""


__all__ = [
    "RecordStoreError",
    "RecordNotFoundError",
    "StoreUnavailableError",
]
