# paysync/exceptions.py

from typing import Dict, Optional


class PaySyncError(Exception):
    """Base class for all application errors."""


class NotFoundError(PaySyncError):
    """A referenced employee or payroll record does not exist."""

    def __init__(self, message: str, entity_id: Optional[str] = None):
        super().__init__(message)
        self.entity_id = entity_id


class StorageError(PaySyncError):
    """Reading or writing the key-value store failed."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class ValidationError(PaySyncError):
    """User-entered form fields failed required/format checks."""

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.field_errors: Dict[str, str] = field_errors or {}
