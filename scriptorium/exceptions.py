"""
Custom exceptions for the application.
"""

class ScriptoriumError(Exception):
    """Base exception for scriptorium errors."""
    pass

class DuplicateEmailError(ScriptoriumError):
    """Raised when a user is saved with an email another user already holds."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")

class UserNotFoundError(ScriptoriumError):
    """Raised when updating a user whose id has no stored row."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"No user with id {user_id}")

class StorageError(ScriptoriumError):
    """Raised when the underlying database operation fails."""
    pass
