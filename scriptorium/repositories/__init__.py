"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from scriptorium.repositories.users import UserRepository

__all__ = ['UserRepository']
