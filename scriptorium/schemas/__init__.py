"""
Pydantic models exchanged with callers of the repositories.
"""

from scriptorium.schemas.user import User

__all__ = ['User']
