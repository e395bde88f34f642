"""
This package contains the database models for the application.
"""

from scriptorium.models.base import Base
from scriptorium.models.users import Users

__all__ = ['Base', 'Users']
