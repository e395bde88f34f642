"""
Base repository pattern implementation for database operations.

This module provides a generic repository that opens one session and one
transaction per unit of work. It includes common row-level queries that
specific repositories build their public operations on.
"""

from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from scriptorium.exceptions import StorageError
from scriptorium.models.base import Base
from scriptorium.utils.logger import get_logger

# Type variable for the model
T = TypeVar('T', bound=Base)

logger = get_logger(__name__)

class BaseRepository(Generic[T]):
    """
    Generic repository for database operations.

    Attributes:
        session_factory (sessionmaker): Factory producing a session per call
        model (Type[T]): SQLAlchemy model class
    """

    def __init__(self, session_factory: sessionmaker, model: Type[T]):
        """
        Initialize the repository with a session factory and model class.

        Args:
            session_factory (sessionmaker): SQLAlchemy session factory
            model (Type[T]): SQLAlchemy model class
        """
        self.session_factory = session_factory
        self.model = model

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around a series of operations.

        Commits when the block exits normally and rolls back on any
        exception. The session is always closed. SQLAlchemy errors are
        re-raised as ``StorageError``; other exceptions pass through.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error in {type(self).__name__}: {str(e)}")
            raise StorageError(str(e)) from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_all(self, session: Session) -> List[T]:
        """
        Get all records ordered by primary key.

        Args:
            session (Session): Open session

        Returns:
            List[T]: List of model instances
        """
        return list(session.execute(select(self.model).order_by(self.model.id)).scalars())

    def get_by_id(self, session: Session, id: Any) -> Optional[T]:
        """
        Get a record by ID.

        Args:
            session (Session): Open session
            id (Any): Primary key value

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        return session.get(self.model, id)

    def get_one_by(self, session: Session, **filters: Any) -> Optional[T]:
        """Get the first record whose columns equal the given values."""
        query = select(self.model).filter_by(**filters).limit(1)
        return session.execute(query).scalars().first()

    def delete(self, session: Session, id: Any) -> bool:
        """
        Delete a record by ID.

        Args:
            session (Session): Open session
            id (Any): Primary key value

        Returns:
            bool: True if deleted, False if not found
        """
        db_item = self.get_by_id(session, id)
        if db_item is None:
            return False
        session.delete(db_item)
        session.flush()
        return True

    def count(self, session: Session) -> int:
        """Count all records."""
        return session.execute(select(func.count()).select_from(self.model)).scalar_one()
