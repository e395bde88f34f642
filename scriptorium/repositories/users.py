"""
Repository for user persistence.

``UserRepository`` maps ``User`` entities to rows of the ``users`` table.
Each public method runs in its own session and transaction, so a failed
call leaves the table exactly as it was.

Updates are whole-row writes: ``save`` copies every field of the given
entity onto the stored row. Callers that want to change a few fields must
load the user first, modify that instance and save it, otherwise fields
they never set are written as they stand on the object.
"""

from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from scriptorium.exceptions import DuplicateEmailError, UserNotFoundError
from scriptorium.models.users import Users
from scriptorium.repositories.base import BaseRepository
from scriptorium.schemas.user import User
from scriptorium.utils.database import get_engine, get_session_local, init_db
from scriptorium.utils.logger import get_logger

logger = get_logger(__name__)

# Name of the unique constraint on users.email, and the column reference
# SQLite reports instead of the name
EMAIL_CONSTRAINT_MARKERS = ("uq_users_email", "users.email")

def is_duplicate_email_error(error: IntegrityError) -> bool:
    """Whether an integrity error came from the email uniqueness constraint."""
    message = str(error.orig) if error.orig is not None else str(error)
    return any(marker in message for marker in EMAIL_CONSTRAINT_MARKERS)

class UserRepository(BaseRepository[Users]):
    """
    Repository for user database operations.

    Example:
        ```python
        repo = UserRepository.from_url("sqlite:///users.db", create_schema=True)
        jane = repo.save(User(first_name="Jane", last_name="Doe",
                              email="jane.doe@example.com", password_hash="..."))
        jane.email = "jonathan.doe@example.com"
        repo.save(jane)
        ```
    """

    def __init__(self, session_factory: sessionmaker):
        """
        Initialize the repository with a session factory.

        Args:
            session_factory (sessionmaker): SQLAlchemy session factory
        """
        super().__init__(session_factory, Users)

    @classmethod
    def from_url(cls, database_url: str, create_schema: bool = False) -> "UserRepository":
        """
        Build a repository for the database at ``database_url``.

        Args:
            database_url (str): SQLAlchemy database URL
            create_schema (bool): Create the users table if it is missing

        Returns:
            UserRepository: Repository bound to a new engine
        """
        engine = get_engine(database_url)
        if create_schema:
            init_db(engine)
        return cls(get_session_local(engine))

    def save(self, user: User) -> User:
        """
        Insert a new user or update an existing one.

        A user without an id is inserted; a user with an id overwrites all
        mutable columns of its row. The given instance is left untouched.

        Args:
            user (User): User to persist

        Returns:
            User: The stored user, with its id populated

        Raises:
            DuplicateEmailError: Another user already holds ``user.email``
            UserNotFoundError: ``user.id`` is set but no row has that id
            StorageError: Any other database failure
        """
        with self.session_scope() as session:
            if user.id is None:
                row = Users(**user.column_values())
                session.add(row)
            else:
                row = self.get_by_id(session, user.id)
                if row is None:
                    raise UserNotFoundError(user.id)
                for key, value in user.column_values().items():
                    setattr(row, key, value)

            try:
                session.flush()
            except IntegrityError as e:
                if is_duplicate_email_error(e):
                    logger.warning(f"Rejected save of user {user.id}: email {user.email} already in use")
                    raise DuplicateEmailError(user.email) from e
                raise

            saved = User.model_validate(row)

        action = "Inserted" if user.id is None else "Updated"
        logger.info(f"{action} user {saved.id}")
        return saved

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by id, or None if there is no such user."""
        with self.session_scope() as session:
            row = self.get_by_id(session, user_id)
            logger.debug(f"Lookup of user {user_id}: {'found' if row else 'missing'}")
            return User.model_validate(row) if row is not None else None

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email.

        The match is exact and case-sensitive.

        Args:
            email (str): Email to search for

        Returns:
            Optional[User]: User if found, None otherwise
        """
        with self.session_scope() as session:
            row = self.get_one_by(session, email=email)
            return User.model_validate(row) if row is not None else None

    def find_all(self) -> List[User]:
        """Get every stored user, ordered by id."""
        with self.session_scope() as session:
            return [User.model_validate(row) for row in self.get_all(session)]

    def delete_by_id(self, user_id: int) -> None:
        """Delete a user by id. Deleting an unknown id does nothing."""
        with self.session_scope() as session:
            deleted = self.delete(session, user_id)
        if deleted:
            logger.info(f"Deleted user {user_id}")
        else:
            logger.debug(f"Delete of user {user_id} skipped: no such user")

    def count_users(self) -> int:
        """Number of stored users."""
        with self.session_scope() as session:
            return self.count(session)

    def exists_by_email(self, email: str) -> bool:
        """Whether any user holds ``email``."""
        with self.session_scope() as session:
            return self.get_one_by(session, email=email) is not None
