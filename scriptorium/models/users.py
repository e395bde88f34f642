from sqlalchemy import Column, Integer, String, UniqueConstraint

from scriptorium.models.base import Base

class Users(Base):
    """
    Model for user accounts in the system.

    Column names follow the existing ``users`` table, which uses camelCase;
    the Python attributes are snake_case.

    Attributes:
        id (int): Auto-assigned primary key
        first_name (str): Given name
        last_name (str): Family name
        email (str): Email address, unique across all users
        password_hash (str): Hashed password
        street (str): Street address
        postal_code (str): Postal code
        city (str): City
        country (str): Country
    """
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)
    email = Column(String, nullable=False)
    password_hash = Column("passwordHash", String, nullable=False)
    street = Column(String)
    postal_code = Column("postalCode", String)
    city = Column(String)
    country = Column(String)

    def __repr__(self):
        return f"<User {self.email}>"
