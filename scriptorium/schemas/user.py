"""
Pydantic model for the user entity.

A ``User`` is the in-memory form of a row in the ``users`` table. Saving
writes every field back, so an instance passed to ``UserRepository.save``
for an update must carry the full set of values the row should end up with.
Load the user, change what you need, and save that same object.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Fields written on insert and overwritten on update
MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "password_hash",
    "street",
    "postal_code",
    "city",
    "country",
)

class User(BaseModel):
    """User entity. ``id`` is None until the user has been saved."""

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )

    id: Optional[int] = Field(default=None, frozen=True)
    first_name: str
    last_name: str
    email: str
    password_hash: str
    street: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        """Whether storage has assigned this user an id."""
        return self.id is not None

    def column_values(self) -> dict:
        """Values for every mutable column, keyed by attribute name."""
        return {name: getattr(self, name) for name in MUTABLE_FIELDS}
