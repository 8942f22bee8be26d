"""
User Model

Represents a registered account. Users are created at registration and
never modified afterwards.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base


class User(Base):
    """
    User model representing registered users in the system.

    Table: users

    Indexes:
    - Primary key on id (automatic)
    - username: Unique index for login lookups

    Example:
        user = User(
            username="johndoe",
            hashed_password=hash_password("secret123"),
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique login name"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, username='{self.username}')"
