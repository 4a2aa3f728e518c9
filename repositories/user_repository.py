"""
User repository.

Users only exist to own career questions; there are no credentials.
"""

from typing import Optional
from sqlmodel import Session, select

from models.user import User
from repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for managing users."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, User)

    def get_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by username.

        Args:
            username: Unique username

        Returns:
            User or None
        """
        query = select(User).where(User.username == username)
        return self.db.exec(query).first()
