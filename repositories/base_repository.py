"""
Base repository with common CRUD operations.

Provides a foundation for all SQL-backed repositories used by SQLStore.
"""

from typing import TypeVar, Generic, Optional, Type, Any, Dict
from sqlmodel import Session, select, SQLModel

from models.common import utc_now

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """
    Generic base repository with common CRUD operations.

    Type Parameters:
        T: SQLModel entity type
    """

    def __init__(self, db_session: Session, model_class: Type[T]):
        """
        Initialize repository.

        Args:
            db_session: SQLModel database session
            model_class: The SQLModel class this repository manages
        """
        self.db = db_session
        self.model_class = model_class

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by ID.

        Args:
            id: Primary key

        Returns:
            Entity if found, None otherwise
        """
        return self.db.get(self.model_class, id)

    def create(self, entity: T) -> T:
        """
        Create a new entity.

        Args:
            entity: Entity to create

        Returns:
            Created entity with ID
        """
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: T) -> T:
        """
        Update an existing entity.

        Args:
            entity: Entity with updated values

        Returns:
            Updated entity
        """
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def apply(self, entity: T, updates: Dict[str, Any]) -> T:
        """
        Assign fields from an update dict, stamp updated_at, and persist.

        JSON columns are reassigned, never mutated in place, so SQLAlchemy
        sees the change.

        Args:
            entity: Loaded entity
            updates: Field name -> new value (already validated)

        Returns:
            Updated entity
        """
        for field, value in updates.items():
            setattr(entity, field, value)
        if "updated_at" in self.model_class.model_fields:
            entity.updated_at = utc_now()
        return self.update(entity)


class QuestionScopedRepository(BaseRepository[T]):
    """Repository for entities that are one-to-one with a career question."""

    def get_by_question(self, question_id: str) -> Optional[T]:
        """
        Get the entity attached to a career question.

        Args:
            question_id: CareerQuestion ID

        Returns:
            Entity if found, None otherwise
        """
        query = select(self.model_class).where(self.model_class.question_id == question_id)
        return self.db.exec(query).first()
