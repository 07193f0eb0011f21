"""
Entity store

Provides point lookups by primary key and upsert-by-key writes on top of a SQLAlchemy session.
"""
from typing import TypeVar

from sqlalchemy.orm import Session

from artgraph.data import Base

Entity = TypeVar("Entity", bound=Base)


class EntityStore:
    """
    Wraps the session for the event that is being applied.

    Every save is flushed, which makes the write visible to loads that follow within the same event.
    The session owner commits or rolls back.
    """

    def __init__(self, session: Session):
        self._session = session

    def load(self, entity_type: type[Entity], key: str) -> Entity | None:
        return self._session.get(entity_type, key)

    def save(self, entity: Entity) -> Entity:
        """
        Inserts the entity, or overwrites the stored entity with the same primary key.

        :return: the persistent entity instance
        """
        entity = self._session.merge(entity)
        self._session.flush()
        return entity
