"""
Generic CRUD repository over a SQLAlchemy session.

Provides the four primitives the service layer builds on: find-all,
find-by-id, save (insert-or-update) and delete-by-id.  There is no
query logic beyond a full-table scan ordered by primary key.
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm import scoped_session, Session

from employee_directory.extensions import db

logger = logging.getLogger(__name__)

# Type variable for the mapped model class.
T = TypeVar("T")


class CrudRepository(Generic[T]):
    """
    Repository providing basic persistence for one model class.

    Writes commit by default.  Pass ``commit=False`` to ``save`` to
    batch several writes into the caller's transaction; the caller is
    then responsible for ``commit()`` or ``rollback()``.
    """

    model: type[T]

    def __init__(self, session: Session | scoped_session | None = None):
        """
        Args:
            session: SQLAlchemy session to use.  Defaults to the
                     Flask-SQLAlchemy scoped session.
        """
        self.session = session if session is not None else db.session

    def _primary_key(self):
        return inspect(self.model).primary_key[0]

    # -- Reads -------------------------------------------------------------

    def find_all(self) -> list[T]:
        """Return every row, ordered by primary key."""
        stmt = db.select(self.model).order_by(self._primary_key())
        return list(self.session.execute(stmt).scalars().all())

    def find_by_id(self, entity_id: Any) -> T | None:
        """Return the row with the given primary key, or None."""
        return self.session.get(self.model, entity_id)

    def exists_by_id(self, entity_id: Any) -> bool:
        """Return True if a row with the given primary key exists."""
        return self.find_by_id(entity_id) is not None

    # -- Writes ------------------------------------------------------------

    def save(self, entity: T, commit: bool = True) -> T:
        """
        Insert ``entity`` if it has no primary key, otherwise overwrite
        the stored row with the same key.

        Args:
            entity: A transient or detached model instance.
            commit: Commit the session after flushing.

        Returns:
            The persistent instance, with its generated key populated.
        """
        if self._key_of(entity) is None:
            self.session.add(entity)
            persisted = entity
        else:
            # merge() copies state onto the session's instance for that key.
            persisted = self.session.merge(entity)

        # Flush so a generated key is available before commit.
        self.session.flush()
        if commit:
            self.session.commit()
        return persisted

    def delete_by_id(self, entity_id: Any, commit: bool = True) -> bool:
        """
        Delete the row with the given primary key.  No-op when absent.

        Returns:
            True if a row was deleted.
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            logger.debug(
                "delete_by_id: no %s with id %s", self.model.__name__, entity_id
            )
            return False
        self.session.delete(entity)
        if commit:
            self.session.commit()
        return True

    def commit(self) -> None:
        """Commit the current transaction."""
        self.session.commit()

    def rollback(self) -> None:
        """Roll back the current transaction."""
        self.session.rollback()

    def _key_of(self, entity: T) -> Any:
        return getattr(entity, self._primary_key().key)
