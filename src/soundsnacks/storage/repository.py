"""Repository over the category and sound tables.

Changes are staged with :meth:`Repository.insert`, :meth:`Repository.update`
and :meth:`Repository.delete`, then written in one transaction by
:meth:`Repository.save`. Queries return immutable model objects, never
ORM rows.

Example:
    repo = Repository.open(database_url(data_dir))
    repo.insert(Category(name="Memes", color_hex="#FF69B4"))
    repo.save()
    names = [c.name for c in repo.categories()]
"""

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from soundsnacks.errors import StorageError
from soundsnacks.models.category import Category
from soundsnacks.models.sound import Sound
from soundsnacks.storage.database import create_db_engine, create_session
from soundsnacks.storage.records import CategoryRecord, SoundRecord

logger = logging.getLogger(__name__)

Entity = Category | Sound


class Repository:
    """Synchronous, fallible store for categories and sounds."""

    def __init__(self, session: Session, engine: Engine | None = None) -> None:
        """Initialize the repository.

        Args:
            session: Open SQLAlchemy session used for every operation.
            engine: Engine to dispose on :meth:`close`, if owned.
        """
        self._session = session
        self._engine = engine

    @classmethod
    def open(cls, url: str) -> Repository:
        """Create the engine and tables for ``url`` and return a repository.

        Raises:
            StorageError: If the database cannot be opened or created.
        """
        try:
            engine = create_db_engine(url)
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot open database: {e}") from e
        return cls(create_session(engine), engine)

    @property
    def session(self) -> Session:
        """Return the underlying session."""
        return self._session

    # -- Staging ---------------------------------------------------------------

    def insert(self, entity: Entity) -> None:
        """Stage a new category or sound."""
        if isinstance(entity, Category):
            self._session.add(CategoryRecord.from_model(entity))
        else:
            self._session.add(SoundRecord.from_model(entity))

    def update(self, entity: Entity) -> None:
        """Stage new field values for an existing category or sound.

        Raises:
            StorageError: If no row with the entity's id exists.
        """
        record = self._record_for(entity)
        if record is None:
            raise StorageError(f"No stored record with id {entity.id}")
        record.apply(entity)  # type: ignore[arg-type]

    def delete(self, entity: Entity) -> None:
        """Stage removal of a category or sound (no-op if already gone)."""
        record = self._record_for(entity)
        if record is not None:
            self._session.delete(record)

    def save(self) -> None:
        """Commit all staged changes.

        Raises:
            StorageError: If the commit fails; staged changes are rolled back.
        """
        try:
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Save failed: %s", e)
            raise StorageError(f"Could not save changes: {e}") from e

    def discard(self) -> None:
        """Drop every staged change without writing it."""
        self._session.rollback()

    def _record_for(self, entity: Entity) -> CategoryRecord | SoundRecord | None:
        try:
            if isinstance(entity, Category):
                return self._session.get(CategoryRecord, entity.id)
            return self._session.get(SoundRecord, entity.id)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not load record {entity.id}: {e}") from e

    # -- Queries ---------------------------------------------------------------

    def categories(self) -> list[Category]:
        """Return all categories sorted by name."""
        try:
            rows = self._session.query(CategoryRecord).order_by(CategoryRecord.name).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not load categories: {e}") from e
        return [row.to_model() for row in rows]

    def sounds(self, category: str | None = None) -> list[Sound]:
        """Return sounds sorted by order, optionally only one category's.

        Args:
            category: Category name to filter on, or None for all sounds.
        """
        try:
            query = self._session.query(SoundRecord)
            if category is not None:
                query = query.filter(SoundRecord.category == category)
            rows = query.order_by(SoundRecord.order, SoundRecord.id).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not load sounds: {e}") from e
        return [row.to_model() for row in rows]

    def count_sounds(self) -> int:
        """Return the number of stored sounds."""
        try:
            return int(self._session.query(func.count(SoundRecord.id)).scalar() or 0)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not count sounds: {e}") from e

    def close(self) -> None:
        """Close the session and dispose of an owned engine."""
        self._session.close()
        if self._engine is not None:
            self._engine.dispose()
