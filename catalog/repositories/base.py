"""
Base Repository

Generic find/update/delete operations shared by the catalog repositories.
Each method returns the affected record, or None when the id is unknown,
so handlers can decide between rendering, redirecting and a 404.
"""

import logging
from typing import Any, Generic, Mapping, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from catalog.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, id_value: int) -> Optional[ModelT]:
        return self.db.get(self.model, id_value)

    def insert(self, record: ModelT) -> ModelT:
        """Persist a new record and return it with its generated id."""
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info(f"Created {record!r}")
        return record

    def find_by_id_and_update(
        self,
        id_value: int,
        data: Mapping[str, Any],
    ) -> Optional[ModelT]:
        """
        Overwrite the given fields of the record with this id.

        Args:
            id_value: Primary key of the record to update
            data: Column name -> new value

        Returns:
            The updated record, or None if no record has this id
        """
        record = self.find_by_id(id_value)
        if record is None:
            return None

        for field, value in data.items():
            setattr(record, field, value)
        self.db.commit()
        self.db.refresh(record)
        logger.info(f"Updated {record!r}")
        return record

    def find_by_id_and_delete(self, id_value: int) -> Optional[ModelT]:
        """Delete the record with this id and return it (None if missing)."""
        record = self.find_by_id(id_value)
        if record is None:
            return None

        self.db.delete(record)
        self.db.commit()
        logger.info(f"Deleted {record!r}")
        return record
