"""BookInstance store operations."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from catalog.models import BookInstance
from catalog.repositories.base import BaseRepository


class BookInstanceRepository(BaseRepository[BookInstance]):
    model = BookInstance

    def find_all_with_book(self) -> List[BookInstance]:
        """All copies with their parent book loaded."""
        stmt = (
            select(BookInstance)
            .options(joinedload(BookInstance.book))
            .order_by(BookInstance.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def find_by_id(
        self,
        id_value: int,
        populate_book: bool = False,
    ) -> Optional[BookInstance]:
        if not populate_book:
            return super().find_by_id(id_value)

        stmt = (
            select(BookInstance)
            .options(joinedload(BookInstance.book))
            .where(BookInstance.id == id_value)
        )
        return self.db.execute(stmt).scalar_one_or_none()
