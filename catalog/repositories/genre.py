"""Genre store operations."""

from typing import List, Optional

from sqlalchemy import func, select

from catalog.models import Genre
from catalog.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    model = Genre

    def find_all_sorted(self) -> List[Genre]:
        """All genres ordered by name."""
        stmt = select(Genre).order_by(Genre.name)
        return list(self.db.execute(stmt).scalars().all())

    def find_by_name_ci(
        self,
        name: str,
        exclude_id: Optional[int] = None,
    ) -> Optional[Genre]:
        """
        Find a genre whose name matches ignoring case.

        Args:
            name: Name to look for
            exclude_id: Skip the genre with this id (the one being edited)

        Returns:
            The first matching genre, or None
        """
        stmt = select(Genre).where(func.lower(Genre.name) == func.lower(name))
        if exclude_id is not None:
            stmt = stmt.where(Genre.id != exclude_id)
        return self.db.execute(stmt.order_by(Genre.id).limit(1)).scalar_one_or_none()
