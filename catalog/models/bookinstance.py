"""
BookInstance Model

A BookInstance is one physical, loanable copy of a Book. It is stored as an
independent record holding a foreign key to its book.
"""

from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

if TYPE_CHECKING:
    from catalog.models.book import Book


class BookInstanceStatus(str, Enum):
    """
    Availability of a copy.

    - AVAILABLE: On the shelf
    - MAINTENANCE: Being repaired or processed (default for new copies)
    - LOANED: Checked out, see due_back
    - RESERVED: Held for a borrower
    """
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"

    @classmethod
    def from_form(cls, value: str | None) -> "BookInstanceStatus":
        """
        Convert a submitted status to a member.

        A blank submission means "use the default". Any other unknown value
        raises ValueError, like a schema violation at save time would.
        """
        if not value:
            return cls.MAINTENANCE
        return cls(value)


class BookInstance(Base):
    """
    BookInstance model representing copies of a book.

    Table: book_instances

    Fields:
    - book_id: The book this is a copy of (required)
    - imprint: Publisher/edition information (required)
    - status: One of BookInstanceStatus values
    - due_back: When a loaned copy is expected back (optional)

    Example:
        copy = BookInstance(
            book_id=1,
            imprint="London Gollancz, 2014.",
            status=BookInstanceStatus.LOANED.value,
            due_back=date(2024, 3, 1),
        )
    """

    __tablename__ = "book_instances"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    book_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    imprint: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Publisher and edition details"
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=BookInstanceStatus.MAINTENANCE.value,
        comment="Available, Maintenance, Loaned or Reserved"
    )

    due_back: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Date a loaned copy is due back"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    book: Mapped["Book"] = relationship(
        "Book",
        back_populates="instances",
    )

    @property
    def url(self) -> str:
        """Detail page for this copy."""
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        """Due date as shown in lists, e.g. 'Jan 5, 2024'."""
        if self.due_back is None:
            return ""
        return f"{self.due_back:%b} {self.due_back.day}, {self.due_back.year}"

    @property
    def due_back_iso(self) -> str:
        """Value for the date input of the edit form."""
        return self.due_back.isoformat() if self.due_back else ""

    def __repr__(self) -> str:
        return (
            f"BookInstance(id={self.id}, book_id={self.book_id}, "
            f"status='{self.status}')"
        )
