"""Todo ORM - the single persisted entity.

Invariants:
    - id is an integer primary key assigned by the store, never reused
    - name is non-nullable
    - is_complete defaults to False
    - secret is internal-only: no schema reads or writes it

Design Decisions:
    - sqlite_autoincrement: SQLite otherwise hands out max(rowid)+1, which
      reissues the id of a deleted last row
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.db.base import Base


class Todo(Base):
    """Todo record."""
    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_complete: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    secret: Mapped[str | None] = mapped_column(String, nullable=True)

    def __repr__(self) -> str:
        return f"Todo(id={self.id!r}, name={self.name!r}, is_complete={self.is_complete!r})"
