from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy import Boolean, Text, delete, func, insert, literal, select, update
from sqlalchemy.engine import Connection, Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from .db import get_engine
from .errors import DatabaseError
from .models import TodoEntity, todos
from .schemas import TodoCreate, TodoUpdate


def _row_to_entity(row: RowMapping) -> TodoEntity:
    return {
        "id": int(row["id"]),
        "title": str(row["title"]),
        "completed": bool(row["completed"]),
    }


def _driver_message(exc: SQLAlchemyError) -> str:
    # Prefer the DBAPI's own text over SQLAlchemy's wrapped description.
    orig = getattr(exc, "orig", None)
    return str(orig).strip() if orig is not None else str(exc)


# PUBLIC_INTERFACE
class TodoRepository:
    """
    Todo storage on a SQLAlchemy engine.

    Every operation is a single statement run on a connection borrowed from
    the engine's pool for the duration of that statement.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @contextmanager
    def _conn(self) -> Generator[Connection, None, None]:
        try:
            with self._engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            raise DatabaseError(_driver_message(e)) from e

    def list(self) -> List[TodoEntity]:
        """Return all todos ordered by id ascending."""
        stmt = select(todos).order_by(todos.c.id.asc())
        with self._conn() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_row_to_entity(r) for r in rows]

    def create(self, data: TodoCreate) -> TodoEntity:
        """Insert a todo and return the stored row."""
        stmt = (
            insert(todos)
            .values(title=data.title, completed=data.completed)
            .returning(*todos.c)
        )
        with self._conn() as conn:
            row = conn.execute(stmt).mappings().one()
        return _row_to_entity(row)

    def update(self, todo_id: int, data: TodoUpdate) -> Optional[TodoEntity]:
        """
        Apply a partial update. Fields left as None keep their stored value.
        Return the updated row, or None if no todo has that id.
        """
        stmt = (
            update(todos)
            .where(todos.c.id == todo_id)
            .values(
                title=func.coalesce(literal(data.title, Text), todos.c.title),
                completed=func.coalesce(literal(data.completed, Boolean), todos.c.completed),
            )
            .returning(*todos.c)
        )
        with self._conn() as conn:
            row = conn.execute(stmt).mappings().first()
        return None if row is None else _row_to_entity(row)

    def delete(self, todo_id: int) -> Optional[TodoEntity]:
        """Delete a todo. Return the deleted row, or None if it did not exist."""
        stmt = delete(todos).where(todos.c.id == todo_id).returning(*todos.c)
        with self._conn() as conn:
            row = conn.execute(stmt).mappings().first()
        return None if row is None else _row_to_entity(row)


# PUBLIC_INTERFACE
def get_repository() -> TodoRepository:
    """Return a repository bound to the process-wide engine."""
    return TodoRepository(get_engine())
