from __future__ import annotations

from typing import TypedDict

from sqlalchemy import Boolean, Column, Integer, MetaData, Table, Text, false

metadata = MetaData()

# Integer primary key compiles to SERIAL on PostgreSQL and to an
# autoincrementing rowid alias on SQLite.
todos = Table(
    "todos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("completed", Boolean, nullable=False, default=False, server_default=false()),
)


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A row of the todos table as returned by the repository.

    Fields:
    - id: Unique integer identifier assigned by the database
    - title: Trimmed, non-empty title
    - completed: Boolean completion flag
    """

    id: int
    title: str
    completed: bool
