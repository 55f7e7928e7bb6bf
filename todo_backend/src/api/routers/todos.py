from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from ..errors import NotFoundError
from ..repositories import TodoRepository, get_repository
from ..schemas import ErrorResponse, TodoCreate, TodoDeleted, TodoOut, TodoUpdate

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
    responses={500: {"model": ErrorResponse, "description": "Database error"}},
)


def _get_repo(repo: TodoRepository = Depends(get_repository)) -> TodoRepository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="Return every Todo item ordered by id ascending.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_todos(repo: TodoRepository = Depends(_get_repo)) -> List[TodoOut]:
    return [TodoOut(**it) for it in repo.list()]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"model": ErrorResponse, "description": "Title missing or blank"},
    },
)
def create_todo(payload: TodoCreate, repo: TodoRepository = Depends(_get_repo)) -> TodoOut:
    """
    Create a new Todo. The title is trimmed and completed defaults to false.
    """
    created = repo.create(payload)
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description="Update the title and/or completed flag of a Todo item. Omitted fields are left unchanged.",
    responses={
        200: {"description": "Todo updated"},
        400: {"model": ErrorResponse, "description": "Title provided but blank"},
        404: {"model": ErrorResponse, "description": "Todo not found"},
    },
)
def update_todo(
    todo_id: int,
    payload: Optional[TodoUpdate] = Body(default=None),
    repo: TodoRepository = Depends(_get_repo),
) -> TodoOut:
    """
    Partial update of a Todo item. A request without a body changes nothing.
    """
    updated = repo.update(todo_id, payload or TodoUpdate())
    if updated is None:
        raise NotFoundError()
    return TodoOut(**updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=TodoDeleted,
    summary="Delete Todo",
    description="Delete a Todo item by ID and return it with a confirmation message.",
    responses={
        200: {"description": "Todo deleted"},
        404: {"model": ErrorResponse, "description": "Todo not found"},
    },
)
def delete_todo(todo_id: int, repo: TodoRepository = Depends(_get_repo)) -> TodoDeleted:
    deleted = repo.delete(todo_id)
    if deleted is None:
        raise NotFoundError()
    return TodoDeleted(todo=TodoOut(**deleted))
