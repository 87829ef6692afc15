import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ..config import ENFORCE_TASK_OWNERSHIP
from ..dependencies import get_current_user, get_task_repository
from ..exceptions import ForbiddenError, TaskNotFoundError
from ..models import Task as TaskModel, User
from ..repositories import TaskRepository
from ..schemas.task import Task as TaskSchema, TaskComplete, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_task_for_user(task_id: int, current_user: User, tasks: TaskRepository) -> TaskModel:
    task = tasks.find_by_id(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    # With enforcement off, any authenticated user may act on any task id.
    if ENFORCE_TASK_OWNERSHIP and task.user_id != current_user.id:
        raise ForbiddenError()
    return task


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(
    skip: int = 0,
    limit: int = 100,
    status: str = "all",
    sort: str = "created_at",
    order: str = "desc",
    current_user: User = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """List the current user's tasks with optional filtering and sorting."""
    return tasks.list_for_owner(
        current_user.id,
        status=status,
        sort=sort,
        order=order,
        skip=skip,
        limit=limit,
    )


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    current_user: User = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Create a new task owned by the current user."""
    db_task = tasks.save(
        TaskModel(
            title=task.title,
            description=task.description,
            completed=task.completed,
            user_id=current_user.id,
        )
    )
    logger.debug("Task %s created by %s", db_task.id, current_user.username)
    return db_task


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Get a specific task by ID."""
    return _get_task_for_user(task_id, current_user, tasks)


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    current_user: User = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Update a specific task."""
    task = _get_task_for_user(task_id, current_user, tasks)

    for field, value in task_update.model_dump(exclude_unset=True).items():
        # Only description may be cleared
        if value is None and field != "description":
            continue
        setattr(task, field, value)

    return tasks.save(task)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Delete a specific task."""
    task = _get_task_for_user(task_id, current_user, tasks)
    tasks.delete(task)
    logger.debug("Task %s deleted by %s", task_id, current_user.username)


@router.patch("/tasks/{task_id}/complete", response_model=TaskSchema)
def mark_task_complete(
    task_id: int,
    payload: Optional[TaskComplete] = None,
    current_user: User = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Mark a task as complete, or back to pending with completed=false."""
    task = _get_task_for_user(task_id, current_user, tasks)
    task.completed = True if payload is None else payload.completed
    return tasks.save(task)
