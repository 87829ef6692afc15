from typing import List, Optional

from sqlalchemy.orm import Session

from ..exceptions import InvalidQueryError
from ..models import Task
from ..models.task import utcnow

STATUS_FILTERS = ("all", "completed", "pending")
SORT_FIELDS = ("created_at", "title")
SORT_ORDERS = ("asc", "desc")


class TaskRepository:
    def __init__(self, db: Session):
        self._db = db

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self._db.get(Task, task_id)

    def list_for_owner(
        self,
        user_id: int,
        status: str = "all",
        sort: str = "created_at",
        order: str = "desc",
        skip: int = 0,
        limit: int = 100,
    ) -> List[Task]:
        """List a user's tasks, filtered and sorted.

        Raises InvalidQueryError for an unknown status, sort field or order.
        """
        if status not in STATUS_FILTERS:
            raise InvalidQueryError(f"Invalid status filter: {status}")
        if sort not in SORT_FIELDS:
            raise InvalidQueryError(f"Invalid sort field: {sort}")
        if order not in SORT_ORDERS:
            raise InvalidQueryError(f"Invalid sort order: {order}")

        query = self._db.query(Task).filter(Task.user_id == user_id)

        if status == "completed":
            query = query.filter(Task.completed.is_(True))
        elif status == "pending":
            query = query.filter(Task.completed.is_(False))

        column = Task.title if sort == "title" else Task.created_at
        query = query.order_by(column.asc() if order == "asc" else column.desc(), Task.id)

        return query.offset(skip).limit(limit).all()

    def save(self, task: Task) -> Task:
        if task.id is not None:
            task.updated_at = utcnow()
        self._db.add(task)
        self._db.commit()
        self._db.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        self._db.delete(task)
        self._db.commit()
