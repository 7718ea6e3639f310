# todoapp/repository.py
"""Task record store: every query the service needs, over one SQLModel session."""

from typing import Optional

from sqlmodel import Session, select

from todoapp.models import Task


class TaskRepository:
    """Thin query layer over a :class:`sqlmodel.Session`.

    Parameters
    ----------
    session : Session
        Open session; the repository commits after each write but never
        closes it.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # -- reads ---------------------------------------------------------------

    def find_all(self) -> list[Task]:
        return list(self._session.exec(select(Task).order_by(Task.id)).all())

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self._session.get(Task, task_id)

    def exists_by_id(self, task_id: int) -> bool:
        return self.find_by_id(task_id) is not None

    def find_open_tasks(self) -> list[Task]:
        return self._find_by_open_flag(True)

    def find_closed_tasks(self) -> list[Task]:
        return self._find_by_open_flag(False)

    def description_exists(self, description: str) -> bool:
        """Return True iff some task's description equals *description* exactly."""
        statement = select(Task.id).where(Task.description == description).limit(1)
        return self._session.exec(statement).first() is not None

    # -- writes --------------------------------------------------------------

    def save(self, task: Task) -> Task:
        """Insert or update *task* and return it refreshed (with its id if new)."""
        self._session.add(task)
        self._session.commit()
        self._session.refresh(task)
        return task

    def delete_by_id(self, task_id: int) -> None:
        task = self._session.get(Task, task_id)
        if task is None:
            return
        self._session.delete(task)
        self._session.commit()

    # -- private helpers -----------------------------------------------------

    def _find_by_open_flag(self, is_open: bool) -> list[Task]:
        statement = (
            select(Task).where(Task.is_task_open == is_open).order_by(Task.id)
        )
        return list(self._session.exec(statement).all())
