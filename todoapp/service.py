# todoapp/service.py
"""Task business rules: existence checks, uniqueness, mapping and partial updates.

The service is transport-agnostic. It speaks in request schemas and
:class:`TaskDTO` values and raises :mod:`todoapp.exceptions` errors; it never
hands a persisted ``Task`` back to its caller.
"""

import logging

from todoapp.exceptions import DuplicateDescriptionError, TaskNotFoundError
from todoapp.models import Task, TaskCreateRequest, TaskDTO, TaskUpdateRequest
from todoapp.repository import TaskRepository

logger = logging.getLogger(__name__)


def _to_dto(task: Task) -> TaskDTO:
    return TaskDTO.model_validate(task)


class TaskService:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    # -- queries -------------------------------------------------------------

    def get_task_by_id(self, task_id: int) -> TaskDTO:
        return _to_dto(self._fetch(task_id))

    def get_all_tasks(self) -> list[TaskDTO]:
        return [_to_dto(task) for task in self._repository.find_all()]

    def get_open_tasks(self) -> list[TaskDTO]:
        return [_to_dto(task) for task in self._repository.find_open_tasks()]

    def get_closed_tasks(self) -> list[TaskDTO]:
        return [_to_dto(task) for task in self._repository.find_closed_tasks()]

    # -- commands ------------------------------------------------------------

    def create_task(self, request: TaskCreateRequest) -> TaskDTO:
        """Persist a new task built from *request*.

        Raises
        ------
        DuplicateDescriptionError
            If a task with the same description already exists. Nothing is
            saved in that case.
        """
        if self._repository.description_exists(request.description):
            logger.warning("Rejected duplicate description: %r", request.description)
            raise DuplicateDescriptionError(request.description)

        task = Task.model_validate(request.model_dump())
        saved = self._repository.save(task)
        logger.info("Created task %s", saved.id)
        return _to_dto(saved)

    def update_task(self, task_id: int, request: TaskUpdateRequest) -> TaskDTO:
        """Apply the fields present in *request* to the stored task.

        Absent fields keep their stored value, so an empty request returns the
        task unchanged. Description uniqueness is not re-checked here.
        """
        task = self._fetch(task_id)
        changes = request.changes()
        if not changes:
            return _to_dto(task)

        task.sqlmodel_update(changes)
        saved = self._repository.save(task)
        logger.info("Updated task %s: %s", task_id, sorted(changes))
        return _to_dto(saved)

    def delete_task(self, task_id: int) -> str:
        """Hard-delete a task and return a confirmation message naming its id."""
        if not self._repository.exists_by_id(task_id):
            logger.warning("Delete of missing task %s", task_id)
            raise TaskNotFoundError(task_id)

        self._repository.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)
        return f"Task with the ID: {task_id} has been deleted."

    # -- private helpers -----------------------------------------------------

    def _fetch(self, task_id: int) -> Task:
        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.warning("Task %s not found", task_id)
            raise TaskNotFoundError(task_id)
        return task
