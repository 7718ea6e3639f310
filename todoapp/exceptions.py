# todoapp/exceptions.py
"""Domain errors raised by the task service and rendered by the HTTP layer."""


class TaskError(Exception):
    """Base error carrying a client-facing message and the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskNotFoundError(TaskError):
    status_code = 404

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with the ID: {task_id} does not exist")
        self.task_id = task_id


class DuplicateDescriptionError(TaskError):
    status_code = 409

    def __init__(self, description: str) -> None:
        super().__init__(f"There is already a task with the description: {description}")
        self.description = description
