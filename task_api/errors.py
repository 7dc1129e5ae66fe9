# COMPONENT: TASK STORE ERRORS
# REQUIREMENTS SATISFIED: error taxonomy for the record store
"""
task_api/errors.py

Exceptions raised by the in-memory task store.

The store never builds HTTP responses itself. It raises one of the classes
below and the application maps each class to a status code and JSON body
(see task_api/main.py).
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

NOT_FOUND_MESSAGE = "Item não encontrado"
TASK_NOT_FOUND_MESSAGE = "Tarefa não encontrada"
INVALID_INPUT_MESSAGE = "Dados inválidos ou campos obrigatórios ausentes"
ID_EXISTS_MESSAGE = "ID já existe"


class TaskStoreError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class NotFound(TaskStoreError):
    """The referenced identifier is not in the store."""

    status_code = 404

    def __init__(self, task_id: str, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)
        self.task_id = task_id


class InvalidInput(TaskStoreError):
    """A replacement record is missing required fields or has the wrong types."""

    status_code = 400

    def __init__(self, details: Optional[List[Dict[str, Any]]] = None, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.details = details or []


class BatchCollision(TaskStoreError):
    """
    A batch create would have overwritten existing identifiers.

    Identifiers are generated by the store so this is not expected at runtime.
    The whole batch is rejected and every colliding id is reported.
    """

    status_code = 400

    def __init__(self, ids: List[str]):
        super().__init__(f"{len(ids)} id(s) already exist")
        self.ids = list(ids)

    def to_body(self) -> Dict[str, Any]:
        return {"errors": [{"id": i, "error": ID_EXISTS_MESSAGE} for i in self.ids]}
