# COMPONENT: IN-MEMORY TASK REPOSITORY
# REQUIREMENTS SATISFIED: record storage, identifier assignment, CRUD contract
"""
task_api/repositories/tasks_repo.py

Defines the in-memory store behind the /tasks API.

Records are arbitrary JSON objects kept in an insertion-ordered dict keyed
by a string identifier. Identifiers come from a counter that starts at 1 and
only ever moves forward, so an id is never handed out twice, not even after
its record has been deleted.

Key responsibilities:
    - Assign identifiers and store new records (single or batch)
    - Return records with their identifier injected as the first field
    - Validate and apply full replacements (PUT) and verbatim overwrites (PATCH)
    - Delete records and retire their identifiers

Every public method takes the store lock, so the store can be shared by
request handlers running on the server's thread pool. Nothing is persisted;
the contents die with the process.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List
import copy
import threading

from pydantic import ValidationError

from ..errors import (
    BatchCollision,
    InvalidInput,
    NotFound,
    NOT_FOUND_MESSAGE,
    TASK_NOT_FOUND_MESSAGE,
)
from ..schemas.tasks import TaskReplace
from ..utils.logging import get_logger

logger = get_logger("store")

Record = Dict[str, Any]


def _normalize(record: Record, strip_nested: bool = False) -> Record:
    """Copy a client record for storage, dropping ids the store owns."""
    item = copy.deepcopy(record)
    # The store's identifier is authoritative.
    item.pop("id", None)
    if strip_nested:
        value = item.get("value")
        if isinstance(value, dict):
            value.pop("id", None)
    return item


class TaskStore:
    def __init__(self):
        self._store: Dict[str, Record] = {}
        self._next_id: int = 1
        self._lock = threading.Lock()

    @property
    def next_id(self) -> int:
        return self._next_id

    def _materialize(self, task_id: str) -> Record:
        return {"id": task_id, **copy.deepcopy(self._store[task_id])}

    def _require(self, task_id: str, message: str = NOT_FOUND_MESSAGE) -> None:
        if task_id not in self._store:
            raise NotFound(task_id, message=message)

    # -----------------------------
    # Reads
    # -----------------------------
    def list_all(self) -> List[Record]:
        with self._lock:
            return [self._materialize(task_id) for task_id in self._store]

    def get(self, task_id: str) -> Record:
        with self._lock:
            self._require(task_id)
            return self._materialize(task_id)

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    # -----------------------------
    # Creation
    # -----------------------------
    def create_one(self, record: Record) -> Record:
        with self._lock:
            task_id = str(self._next_id)
            self._next_id += 1
            self._store[task_id] = _normalize(record, strip_nested=True)
            logger.debug("Stored task %s", task_id)
            return self._materialize(task_id)

    def create_batch(self, records: Iterable[Record]) -> List[Record]:
        """
        Create every record in order, or none of them.

        Ids are assigned from the counter in sequence. If any of them is
        already taken the batch is rejected with BatchCollision and the
        counter stays where it was.
        """
        with self._lock:
            staged = []
            for offset, record in enumerate(records):
                staged.append((str(self._next_id + offset), _normalize(record, strip_nested=True)))

            collisions = [task_id for task_id, _ in staged if task_id in self._store]
            if collisions:
                logger.error("Batch rejected, ids already in use: %s", collisions)
                raise BatchCollision(collisions)

            for task_id, item in staged:
                self._store[task_id] = item
            self._next_id += len(staged)
            logger.debug("Stored batch of %d task(s)", len(staged))
            return [self._materialize(task_id) for task_id, _ in staged]

    # -----------------------------
    # Updates
    # -----------------------------
    def replace_one(self, task_id: str, record: Any) -> Record:
        with self._lock:
            self._require(task_id, TASK_NOT_FOUND_MESSAGE)
            if not isinstance(record, dict):
                raise InvalidInput([{"msg": "body must be a JSON object", "type": "dict_type"}])
            try:
                TaskReplace.model_validate(record)
            except ValidationError as e:
                logger.info("Rejected replacement for task %s: %s", task_id, e.error_count())
                raise InvalidInput(e.errors(include_url=False)) from e

            self._store[task_id] = _normalize(record)
            logger.debug("Replaced task %s", task_id)
            return self._materialize(task_id)

    def patch_one(self, task_id: str, record: Record) -> Record:
        # Overwrites the whole record; fields missing from the input are gone.
        with self._lock:
            self._require(task_id)
            self._store[task_id] = _normalize(record)
            logger.debug("Overwrote task %s", task_id)
            return self._materialize(task_id)

    # -----------------------------
    # Removal
    # -----------------------------
    def delete_one(self, task_id: str) -> None:
        with self._lock:
            self._require(task_id)
            del self._store[task_id]
            logger.debug("Deleted task %s", task_id)

    def reset(self) -> None:
        """Drop all records. The id counter is not rewound."""
        with self._lock:
            self._store.clear()
