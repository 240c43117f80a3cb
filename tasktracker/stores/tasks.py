from datetime import datetime, UTC
from typing import Optional

from tasktracker.models.task import Task
from tasktracker.stores.base import Store, as_document, storage_call
from tasktracker.utils.ids import new_id


class TaskStore(Store):
    def _get(self, task_id: str, owner_id: Optional[str] = None):
        query = self.db.query(Task).filter(Task.id == task_id)
        if owner_id is not None:
            query = query.filter(Task.user_id == owner_id)
        return query.first()

    @storage_call
    def create(self, record: dict) -> dict:
        task = Task(id=new_id(), created_at=datetime.now(UTC))
        self._overwrite(task, record)
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return as_document(task)

    @storage_call
    def find_by_id_scoped(self, user_id: str, task_id: str):
        return as_document(self._get(task_id, owner_id=user_id))

    @storage_call
    def find_by_id_unscoped(self, task_id: str):
        return as_document(self._get(task_id))

    @storage_call
    def list_by_user(self, user_id: str) -> list:
        tasks = self.db.query(Task).filter(Task.user_id == user_id).order_by(Task.created_at).all()
        return [as_document(t) for t in tasks]

    @storage_call
    def replace_by_id(self, task_id: str, record: dict, owner_id: Optional[str] = None):
        """Full overwrite keyed by ``task_id``; scoped to ``owner_id`` only when given."""
        task = self._get(task_id, owner_id=owner_id)
        if task is None:
            return None
        self._overwrite(task, record)
        self.db.commit()
        self.db.refresh(task)
        return as_document(task)

    @storage_call
    def set_remarks(self, task_id: str, remarks: str, owner_id: Optional[str] = None):
        task = self._get(task_id, owner_id=owner_id)
        if task is None:
            return None
        task.remarks = remarks
        self.db.commit()
        self.db.refresh(task)
        return as_document(task)

    @storage_call
    def delete_by_id_scoped(self, user_id: str, task_id: str):
        task = self._get(task_id, owner_id=user_id)
        if task is None:
            return None
        removed = as_document(task)
        self.db.delete(task)
        self.db.commit()
        return removed
