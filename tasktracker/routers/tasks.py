import logging

from fastapi import APIRouter, Depends

import tasktracker.config as cfg
from tasktracker.dependencies import get_task_store, require_valid_id
from tasktracker.errors import ErrorCode, ServiceError, envelope, storage_guard
from tasktracker.schemas.task import TaskCreate, TaskOut, TaskRef, TaskRemarks, TaskUpdate, UserRef
from tasktracker.stores.tasks import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])

# NOTE: user_id is taken from the request body as-is. These routes need an
# auth layer (e.g. the login token) before they can be exposed publicly.


def _task_payload(doc: dict) -> dict:
    return TaskOut.model_validate(doc).model_dump(mode="json")


def _check_ids(ref: TaskRef):
    require_valid_id(ref.user_id, "user")
    require_valid_id(ref.task_id, "task")


def _mutation_owner(user_id: str):
    """Owner filter for updatetask/giveremarks.

    By default those two look the task up by task_id alone, so any caller
    can mutate any task. ENFORCE_TASK_OWNERSHIP scopes them to user_id.
    """
    return user_id if cfg.ENFORCE_TASK_OWNERSHIP else None


@router.post("/addtask")
def add_task(task: TaskCreate, tasks: TaskStore = Depends(get_task_store)):
    require_valid_id(task.user_id, "user")
    with storage_guard("Error creating task"):
        created = tasks.create(task.model_dump())
    logger.info("task %s created for user %s", created["id"], created["user_id"])
    return envelope("Task created successfully", task=_task_payload(created))


@router.post("/updatetask")
def update_task(task: TaskUpdate, tasks: TaskStore = Depends(get_task_store)):
    _check_ids(task)
    record = task.model_dump(exclude={"task_id"})
    with storage_guard("Error updating task"):
        updated = tasks.replace_by_id(task.task_id, record, owner_id=_mutation_owner(task.user_id))
    if not updated:
        raise ServiceError(ErrorCode.NOT_FOUND, "Task not found")
    return envelope("Task updated successfully")


@router.post("/deletetask")
def delete_task(ref: TaskRef, tasks: TaskStore = Depends(get_task_store)):
    _check_ids(ref)
    with storage_guard("Error deleting task"):
        removed = tasks.delete_by_id_scoped(ref.user_id, ref.task_id)
    if not removed:
        raise ServiceError(ErrorCode.NOT_FOUND, "Task not found")
    return envelope("Task deleted successfully")


@router.post("/getalltasks")
@router.post("/getallusertasks")
def list_tasks(ref: UserRef, tasks: TaskStore = Depends(get_task_store)):
    require_valid_id(ref.user_id, "user")
    with storage_guard("Error fetching tasks"):
        docs = tasks.list_by_user(ref.user_id)
    return envelope("Tasks fetched successfully", tasks=[_task_payload(d) for d in docs])


@router.post("/gettask")
def get_task(ref: TaskRef, tasks: TaskStore = Depends(get_task_store)):
    _check_ids(ref)
    with storage_guard("Error fetching task"):
        doc = tasks.find_by_id_scoped(ref.user_id, ref.task_id)
    if not doc:
        raise ServiceError(ErrorCode.NOT_FOUND, "Task not found")
    return envelope("Task fetched successfully", task=_task_payload(doc))


@router.post("/giveremarks")
def give_remarks(body: TaskRemarks, tasks: TaskStore = Depends(get_task_store)):
    _check_ids(body)
    owner = _mutation_owner(body.user_id)
    with storage_guard("Error giving remarks"):
        if owner is None:
            task = tasks.find_by_id_unscoped(body.task_id)
        else:
            task = tasks.find_by_id_scoped(owner, body.task_id)
        if not task:
            raise ServiceError(ErrorCode.NOT_FOUND, "Task not found")
        tasks.set_remarks(task["id"], body.remarks)
    return envelope("Remarks given successfully")
