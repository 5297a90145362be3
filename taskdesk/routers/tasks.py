from fastapi import APIRouter, Depends
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session
from taskdesk.database import get_db
from taskdesk.models.task import Task
from taskdesk.schemas.task import (
    AddTaskRequest,
    DeleteTaskRequest,
    EditTaskRequest,
    TaskDetailRequest,
    TaskDetailResponse,
    TaskListRequest,
    TaskListResponse,
    TasksAfterAdd,
    TasksAfterDelete,
    TasksAfterEdit,
    UpdateDetailsRequest,
)
from taskdesk.schemas.user import MessageResponse

router = APIRouter(tags=["tasks"])

# Every task endpoint answers 201, reads included.


def _task_refs(db: Session, user_id: int) -> list:
    """Return (title, id) for every task owned by user_id, oldest first."""
    rows = db.execute(select(Task.title, Task.id).where(Task.userid == user_id).order_by(Task.id))
    return [row._asdict() for row in rows]


@router.post("/gettasks", response_model=TaskListResponse, status_code=201)
def get_tasks(body: TaskListRequest, db: Session = Depends(get_db)):
    rows = db.execute(
        select(Task.title, Task.id, Task.priority).where(Task.userid == body.userId).order_by(Task.id)
    )
    return {"tasksfirst": [row._asdict() for row in rows]}


@router.post("/getdetails", response_model=TaskDetailResponse, status_code=201)
def get_details(body: TaskDetailRequest, db: Session = Depends(get_db)):
    rows = db.execute(select(Task.taskdetails, Task.title).where(Task.id == body.taskId))
    return {"taskdetails": [row._asdict() for row in rows]}


@router.post("/updatetaskdetails", response_model=MessageResponse, status_code=201)
def update_task_details(body: UpdateDetailsRequest, db: Session = Depends(get_db)):
    # zero matched rows is not an error
    db.execute(update(Task).where(Task.id == body.taskId).values(taskdetails=body.details))
    db.commit()
    return {"message": "Task details updated successfully"}


@router.post("/home", response_model=TasksAfterAdd, status_code=201)
def add_task(body: AddTaskRequest, db: Session = Depends(get_db)):
    db.add(Task(userid=body.user, title=body.work, priority=body.dropvalue, taskdetails=body.details))
    db.flush()
    tasks = _task_refs(db, body.user)
    db.commit()
    return {"tasksAfterAdd": tasks, "message": "Task inserted successfully"}


@router.post("/edit", response_model=TasksAfterEdit, status_code=201)
def edit_task(body: EditTaskRequest, db: Session = Depends(get_db)):
    db.execute(
        update(Task)
        .where(Task.id == body.id, Task.userid == body.userId)
        .values(title=body.editedTitle, priority=body.editedpriority)
    )
    tasks = _task_refs(db, body.userId)
    db.commit()
    return {"tasksAfterEdit": tasks, "message": "Task Edited successfully"}


@router.post("/delete", response_model=TasksAfterDelete, status_code=201)
def delete_task(body: DeleteTaskRequest, db: Session = Depends(get_db)):
    db.execute(delete(Task).where(Task.id == body.id, Task.userid == body.userId))
    tasks = _task_refs(db, body.userId)
    db.commit()
    return {"tasksAfterDelete": tasks, "message": "Task Deleted successfully"}
