from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from taskdesk.schemas.validators import encodable_text


class TaskListRequest(BaseModel):
    userId: int


class TaskDetailRequest(BaseModel):
    taskId: int


class UpdateDetailsRequest(BaseModel):
    taskId: int
    details: Optional[str] = None

    @field_validator("details")
    @classmethod
    def text_is_encodable(cls, v):
        return encodable_text(v)


class AddTaskRequest(BaseModel):
    user: int
    work: Optional[str] = None
    dropvalue: Optional[str] = None
    details: Optional[str] = ""

    @field_validator("work", "dropvalue", "details")
    @classmethod
    def text_is_encodable(cls, v):
        return encodable_text(v)


class EditTaskRequest(BaseModel):
    editedTitle: Optional[str] = None
    id: int
    userId: int
    editedpriority: Optional[str] = None

    @field_validator("editedTitle", "editedpriority")
    @classmethod
    def text_is_encodable(cls, v):
        return encodable_text(v)


class DeleteTaskRequest(BaseModel):
    userId: int
    id: int


class TaskSummary(BaseModel):
    title: Optional[str] = None
    id: int
    priority: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TaskRef(BaseModel):
    title: Optional[str] = None
    id: int

    model_config = ConfigDict(from_attributes=True)


class TaskDetail(BaseModel):
    taskdetails: Optional[str] = None
    title: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TaskListResponse(BaseModel):
    tasksfirst: List[TaskSummary]


class TaskDetailResponse(BaseModel):
    taskdetails: List[TaskDetail]


class TasksAfterAdd(BaseModel):
    tasksAfterAdd: List[TaskRef]
    message: str


class TasksAfterEdit(BaseModel):
    tasksAfterEdit: List[TaskRef]
    message: str


class TasksAfterDelete(BaseModel):
    tasksAfterDelete: List[TaskRef]
    message: str
