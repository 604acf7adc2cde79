from pydantic import Field
from datetime import date, datetime
from typing import Optional, List
from moodjournal.models.task import TaskStatus, TaskCategory
from moodjournal.schemas.base import CamelModel

class TaskCreate(CamelModel):
    task_board_id: int
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: TaskCategory

class TaskUpdate(CamelModel):
    # Status and order only change through /tasks/reorder.
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[TaskCategory] = None

class TaskReorder(CamelModel):
    task_id: int
    source_status: TaskStatus
    destination_status: TaskStatus
    source_index: int = Field(..., ge=0)
    destination_index: int = Field(..., ge=0)

class TaskResponse(CamelModel):
    id: int
    task_board_id: int
    title: str
    description: Optional[str]
    status: TaskStatus
    category: TaskCategory
    order: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

class TaskReorderResponse(CamelModel):
    success: bool
    tasks: List[TaskResponse]

class TaskDeleteResponse(CamelModel):
    success: bool

class TaskBoardResponse(CamelModel):
    id: int
    user_id: int
    week_start_date: date
    week_end_date: date
    created_at: Optional[datetime]
    tasks: List[TaskResponse]
    formatted_date_range: str
