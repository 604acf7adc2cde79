from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from moodjournal.database import get_db
from moodjournal.core.auth import get_current_user
from moodjournal.schemas.task import (
    TaskCreate, TaskUpdate, TaskReorder, TaskResponse,
    TaskReorderResponse, TaskDeleteResponse
)
from moodjournal.services import ordering

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    task_board_id: int = Query(..., alias="taskBoardId"),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    board = await ordering.get_owned_board(db, current_user.id, task_board_id)
    return await ordering.list_board_tasks(db, board.id)


@router.post("", response_model=TaskResponse)
async def create_task(
    task_in: TaskCreate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await ordering.create_task(db, current_user.id, task_in)


@router.post("/reorder", response_model=TaskReorderResponse)
async def reorder_task(
    move_in: TaskReorder,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    tasks = await ordering.move_task(db, current_user.id, move_in)
    return TaskReorderResponse(
        success=True,
        tasks=[TaskResponse.model_validate(task) for task in tasks]
    )


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await ordering.get_owned_task(db, current_user.id, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_in: TaskUpdate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await ordering.update_task(db, current_user.id, task_id, task_in)


@router.delete("/{task_id}", response_model=TaskDeleteResponse)
async def delete_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    await ordering.delete_task(db, current_user.id, task_id)
    return TaskDeleteResponse(success=True)
