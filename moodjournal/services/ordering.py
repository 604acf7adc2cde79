"""Dense per-column ordering of tasks on a weekly board.

Within one ``(task_board_id, status)`` column the ``order`` values are always
exactly ``0..n-1``. Every mutation here keeps that true:

- create appends to the end of TODO,
- delete closes the gap left behind,
- move closes the gap in the source column and opens a slot in the
  destination column before writing the moved task.

Multi-row writes run through :func:`moodjournal.database.unit_of_work`, so a
failure at any step leaves every column as it was.
"""
import logging
from typing import List

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from moodjournal.core.errors import AccessDenied, InvalidArgument, NotFound
from moodjournal.database import unit_of_work
from moodjournal.models.task import Task, TaskBoard, TaskStatus
from moodjournal.schemas.task import TaskCreate, TaskReorder, TaskUpdate

logger = logging.getLogger(__name__)


async def get_owned_board(db: AsyncSession, user_id: int, board_id: int) -> TaskBoard:
    result = await db.execute(
        select(TaskBoard)
        .where(TaskBoard.id == board_id)
        .where(TaskBoard.user_id == user_id)
    )
    board = result.scalar_one_or_none()
    if board is None:
        raise NotFound("Task board not found or access denied")
    return board


async def get_owned_task(db: AsyncSession, user_id: int, task_id: int) -> Task:
    result = await db.execute(
        select(Task, TaskBoard.user_id)
        .join(TaskBoard, Task.task_board_id == TaskBoard.id)
        .where(Task.id == task_id)
        .execution_options(populate_existing=True)
    )
    row = result.one_or_none()
    if row is None:
        raise NotFound("Task not found")
    task, owner_id = row
    if owner_id != user_id:
        raise AccessDenied()
    return task


async def list_board_tasks(db: AsyncSession, board_id: int) -> List[Task]:
    result = await db.execute(
        select(Task)
        .where(Task.task_board_id == board_id)
        .order_by(Task.status, Task.order)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def column_size(db: AsyncSession, board_id: int, status: TaskStatus) -> int:
    result = await db.execute(
        select(func.count(Task.id))
        .where(Task.task_board_id == board_id)
        .where(Task.status == status.value)
    )
    return result.scalar_one() or 0


async def _shift(db: AsyncSession, board_id: int, status: TaskStatus, delta: int, *bounds) -> None:
    await db.execute(
        update(Task)
        .where(Task.task_board_id == board_id)
        .where(Task.status == status.value)
        .where(*bounds)
        .values(order=Task.order + delta)
        .execution_options(synchronize_session="fetch")
    )


async def _place_task(db: AsyncSession, task_id: int, status: TaskStatus, index: int) -> None:
    await db.execute(
        update(Task)
        .where(Task.id == task_id)
        .values(status=status.value, order=index)
        .execution_options(synchronize_session="fetch")
    )


async def create_task(db: AsyncSession, user_id: int, task_in: TaskCreate) -> Task:
    board = await get_owned_board(db, user_id, task_in.task_board_id)

    async def _create(db: AsyncSession) -> Task:
        position = await column_size(db, board.id, TaskStatus.TODO)
        task = Task(
            task_board_id=board.id,
            title=task_in.title,
            description=task_in.description or None,
            category=task_in.category.value,
            status=TaskStatus.TODO.value,
            order=position,
        )
        db.add(task)
        await db.flush()
        return task

    task = await unit_of_work(db, _create)
    await db.refresh(task)
    logger.info("Created task %s on board %s at TODO[%s]", task.id, board.id, task.order)
    return task


async def update_task(db: AsyncSession, user_id: int, task_id: int, task_in: TaskUpdate) -> Task:
    task = await get_owned_task(db, user_id, task_id)
    changes = task_in.model_dump(exclude_unset=True)

    if changes.get("title"):
        task.title = changes["title"]
    if "description" in changes:
        task.description = changes["description"]
    if changes.get("category"):
        task.category = changes["category"].value

    db.add(task)
    await db.commit()
    await db.refresh(task)
    return task


async def delete_task(db: AsyncSession, user_id: int, task_id: int) -> None:
    task = await get_owned_task(db, user_id, task_id)
    board_id, status, position = task.task_board_id, TaskStatus(task.status), task.order

    async def _delete(db: AsyncSession) -> None:
        await db.delete(task)
        await db.flush()
        await _shift(db, board_id, status, -1, Task.order > position)

    await unit_of_work(db, _delete)
    logger.info("Deleted task %s from board %s %s[%s]", task_id, board_id, status.value, position)


async def move_task(db: AsyncSession, user_id: int, move: TaskReorder) -> List[Task]:
    """Move a task to ``destination_index`` of ``destination_status``.

    The caller's view of the source position must match what is stored;
    a stale drag would otherwise shift the wrong neighbours.
    """
    task = await get_owned_task(db, user_id, move.task_id)
    board_id = task.task_board_id
    source, destination = move.source_status, move.destination_status
    src, dst = move.source_index, move.destination_index
    same_column = source == destination

    if task.status != source.value or task.order != src:
        raise InvalidArgument("Source position does not match the task's current position")

    size = await column_size(db, board_id, destination)
    last_slot = size - 1 if same_column else size
    if dst > last_slot:
        raise InvalidArgument(f"destinationIndex must be between 0 and {last_slot}")

    async def _move(db: AsyncSession) -> None:
        if same_column:
            if src < dst:
                await _shift(db, board_id, source, -1, Task.order > src, Task.order <= dst)
            elif src > dst:
                await _shift(db, board_id, source, 1, Task.order >= dst, Task.order < src)
        else:
            await _shift(db, board_id, source, -1, Task.order > src)
            await _shift(db, board_id, destination, 1, Task.order >= dst)
        await _place_task(db, task.id, destination, dst)

    await unit_of_work(db, _move)
    logger.info(
        "Moved task %s on board %s from %s[%s] to %s[%s]",
        task.id, board_id, source.value, src, destination.value, dst,
    )
    return await list_board_tasks(db, board_id)
