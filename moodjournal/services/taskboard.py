from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moodjournal.core.errors import InvalidArgument
from moodjournal.models.task import TaskBoard
from moodjournal.services.ordering import list_board_tasks
from moodjournal.schemas.task import TaskBoardResponse, TaskResponse


def parse_week_date(raw: Optional[str]) -> date:
    """Accept ``YYYY-MM-DD`` or a full ISO timestamp; empty means today."""
    if not raw:
        return date.today()
    try:
        return datetime.fromisoformat(raw.strip().replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidArgument("weekDate must be an ISO date")


def week_bounds(day: date) -> Tuple[date, date]:
    """Monday..Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def _format_day(day: date) -> str:
    return f"{day:%b} {day.day}, {day.year}"


def format_date_range(start: date, end: date) -> str:
    return f"{_format_day(start)} - {_format_day(end)}"


async def get_or_create_board(db: AsyncSession, user_id: int, week_date: date) -> TaskBoard:
    week_start, week_end = week_bounds(week_date)
    result = await db.execute(
        select(TaskBoard)
        .where(TaskBoard.user_id == user_id)
        .where(TaskBoard.week_start_date == week_start)
        .where(TaskBoard.week_end_date == week_end)
        .order_by(TaskBoard.id)
        .limit(1)
    )
    board = result.scalar_one_or_none()
    if board is None:
        board = TaskBoard(user_id=user_id, week_start_date=week_start, week_end_date=week_end)
        db.add(board)
        await db.commit()
        await db.refresh(board)
    return board


async def build_board_response(db: AsyncSession, board: TaskBoard) -> TaskBoardResponse:
    tasks = await list_board_tasks(db, board.id)
    return TaskBoardResponse(
        id=board.id,
        user_id=board.user_id,
        week_start_date=board.week_start_date,
        week_end_date=board.week_end_date,
        created_at=board.created_at,
        tasks=[TaskResponse.model_validate(task) for task in tasks],
        formatted_date_range=format_date_range(board.week_start_date, board.week_end_date),
    )
