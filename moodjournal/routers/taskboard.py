from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from moodjournal.database import get_db
from moodjournal.core.auth import get_current_user
from moodjournal.schemas.task import TaskBoardResponse
from moodjournal.services.taskboard import parse_week_date, get_or_create_board, build_board_response

router = APIRouter(prefix="/taskboard", tags=["taskboard"])


@router.get("", response_model=TaskBoardResponse)
async def get_task_board(
    week_date: Optional[str] = Query(None, alias="weekDate"),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    board = await get_or_create_board(db, current_user.id, parse_week_date(week_date))
    return await build_board_response(db, board)
