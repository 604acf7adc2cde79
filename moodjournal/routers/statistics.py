from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from moodjournal.database import get_db
from moodjournal.core.auth import get_current_user
from moodjournal.schemas.statistics import MoodPoint, MoodSleepPoint, DietStatistics
from moodjournal.services import statistics

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("/mood", response_model=list[MoodPoint])
async def get_mood_statistics(
    start: datetime = Query(...),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await statistics.mood_series(db, current_user.id, start)


@router.get("/mood-sleep", response_model=list[MoodSleepPoint])
async def get_mood_sleep_statistics(
    start: datetime = Query(...),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await statistics.mood_sleep_series(db, current_user.id, start)


@router.get("/diet", response_model=DietStatistics)
async def get_diet_statistics(
    time_range: str = Query("week", alias="timeRange"),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await statistics.diet_breakdown(db, current_user.id, time_range)
