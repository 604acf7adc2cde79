import calendar
import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moodjournal.config import settings
from moodjournal.core.errors import InvalidArgument
from moodjournal.models.entry import DailyEntry, Mood, Sleep, Diet
from moodjournal.schemas.statistics import MoodPoint, MoodSleepPoint, DietStatistics
from moodjournal.services.entries import to_utc

logger = logging.getLogger(__name__)

TIME_RANGE_MONTHS = {"month": 1, "3months": 3, "6months": 6, "year": 12}

SAMPLE_FOOD_CATEGORIES = {
    "fruits-veggies": 5,
    "lean-protein": 4,
    "whole-grains": 3,
    "dairy": 2,
    "sugary-items": 1,
}

# (mood, sleep hours, sleep quality) for the last seven days, oldest first
SAMPLE_MOOD_SLEEP = [(3, 6, 2), (4, 7, 3), (2, 5, 2), (4, 8, 4), (5, 8, 5), (3, 6, 3), (4, 7, 4)]


def _months_before(moment: datetime, months: int) -> datetime:
    year, month = divmod(moment.year * 12 + moment.month - 1 - months, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def range_start(time_range: str, now: datetime | None = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    if time_range == "week":
        return now - timedelta(days=7)
    if time_range in TIME_RANGE_MONTHS:
        return _months_before(now, TIME_RANGE_MONTHS[time_range])
    raise InvalidArgument(f"Unknown timeRange '{time_range}'")


def _short_date(value: datetime) -> str:
    return f"{value:%b %d}"


async def mood_series(db: AsyncSession, user_id: int, start: datetime) -> List[MoodPoint]:
    result = await db.execute(
        select(DailyEntry.date, Mood.rating)
        .join(Mood, DailyEntry.mood_id == Mood.id)
        .where(DailyEntry.user_id == user_id)
        .where(DailyEntry.date >= to_utc(start))
        .order_by(DailyEntry.date)
    )
    return [MoodPoint(date=row.date, rating=row.rating) for row in result]


async def mood_sleep_series(db: AsyncSession, user_id: int, start: datetime) -> List[MoodSleepPoint]:
    # Inner join: entries whose sleep section was unlinked have nothing to plot.
    result = await db.execute(
        select(DailyEntry.date, Mood.rating, Sleep.hours, Sleep.quality)
        .join(Mood, DailyEntry.mood_id == Mood.id)
        .join(Sleep, DailyEntry.sleep_id == Sleep.id)
        .where(DailyEntry.user_id == user_id)
        .where(DailyEntry.date >= to_utc(start))
        .order_by(DailyEntry.date)
    )
    points = [
        MoodSleepPoint(
            date=_short_date(row.date),
            mood=row.rating,
            sleep_hours=row.hours,
            sleep_quality=row.quality,
        )
        for row in result
    ]
    if not points and settings.STATISTICS_SAMPLE_FALLBACK:
        logger.info("No mood/sleep data for user %s, returning sample series", user_id)
        today = datetime.now(timezone.utc)
        size = len(SAMPLE_MOOD_SLEEP)
        return [
            MoodSleepPoint(
                date=_short_date(today - timedelta(days=size - 1 - i)),
                mood=mood,
                sleep_hours=hours,
                sleep_quality=quality,
            )
            for i, (mood, hours, quality) in enumerate(SAMPLE_MOOD_SLEEP)
        ]
    return points


async def diet_breakdown(db: AsyncSession, user_id: int, time_range: str = "week") -> DietStatistics:
    """Count food choices across the user's linked diets in the time range."""
    start = range_start(time_range)
    result = await db.execute(
        select(Diet.food_choices)
        .join(DailyEntry, DailyEntry.diet_id == Diet.id)
        .where(DailyEntry.user_id == user_id)
        .where(DailyEntry.date >= to_utc(start))
    )
    counts = Counter()
    for choices in result.scalars():
        counts.update(choice for choice in (choices or []) if isinstance(choice, str))

    total = sum(counts.values())
    if total == 0 and settings.STATISTICS_SAMPLE_FALLBACK:
        logger.info("No diet data for user %s in %s, returning sample data", user_id, time_range)
        return DietStatistics(
            food_categories=dict(SAMPLE_FOOD_CATEGORIES),
            total_entries=sum(SAMPLE_FOOD_CATEGORIES.values()),
            sample=True,
        )
    return DietStatistics(food_categories=dict(counts.most_common()), total_entries=total)
