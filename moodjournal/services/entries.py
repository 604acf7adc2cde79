import copy
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from moodjournal.core.errors import InvalidArgument, NotFound
from moodjournal.database import unit_of_work
from moodjournal.models.entry import DailyEntry, Mood, Sleep, Exercise, Diet
from moodjournal.schemas.entry import DailyEntryData, DailyEntryDetail, SleepData, ExerciseData, DietData

logger = logging.getLogger(__name__)

# Neutral values written on create when a section is skipped.
PLACEHOLDER_SLEEP = {"hours": 0, "quality": 0}
PLACEHOLDER_EXERCISE = {"did_exercise": "no", "type": None, "duration": None}
PLACEHOLDER_DIET = {"rating": 0, "food_choices": [], "water_intake": "less-than-1l"}

OPTIONAL_SECTIONS = (
    ("sleep", Sleep, PLACEHOLDER_SLEEP),
    ("exercise", Exercise, PLACEHOLDER_EXERCISE),
    ("diet", Diet, PLACEHOLDER_DIET),
)

_WITH_SECTIONS = (
    selectinload(DailyEntry.mood),
    selectinload(DailyEntry.sleep),
    selectinload(DailyEntry.exercise),
    selectinload(DailyEntry.diet),
)


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


async def _load_entry(db: AsyncSession, entry_id: int) -> Optional[DailyEntry]:
    result = await db.execute(
        select(DailyEntry)
        .options(*_WITH_SECTIONS)
        .where(DailyEntry.id == entry_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_entry(db: AsyncSession, user_id: int, entry_id: int) -> DailyEntry:
    result = await db.execute(
        select(DailyEntry)
        .options(*_WITH_SECTIONS)
        .where(DailyEntry.id == entry_id)
        .where(DailyEntry.user_id == user_id)
    )
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NotFound("Entry not found")
    return entry


async def find_entry_in_range(
    db: AsyncSession, user_id: int, start: datetime, end: datetime
) -> Optional[DailyEntry]:
    if end < start:
        raise InvalidArgument("End date must be after start date")
    result = await db.execute(
        select(DailyEntry)
        .options(*_WITH_SECTIONS)
        .where(DailyEntry.user_id == user_id)
        .where(DailyEntry.date >= to_utc(start))
        .where(DailyEntry.date <= to_utc(end))
        .order_by(DailyEntry.date)
        .limit(1)
    )
    return result.scalar_one_or_none()


def entry_status(entry: Optional[DailyEntry]) -> str:
    """none / started / completed.

    An entry is completed only when all four sections are linked; an entry
    with any section unlinked is still in progress.
    """
    if entry is None:
        return "none"
    sections = (entry.mood, entry.sleep, entry.exercise, entry.diet)
    return "completed" if all(section is not None for section in sections) else "started"


def format_entry(entry: DailyEntry) -> DailyEntryDetail:
    return DailyEntryDetail(
        id=entry.id,
        date=entry.date,
        mood={"rating": entry.mood.rating, "notes": entry.mood.notes or ""},
        sleep=SleepData.model_validate(entry.sleep) if entry.sleep else None,
        exercise=ExerciseData.model_validate(entry.exercise) if entry.exercise else None,
        diet=DietData.model_validate(entry.diet) if entry.diet else None,
    )


async def create_entry(db: AsyncSession, user_id: int, data: DailyEntryData) -> DailyEntry:
    """Create an entry with all four sections.

    Skipped sections are still created, filled with the placeholder values,
    so a fresh entry never has an unlinked section.
    """
    async def _create(db: AsyncSession) -> DailyEntry:
        entry = DailyEntry(
            user_id=user_id,
            date=to_utc(data.date) if data.date else datetime.now(timezone.utc),
            mood=Mood(rating=data.mood.rating, notes=data.mood.notes or None),
        )
        for name, model, placeholder in OPTIONAL_SECTIONS:
            section = getattr(data, name)
            values = section.model_dump() if section is not None else copy.deepcopy(placeholder)
            setattr(entry, name, model(**values))
        db.add(entry)
        await db.flush()
        return await _load_entry(db, entry.id)

    entry = await unit_of_work(db, _create)
    logger.info("Created daily entry %s for user %s", entry.id, user_id)
    return entry


async def update_entry(db: AsyncSession, user_id: int, entry_id: int, data: DailyEntryData) -> DailyEntry:
    """Apply a full entry payload to an existing entry.

    Per optional section:
      - given and linked   -> update the row in place
      - given and unlinked -> create a row and link it
      - null and linked    -> unlink it; the row itself is kept
      - null and unlinked  -> nothing
    """
    entry = await get_entry(db, user_id, entry_id)

    async def _update(db: AsyncSession) -> DailyEntry:
        entry.mood.rating = data.mood.rating
        entry.mood.notes = data.mood.notes or None

        for name, model, _ in OPTIONAL_SECTIONS:
            section = getattr(data, name)
            current = getattr(entry, name)
            if section is not None:
                values = section.model_dump()
                if current is not None:
                    for key, value in values.items():
                        setattr(current, key, value)
                else:
                    setattr(entry, name, model(**values))
            elif current is not None:
                setattr(entry, name, None)

        await db.flush()
        return await _load_entry(db, entry.id)

    updated = await unit_of_work(db, _update)
    logger.info("Updated daily entry %s for user %s", entry_id, user_id)
    return updated
