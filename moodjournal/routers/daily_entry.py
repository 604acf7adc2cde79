from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from moodjournal.database import get_db
from moodjournal.core.auth import get_current_user
from moodjournal.schemas.entry import (
    DailyEntryData, DailyEntryDetail, DailyEntryResponse,
    EntryCheckResponse, EntryStatusResponse
)
from moodjournal.services import entries

router = APIRouter(prefix="/daily-entry", tags=["daily-entry"])


@router.post("", response_model=DailyEntryResponse)
async def create_daily_entry(
    entry_in: DailyEntryData,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await entries.create_entry(db, current_user.id, entry_in)


# Registered before /{entry_id} so "check" and "status" are not taken as ids.
@router.get("/check", response_model=EntryCheckResponse)
async def check_daily_entry(
    start: datetime = Query(...),
    end: datetime = Query(...),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    entry = await entries.find_entry_in_range(db, current_user.id, start, end)
    return EntryCheckResponse(exists=entry is not None, entry_id=entry.id if entry else None)


@router.get("/status", response_model=EntryStatusResponse)
async def daily_entry_status(
    start: datetime = Query(...),
    end: datetime = Query(...),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    entry = await entries.find_entry_in_range(db, current_user.id, start, end)
    return EntryStatusResponse(
        status=entries.entry_status(entry),
        entry_id=entry.id if entry else None
    )


@router.get("/{entry_id}", response_model=DailyEntryDetail)
async def get_daily_entry(
    entry_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    entry = await entries.get_entry(db, current_user.id, entry_id)
    return entries.format_entry(entry)


@router.put("/{entry_id}", response_model=DailyEntryResponse)
async def update_daily_entry(
    entry_id: int,
    entry_in: DailyEntryData,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await entries.update_entry(db, current_user.id, entry_id, entry_in)
