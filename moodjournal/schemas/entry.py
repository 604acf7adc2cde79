from pydantic import Field
from datetime import datetime
from typing import Optional, List, Literal
from moodjournal.schemas.base import CamelModel

WaterIntake = Literal["less-than-1l", "1l-1.5l", "1.5l-2l", "2l-plus"]


# --- Section payloads (request bodies and the formatted entry view) ---

class MoodData(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    notes: Optional[str] = None

class SleepData(CamelModel):
    hours: float = Field(..., ge=0, le=24)
    quality: int = Field(..., ge=0, le=5)

class ExerciseData(CamelModel):
    did_exercise: Literal["yes", "no"]
    type: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)

class DietData(CamelModel):
    rating: int = Field(..., ge=0, le=5)
    food_choices: List[str] = Field(default_factory=list)
    water_intake: WaterIntake = "less-than-1l"

class DailyEntryData(CamelModel):
    mood: MoodData
    sleep: Optional[SleepData] = None
    exercise: Optional[ExerciseData] = None
    diet: Optional[DietData] = None
    date: Optional[datetime] = None  # defaults to now on create, ignored on update


class DailyEntryDetail(CamelModel):
    """Entry as the edit form consumes it: sections only, no child ids."""
    id: int
    date: datetime
    mood: MoodData
    sleep: Optional[SleepData] = None
    exercise: Optional[ExerciseData] = None
    diet: Optional[DietData] = None


# --- Stored rows ---

class MoodResponse(MoodData):
    id: int

class SleepResponse(SleepData):
    id: int

class ExerciseResponse(ExerciseData):
    id: int

class DietResponse(DietData):
    id: int

class DailyEntryResponse(CamelModel):
    id: int
    user_id: int
    date: datetime
    mood_id: int
    sleep_id: Optional[int]
    exercise_id: Optional[int]
    diet_id: Optional[int]
    mood: MoodResponse
    sleep: Optional[SleepResponse]
    exercise: Optional[ExerciseResponse]
    diet: Optional[DietResponse]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class EntryCheckResponse(CamelModel):
    exists: bool
    entry_id: Optional[int] = None

class EntryStatusResponse(CamelModel):
    status: Literal["none", "started", "completed"]
    entry_id: Optional[int] = None
