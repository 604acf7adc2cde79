from datetime import datetime
from typing import Dict
from moodjournal.schemas.base import CamelModel

class MoodPoint(CamelModel):
    date: datetime
    rating: int

class MoodSleepPoint(CamelModel):
    date: str  # "MMM dd"
    mood: float
    sleep_hours: float
    sleep_quality: int

class DietStatistics(CamelModel):
    food_categories: Dict[str, int]
    total_entries: int
    sample: bool = False
