from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from moodjournal.database import Base

# Child sections are owned by exactly one DailyEntry through the FK columns on
# daily_entries. Unlinking a section nulls the FK and leaves the row in place.


class Mood(Base):
    __tablename__ = "moods"

    id = Column(Integer, primary_key=True, index=True)
    rating = Column(Integer, nullable=False)   # 1–5
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Sleep(Base):
    __tablename__ = "sleeps"

    id = Column(Integer, primary_key=True, index=True)
    hours = Column(Float, nullable=False)
    quality = Column(Integer, nullable=False)  # 0 = not recorded, 1–5
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    did_exercise = Column(String, nullable=False)  # "yes" / "no"
    type = Column(String, nullable=True)
    duration = Column(Integer, nullable=True)      # minutes
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Diet(Base):
    __tablename__ = "diets"

    id = Column(Integer, primary_key=True, index=True)
    rating = Column(Integer, nullable=False)
    food_choices = Column(JSON, nullable=False, default=list)
    water_intake = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class DailyEntry(Base):
    __tablename__ = "daily_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)

    mood_id = Column(Integer, ForeignKey("moods.id"), unique=True, nullable=False)
    sleep_id = Column(Integer, ForeignKey("sleeps.id"), unique=True, nullable=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), unique=True, nullable=True)
    diet_id = Column(Integer, ForeignKey("diets.id"), unique=True, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    mood = relationship(Mood)
    sleep = relationship(Sleep)
    exercise = relationship(Exercise)
    diet = relationship(Diet)
