import enum
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Index, func
from moodjournal.database import Base


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskCategory(str, enum.Enum):
    WELLNESS_SELFCARE = "WELLNESS_SELFCARE"
    SOCIAL_RELATIONSHIPS = "SOCIAL_RELATIONSHIPS"
    PRODUCTIVITY_ORGANIZATION = "PRODUCTIVITY_ORGANIZATION"


class TaskBoard(Base):
    __tablename__ = "task_boards"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    week_start_date = Column(Date, nullable=False)  # Monday
    week_end_date = Column(Date, nullable=False)    # Sunday
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    task_board_id = Column(Integer, ForeignKey("task_boards.id"), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default=TaskStatus.TODO.value)
    category = Column(String, nullable=False)
    # Dense and zero-based within (task_board_id, status). No unique constraint:
    # column shifts pass through transient duplicates before the moved row lands.
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (Index("ix_tasks_board_status_order", "task_board_id", "status", "order"),)
