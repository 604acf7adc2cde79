from fastapi import FastAPI
from moodjournal.config import settings
from moodjournal.database import engine, Base
from moodjournal.core.errors import register_exception_handlers
from moodjournal.models.user import User
from moodjournal.models.entry import DailyEntry, Mood, Sleep, Exercise, Diet
from moodjournal.models.task import Task, TaskBoard
from moodjournal.routers import auth, daily_entry, taskboard, task, statistics
import logging


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

app = FastAPI(title="MoodJournal API", version="1.0")

register_exception_handlers(app)

# Include Routers
app.include_router(auth.router)
app.include_router(daily_entry.router)
app.include_router(taskboard.router)
app.include_router(task.router)
app.include_router(statistics.router)

# Create DB Tables (local runs only, Alembic handles prod)
@app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

@app.get("/")
def read_root():
    return {"message": "Welcome to MoodJournal"}

@app.get("/health")
async def health():
    return {"ok": True}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("moodjournal.main:app", host="0.0.0.0", port=8000, reload=True)
