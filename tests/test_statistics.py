from datetime import datetime, timedelta, timezone

from moodjournal.config import settings
from moodjournal.schemas.entry import DailyEntryData
from moodjournal.services import entries
from moodjournal.services.statistics import range_start, _months_before


async def _entry(db, user, when, mood=3, sleep=None, diet=None):
    payload = {"date": when, "mood": {"rating": mood}, "sleep": sleep, "diet": diet}
    return await entries.create_entry(db, user.id, DailyEntryData.model_validate(payload))


async def _unlink(db, user, entry, **sections):
    payload = {
        "mood": {"rating": entry.mood.rating},
        "sleep": {"hours": entry.sleep.hours, "quality": entry.sleep.quality},
        "exercise": {"didExercise": entry.exercise.did_exercise},
        "diet": {"rating": entry.diet.rating, "foodChoices": entry.diet.food_choices},
        **sections,
    }
    return await entries.update_entry(db, user.id, entry.id, DailyEntryData.model_validate(payload))


async def test_mood_series_is_ascending(client, auth_headers, db, user):
    await _entry(db, user, "2026-10-12T08:00:00", mood=5)
    await _entry(db, user, "2026-10-10T08:00:00", mood=2)
    await _entry(db, user, "2026-09-01T08:00:00", mood=1)

    resp = await client.get("/statistics/mood", params={"start": "2026-10-01T00:00:00"}, headers=auth_headers)

    assert resp.status_code == 200
    assert [point["rating"] for point in resp.json()] == [2, 5]


async def test_mood_sleep_skips_unlinked_sleep(client, auth_headers, db, user):
    await _entry(db, user, "2026-10-05T08:00:00", mood=4, sleep={"hours": 8, "quality": 5})
    unlinked = await _entry(db, user, "2026-10-06T08:00:00", mood=2, sleep={"hours": 4, "quality": 1})
    await _unlink(db, user, unlinked, sleep=None)

    resp = await client.get("/statistics/mood-sleep", params={"start": "2026-10-01T00:00:00"}, headers=auth_headers)

    assert resp.json() == [{"date": "Oct 05", "mood": 4, "sleepHours": 8, "sleepQuality": 5}]


async def test_mood_requires_start(client, auth_headers):
    resp = await client.get("/statistics/mood", headers=auth_headers)
    assert resp.status_code == 400


async def test_diet_breakdown_counts_linked_diets(client, auth_headers, db, user):
    recent = datetime.now(timezone.utc) - timedelta(days=1)
    await _entry(db, user, recent, diet={"rating": 4, "foodChoices": ["dairy", "fruits-veggies"]})
    await _entry(db, user, recent, diet={"rating": 5, "foodChoices": ["fruits-veggies"]})
    dropped = await _entry(db, user, recent, diet={"rating": 3, "foodChoices": ["sugary-items"]})
    await _unlink(db, user, dropped, diet=None)
    await _entry(db, user, recent - timedelta(days=40), diet={"rating": 5, "foodChoices": ["whole-grains"]})

    resp = await client.get("/statistics/diet", params={"timeRange": "week"}, headers=auth_headers)

    body = resp.json()
    assert body["foodCategories"] == {"fruits-veggies": 2, "dairy": 1}
    assert list(body["foodCategories"]) == ["fruits-veggies", "dairy"]
    assert body["totalEntries"] == 3
    assert body["sample"] is False

    resp = await client.get("/statistics/diet", params={"timeRange": "3months"}, headers=auth_headers)
    assert resp.json()["foodCategories"]["whole-grains"] == 1


async def test_empty_statistics_stay_empty_by_default(client, auth_headers):
    resp = await client.get("/statistics/diet", headers=auth_headers)
    assert resp.json() == {"foodCategories": {}, "totalEntries": 0, "sample": False}

    resp = await client.get("/statistics/mood-sleep", params={"start": "2026-10-01T00:00:00"}, headers=auth_headers)
    assert resp.json() == []


async def test_sample_fallback_is_flagged(client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "STATISTICS_SAMPLE_FALLBACK", True)

    body = (await client.get("/statistics/diet", headers=auth_headers)).json()
    assert body["sample"] is True
    assert body["totalEntries"] == 15

    series = (await client.get("/statistics/mood-sleep", params={"start": "2026-10-01T00:00:00"}, headers=auth_headers)).json()
    assert len(series) == 7


async def test_unknown_time_range(client, auth_headers):
    resp = await client.get("/statistics/diet", params={"timeRange": "decade"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Unknown timeRange 'decade'"}


def test_range_start_month_arithmetic():
    assert _months_before(datetime(2026, 3, 31), 1) == datetime(2026, 2, 28)
    assert _months_before(datetime(2026, 1, 15), 3) == datetime(2025, 10, 15)
    now = datetime(2026, 10, 19, 12, tzinfo=timezone.utc)
    assert range_start("week", now) == datetime(2026, 10, 12, 12, tzinfo=timezone.utc)
    assert range_start("year", now) == datetime(2025, 10, 19, 12, tzinfo=timezone.utc)
